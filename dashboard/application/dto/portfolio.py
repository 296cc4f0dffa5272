"""
Portfolio DTOs for dashboard read models.

Money and percentage fields are display strings; chart series use plain
numbers.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from dashboard.domain.entities.portfolio import Portfolio
from dashboard.domain.entities.stock import Stock
from dashboard.domain.entities.transaction import Transaction
from dashboard.domain.services.portfolio_calculator import (
    AllocationSlice,
    PerformancePoint,
    PortfolioMetrics,
    RiskMetrics,
)
from dashboard.domain.value_objects.money import Money


def format_signed_money(money: Money, negative: bool) -> str:
    """Formatted amount with a leading "-" when negative."""
    text = money.to_formatted_string()
    return f"-{text}" if negative and not money.is_zero() else text


@dataclass(frozen=True)
class PortfolioDto:
    """
    Portfolio summary.

    Attributes:
        id: Portfolio ID
        user_id: Owner
        total_value: e.g. "$1,247,893.75"
        daily_pnl: Signed, e.g. "-$2,341.80"
        success_rate: e.g. "82.40%"
        active_positions: Number of open positions
        performance_status: excellent / good / average / poor
        is_diversified: At least five positions
        average_position_value: Total value per position
    """
    id: int
    user_id: int
    total_value: str
    daily_pnl: str
    success_rate: str
    active_positions: int
    performance_status: str
    is_diversified: bool
    average_position_value: str

    @classmethod
    def from_entity(cls, portfolio: Portfolio) -> PortfolioDto:
        return cls(
            id=portfolio.id,
            user_id=portfolio.user_id,
            total_value=portfolio.total_value.to_formatted_string(),
            daily_pnl=format_signed_money(portfolio.daily_pnl, portfolio.daily_pnl_negative),
            success_rate=portfolio.success_rate.to_formatted_string(),
            active_positions=portfolio.active_positions,
            performance_status=portfolio.performance_status().value,
            is_diversified=portfolio.is_diversified(),
            average_position_value=portfolio.average_position_value().to_formatted_string(),
        )


@dataclass(frozen=True)
class StockDto:
    """Market quote with display helpers."""
    id: int
    symbol: str
    name: str
    price: str
    change: str
    change_percent: str
    volume: int
    market_cap: str
    is_trending_up: bool
    performance_category: str
    gradient_color: str
    volume_in_millions: float

    @classmethod
    def from_entity(cls, stock: Stock) -> StockDto:
        return cls(
            id=stock.id,
            symbol=stock.symbol.value,
            name=stock.name,
            price=stock.price.to_formatted_string(),
            change=stock.change.to_formatted_string(),
            change_percent=stock.change_percent.to_formatted_string(),
            volume=stock.volume,
            market_cap=stock.market_cap,
            is_trending_up=stock.is_trending_up(),
            performance_category=stock.performance_category().value,
            gradient_color=stock.gradient_color(),
            volume_in_millions=stock.volume_in_millions,
        )


@dataclass(frozen=True)
class TransactionDto:
    """Transaction row for the activity feed."""
    id: int
    user_id: int
    type: str
    symbol: str
    amount: str
    shares: Optional[int]
    timestamp: datetime
    formatted_title: str
    time_ago: str
    icon_color_class: str
    background_color_class: str
    price_per_share: Optional[str] = None

    @classmethod
    def from_entity(
        cls,
        transaction: Transaction,
        now: Optional[datetime] = None,
    ) -> TransactionDto:
        price_per_share = transaction.price_per_share()
        return cls(
            id=transaction.id,
            user_id=transaction.user_id,
            type=transaction.type.value,
            symbol=transaction.symbol.value,
            amount=transaction.amount.to_formatted_string(),
            shares=transaction.shares,
            timestamp=transaction.timestamp,
            formatted_title=transaction.formatted_title(),
            time_ago=transaction.time_ago(now),
            icon_color_class=transaction.icon_color_class(),
            background_color_class=transaction.background_color_class(),
            price_per_share=(
                price_per_share.to_formatted_string() if price_per_share else None
            ),
        )


@dataclass(frozen=True)
class AllocationDto:
    name: str
    value: float
    amount: str
    color: str

    @classmethod
    def from_slice(cls, allocation: AllocationSlice) -> AllocationDto:
        return cls(
            name=allocation.name,
            value=float(allocation.value.value),
            amount=allocation.amount.to_formatted_string(),
            color=allocation.color,
        )


@dataclass(frozen=True)
class PerformanceDataDto:
    date: str
    value: float
    pnl: float

    @classmethod
    def from_point(cls, point: PerformancePoint) -> PerformanceDataDto:
        return cls(
            date=point.date.isoformat(),
            value=float(point.value.amount),
            pnl=float(point.pnl.amount),
        )


@dataclass(frozen=True)
class RiskMetricsDto:
    volatility: str
    sharpe_ratio: float
    max_drawdown: str
    beta: float

    @classmethod
    def from_metrics(cls, metrics: RiskMetrics) -> RiskMetricsDto:
        return cls(
            volatility=metrics.volatility.to_formatted_string(),
            sharpe_ratio=metrics.sharpe_ratio,
            max_drawdown=metrics.max_drawdown.to_formatted_string(),
            beta=metrics.beta,
        )


@dataclass(frozen=True)
class PortfolioMetricsDto:
    """Figures computed from the transaction history."""
    total_value: str
    daily_pnl: str
    total_pnl: str
    success_rate: str
    active_positions: int
    total_invested: str

    @classmethod
    def from_metrics(cls, metrics: PortfolioMetrics) -> PortfolioMetricsDto:
        return cls(
            total_value=metrics.total_value.to_formatted_string(),
            daily_pnl=format_signed_money(metrics.daily_pnl, metrics.daily_pnl_negative),
            total_pnl=format_signed_money(metrics.total_pnl, metrics.total_pnl_negative),
            success_rate=metrics.success_rate.to_formatted_string(),
            active_positions=metrics.active_positions,
            total_invested=metrics.total_invested.to_formatted_string(),
        )


@dataclass(frozen=True)
class DashboardDataDto:
    """Everything the dashboard page renders in one response."""
    portfolio: PortfolioDto
    stocks: List[StockDto]
    transactions: List[TransactionDto]
    allocation: List[AllocationDto]
    performance_history: List[PerformanceDataDto]
    risk_metrics: RiskMetricsDto
    metrics: PortfolioMetricsDto
