"""
Portfolio, market and dashboard schemas
Pydantic models used for API responses.
"""
from datetime import datetime
from typing import Optional
from pydantic import Field

from backend.app.schemas.base import CamelModel


class PortfolioResponse(CamelModel):
    """Portfolio summary"""
    id: int
    user_id: int
    total_value: str = Field(..., description="Total value, e.g. $1,247,893.75")
    daily_pnl: str = Field(..., alias="dailyPnL", description="Signed daily P&L")
    success_rate: str = Field(..., description="Success rate, e.g. 82.40%")
    active_positions: int = Field(..., ge=0, description="Open positions")
    performance_status: str = Field(..., description="excellent / good / average / poor")
    is_diversified: bool
    average_position_value: str


class StockResponse(CamelModel):
    """Stock quote"""
    id: int
    symbol: str
    name: str
    price: str
    change: str = Field(..., description="Absolute daily move")
    change_percent: str = Field(..., description="Signed daily move in percent")
    volume: int
    market_cap: str
    is_trending_up: bool
    performance_category: str
    gradient_color: str
    volume_in_millions: float


class TransactionResponse(CamelModel):
    """Transaction row"""
    id: int
    user_id: int
    type: str = Field(..., description="buy / sell / dividend")
    symbol: str
    amount: str
    shares: Optional[int] = None
    timestamp: datetime
    formatted_title: str
    time_ago: str
    icon_color_class: str
    background_color_class: str
    price_per_share: Optional[str] = None


class AllocationResponse(CamelModel):
    """Allocation slice"""
    name: str
    value: float = Field(..., description="Share of total value in percent")
    amount: str
    color: str


class PerformanceDataResponse(CamelModel):
    """Performance series point"""
    date: str = Field(..., description="ISO-8601 date")
    value: float
    pnl: float


class RiskMetricsResponse(CamelModel):
    """Risk figures"""
    volatility: str
    sharpe_ratio: float
    max_drawdown: str
    beta: float


class PortfolioMetricsResponse(CamelModel):
    """Figures computed from transactions"""
    total_value: str
    daily_pnl: str = Field(..., alias="dailyPnL")
    total_pnl: str = Field(..., alias="totalPnL")
    success_rate: str
    active_positions: int
    total_invested: str


class DashboardDataResponse(CamelModel):
    """Full dashboard"""
    portfolio: PortfolioResponse
    stocks: list[StockResponse]
    transactions: list[TransactionResponse]
    allocation: list[AllocationResponse]
    performance_history: list[PerformanceDataResponse]
    risk_metrics: RiskMetricsResponse
    metrics: PortfolioMetricsResponse
