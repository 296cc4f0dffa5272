"""
PortfolioCalculationService Domain Service

Derives portfolio metrics, allocation, a performance series and simplified
risk figures from transactions and current prices.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Dict, List, Mapping, Optional, Sequence

import numpy as np

from dashboard.domain.entities.portfolio import Portfolio
from dashboard.domain.entities.stock import Stock
from dashboard.domain.entities.transaction import Transaction
from dashboard.domain.exceptions import CurrencyMismatchError
from dashboard.domain.value_objects.money import DEFAULT_CURRENCY, Money
from dashboard.domain.value_objects.percentage import Percentage


SYMBOL_COLORS = {
    "AAPL": "#3b82f6",
    "MSFT": "#a855f7",
    "TSLA": "#22c55e",
    "AMZN": "#fb923c",
}
DEFAULT_SYMBOL_COLOR = "#6b7280"

PLACEHOLDER_MAX_DRAWDOWN = Percentage(Decimal("5"))
PLACEHOLDER_BETA = 1.0


@dataclass(frozen=True)
class PortfolioMetrics:
    """
    Metrics derived from a user's transactions.

    P&L figures are magnitudes; the *_negative flags carry the sign.
    """
    total_value: Money
    daily_pnl: Money
    daily_pnl_negative: bool
    total_pnl: Money
    total_pnl_negative: bool
    success_rate: Percentage
    active_positions: int
    total_invested: Money


@dataclass(frozen=True)
class AllocationSlice:
    """Share of portfolio value held in one symbol."""
    name: str
    value: Percentage
    amount: Money
    color: str


@dataclass(frozen=True)
class PerformancePoint:
    """One day of the performance series."""
    date: datetime
    value: Money
    pnl: Money


@dataclass(frozen=True)
class RiskMetrics:
    """Simplified risk figures. Drawdown and beta are placeholders."""
    volatility: Percentage
    sharpe_ratio: float
    max_drawdown: Percentage
    beta: float


def _signed_to_money(amount: Decimal, currency: str) -> tuple:
    """Split a signed amount into (Money magnitude, is_negative)."""
    return Money(abs(amount), currency), amount < 0


class PortfolioCalculationService:
    """
    Domain service for portfolio calculations.

    Stateless apart from the random generator used for the synthetic
    performance series.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        history_days: int = 30,
        base_value: Decimal = Decimal("1000000"),
        daily_variance: float = 0.03,
        trend_per_day: float = 0.001,
        currency: str = DEFAULT_CURRENCY,
    ):
        """
        Args:
            rng: Random generator for the performance series (seed it in tests)
            history_days: Length of the performance series
            base_value: Starting value of the performance series
            daily_variance: Max daily fluctuation as a fraction (0.03 = ±3%)
            trend_per_day: Upward drift added per day
            currency: Currency for computed amounts
        """
        self._rng = rng if rng is not None else np.random.default_rng()
        self.history_days = history_days
        self.base_value = base_value
        self.daily_variance = daily_variance
        self.trend_per_day = trend_per_day
        self.currency = currency

    def calculate_portfolio_metrics(
        self,
        transactions: Sequence[Transaction],
        current_prices: Mapping[str, Money],
        now: Optional[datetime] = None,
    ) -> PortfolioMetrics:
        """
        Calculate portfolio metrics from transactions.

        Args:
            transactions: User transactions, in repository order
            current_prices: Latest price per symbol
            now: Reference time for "today" (defaults to now)

        Returns:
            PortfolioMetrics
        """
        positions = self._calculate_positions(transactions)

        holdings = [
            current_prices[symbol] * abs(shares)
            for symbol, shares in positions.items()
            if shares != 0 and symbol in current_prices
        ]
        total_value = self._total(holdings)

        buys = [t for t in transactions if t.is_buy()]
        sells = [t for t in transactions if t.is_sell()]
        total_invested = self._total([buy.amount for buy in buys])

        successful = 0
        for sell in sells:
            buy = self._find_matching_buy(sell, buys)
            if buy is None:
                continue
            buy_price = buy.price_per_share()
            sell_price = sell.price_per_share()
            if buy_price and sell_price and sell_price > buy_price:
                successful += 1

        if sells:
            success_rate = Percentage(Decimal(successful) / Decimal(len(sells)) * 100)
        else:
            success_rate = Percentage.zero()

        if holdings and buys and total_value.currency != total_invested.currency:
            raise CurrencyMismatchError(
                f"Currency mismatch: {total_value.currency} vs {total_invested.currency}"
            )
        pnl_currency = total_invested.currency if buys else total_value.currency
        total_pnl, total_pnl_negative = _signed_to_money(
            total_value.amount - total_invested.amount, pnl_currency
        )
        daily_pnl, daily_pnl_negative = _signed_to_money(
            self._calculate_daily_pnl(transactions, now or datetime.now()),
            transactions[0].amount.currency if transactions else self.currency,
        )

        return PortfolioMetrics(
            total_value=total_value,
            daily_pnl=daily_pnl,
            daily_pnl_negative=daily_pnl_negative,
            total_pnl=total_pnl,
            total_pnl_negative=total_pnl_negative,
            success_rate=success_rate,
            active_positions=sum(1 for shares in positions.values() if shares != 0),
            total_invested=total_invested,
        )

    def calculate_allocation(
        self,
        transactions: Sequence[Transaction],
        current_prices: Mapping[str, Money],
    ) -> List[AllocationSlice]:
        """
        Split current holdings value by symbol, largest first.

        Symbols without a known price are left out.
        """
        amounts: Dict[str, Money] = {}
        for symbol, shares in self._calculate_positions(transactions).items():
            price = current_prices.get(symbol)
            if price is None or shares == 0:
                continue
            amounts[symbol] = price * abs(shares)

        total = sum((m.amount for m in amounts.values()), Decimal("0"))
        if total == 0:
            return []

        slices = [
            AllocationSlice(
                name=symbol,
                value=Percentage(amount.amount / total * 100),
                amount=amount,
                color=SYMBOL_COLORS.get(symbol, DEFAULT_SYMBOL_COLOR),
            )
            for symbol, amount in amounts.items()
        ]
        slices.sort(key=lambda s: s.amount.amount, reverse=True)
        return slices

    def calculate_performance_history(
        self,
        transactions: Sequence[Transaction],
        historical_prices: Optional[Mapping[str, Mapping[datetime, Money]]] = None,
        now: Optional[datetime] = None,
    ) -> List[PerformancePoint]:
        """
        Build a synthetic daily value series ending today.

        No historical prices are stored anywhere, so the series is the base
        value with bounded random noise and a slight upward trend.
        """
        now = now or datetime.now()
        days = self.history_days
        base = float(self.base_value)

        noise = self._rng.uniform(
            1 - self.daily_variance, 1 + self.daily_variance, size=days
        )
        trend = 1 + np.arange(days) * self.trend_per_day
        values = base * noise * trend

        points = []
        for offset, raw_value in enumerate(values):
            value = Money(Decimal(str(raw_value)), self.currency)
            points.append(
                PerformancePoint(
                    date=now - timedelta(days=days - 1 - offset),
                    value=value,
                    pnl=Money(abs(value.amount - self.base_value), self.currency),
                )
            )
        return points

    def calculate_risk_metrics(
        self,
        portfolio: Portfolio,
        stocks: Sequence[Stock],
    ) -> RiskMetrics:
        """
        Simplified risk figures.

        Volatility is the mean absolute daily move of the given stocks;
        Sharpe divides the portfolio's daily return by that volatility.
        """
        moves = np.array([abs(float(s.change_percent.value)) for s in stocks])
        avg_volatility = float(moves.mean()) if moves.size else 0.0
        daily_return = float(portfolio.daily_return_percentage().value)

        return RiskMetrics(
            volatility=Percentage(Decimal(str(avg_volatility))),
            sharpe_ratio=round(daily_return / max(avg_volatility, 1.0), 4),
            max_drawdown=PLACEHOLDER_MAX_DRAWDOWN,
            beta=PLACEHOLDER_BETA,
        )

    # --- Private Methods ---

    def _total(self, amounts: Sequence[Money]) -> Money:
        """Sum in the amounts' own currency; the configured one only when empty."""
        if not amounts:
            return Money.zero(self.currency)
        total = amounts[0]
        for amount in amounts[1:]:
            total = total + amount
        return total

    @staticmethod
    def _calculate_positions(transactions: Sequence[Transaction]) -> Dict[str, int]:
        """Net shares per symbol; sells reduce the position."""
        positions: Dict[str, int] = {}
        for transaction in transactions:
            symbol = transaction.symbol.value
            current = positions.get(symbol, 0)
            if transaction.is_buy() and transaction.shares:
                positions[symbol] = current + transaction.shares
            elif transaction.is_sell() and transaction.shares:
                positions[symbol] = current - abs(transaction.shares)
        return positions

    @staticmethod
    def _calculate_daily_pnl(transactions: Sequence[Transaction], now: datetime) -> Decimal:
        """Cash flow of today's transactions: buys out, sells and dividends in."""
        pnl = Decimal("0")
        for transaction in transactions:
            if transaction.timestamp.date() != now.date():
                continue
            if transaction.is_buy():
                pnl -= transaction.amount.amount
            else:
                pnl += transaction.amount.amount
        return pnl

    @staticmethod
    def _find_matching_buy(
        sell: Transaction,
        buys: Sequence[Transaction],
    ) -> Optional[Transaction]:
        # First earlier buy of the same symbol in list order, not lot accounting.
        for buy in buys:
            if buy.symbol == sell.symbol and buy.timestamp < sell.timestamp:
                return buy
        return None
