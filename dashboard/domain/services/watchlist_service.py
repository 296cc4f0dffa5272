"""
WatchlistService Domain Service

Price alerts and summary figures for a user's watchlist.
"""
from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from dashboard.domain.entities.stock import Stock
from dashboard.domain.entities.watchlist_item import WatchlistItem
from dashboard.domain.value_objects.money import Money


class AlertType(str, Enum):
    """Which side of the target band the price is on."""
    ABOVE_TARGET = "above_target"
    BELOW_TARGET = "below_target"


@dataclass(frozen=True)
class AlertInfo:
    """A triggered price alert."""
    item: WatchlistItem
    stock: Stock
    alert_type: AlertType


@dataclass(frozen=True)
class TopPerformer:
    symbol: str
    change: str


@dataclass(frozen=True)
class WatchlistPerformance:
    """Summary figures for a watchlist."""
    total_items: int
    items_with_alerts: int
    average_days_held: int
    top_performer: Optional[TopPerformer]


class WatchlistService:
    """
    Watchlist domain service.

    An alert fires when the current price leaves the band
    target ± tolerance × target.
    """

    def __init__(self, tolerance: float = 0.02):
        self.tolerance = Decimal(str(tolerance))

    def check_alerts(
        self,
        items: Sequence[WatchlistItem],
        stocks: Sequence[Stock],
    ) -> List[AlertInfo]:
        """
        Find items whose stock price has left the target band.

        Items with alerts off, without a target or without a matching
        stock are skipped.
        """
        stock_map = self._index_stocks(stocks)
        alerts = []

        for item in items:
            if not item.alert_enabled or item.target_price is None:
                continue
            stock = stock_map.get(item.symbol.value)
            if stock is None:
                continue

            alert_type = self._classify(stock.price, item.target_price)
            if alert_type is not None:
                alerts.append(AlertInfo(item=item, stock=stock, alert_type=alert_type))

        return alerts

    def calculate_watchlist_performance(
        self,
        items: Sequence[WatchlistItem],
        stocks: Sequence[Stock],
        now: Optional[datetime] = None,
    ) -> WatchlistPerformance:
        stock_map = self._index_stocks(stocks)

        if items:
            total_days = sum(item.days_since_added(now) for item in items)
            average = (Decimal(total_days) / Decimal(len(items))).quantize(
                Decimal("1"), rounding=ROUND_HALF_UP
            )
            average_days_held = int(average)
        else:
            average_days_held = 0

        top: Optional[Stock] = None
        for item in items:
            stock = stock_map.get(item.symbol.value)
            if stock is None:
                continue
            # strict comparison keeps the first of equal performers
            if top is None or stock.change_percent > top.change_percent:
                top = stock

        return WatchlistPerformance(
            total_items=len(items),
            items_with_alerts=len(self.check_alerts(items, stocks)),
            average_days_held=average_days_held,
            top_performer=(
                TopPerformer(
                    symbol=top.symbol.value,
                    change=top.change_percent.to_signed_string(),
                )
                if top is not None
                else None
            ),
        )

    # --- Private Methods ---

    def _classify(self, price: Money, target: Money) -> Optional[AlertType]:
        band = target.amount * self.tolerance
        if price.amount > target.amount + band:
            return AlertType.ABOVE_TARGET
        if price.amount < target.amount - band:
            return AlertType.BELOW_TARGET
        return None

    @staticmethod
    def _index_stocks(stocks: Sequence[Stock]) -> Dict[str, Stock]:
        return {stock.symbol.value: stock for stock in stocks}
