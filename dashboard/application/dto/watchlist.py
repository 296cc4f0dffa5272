"""
Watchlist DTOs.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from dashboard.application.dto.portfolio import StockDto
from dashboard.domain.entities.watchlist_item import WatchlistItem
from dashboard.domain.services.watchlist_service import AlertInfo, WatchlistPerformance


@dataclass(frozen=True)
class WatchlistItemDto:
    """
    Watchlist entry as shown to the user.

    Attributes:
        id: Item ID
        symbol: Ticker symbol
        added_at: ISO-8601 timestamp
        notes: Free-form notes
        target_price: Formatted alert price, if any
        alert_enabled: Whether alerting is on
        days_since_added: Whole days on the list, partial days rounded up
        has_target_price: Target price is set
        has_notes: Notes are non-blank
    """
    id: int
    symbol: str
    added_at: str
    notes: str
    target_price: Optional[str]
    alert_enabled: bool
    days_since_added: int
    has_target_price: bool
    has_notes: bool

    @classmethod
    def from_entity(
        cls,
        item: WatchlistItem,
        now: Optional[datetime] = None,
    ) -> WatchlistItemDto:
        return cls(
            id=item.id,
            symbol=item.symbol.value,
            added_at=item.added_at.isoformat(),
            notes=item.notes,
            target_price=(
                item.target_price.to_formatted_string() if item.target_price else None
            ),
            alert_enabled=item.alert_enabled,
            days_since_added=item.days_since_added(now),
            has_target_price=item.has_target_price(),
            has_notes=item.has_notes(),
        )


@dataclass(frozen=True)
class CreateWatchlistItemDto:
    """Request to add a stock to a watchlist."""
    symbol: str
    notes: str = ""
    target_price: Optional[str] = None
    alert_enabled: bool = False


@dataclass(frozen=True)
class UpdateWatchlistItemDto:
    """Partial update. None leaves a field unchanged."""
    notes: Optional[str] = None
    target_price: Optional[str] = None
    alert_enabled: Optional[bool] = None


@dataclass(frozen=True)
class TopPerformerDto:
    symbol: str
    change: str


@dataclass(frozen=True)
class WatchlistPerformanceDto:
    total_items: int
    items_with_alerts: int
    average_days_held: int
    top_performer: Optional[TopPerformerDto]

    @classmethod
    def from_performance(cls, performance: WatchlistPerformance) -> WatchlistPerformanceDto:
        top = performance.top_performer
        return cls(
            total_items=performance.total_items,
            items_with_alerts=performance.items_with_alerts,
            average_days_held=performance.average_days_held,
            top_performer=TopPerformerDto(symbol=top.symbol, change=top.change) if top else None,
        )


@dataclass(frozen=True)
class WatchlistAlertDto:
    """A triggered price alert."""
    item_id: int
    symbol: str
    alert_type: str
    current_price: str
    target_price: str

    @classmethod
    def from_alert(cls, alert: AlertInfo) -> WatchlistAlertDto:
        return cls(
            item_id=alert.item.id,
            symbol=alert.item.symbol.value,
            alert_type=alert.alert_type.value,
            current_price=alert.stock.price.to_formatted_string(),
            target_price=alert.item.target_price.to_formatted_string(),
        )


@dataclass(frozen=True)
class WatchlistWithStocksDto:
    items: List[WatchlistItemDto]
    stocks: List[StockDto]
    performance: WatchlistPerformanceDto
    alerts: List[WatchlistAlertDto]
