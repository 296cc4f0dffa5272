"""
WatchlistItem Domain Entity

A stock a user is following, with optional notes and a price alert.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import datetime
import math
from typing import Any, Mapping, Optional, TypedDict

from dashboard.domain.exceptions import InvalidValueError
from dashboard.domain.value_objects.money import Money
from dashboard.domain.value_objects.stock_symbol import StockSymbol


SECONDS_PER_DAY = 24 * 60 * 60


class WatchlistItemData(TypedDict, total=False):
    """Plain watchlist record as stored by repositories."""
    id: int
    user_id: int
    symbol: str
    added_at: datetime
    notes: str
    target_price: Optional[str]
    alert_enabled: bool


@dataclass(frozen=True)
class WatchlistItem:
    """
    Immutable watchlist entry. Update methods return a new instance.

    Attributes:
        id: Item identifier
        user_id: Owner
        symbol: Followed stock
        added_at: When the stock was added
        notes: Free-form notes
        target_price: Price that triggers an alert
        alert_enabled: Whether alerting is on
    """
    id: int
    user_id: int
    symbol: StockSymbol
    added_at: datetime
    notes: str = ""
    target_price: Optional[Money] = None
    alert_enabled: bool = False

    def __post_init__(self) -> None:
        if self.id <= 0:
            raise InvalidValueError("Watchlist item ID must be positive")
        if self.user_id <= 0:
            raise InvalidValueError("User ID must be positive")
        if self.notes is None:
            object.__setattr__(self, "notes", "")

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> WatchlistItem:
        """Rebuild a WatchlistItem from a stored record."""
        symbol = data.get("symbol")
        if not symbol or not str(symbol).strip():
            raise InvalidValueError("Stock symbol is required")

        target_price = data.get("target_price")
        return cls(
            id=data["id"],
            user_id=data["user_id"],
            symbol=StockSymbol(symbol),
            added_at=data["added_at"],
            notes=data.get("notes") or "",
            target_price=Money.from_string(str(target_price)) if target_price else None,
            alert_enabled=bool(data.get("alert_enabled", False)),
        )

    def to_data(self) -> WatchlistItemData:
        """Convert to a plain record."""
        return WatchlistItemData(
            id=self.id,
            user_id=self.user_id,
            symbol=self.symbol.value,
            added_at=self.added_at,
            notes=self.notes,
            target_price=str(self.target_price.amount) if self.target_price else None,
            alert_enabled=self.alert_enabled,
        )

    # --- Queries ---

    def days_since_added(self, now: Optional[datetime] = None) -> int:
        """Whole days since the item was added, any partial day counting as one."""
        elapsed = abs(((now or datetime.now()) - self.added_at).total_seconds())
        return math.ceil(elapsed / SECONDS_PER_DAY)

    def has_target_price(self) -> bool:
        return self.target_price is not None

    def has_notes(self) -> bool:
        return len(self.notes.strip()) > 0

    def should_alert(self, current_price: Money) -> bool:
        """True when alerting is on and the price differs from the target."""
        if not self.alert_enabled or self.target_price is None:
            return False
        return current_price > self.target_price or current_price < self.target_price

    # --- Functional Updates ---

    def update_notes(self, notes: str) -> WatchlistItem:
        return replace(self, notes=notes.strip())

    def update_target_price(self, target_price: Optional[Money]) -> WatchlistItem:
        return replace(self, target_price=target_price)

    def toggle_alert(self) -> WatchlistItem:
        return replace(self, alert_enabled=not self.alert_enabled)

    def set_alert(self, enabled: bool) -> WatchlistItem:
        return replace(self, alert_enabled=enabled)
