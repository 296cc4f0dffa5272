"""
Transaction Domain Entity

A single buy, sell or dividend event in a user's account.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional, TypedDict

from dashboard.domain.exceptions import InvalidValueError
from dashboard.domain.value_objects.money import Money
from dashboard.domain.value_objects.stock_symbol import StockSymbol


class TransactionData(TypedDict):
    """Plain transaction record as stored by repositories."""
    id: int
    user_id: int
    type: str
    symbol: str
    amount: str
    shares: Optional[int]
    timestamp: Optional[datetime]


class TransactionType(str, Enum):
    """Transaction type."""
    BUY = "buy"
    SELL = "sell"
    DIVIDEND = "dividend"


ICON_COLOR_CLASSES = {
    TransactionType.BUY: "text-green-400",
    TransactionType.SELL: "text-red-400",
    TransactionType.DIVIDEND: "text-blue-400",
}

BACKGROUND_COLOR_CLASSES = {
    TransactionType.BUY: "bg-green-500/20",
    TransactionType.SELL: "bg-red-500/20",
    TransactionType.DIVIDEND: "bg-blue-500/20",
}


@dataclass(frozen=True)
class Transaction:
    """
    Immutable transaction entity.

    Attributes:
        id: Transaction identifier
        user_id: Owner
        type: Buy, sell or dividend
        symbol: Stock symbol
        amount: Absolute cash amount
        shares: Share count (None for dividends)
        timestamp: When the transaction happened
    """
    id: int
    user_id: int
    type: TransactionType
    symbol: StockSymbol
    amount: Money
    shares: Optional[int] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if not isinstance(self.type, TransactionType):
            try:
                object.__setattr__(self, "type", TransactionType(self.type))
            except ValueError:
                raise InvalidValueError(f"Invalid transaction type: {self.type}")
        if self.id <= 0:
            raise InvalidValueError("Transaction ID must be positive")
        if self.user_id <= 0:
            raise InvalidValueError("User ID must be positive")
        if self.type != TransactionType.DIVIDEND and not self.shares:
            raise InvalidValueError("Buy and sell transactions must have shares")

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> Transaction:
        """Rebuild a Transaction from a stored record."""
        return cls(
            id=data["id"],
            user_id=data["user_id"],
            type=data["type"],
            symbol=StockSymbol(data["symbol"]),
            amount=Money.from_string(str(data["amount"]).strip().lstrip("-")),
            shares=data.get("shares"),
            timestamp=data.get("timestamp") or datetime.now(),
        )

    def to_data(self) -> TransactionData:
        """Convert to a plain record."""
        return TransactionData(
            id=self.id,
            user_id=self.user_id,
            type=self.type.value,
            symbol=self.symbol.value,
            amount=str(self.amount.amount),
            shares=self.shares,
            timestamp=self.timestamp,
        )

    # --- Business Logic ---

    def is_buy(self) -> bool:
        return self.type == TransactionType.BUY

    def is_sell(self) -> bool:
        return self.type == TransactionType.SELL

    def is_dividend(self) -> bool:
        return self.type == TransactionType.DIVIDEND

    def price_per_share(self) -> Optional[Money]:
        """Amount divided by share count, or None without shares."""
        if not self.shares:
            return None
        return self.amount / abs(self.shares)

    def formatted_title(self) -> str:
        if self.type == TransactionType.BUY:
            return f"Bought {self.symbol.value}"
        if self.type == TransactionType.SELL:
            return f"Sold {self.symbol.value}"
        return f"{self.symbol.value} Dividend"

    def time_ago(self, now: Optional[datetime] = None) -> str:
        """Relative age such as "5 mins ago" or "2 days ago"."""
        elapsed = (now or datetime.now()) - self.timestamp
        minutes = int(elapsed.total_seconds() // 60)
        hours = minutes // 60
        days = hours // 24

        if minutes < 60:
            return f"{minutes} min{'' if minutes == 1 else 's'} ago"
        if hours < 24:
            return f"{hours} hour{'' if hours == 1 else 's'} ago"
        return f"{days} day{'' if days == 1 else 's'} ago"

    def icon_color_class(self) -> str:
        return ICON_COLOR_CLASSES[self.type]

    def background_color_class(self) -> str:
        return BACKGROUND_COLOR_CLASSES[self.type]
