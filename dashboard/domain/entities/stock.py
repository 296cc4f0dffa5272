"""
Stock Domain Entity

Market quote for a single listed stock.
"""
from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Any, Mapping, TypedDict

from dashboard.domain.exceptions import InvalidValueError
from dashboard.domain.value_objects.money import Money
from dashboard.domain.value_objects.percentage import Percentage
from dashboard.domain.value_objects.stock_symbol import StockSymbol


HIGH_VOLUME_THRESHOLD = 10_000_000
LARGE_CAP_BILLIONS = Decimal("10")

GRADIENT_COLORS = {
    "AAPL": "from-blue-500 to-blue-600",
    "MSFT": "from-purple-500 to-purple-600",
    "TSLA": "from-green-500 to-emerald-600",
    "AMZN": "from-yellow-500 to-orange-500",
}
DEFAULT_GRADIENT = "from-gray-500 to-gray-600"


class StockData(TypedDict):
    """Plain stock record as stored by repositories."""
    id: int
    symbol: str
    name: str
    price: str
    change: str
    change_percent: str
    volume: int
    market_cap: str


class PerformanceCategory(str, Enum):
    """Daily move classification."""
    STRONG_GAIN = "strong-gain"
    MODERATE_GAIN = "moderate-gain"
    STABLE = "stable"
    MODERATE_LOSS = "moderate-loss"
    STRONG_LOSS = "strong-loss"


@dataclass(frozen=True)
class Stock:
    """
    Immutable stock entity.

    Attributes:
        id: Stock identifier
        symbol: Ticker symbol
        name: Company name
        price: Last price
        change: Absolute size of today's move (sign lives in change_percent)
        change_percent: Signed daily change
        volume: Shares traded today
        market_cap: Display text such as "$2.9T" or "$801B"
    """
    id: int
    symbol: StockSymbol
    name: str
    price: Money
    change: Money
    change_percent: Percentage
    volume: int
    market_cap: str

    def __post_init__(self) -> None:
        if self.id <= 0:
            raise InvalidValueError("Stock ID must be positive")
        if not self.name or not self.name.strip():
            raise InvalidValueError("Stock name cannot be empty")
        if self.volume < 0:
            raise InvalidValueError("Volume cannot be negative")

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> Stock:
        """Rebuild a Stock from a stored record."""
        return cls(
            id=data["id"],
            symbol=StockSymbol(data["symbol"]),
            name=data["name"],
            price=Money.from_string(str(data["price"])),
            change=Money.from_string(str(data["change"]).strip().lstrip("-")),
            change_percent=Percentage.from_string(str(data["change_percent"])),
            volume=data["volume"],
            market_cap=data["market_cap"],
        )

    def to_data(self) -> StockData:
        """Convert to a plain record."""
        sign = "-" if self.change_percent.is_negative() else ""
        return StockData(
            id=self.id,
            symbol=self.symbol.value,
            name=self.name,
            price=str(self.price.amount),
            change=sign + str(self.change.amount),
            change_percent=str(self.change_percent.value),
            volume=self.volume,
            market_cap=self.market_cap,
        )

    # --- Business Logic ---

    def is_trending_up(self) -> bool:
        return self.change_percent.is_positive()

    def is_trending_down(self) -> bool:
        return self.change_percent.is_negative()

    def previous_price(self) -> Money:
        """Previous close, derived from today's move."""
        if self.change_percent.is_positive():
            return self.price - self.change
        return self.price + self.change

    def has_high_volume(self) -> bool:
        return self.volume > HIGH_VOLUME_THRESHOLD

    @property
    def volume_in_millions(self) -> float:
        millions = Decimal(self.volume) / Decimal(1_000_000)
        return float(millions.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

    def performance_category(self) -> PerformanceCategory:
        change = self.change_percent.value
        if change >= 5:
            return PerformanceCategory.STRONG_GAIN
        if change >= 2:
            return PerformanceCategory.MODERATE_GAIN
        if change >= -2:
            return PerformanceCategory.STABLE
        if change >= -5:
            return PerformanceCategory.MODERATE_LOSS
        return PerformanceCategory.STRONG_LOSS

    def is_large_cap(self) -> bool:
        """Market cap above $10B."""
        cap = self.market_cap.lower()
        if "t" in cap:
            return True
        if "b" in cap:
            try:
                return Decimal(cap.replace("$", "").replace("b", "").strip()) >= LARGE_CAP_BILLIONS
            except ArithmeticError:
                return False
        return False

    def gradient_color(self) -> str:
        return GRADIENT_COLORS.get(self.symbol.value, DEFAULT_GRADIENT)
