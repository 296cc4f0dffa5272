"""
Portfolio Domain Entity

Summary of a user's holdings: total value, today's P&L, trade success
rate and number of open positions.
"""
from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, TypedDict

from dashboard.domain.exceptions import InvalidValueError
from dashboard.domain.value_objects.money import Money
from dashboard.domain.value_objects.percentage import Percentage


DIVERSIFICATION_MIN_POSITIONS = 5


class PortfolioData(TypedDict):
    """Plain portfolio record as stored by repositories."""
    id: int
    user_id: int
    total_value: str
    daily_pnl: str
    success_rate: str
    active_positions: int


class PerformanceStatus(str, Enum):
    """Portfolio performance classification."""
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    POOR = "poor"


@dataclass(frozen=True)
class Portfolio:
    """
    Immutable portfolio entity.

    Money cannot be negative, so the daily P&L is kept as a magnitude
    plus a sign flag.

    Attributes:
        id: Portfolio identifier
        user_id: Owner
        total_value: Current market value
        daily_pnl: Magnitude of today's profit or loss
        success_rate: Share of profitable trades (0-100)
        active_positions: Number of open positions
        daily_pnl_negative: True when daily_pnl is a loss
    """
    id: int
    user_id: int
    total_value: Money
    daily_pnl: Money
    success_rate: Percentage
    active_positions: int
    daily_pnl_negative: bool = False

    def __post_init__(self) -> None:
        if self.id <= 0:
            raise InvalidValueError("Portfolio ID must be positive")
        if self.user_id <= 0:
            raise InvalidValueError("User ID must be positive")
        if self.active_positions < 0:
            raise InvalidValueError("Active positions cannot be negative")
        if self.success_rate.value < 0 or self.success_rate.value > 100:
            raise InvalidValueError("Success rate must be between 0 and 100")
        if self.daily_pnl.is_zero() and self.daily_pnl_negative:
            object.__setattr__(self, "daily_pnl_negative", False)

    # --- Factory Methods ---

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> Portfolio:
        """Rebuild a Portfolio from a stored record."""
        raw_pnl = str(data["daily_pnl"]).strip()
        negative = raw_pnl.startswith("-")
        return cls(
            id=data["id"],
            user_id=data["user_id"],
            total_value=Money.from_string(str(data["total_value"])),
            daily_pnl=Money.from_string(raw_pnl.lstrip("-")),
            success_rate=Percentage.from_string(str(data["success_rate"])),
            active_positions=data["active_positions"],
            daily_pnl_negative=negative,
        )

    def to_data(self) -> PortfolioData:
        """Convert to a plain record."""
        return PortfolioData(
            id=self.id,
            user_id=self.user_id,
            total_value=str(self.total_value.amount),
            daily_pnl=("-" if self.daily_pnl_negative else "") + str(self.daily_pnl.amount),
            success_rate=str(self.success_rate.value),
            active_positions=self.active_positions,
        )

    # --- Business Logic ---

    @property
    def signed_daily_pnl(self) -> Decimal:
        """Daily P&L with its sign restored."""
        amount = self.daily_pnl.amount
        return -amount if self.daily_pnl_negative else amount

    def daily_return_percentage(self) -> Percentage:
        """Today's P&L relative to yesterday's value."""
        if self.total_value.is_zero():
            return Percentage.zero()

        previous_value = self.total_value.amount - self.signed_daily_pnl
        if previous_value <= 0:
            return Percentage.zero()

        return Percentage.from_decimal(self.signed_daily_pnl / previous_value)

    def is_performing_well(self) -> bool:
        return self.signed_daily_pnl > 0 and self.success_rate.value >= 70

    def average_position_value(self) -> Money:
        if self.active_positions == 0:
            return Money.zero(self.total_value.currency)
        return self.total_value / self.active_positions

    def is_diversified(self) -> bool:
        return self.active_positions >= DIVERSIFICATION_MIN_POSITIONS

    def performance_status(self) -> PerformanceStatus:
        """Classify by daily return and success rate, best tier first."""
        daily_return = self.daily_return_percentage().value
        success_rate = self.success_rate.value

        if daily_return >= 2 and success_rate >= 80:
            return PerformanceStatus.EXCELLENT
        if daily_return >= 1 and success_rate >= 70:
            return PerformanceStatus.GOOD
        if daily_return >= 0 and success_rate >= 60:
            return PerformanceStatus.AVERAGE
        return PerformanceStatus.POOR
