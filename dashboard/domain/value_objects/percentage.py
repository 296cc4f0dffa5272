"""
Percentage Value Object

Represents percentage values in percentage points (5 = 5%), rounded to
2 decimal places on construction.
"""
from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from dashboard.domain.exceptions import InvalidValueError


HUNDREDTH = Decimal("0.01")

Number = Union[int, float, str, Decimal]


@dataclass(frozen=True)
class Percentage:
    """
    Immutable value object representing a percentage.

    Attributes:
        value: Percentage points (e.g., 2.95 for 2.95%)
    """
    value: Decimal

    def __post_init__(self) -> None:
        """Convert to Decimal, reject non-finite values and round."""
        value = self.value
        if not isinstance(value, Decimal):
            try:
                value = Decimal(str(value))
            except InvalidOperation:
                raise InvalidValueError("Percentage value must be a finite number")
        if not value.is_finite():
            raise InvalidValueError("Percentage value must be a finite number")
        rounded = value.quantize(HUNDREDTH, rounding=ROUND_HALF_UP)
        if rounded.is_zero():
            rounded = Decimal("0.00")  # drop the sign of -0.00
        object.__setattr__(self, "value", rounded)

    # --- Factory Methods ---

    @classmethod
    def from_decimal(cls, decimal: Number) -> Percentage:
        """Create Percentage from a fraction (0.05 = 5%)."""
        return cls(Decimal(str(decimal)) * Decimal("100"))

    @classmethod
    def from_string(cls, value: str) -> Percentage:
        """Parse text such as "2.95%" or "-1.65"."""
        try:
            return cls(Decimal(str(value).replace("%", "").strip()))
        except InvalidOperation:
            raise InvalidValueError(f"Invalid percentage string: {value}")

    @classmethod
    def zero(cls) -> Percentage:
        """Create zero percentage."""
        return cls(Decimal("0"))

    # --- Arithmetic Operations ---

    @property
    def decimal(self) -> Decimal:
        """Fraction form (5% -> 0.05)."""
        return self.value / Decimal("100")

    def __add__(self, other: Percentage) -> Percentage:
        return Percentage(self.value + other.value)

    def __sub__(self, other: Percentage) -> Percentage:
        return Percentage(self.value - other.value)

    def __mul__(self, factor: Number) -> Percentage:
        return Percentage(self.value * Decimal(str(factor)))

    def __rmul__(self, factor: Number) -> Percentage:
        return self.__mul__(factor)

    def __truediv__(self, divisor: Number) -> Percentage:
        divisor_decimal = Decimal(str(divisor))
        if divisor_decimal == 0:
            raise InvalidValueError("Cannot divide by zero")
        return Percentage(self.value / divisor_decimal)

    def __neg__(self) -> Percentage:
        return Percentage(-self.value)

    def __abs__(self) -> Percentage:
        return Percentage(abs(self.value))

    # --- Comparison Operations ---

    def __lt__(self, other: Percentage) -> bool:
        return self.value < other.value

    def __le__(self, other: Percentage) -> bool:
        return self.value <= other.value

    def __gt__(self, other: Percentage) -> bool:
        return self.value > other.value

    def __ge__(self, other: Percentage) -> bool:
        return self.value >= other.value

    # --- Utility Methods ---

    def is_zero(self) -> bool:
        return self.value == Decimal("0")

    def is_positive(self) -> bool:
        return self.value > Decimal("0")

    def is_negative(self) -> bool:
        return self.value < Decimal("0")

    # --- String Representation ---

    def to_formatted_string(self, places: int = 2) -> str:
        """Format as "2.95%"."""
        return f"{self.value:.{places}f}%"

    def to_signed_string(self, places: int = 2) -> str:
        """Format with explicit sign, "+2.95%" / "-1.65%"."""
        sign = "+" if self.value >= 0 else ""
        return f"{sign}{self.value:.{places}f}%"

    def __str__(self) -> str:
        return self.to_formatted_string()

    def __repr__(self) -> str:
        return f"Percentage({self.value})"
