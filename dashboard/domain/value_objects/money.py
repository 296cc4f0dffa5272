"""
Money Value Object

Represents non-negative monetary amounts with a currency code, ensuring type
safety and proper handling of financial calculations.
"""
from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re
from typing import Union

from dashboard.domain.exceptions import CurrencyMismatchError, InvalidValueError


DEFAULT_CURRENCY = "USD"

CENT = Decimal("0.01")

# en-US display symbols; other codes are rendered as "CHF 1,234.56"
CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "KRW": "₩",
}

COMPACT_UNITS = (
    (Decimal("1000000000000"), "T"),
    (Decimal("1000000000"), "B"),
    (Decimal("1000000"), "M"),
    (Decimal("1000"), "K"),
)

_NON_NUMERIC = re.compile(r"[^0-9.\-]")

Number = Union[int, float, str, Decimal]


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise InvalidValueError(f"Invalid numeric value: {value!r}")


@dataclass(frozen=True)
class Money:
    """
    Immutable value object representing a monetary amount.

    Attributes:
        amount: Non-negative amount, rounded to 2 decimal places
        currency: ISO 4217 style 3-letter code (upper-cased)
    """
    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        """Validate and normalize the amount and currency."""
        amount = _to_decimal(self.amount)
        if not amount.is_finite():
            raise InvalidValueError("Money amount must be a finite number")
        if amount < 0:
            raise InvalidValueError("Money amount cannot be negative")
        if not isinstance(self.currency, str) or len(self.currency) != 3:
            raise InvalidValueError("Currency must be a valid 3-letter code")

        object.__setattr__(self, "amount", amount.quantize(CENT, rounding=ROUND_HALF_UP))
        object.__setattr__(self, "currency", self.currency.upper())

    # --- Factory Methods ---

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> Money:
        """Create zero Money of given currency."""
        return cls(Decimal("0"), currency)

    @classmethod
    def from_string(cls, value: str, currency: str = DEFAULT_CURRENCY) -> Money:
        """
        Parse display or raw text such as "$1,234.56" or "1234.56".

        Raises:
            InvalidValueError: If no number can be parsed
        """
        cleaned = _NON_NUMERIC.sub("", str(value))
        try:
            amount = Decimal(cleaned)
        except InvalidOperation:
            raise InvalidValueError(f"Invalid money string: {value}")
        return cls(amount, currency)

    # --- Arithmetic Operations ---

    def __add__(self, other: Money) -> Money:
        """Add two Money objects of same currency."""
        self._ensure_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        """Subtract Money objects of same currency."""
        self._ensure_same_currency(other)
        result = self.amount - other.amount
        if result < 0:
            raise InvalidValueError("Cannot subtract to negative amount")
        return Money(result, self.currency)

    def __mul__(self, factor: Number) -> Money:
        """Multiply Money by a non-negative scalar."""
        factor_decimal = _to_decimal(factor)
        if factor_decimal < 0:
            raise InvalidValueError("Cannot multiply by negative factor")
        return Money(self.amount * factor_decimal, self.currency)

    def __rmul__(self, factor: Number) -> Money:
        """Right multiply Money by a scalar."""
        return self.__mul__(factor)

    def __truediv__(self, divisor: Number) -> Money:
        """Divide Money by a positive scalar."""
        divisor_decimal = _to_decimal(divisor)
        if divisor_decimal <= 0:
            raise InvalidValueError("Cannot divide by zero or negative number")
        return Money(self.amount / divisor_decimal, self.currency)

    # --- Comparison Operations ---

    def __lt__(self, other: Money) -> bool:
        self._ensure_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._ensure_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._ensure_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._ensure_same_currency(other)
        return self.amount >= other.amount

    # --- Utility Methods ---

    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self.amount == Decimal("0")

    def is_positive(self) -> bool:
        """Check if amount is positive (greater than zero)."""
        return self.amount > Decimal("0")

    # --- Formatting ---

    @property
    def symbol(self) -> str:
        """Display prefix for this currency."""
        return CURRENCY_SYMBOLS.get(self.currency, f"{self.currency} ")

    def to_formatted_string(self) -> str:
        """Format as en-US currency text, e.g. "$1,234.56"."""
        return f"{self.symbol}{self.amount:,.2f}"

    def to_compact_string(self) -> str:
        """Format in compact notation, e.g. "$1.2M"."""
        for index, (unit, suffix) in enumerate(COMPACT_UNITS):
            if self.amount < unit:
                continue
            scaled = (self.amount / unit).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
            # 999.96K rounds up to 1000.0K, which reads as 1M
            if scaled >= 1000 and index > 0:
                unit, suffix = COMPACT_UNITS[index - 1]
                scaled = (self.amount / unit).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
            return f"{self.symbol}{_strip_zero_fraction(scaled)}{suffix}"

        scaled = self.amount.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        if scaled >= 1000:
            return f"{self.symbol}1K"
        return f"{self.symbol}{_strip_zero_fraction(scaled)}"

    # --- Private Methods ---

    def _ensure_same_currency(self, other: Money) -> None:
        """Raise error if currencies don't match."""
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Currency mismatch: {self.currency} vs {other.currency}"
            )

    # --- String Representation ---

    def __str__(self) -> str:
        return self.to_formatted_string()

    def __repr__(self) -> str:
        return f"Money({self.amount}, {self.currency})"


def _strip_zero_fraction(value: Decimal) -> str:
    text = f"{value:f}"
    if text.endswith(".0"):
        return text[:-2]
    return text
