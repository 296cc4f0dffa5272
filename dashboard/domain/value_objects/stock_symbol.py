"""
StockSymbol Value Object

Ticker symbols of 1-5 uppercase letters, validated at construction.
"""
from __future__ import annotations
from dataclasses import dataclass
import re

from dashboard.domain.exceptions import InvalidValueError


SYMBOL_PATTERN = re.compile(r"^[A-Z]+$")
MAX_SYMBOL_LENGTH = 5


@dataclass(frozen=True)
class StockSymbol:
    """
    Immutable stock ticker symbol.

    Attributes:
        value: Normalized (trimmed, upper-cased) symbol
    """
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise InvalidValueError("Stock symbol must be a non-empty string")

        clean_symbol = self.value.strip().upper()
        if not 1 <= len(clean_symbol) <= MAX_SYMBOL_LENGTH:
            raise InvalidValueError("Stock symbol must be between 1 and 5 characters")
        if not SYMBOL_PATTERN.match(clean_symbol):
            raise InvalidValueError("Stock symbol must contain only letters")

        object.__setattr__(self, "value", clean_symbol)

    @classmethod
    def is_valid(cls, symbol: str) -> bool:
        """Check whether text would make a valid symbol."""
        try:
            cls(symbol)
        except InvalidValueError:
            return False
        return True

    def __str__(self) -> str:
        return self.value
