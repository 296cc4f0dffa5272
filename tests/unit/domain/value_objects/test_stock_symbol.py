"""
Tests for StockSymbol value object.
"""
import pytest

from dashboard.domain.exceptions import InvalidValueError
from dashboard.domain.value_objects.stock_symbol import StockSymbol


class TestStockSymbol:
    """Tests for StockSymbol."""

    def test_normalized_to_upper_case(self):
        assert StockSymbol(" aapl ").value == "AAPL"

    def test_str(self):
        assert str(StockSymbol("MSFT")) == "MSFT"

    def test_equality_by_value(self):
        assert StockSymbol("nvda") == StockSymbol("NVDA")

    @pytest.mark.parametrize(
        "symbol,message",
        [
            ("", "non-empty"),
            ("TOOLONG", "between 1 and 5"),
            ("BRK.B", "only letters"),
            ("A1", "only letters"),
        ],
    )
    def test_invalid_symbols(self, symbol, message):
        with pytest.raises(InvalidValueError, match=message):
            StockSymbol(symbol)

    def test_is_valid(self):
        assert StockSymbol.is_valid("GOOGL")
        assert not StockSymbol.is_valid("123")
