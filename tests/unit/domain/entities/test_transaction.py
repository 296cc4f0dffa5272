"""
Tests for Transaction entity.
"""
import pytest
from datetime import datetime, timedelta
from decimal import Decimal

from dashboard.domain.entities.transaction import Transaction, TransactionType
from dashboard.domain.exceptions import InvalidValueError
from dashboard.domain.value_objects.money import Money
from dashboard.domain.value_objects.stock_symbol import StockSymbol

NOW = datetime(2024, 3, 15, 12, 0, 0)


def make_transaction(type_="buy", shares=50, amount="9487.50", minutes_ago=0):
    return Transaction(
        id=1,
        user_id=1,
        type=type_,
        symbol=StockSymbol("AAPL"),
        amount=Money(Decimal(amount)),
        shares=shares,
        timestamp=NOW - timedelta(minutes=minutes_ago),
    )


class TestTransactionCreation:
    """Construction and validation."""

    def test_type_string_is_coerced(self):
        assert make_transaction("sell").type is TransactionType.SELL

    def test_invalid_type_rejected(self):
        with pytest.raises(InvalidValueError, match="Invalid transaction type: swap"):
            make_transaction("swap")

    def test_buy_requires_shares(self):
        with pytest.raises(InvalidValueError, match="must have shares"):
            make_transaction("buy", shares=None)

    def test_dividend_without_shares(self):
        dividend = make_transaction("dividend", shares=None, amount="412.50")
        assert dividend.is_dividend()
        assert dividend.price_per_share() is None

    def test_from_data_uses_absolute_amount(self):
        transaction = Transaction.from_data({
            "id": 3,
            "user_id": 1,
            "type": "sell",
            "symbol": "tsla",
            "amount": "-7554.60",
            "shares": 30,
            "timestamp": NOW,
        })
        assert transaction.amount == Money(Decimal("7554.60"))
        assert transaction.symbol.value == "TSLA"


class TestTransactionDisplay:
    """Display helpers."""

    def test_price_per_share(self):
        assert make_transaction().price_per_share() == Money(Decimal("189.75"))

    @pytest.mark.parametrize(
        "type_,shares,title",
        [("buy", 1, "Bought AAPL"), ("sell", 1, "Sold AAPL"), ("dividend", None, "AAPL Dividend")],
    )
    def test_formatted_title(self, type_, shares, title):
        assert make_transaction(type_, shares=shares).formatted_title() == title

    @pytest.mark.parametrize(
        "minutes_ago,expected",
        [
            (0, "0 mins ago"),
            (1, "1 min ago"),
            (15, "15 mins ago"),
            (60, "1 hour ago"),
            (360, "6 hours ago"),
            (1440, "1 day ago"),
            (4320, "3 days ago"),
        ],
    )
    def test_time_ago(self, minutes_ago, expected):
        assert make_transaction(minutes_ago=minutes_ago).time_ago(NOW) == expected

    def test_color_classes(self):
        sell = make_transaction("sell")
        assert sell.icon_color_class() == "text-red-400"
        assert sell.background_color_class() == "bg-red-500/20"
