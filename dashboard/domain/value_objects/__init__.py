"""Domain value objects."""
from dashboard.domain.value_objects.money import Money, DEFAULT_CURRENCY
from dashboard.domain.value_objects.percentage import Percentage
from dashboard.domain.value_objects.stock_symbol import StockSymbol

__all__ = [
    "Money",
    "DEFAULT_CURRENCY",
    "Percentage",
    "StockSymbol",
]
