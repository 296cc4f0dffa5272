"""Domain entities."""
from dashboard.domain.entities.portfolio import (
    Portfolio,
    PortfolioData,
    PerformanceStatus,
)
from dashboard.domain.entities.stock import (
    Stock,
    StockData,
    PerformanceCategory,
)
from dashboard.domain.entities.transaction import (
    Transaction,
    TransactionData,
    TransactionType,
)
from dashboard.domain.entities.watchlist_item import (
    WatchlistItem,
    WatchlistItemData,
)

__all__ = [
    "Portfolio",
    "PortfolioData",
    "PerformanceStatus",
    "Stock",
    "StockData",
    "PerformanceCategory",
    "Transaction",
    "TransactionData",
    "TransactionType",
    "WatchlistItem",
    "WatchlistItemData",
]
