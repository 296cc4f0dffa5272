"""In-memory persistence adapters."""
from dashboard.infrastructure.adapters.persistence.memory_portfolio_adapter import InMemoryPortfolioAdapter
from dashboard.infrastructure.adapters.persistence.memory_stock_adapter import InMemoryStockAdapter
from dashboard.infrastructure.adapters.persistence.memory_transaction_adapter import InMemoryTransactionAdapter
from dashboard.infrastructure.adapters.persistence.memory_watchlist_adapter import InMemoryWatchlistAdapter

__all__ = [
    "InMemoryPortfolioAdapter",
    "InMemoryStockAdapter",
    "InMemoryTransactionAdapter",
    "InMemoryWatchlistAdapter",
]
