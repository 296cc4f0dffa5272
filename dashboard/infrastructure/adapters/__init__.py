"""Infrastructure adapters."""
from dashboard.infrastructure.adapters.persistence import (
    InMemoryPortfolioAdapter,
    InMemoryStockAdapter,
    InMemoryTransactionAdapter,
    InMemoryWatchlistAdapter,
)

__all__ = [
    "InMemoryPortfolioAdapter",
    "InMemoryStockAdapter",
    "InMemoryTransactionAdapter",
    "InMemoryWatchlistAdapter",
]
