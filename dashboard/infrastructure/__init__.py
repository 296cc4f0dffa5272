"""
Infrastructure Layer - Port Adapters

Adapters implementing the application's repository ports.

Structure:
- adapters/persistence/: In-memory repositories seeded with sample data
"""
from dashboard.infrastructure.adapters import (
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
