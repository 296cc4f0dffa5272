"""Application ports (interfaces)."""
from dashboard.application.ports.outbound import (
    PortfolioRepositoryPort,
    StockRepositoryPort,
    TransactionRepositoryPort,
    WatchlistRepositoryPort,
)

__all__ = [
    "PortfolioRepositoryPort",
    "StockRepositoryPort",
    "TransactionRepositoryPort",
    "WatchlistRepositoryPort",
]
