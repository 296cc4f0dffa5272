# Outbound ports (repository interfaces)
from dashboard.application.ports.outbound.portfolio_repository_port import PortfolioRepositoryPort
from dashboard.application.ports.outbound.stock_repository_port import StockRepositoryPort
from dashboard.application.ports.outbound.transaction_repository_port import TransactionRepositoryPort
from dashboard.application.ports.outbound.watchlist_repository_port import WatchlistRepositoryPort

__all__ = [
    "PortfolioRepositoryPort",
    "StockRepositoryPort",
    "TransactionRepositoryPort",
    "WatchlistRepositoryPort",
]
