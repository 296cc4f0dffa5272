"""Application use cases."""
from dashboard.application.use_cases.get_portfolio import GetPortfolioUseCase
from dashboard.application.use_cases.get_market_data import GetMarketDataUseCase
from dashboard.application.use_cases.get_transactions import GetTransactionsUseCase
from dashboard.application.use_cases.get_dashboard_data import GetDashboardDataUseCase
from dashboard.application.use_cases.manage_watchlist import ManageWatchlistUseCase

__all__ = [
    "GetPortfolioUseCase",
    "GetMarketDataUseCase",
    "GetTransactionsUseCase",
    "GetDashboardDataUseCase",
    "ManageWatchlistUseCase",
]
