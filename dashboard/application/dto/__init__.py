"""Data Transfer Objects."""
from dashboard.application.dto.portfolio import (
    PortfolioDto,
    StockDto,
    TransactionDto,
    AllocationDto,
    PerformanceDataDto,
    RiskMetricsDto,
    PortfolioMetricsDto,
    DashboardDataDto,
)
from dashboard.application.dto.watchlist import (
    WatchlistItemDto,
    CreateWatchlistItemDto,
    UpdateWatchlistItemDto,
    TopPerformerDto,
    WatchlistPerformanceDto,
    WatchlistAlertDto,
    WatchlistWithStocksDto,
)

__all__ = [
    "PortfolioDto",
    "StockDto",
    "TransactionDto",
    "AllocationDto",
    "PerformanceDataDto",
    "RiskMetricsDto",
    "PortfolioMetricsDto",
    "DashboardDataDto",
    "WatchlistItemDto",
    "CreateWatchlistItemDto",
    "UpdateWatchlistItemDto",
    "TopPerformerDto",
    "WatchlistPerformanceDto",
    "WatchlistAlertDto",
    "WatchlistWithStocksDto",
]
