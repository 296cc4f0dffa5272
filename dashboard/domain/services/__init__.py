"""Domain services."""
from dashboard.domain.services.portfolio_calculator import (
    PortfolioCalculationService,
    PortfolioMetrics,
    AllocationSlice,
    PerformancePoint,
    RiskMetrics,
)
from dashboard.domain.services.watchlist_service import (
    WatchlistService,
    WatchlistPerformance,
    AlertInfo,
    AlertType,
    TopPerformer,
)

__all__ = [
    "PortfolioCalculationService",
    "PortfolioMetrics",
    "AllocationSlice",
    "PerformancePoint",
    "RiskMetrics",
    "WatchlistService",
    "WatchlistPerformance",
    "AlertInfo",
    "AlertType",
    "TopPerformer",
]
