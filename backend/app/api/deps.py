"""
API dependencies
Container access, path parameter parsing and error mapping.
"""
import logging
from typing import Optional

from fastapi import Depends, HTTPException, status

from dashboard.application.use_cases import (
    GetDashboardDataUseCase,
    GetMarketDataUseCase,
    GetPortfolioUseCase,
    GetTransactionsUseCase,
    ManageWatchlistUseCase,
)
from dashboard.container import Container
from dashboard.exceptions import (
    DashboardError,
    InvalidInputError,
    PortfolioNotFoundError,
    RecordNotFoundError,
    StockNotFoundError,
    WatchlistItemExistsError,
    WatchlistItemNotFoundError,
)

logger = logging.getLogger(__name__)

# ============================================================================
# Container singleton
# ============================================================================
_container: Optional[Container] = None


def get_container() -> Container:
    """
    Return the process-wide Container, creating it on first use.

    Tests replace this dependency through app.dependency_overrides.
    """
    global _container
    if _container is None:
        _container = Container()
        logger.info("Container initialized with in-memory repositories")
    return _container


def reset_container() -> None:
    """Drop the cached Container so the next request builds a fresh one."""
    global _container
    _container = None


def get_portfolio_use_case(container: Container = Depends(get_container)) -> GetPortfolioUseCase:
    return container.get_portfolio_use_case()


def get_market_data_use_case(container: Container = Depends(get_container)) -> GetMarketDataUseCase:
    return container.get_market_data_use_case()


def get_transactions_use_case(container: Container = Depends(get_container)) -> GetTransactionsUseCase:
    return container.get_transactions_use_case()


def get_dashboard_data_use_case(container: Container = Depends(get_container)) -> GetDashboardDataUseCase:
    return container.get_dashboard_data_use_case()


def get_manage_watchlist_use_case(container: Container = Depends(get_container)) -> ManageWatchlistUseCase:
    return container.get_manage_watchlist_use_case()


# ============================================================================
# Path parameters
# ============================================================================

def _parse_positive_int(value: str) -> Optional[int]:
    text = value.strip()
    # ASCII digits only; "²" passes isdigit() but not int()
    if not (text.isascii() and text.isdigit()):
        return None
    number = int(text)
    return number if number > 0 else None


def parse_user_id(user_id: str) -> int:
    """Parse a userId path segment; anything but a positive integer is a 400."""
    parsed = _parse_positive_int(user_id)
    if parsed is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid user ID")
    return parsed


def parse_item_id(item_id: str) -> int:
    """Parse an itemId path segment; anything but a positive integer is a 400."""
    parsed = _parse_positive_int(item_id)
    if parsed is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid item ID")
    return parsed


# ============================================================================
# Error mapping
# ============================================================================

_STATUS_BY_ERROR = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    WatchlistItemExistsError: status.HTTP_400_BAD_REQUEST,
    PortfolioNotFoundError: status.HTTP_404_NOT_FOUND,
    StockNotFoundError: status.HTTP_404_NOT_FOUND,
    WatchlistItemNotFoundError: status.HTTP_404_NOT_FOUND,
    RecordNotFoundError: status.HTTP_404_NOT_FOUND,
}


def to_http_exception(error: DashboardError) -> HTTPException:
    """
    Map an application error to an HTTPException.

    Unmapped errors (UseCaseError and anything new) become 500 and are logged.
    """
    status_code = _STATUS_BY_ERROR.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Request failed: {error.message}", exc_info=error)
    return HTTPException(status_code=status_code, detail=error.message)
