"""
Dashboard application exceptions
"""
from typing import Optional


class DashboardError(Exception):
    """Base application error"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        """
        Args:
            message: Error message
            error_code: Machine-readable error code (optional)
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class InvalidInputError(DashboardError):
    """Request data failed validation"""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_INPUT")


class PortfolioNotFoundError(DashboardError):
    """No portfolio exists for the user"""

    def __init__(self, user_id: int):
        super().__init__("Portfolio not found", error_code="PORTFOLIO_NOT_FOUND")
        self.user_id = user_id


class StockNotFoundError(DashboardError):
    """No stock with the given symbol"""

    def __init__(self, symbol: str):
        super().__init__("Stock not found", error_code="STOCK_NOT_FOUND")
        self.symbol = symbol


class WatchlistItemNotFoundError(DashboardError):
    """Watchlist item is missing or owned by another user"""

    def __init__(self, item_id: int):
        super().__init__("Watchlist item not found", error_code="WATCHLIST_ITEM_NOT_FOUND")
        self.item_id = item_id


class WatchlistItemExistsError(DashboardError):
    """Symbol is already on the user's watchlist"""

    def __init__(self, symbol: str):
        super().__init__("Stock already in watchlist", error_code="WATCHLIST_ITEM_EXISTS")
        self.symbol = symbol


class RecordNotFoundError(DashboardError):
    """Repository update target does not exist"""

    def __init__(self, entity: str, key: object):
        """
        Args:
            entity: Record kind (e.g. 'Stock')
            key: Identifier that was looked up
        """
        super().__init__(f"{entity} {key} not found", error_code="RECORD_NOT_FOUND")
        self.entity = entity
        self.key = key


class UseCaseError(DashboardError):
    """Unexpected failure inside a use case"""

    def __init__(self, message: str):
        super().__init__(message, error_code="USE_CASE_FAILED")


class ConfigurationError(DashboardError):
    """Invalid configuration value"""

    def __init__(self, config_key: str, reason: str):
        """
        Args:
            config_key: Setting name
            reason: Why it was rejected
        """
        message = f"Configuration error ({config_key}): {reason}"
        super().__init__(message, error_code="CONFIGURATION_ERROR")
        self.config_key = config_key
        self.reason = reason
