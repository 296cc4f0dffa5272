"""
Dashboard settings
Environment variables take precedence; values are validated on load.
"""
import os
from typing import Optional
from dotenv import load_dotenv
from dashboard.exceptions import ConfigurationError

load_dotenv()


def get_env_int(key: str, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    """Read an integer environment variable (validated)"""
    value = os.getenv(key)
    if value is None:
        return default

    try:
        int_value = int(value)
    except ValueError:
        raise ConfigurationError(key, f"not an integer: {value}")
    if min_value is not None and int_value < min_value:
        raise ConfigurationError(key, f"value {int_value} is below the minimum ({min_value})")
    if max_value is not None and int_value > max_value:
        raise ConfigurationError(key, f"value {int_value} is above the maximum ({max_value})")
    return int_value


def get_env_optional_int(key: str) -> Optional[int]:
    """Read an integer environment variable that may be unset or empty"""
    value = os.getenv(key)
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(key, f"not an integer: {value}")


def get_env_float(key: str, default: float, min_value: Optional[float] = None, max_value: Optional[float] = None) -> float:
    """Read a float environment variable (validated)"""
    value = os.getenv(key)
    if value is None:
        return default

    try:
        float_value = float(value)
    except ValueError:
        raise ConfigurationError(key, f"not a number: {value}")
    if min_value is not None and float_value < min_value:
        raise ConfigurationError(key, f"value {float_value} is below the minimum ({min_value})")
    if max_value is not None and float_value > max_value:
        raise ConfigurationError(key, f"value {float_value} is above the maximum ({max_value})")
    return float_value


def get_env_str(key: str, default: str) -> str:
    """Read a string environment variable"""
    return os.getenv(key, default)


class DisplayConfig:
    """Display settings"""
    DEFAULT_CURRENCY = get_env_str("DISPLAY_DEFAULT_CURRENCY", "USD").upper()
    RECENT_TRANSACTIONS_LIMIT = get_env_int("DISPLAY_RECENT_TRANSACTIONS_LIMIT", 10, min_value=1, max_value=100)

    @classmethod
    def validate(cls):
        if len(cls.DEFAULT_CURRENCY) != 3 or not cls.DEFAULT_CURRENCY.isalpha():
            raise ConfigurationError("DEFAULT_CURRENCY", "currency must be a 3-letter code")


class WatchlistConfig:
    """Watchlist alert settings"""
    ALERT_TOLERANCE = get_env_float("WATCHLIST_ALERT_TOLERANCE", 0.02, min_value=0.0, max_value=1.0)  # ±2%

    @classmethod
    def validate(cls):
        if cls.ALERT_TOLERANCE < 0 or cls.ALERT_TOLERANCE > 1.0:
            raise ConfigurationError("ALERT_TOLERANCE", "tolerance must be between 0 and 1")


class PerformanceConfig:
    """Synthetic performance series settings"""
    HISTORY_DAYS = get_env_int("PERFORMANCE_HISTORY_DAYS", 30, min_value=1, max_value=365)
    BASE_VALUE = get_env_int("PERFORMANCE_BASE_VALUE", 1_000_000, min_value=1)
    DAILY_VARIANCE = get_env_float("PERFORMANCE_DAILY_VARIANCE", 0.03, min_value=0.0, max_value=0.5)  # ±3%
    TREND_PER_DAY = get_env_float("PERFORMANCE_TREND_PER_DAY", 0.001, min_value=-0.1, max_value=0.1)  # +0.1%/day
    RANDOM_SEED = get_env_optional_int("PERFORMANCE_RANDOM_SEED")

    @classmethod
    def validate(cls):
        if cls.HISTORY_DAYS <= 0:
            raise ConfigurationError("HISTORY_DAYS", "history length must be positive")
        if cls.BASE_VALUE <= 0:
            raise ConfigurationError("BASE_VALUE", "base value must be positive")


def validate_all_configs():
    """Validate every config class"""
    DisplayConfig.validate()
    WatchlistConfig.validate()
    PerformanceConfig.validate()
