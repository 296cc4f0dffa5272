"""Configuration module"""
from .settings import DisplayConfig, WatchlistConfig, PerformanceConfig, validate_all_configs

__all__ = ['DisplayConfig', 'WatchlistConfig', 'PerformanceConfig', 'validate_all_configs']
