"""
Application Layer - Use Cases and Ports

Use cases orchestrate domain entities and services and talk to storage
through ports (interfaces).

Structure:
- ports/outbound/: Repository interfaces implemented by infrastructure adapters
- use_cases/: Application services, one per dashboard operation
- dto/: Data Transfer Objects returned to the API layer
"""
from dashboard.application.use_cases import (
    GetPortfolioUseCase,
    GetMarketDataUseCase,
    GetTransactionsUseCase,
    GetDashboardDataUseCase,
    ManageWatchlistUseCase,
)

__all__ = [
    "GetPortfolioUseCase",
    "GetMarketDataUseCase",
    "GetTransactionsUseCase",
    "GetDashboardDataUseCase",
    "ManageWatchlistUseCase",
]
