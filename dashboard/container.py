"""
Dependency Injection Container.

This module provides a central container for wiring dependencies
following the Dependency Inversion Principle.

Usage:
    # Production
    container = Container()
    get_dashboard = container.get_dashboard_data_use_case()

    # Testing
    container = Container.create_for_testing()
    # or with custom doubles
    container = Container(stock_repository=mock_stocks)
"""
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

import numpy as np

from dashboard.application.ports.outbound.portfolio_repository_port import PortfolioRepositoryPort
from dashboard.application.ports.outbound.stock_repository_port import StockRepositoryPort
from dashboard.application.ports.outbound.transaction_repository_port import TransactionRepositoryPort
from dashboard.application.ports.outbound.watchlist_repository_port import WatchlistRepositoryPort
from dashboard.application.use_cases.get_dashboard_data import GetDashboardDataUseCase
from dashboard.application.use_cases.get_market_data import GetMarketDataUseCase
from dashboard.application.use_cases.get_portfolio import GetPortfolioUseCase
from dashboard.application.use_cases.get_transactions import GetTransactionsUseCase
from dashboard.application.use_cases.manage_watchlist import ManageWatchlistUseCase
from dashboard.config.settings import DisplayConfig, PerformanceConfig, WatchlistConfig
from dashboard.domain.services.portfolio_calculator import PortfolioCalculationService
from dashboard.domain.services.watchlist_service import WatchlistService


class Container:
    """
    Dependency Injection Container.

    Manages the creation and wiring of application dependencies.
    Repositories and services are created once per container.
    """

    def __init__(
        self,
        portfolio_repository: Optional[PortfolioRepositoryPort] = None,
        stock_repository: Optional[StockRepositoryPort] = None,
        transaction_repository: Optional[TransactionRepositoryPort] = None,
        watchlist_repository: Optional[WatchlistRepositoryPort] = None,
        calculation_service: Optional[PortfolioCalculationService] = None,
        watchlist_service: Optional[WatchlistService] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize container with optional overrides.

        Args:
            portfolio_repository: Portfolio storage (in-memory if None)
            stock_repository: Quote storage (in-memory if None)
            transaction_repository: Transaction storage (in-memory if None)
            watchlist_repository: Watchlist storage (in-memory if None)
            calculation_service: Portfolio calculations (configured from env if None)
            watchlist_service: Watchlist calculations (configured from env if None)
            clock: Source of "now" for use cases
        """
        self._portfolio_repository = portfolio_repository
        self._stock_repository = stock_repository
        self._transaction_repository = transaction_repository
        self._watchlist_repository = watchlist_repository
        self._calculation_service = calculation_service
        self._watchlist_service = watchlist_service
        self.clock = clock

        # Cached use cases
        self._get_portfolio_use_case: Optional[GetPortfolioUseCase] = None
        self._get_market_data_use_case: Optional[GetMarketDataUseCase] = None
        self._get_transactions_use_case: Optional[GetTransactionsUseCase] = None
        self._get_dashboard_data_use_case: Optional[GetDashboardDataUseCase] = None
        self._manage_watchlist_use_case: Optional[ManageWatchlistUseCase] = None

    @classmethod
    def create_for_testing(
        cls,
        seed: int = 42,
        clock: Callable[[], datetime] = datetime.now,
    ) -> "Container":
        """
        Create container with fresh in-memory adapters and a seeded generator.

        Args:
            seed: Seed for the performance series
            clock: Source of "now"

        Returns:
            Container with test adapters
        """
        from dashboard.infrastructure.adapters.persistence import (
            InMemoryPortfolioAdapter,
            InMemoryStockAdapter,
            InMemoryTransactionAdapter,
            InMemoryWatchlistAdapter,
        )

        return cls(
            portfolio_repository=InMemoryPortfolioAdapter(),
            stock_repository=InMemoryStockAdapter(),
            transaction_repository=InMemoryTransactionAdapter(),
            watchlist_repository=InMemoryWatchlistAdapter(),
            calculation_service=PortfolioCalculationService(rng=np.random.default_rng(seed)),
            watchlist_service=WatchlistService(),
            clock=clock,
        )

    # --- Port Getters ---

    def get_portfolio_repository(self) -> PortfolioRepositoryPort:
        """Get portfolio repository implementation."""
        if self._portfolio_repository is None:
            from dashboard.infrastructure.adapters.persistence import InMemoryPortfolioAdapter
            self._portfolio_repository = InMemoryPortfolioAdapter()
        return self._portfolio_repository

    def get_stock_repository(self) -> StockRepositoryPort:
        """Get stock repository implementation."""
        if self._stock_repository is None:
            from dashboard.infrastructure.adapters.persistence import InMemoryStockAdapter
            self._stock_repository = InMemoryStockAdapter()
        return self._stock_repository

    def get_transaction_repository(self) -> TransactionRepositoryPort:
        """Get transaction repository implementation."""
        if self._transaction_repository is None:
            from dashboard.infrastructure.adapters.persistence import InMemoryTransactionAdapter
            self._transaction_repository = InMemoryTransactionAdapter()
        return self._transaction_repository

    def get_watchlist_repository(self) -> WatchlistRepositoryPort:
        """Get watchlist repository implementation."""
        if self._watchlist_repository is None:
            from dashboard.infrastructure.adapters.persistence import InMemoryWatchlistAdapter
            self._watchlist_repository = InMemoryWatchlistAdapter()
        return self._watchlist_repository

    # --- Service Getters ---

    def get_calculation_service(self) -> PortfolioCalculationService:
        if self._calculation_service is None:
            self._calculation_service = PortfolioCalculationService(
                rng=np.random.default_rng(PerformanceConfig.RANDOM_SEED),
                history_days=PerformanceConfig.HISTORY_DAYS,
                base_value=Decimal(PerformanceConfig.BASE_VALUE),
                daily_variance=PerformanceConfig.DAILY_VARIANCE,
                trend_per_day=PerformanceConfig.TREND_PER_DAY,
                currency=DisplayConfig.DEFAULT_CURRENCY,
            )
        return self._calculation_service

    def get_watchlist_service(self) -> WatchlistService:
        if self._watchlist_service is None:
            self._watchlist_service = WatchlistService(tolerance=WatchlistConfig.ALERT_TOLERANCE)
        return self._watchlist_service

    # --- Use Case Getters ---

    def get_portfolio_use_case(self) -> GetPortfolioUseCase:
        """Get GetPortfolioUseCase with wired dependencies."""
        if self._get_portfolio_use_case is None:
            self._get_portfolio_use_case = GetPortfolioUseCase(
                portfolio_repository=self.get_portfolio_repository(),
            )
        return self._get_portfolio_use_case

    def get_market_data_use_case(self) -> GetMarketDataUseCase:
        """Get GetMarketDataUseCase with wired dependencies."""
        if self._get_market_data_use_case is None:
            self._get_market_data_use_case = GetMarketDataUseCase(
                stock_repository=self.get_stock_repository(),
            )
        return self._get_market_data_use_case

    def get_transactions_use_case(self) -> GetTransactionsUseCase:
        """Get GetTransactionsUseCase with wired dependencies."""
        if self._get_transactions_use_case is None:
            self._get_transactions_use_case = GetTransactionsUseCase(
                transaction_repository=self.get_transaction_repository(),
                default_limit=DisplayConfig.RECENT_TRANSACTIONS_LIMIT,
                clock=self.clock,
            )
        return self._get_transactions_use_case

    def get_dashboard_data_use_case(self) -> GetDashboardDataUseCase:
        """Get GetDashboardDataUseCase with wired dependencies."""
        if self._get_dashboard_data_use_case is None:
            self._get_dashboard_data_use_case = GetDashboardDataUseCase(
                get_portfolio=self.get_portfolio_use_case(),
                get_market_data=self.get_market_data_use_case(),
                get_transactions=self.get_transactions_use_case(),
                calculation_service=self.get_calculation_service(),
                clock=self.clock,
            )
        return self._get_dashboard_data_use_case

    def get_manage_watchlist_use_case(self) -> ManageWatchlistUseCase:
        """Get ManageWatchlistUseCase with wired dependencies."""
        if self._manage_watchlist_use_case is None:
            self._manage_watchlist_use_case = ManageWatchlistUseCase(
                watchlist_repository=self.get_watchlist_repository(),
                stock_repository=self.get_stock_repository(),
                watchlist_service=self.get_watchlist_service(),
                clock=self.clock,
            )
        return self._manage_watchlist_use_case
