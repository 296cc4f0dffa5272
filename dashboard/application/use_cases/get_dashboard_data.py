"""
GetDashboardDataUseCase - Aggregated dashboard read model.

Loads the portfolio, quotes and transactions concurrently, then derives
allocation, the performance series, risk figures and transaction metrics.
"""
import asyncio
from datetime import datetime
import logging
from typing import Callable, Dict

from dashboard.application.dto.portfolio import (
    AllocationDto,
    DashboardDataDto,
    PerformanceDataDto,
    PortfolioDto,
    PortfolioMetricsDto,
    RiskMetricsDto,
    StockDto,
    TransactionDto,
)
from dashboard.application.use_cases.get_market_data import GetMarketDataUseCase
from dashboard.application.use_cases.get_portfolio import GetPortfolioUseCase
from dashboard.application.use_cases.get_transactions import GetTransactionsUseCase
from dashboard.domain.services.portfolio_calculator import PortfolioCalculationService
from dashboard.domain.value_objects.money import Money
from dashboard.exceptions import DashboardError, PortfolioNotFoundError, UseCaseError

logger = logging.getLogger(__name__)


class GetDashboardDataUseCase:
    """Use case composing the full dashboard."""

    def __init__(
        self,
        get_portfolio: GetPortfolioUseCase,
        get_market_data: GetMarketDataUseCase,
        get_transactions: GetTransactionsUseCase,
        calculation_service: PortfolioCalculationService,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.get_portfolio = get_portfolio
        self.get_market_data = get_market_data
        self.get_transactions = get_transactions
        self.calculation_service = calculation_service
        self.clock = clock

    async def execute(self, user_id: int) -> DashboardDataDto:
        """
        Build the dashboard for a user.

        Args:
            user_id: Owner

        Returns:
            DashboardDataDto

        Raises:
            PortfolioNotFoundError: If the user has no portfolio
            UseCaseError: On unexpected failures
        """
        portfolio, stocks, transactions = await asyncio.gather(
            self.get_portfolio.load(user_id),
            self.get_market_data.load(),
            self.get_transactions.load(user_id),
        )

        if portfolio is None:
            raise PortfolioNotFoundError(user_id)

        try:
            now = self.clock()
            prices: Dict[str, Money] = {stock.symbol.value: stock.price for stock in stocks}
            service = self.calculation_service

            allocation = service.calculate_allocation(transactions, prices)
            history = service.calculate_performance_history(transactions, {}, now=now)
            risk = service.calculate_risk_metrics(portfolio, stocks)
            metrics = service.calculate_portfolio_metrics(transactions, prices, now=now)

            return DashboardDataDto(
                portfolio=PortfolioDto.from_entity(portfolio),
                stocks=[StockDto.from_entity(stock) for stock in stocks],
                transactions=[TransactionDto.from_entity(t, now) for t in transactions],
                allocation=[AllocationDto.from_slice(s) for s in allocation],
                performance_history=[PerformanceDataDto.from_point(p) for p in history],
                risk_metrics=RiskMetricsDto.from_metrics(risk),
                metrics=PortfolioMetricsDto.from_metrics(metrics),
            )
        except DashboardError:
            raise
        except Exception as e:
            logger.error(f"Failed to get dashboard data for user {user_id}: {e}")
            raise UseCaseError(f"Failed to get dashboard data: {e}") from e
