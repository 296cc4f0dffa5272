"""
GetMarketDataUseCase - Market quotes.
"""
import logging
from typing import List, Optional

from dashboard.application.dto.portfolio import StockDto
from dashboard.application.ports.outbound.stock_repository_port import StockRepositoryPort
from dashboard.domain.entities.stock import Stock
from dashboard.exceptions import DashboardError, UseCaseError

logger = logging.getLogger(__name__)


class GetMarketDataUseCase:
    """Use case for reading stock quotes."""

    def __init__(self, stock_repository: StockRepositoryPort):
        self.stock_repository = stock_repository

    async def load(self) -> List[Stock]:
        try:
            return await self.stock_repository.get_all()
        except DashboardError:
            raise
        except Exception as e:
            logger.error(f"Failed to get market data: {e}")
            raise UseCaseError(f"Failed to get market data: {e}") from e

    async def execute(self) -> List[StockDto]:
        """Get every stock quote."""
        return [StockDto.from_entity(stock) for stock in await self.load()]

    async def get_by_symbol(self, symbol: str) -> Optional[StockDto]:
        """
        Get a single quote.

        Args:
            symbol: Ticker, any case

        Returns:
            StockDto, or None for an unknown symbol
        """
        try:
            stock = await self.stock_repository.get_by_symbol(symbol.upper())
        except DashboardError:
            raise
        except Exception as e:
            logger.error(f"Failed to get stock {symbol}: {e}")
            raise UseCaseError(f"Failed to get stock: {e}") from e

        return StockDto.from_entity(stock) if stock else None
