"""
GetPortfolioUseCase - Portfolio summary for a user.
"""
import logging
from typing import Optional

from dashboard.application.dto.portfolio import PortfolioDto
from dashboard.application.ports.outbound.portfolio_repository_port import PortfolioRepositoryPort
from dashboard.domain.entities.portfolio import Portfolio
from dashboard.exceptions import DashboardError, UseCaseError

logger = logging.getLogger(__name__)


class GetPortfolioUseCase:
    """Use case for reading a user's portfolio."""

    def __init__(self, portfolio_repository: PortfolioRepositoryPort):
        """
        Args:
            portfolio_repository: Portfolio storage
        """
        self.portfolio_repository = portfolio_repository

    async def load(self, user_id: int) -> Optional[Portfolio]:
        """Fetch the portfolio entity, or None when the user has none."""
        try:
            return await self.portfolio_repository.get_by_user_id(user_id)
        except DashboardError:
            raise
        except Exception as e:
            logger.error(f"Failed to get portfolio for user {user_id}: {e}")
            raise UseCaseError(f"Failed to get portfolio: {e}") from e

    async def execute(self, user_id: int) -> Optional[PortfolioDto]:
        """
        Get a user's portfolio summary.

        Args:
            user_id: Owner

        Returns:
            PortfolioDto, or None when the user has no portfolio
        """
        portfolio = await self.load(user_id)
        if portfolio is None:
            return None
        return PortfolioDto.from_entity(portfolio)
