"""
PortfolioRepositoryPort - Interface for portfolio storage.
"""
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from dashboard.domain.entities.portfolio import Portfolio


class PortfolioRepositoryPort(ABC):
    """Port interface for portfolio persistence."""

    @abstractmethod
    async def get_by_user_id(self, user_id: int) -> Optional[Portfolio]:
        """
        Get a user's portfolio.

        Args:
            user_id: Owner

        Returns:
            Portfolio if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, data: Mapping[str, Any]) -> Portfolio:
        """
        Store a new portfolio. The repository assigns the id.

        Args:
            data: Portfolio fields without id

        Returns:
            Created portfolio
        """
        pass

    @abstractmethod
    async def update(self, portfolio: Portfolio) -> Portfolio:
        """
        Replace a stored portfolio.

        Raises:
            RecordNotFoundError: If no portfolio has this id
        """
        pass

    @abstractmethod
    async def delete(self, portfolio_id: int) -> None:
        """Delete a portfolio. Missing ids are ignored."""
        pass
