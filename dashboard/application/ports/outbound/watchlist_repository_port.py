"""
WatchlistRepositoryPort - Interface for watchlist storage.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from dashboard.domain.entities.watchlist_item import WatchlistItem


class WatchlistRepositoryPort(ABC):
    """Port interface for watchlist persistence."""

    @abstractmethod
    async def get_by_user_id(self, user_id: int) -> List[WatchlistItem]:
        """Get a user's watchlist in the order items were added."""
        pass

    @abstractmethod
    async def get_by_id(self, item_id: int) -> Optional[WatchlistItem]:
        pass

    @abstractmethod
    async def get_by_user_id_and_symbol(
        self,
        user_id: int,
        symbol: str,
    ) -> Optional[WatchlistItem]:
        """
        Find a user's item for a ticker, ignoring case.

        Args:
            user_id: Owner
            symbol: Ticker symbol

        Returns:
            WatchlistItem if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, data: Mapping[str, Any]) -> WatchlistItem:
        """
        Add an item.

        The repository assigns the id, and added_at when none is given.
        """
        pass

    @abstractmethod
    async def update(self, item: WatchlistItem) -> WatchlistItem:
        """
        Replace a stored item.

        Raises:
            RecordNotFoundError: If no item has this id
        """
        pass

    @abstractmethod
    async def delete(self, item_id: int) -> None:
        """Delete an item. Missing ids are ignored."""
        pass
