"""
StockRepositoryPort - Interface for market quote storage.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from dashboard.domain.entities.stock import Stock


class StockRepositoryPort(ABC):
    """Port interface for stock persistence."""

    @abstractmethod
    async def get_all(self) -> List[Stock]:
        """Get every stock in insertion order."""
        pass

    @abstractmethod
    async def get_by_symbol(self, symbol: str) -> Optional[Stock]:
        """
        Get a stock by ticker, ignoring case.

        Args:
            symbol: Ticker symbol

        Returns:
            Stock if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, data: Mapping[str, Any]) -> Stock:
        """Store a new stock. The repository assigns the id."""
        pass

    @abstractmethod
    async def update(self, stock: Stock) -> Stock:
        """
        Replace a stored stock, matched by symbol.

        Raises:
            RecordNotFoundError: If the symbol is unknown
        """
        pass

    @abstractmethod
    async def delete(self, symbol: str) -> None:
        """Delete a stock. Unknown symbols are ignored."""
        pass
