"""
TransactionRepositoryPort - Interface for transaction history storage.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from dashboard.domain.entities.transaction import Transaction


class TransactionRepositoryPort(ABC):
    """Port interface for transaction persistence."""

    @abstractmethod
    async def get_by_user_id(self, user_id: int) -> List[Transaction]:
        """
        Get all transactions for a user.

        Args:
            user_id: Owner

        Returns:
            Transactions in stored order (newest inserted first)
        """
        pass

    @abstractmethod
    async def get_recent_by_user_id(
        self,
        user_id: int,
        limit: int = 10,
    ) -> List[Transaction]:
        """
        Get a user's latest transactions.

        Args:
            user_id: Owner
            limit: Maximum number of transactions to return

        Returns:
            Transactions sorted newest first
        """
        pass

    @abstractmethod
    async def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        pass

    @abstractmethod
    async def create(self, data: Mapping[str, Any]) -> Transaction:
        """
        Record a transaction.

        The repository assigns the id, and the timestamp when none is given.
        """
        pass

    @abstractmethod
    async def update(self, transaction: Transaction) -> Transaction:
        """
        Replace a stored transaction.

        Raises:
            RecordNotFoundError: If no transaction has this id
        """
        pass

    @abstractmethod
    async def delete(self, transaction_id: int) -> None:
        """Delete a transaction. Missing ids are ignored."""
        pass
