"""
GetTransactionsUseCase - Transaction history for a user.
"""
from datetime import datetime
import logging
from typing import Callable, List, Optional

from dashboard.application.dto.portfolio import TransactionDto
from dashboard.application.ports.outbound.transaction_repository_port import TransactionRepositoryPort
from dashboard.domain.entities.transaction import Transaction
from dashboard.exceptions import DashboardError, InvalidInputError, UseCaseError

logger = logging.getLogger(__name__)


class GetTransactionsUseCase:
    """Use case for reading a user's transactions."""

    def __init__(
        self,
        transaction_repository: TransactionRepositoryPort,
        default_limit: int = 10,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Args:
            transaction_repository: Transaction storage
            default_limit: Page size for get_recent when none is given
            clock: Source of "now" for relative times
        """
        self.transaction_repository = transaction_repository
        self.default_limit = default_limit
        self.clock = clock

    async def load(self, user_id: int) -> List[Transaction]:
        try:
            return await self.transaction_repository.get_by_user_id(user_id)
        except DashboardError:
            raise
        except Exception as e:
            logger.error(f"Failed to get transactions for user {user_id}: {e}")
            raise UseCaseError(f"Failed to get transactions: {e}") from e

    async def execute(self, user_id: int) -> List[TransactionDto]:
        """Get all of a user's transactions in stored order."""
        transactions = await self.load(user_id)
        now = self.clock()
        return [TransactionDto.from_entity(t, now) for t in transactions]

    async def get_recent(
        self,
        user_id: int,
        limit: Optional[int] = None,
    ) -> List[TransactionDto]:
        """
        Get a user's latest transactions, newest first.

        Args:
            user_id: Owner
            limit: Maximum rows (defaults to default_limit)

        Raises:
            InvalidInputError: If limit is not positive
        """
        limit = self.default_limit if limit is None else limit
        if limit <= 0:
            raise InvalidInputError("Limit must be positive")

        try:
            transactions = await self.transaction_repository.get_recent_by_user_id(user_id, limit)
        except DashboardError:
            raise
        except Exception as e:
            logger.error(f"Failed to get recent transactions for user {user_id}: {e}")
            raise UseCaseError(f"Failed to get recent transactions: {e}") from e

        now = self.clock()
        return [TransactionDto.from_entity(t, now) for t in transactions]
