"""
InMemoryTransactionAdapter - In-memory implementation of TransactionRepositoryPort.
"""
import copy
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

from dashboard.application.ports.outbound.transaction_repository_port import TransactionRepositoryPort
from dashboard.domain.entities.transaction import Transaction, TransactionData
from dashboard.exceptions import RecordNotFoundError
from dashboard.infrastructure.adapters.persistence.sample_data import build_transactions


class InMemoryTransactionAdapter(TransactionRepositoryPort):
    """
    Transaction storage with one list per user.

    New transactions go to the front of the user's list.
    """

    def __init__(self, records: Optional[Iterable[TransactionData]] = None):
        self._transactions: Dict[int, List[TransactionData]] = {}
        self._next_id = 1
        for record in build_transactions() if records is None else records:
            self._transactions.setdefault(record["user_id"], []).append(copy.deepcopy(record))
            self._next_id = max(self._next_id, record["id"] + 1)

    def clear(self):
        """Clear all stored data. Useful for test cleanup."""
        self._transactions.clear()
        self._next_id = 1

    async def get_by_user_id(self, user_id: int) -> List[Transaction]:
        return [
            Transaction.from_data(copy.deepcopy(r))
            for r in self._transactions.get(user_id, [])
        ]

    async def get_recent_by_user_id(
        self,
        user_id: int,
        limit: int = 10,
    ) -> List[Transaction]:
        transactions = await self.get_by_user_id(user_id)
        # Sort by timestamp descending (most recent first)
        transactions.sort(key=lambda t: t.timestamp, reverse=True)
        return transactions[:limit]

    async def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        record = self._find(transaction_id)
        return Transaction.from_data(copy.deepcopy(record)) if record else None

    async def create(self, data: Mapping[str, Any]) -> Transaction:
        record = copy.deepcopy(dict(data))
        record["id"] = self._next_id
        record["timestamp"] = record.get("timestamp") or datetime.now()
        transaction = Transaction.from_data(record)

        self._transactions.setdefault(transaction.user_id, []).insert(0, transaction.to_data())
        self._next_id += 1
        return transaction

    async def update(self, transaction: Transaction) -> Transaction:
        for records in self._transactions.values():
            for index, record in enumerate(records):
                if record["id"] == transaction.id:
                    records[index] = transaction.to_data()
                    return transaction
        raise RecordNotFoundError("Transaction", transaction.id)

    async def delete(self, transaction_id: int) -> None:
        for user_id, records in self._transactions.items():
            self._transactions[user_id] = [r for r in records if r["id"] != transaction_id]

    def _find(self, transaction_id: int) -> Optional[TransactionData]:
        for records in self._transactions.values():
            for record in records:
                if record["id"] == transaction_id:
                    return record
        return None
