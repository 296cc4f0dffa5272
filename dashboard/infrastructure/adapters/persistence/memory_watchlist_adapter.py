"""
InMemoryWatchlistAdapter - In-memory implementation of WatchlistRepositoryPort.
"""
import copy
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

from dashboard.application.ports.outbound.watchlist_repository_port import WatchlistRepositoryPort
from dashboard.domain.entities.watchlist_item import WatchlistItem, WatchlistItemData
from dashboard.exceptions import RecordNotFoundError
from dashboard.infrastructure.adapters.persistence.sample_data import build_watchlist


class InMemoryWatchlistAdapter(WatchlistRepositoryPort):
    """
    Dict-backed watchlist storage keyed by item id, in insertion order.
    """

    def __init__(self, records: Optional[Iterable[WatchlistItemData]] = None):
        self._items: Dict[int, WatchlistItemData] = {}
        self._next_id = 1
        for record in build_watchlist() if records is None else records:
            self._items[record["id"]] = copy.deepcopy(record)
            self._next_id = max(self._next_id, record["id"] + 1)

    def clear(self):
        """Clear all stored data. Useful for test cleanup."""
        self._items.clear()
        self._next_id = 1

    async def get_by_user_id(self, user_id: int) -> List[WatchlistItem]:
        return [
            WatchlistItem.from_data(copy.deepcopy(r))
            for r in self._items.values()
            if r["user_id"] == user_id
        ]

    async def get_by_id(self, item_id: int) -> Optional[WatchlistItem]:
        record = self._items.get(item_id)
        return WatchlistItem.from_data(copy.deepcopy(record)) if record else None

    async def get_by_user_id_and_symbol(
        self,
        user_id: int,
        symbol: str,
    ) -> Optional[WatchlistItem]:
        for record in self._items.values():
            if record["user_id"] == user_id and record["symbol"].upper() == symbol.upper():
                return WatchlistItem.from_data(copy.deepcopy(record))
        return None

    async def create(self, data: Mapping[str, Any]) -> WatchlistItem:
        record = copy.deepcopy(dict(data))
        record["id"] = self._next_id
        record["added_at"] = record.get("added_at") or datetime.now()
        item = WatchlistItem.from_data(record)

        self._items[item.id] = item.to_data()
        self._next_id += 1
        return item

    async def update(self, item: WatchlistItem) -> WatchlistItem:
        if item.id not in self._items:
            raise RecordNotFoundError("WatchlistItem", item.id)
        self._items[item.id] = item.to_data()
        return item

    async def delete(self, item_id: int) -> None:
        self._items.pop(item_id, None)
