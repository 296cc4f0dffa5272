"""
InMemoryStockAdapter - In-memory implementation of StockRepositoryPort.
"""
import copy
from typing import Any, Dict, Iterable, List, Mapping, Optional

from dashboard.application.ports.outbound.stock_repository_port import StockRepositoryPort
from dashboard.domain.entities.stock import Stock, StockData
from dashboard.exceptions import RecordNotFoundError
from dashboard.infrastructure.adapters.persistence.sample_data import build_stocks


class InMemoryStockAdapter(StockRepositoryPort):
    """
    Dict-backed quote storage keyed by upper-case symbol.

    Seeded with the sample quotes unless records are given.
    """

    def __init__(self, records: Optional[Iterable[StockData]] = None):
        self._stocks: Dict[str, StockData] = {}
        self._next_id = 1
        for record in build_stocks() if records is None else records:
            self._stocks[record["symbol"].upper()] = copy.deepcopy(record)
            self._next_id = max(self._next_id, record["id"] + 1)

    def clear(self):
        """Clear all stored data. Useful for test cleanup."""
        self._stocks.clear()
        self._next_id = 1

    async def get_all(self) -> List[Stock]:
        return [Stock.from_data(copy.deepcopy(r)) for r in self._stocks.values()]

    async def get_by_symbol(self, symbol: str) -> Optional[Stock]:
        record = self._stocks.get(symbol.upper())
        return Stock.from_data(copy.deepcopy(record)) if record else None

    async def create(self, data: Mapping[str, Any]) -> Stock:
        record = StockData(**{**copy.deepcopy(dict(data)), "id": self._next_id})
        stock = Stock.from_data(record)
        self._stocks[stock.symbol.value] = stock.to_data()
        self._next_id += 1
        return stock

    async def update(self, stock: Stock) -> Stock:
        if stock.symbol.value not in self._stocks:
            raise RecordNotFoundError("Stock", stock.symbol.value)
        self._stocks[stock.symbol.value] = stock.to_data()
        return stock

    async def delete(self, symbol: str) -> None:
        self._stocks.pop(symbol.upper(), None)
