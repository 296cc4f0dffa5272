"""
InMemoryPortfolioAdapter - In-memory implementation of PortfolioRepositoryPort.
"""
import copy
from typing import Any, Dict, Iterable, Mapping, Optional

from dashboard.application.ports.outbound.portfolio_repository_port import PortfolioRepositoryPort
from dashboard.domain.entities.portfolio import Portfolio, PortfolioData
from dashboard.exceptions import RecordNotFoundError
from dashboard.infrastructure.adapters.persistence.sample_data import build_portfolios


class InMemoryPortfolioAdapter(PortfolioRepositoryPort):
    """
    Dict-backed portfolio storage keyed by portfolio id.

    Seeded with the sample portfolios unless records are given.
    """

    def __init__(self, records: Optional[Iterable[PortfolioData]] = None):
        self._portfolios: Dict[int, PortfolioData] = {}
        self._next_id = 1
        for record in build_portfolios() if records is None else records:
            self._portfolios[record["id"]] = copy.deepcopy(record)
            self._next_id = max(self._next_id, record["id"] + 1)

    def clear(self):
        """Clear all stored data. Useful for test cleanup."""
        self._portfolios.clear()
        self._next_id = 1

    async def get_by_user_id(self, user_id: int) -> Optional[Portfolio]:
        for record in self._portfolios.values():
            if record["user_id"] == user_id:
                return Portfolio.from_data(copy.deepcopy(record))
        return None

    async def create(self, data: Mapping[str, Any]) -> Portfolio:
        record = PortfolioData(**{**copy.deepcopy(dict(data)), "id": self._next_id})
        portfolio = Portfolio.from_data(record)
        self._portfolios[portfolio.id] = portfolio.to_data()
        self._next_id += 1
        return portfolio

    async def update(self, portfolio: Portfolio) -> Portfolio:
        if portfolio.id not in self._portfolios:
            raise RecordNotFoundError("Portfolio", portfolio.id)
        self._portfolios[portfolio.id] = portfolio.to_data()
        return portfolio

    async def delete(self, portfolio_id: int) -> None:
        self._portfolios.pop(portfolio_id, None)
