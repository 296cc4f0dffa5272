"""
Pytest configuration and shared fixtures
Each test gets an app wired to fresh in-memory repositories and a fixed clock.
"""
from datetime import datetime
from typing import AsyncGenerator

import numpy as np
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from backend.app.api.deps import get_container, reset_container
from backend.app.main import app
from dashboard.container import Container
from dashboard.domain.services.portfolio_calculator import PortfolioCalculationService
from dashboard.domain.services.watchlist_service import WatchlistService
from dashboard.infrastructure.adapters.persistence import (
    InMemoryPortfolioAdapter,
    InMemoryStockAdapter,
    InMemoryTransactionAdapter,
    InMemoryWatchlistAdapter,
)
from dashboard.infrastructure.adapters.persistence.sample_data import (
    build_transactions,
    build_watchlist,
)

NOW = datetime(2024, 3, 15, 12, 0, 0)


@pytest.fixture
def container() -> Container:
    """
    Container seeded with the sample data, timestamped relative to NOW
    """
    return Container(
        portfolio_repository=InMemoryPortfolioAdapter(),
        stock_repository=InMemoryStockAdapter(),
        transaction_repository=InMemoryTransactionAdapter(build_transactions(NOW)),
        watchlist_repository=InMemoryWatchlistAdapter(build_watchlist(NOW)),
        calculation_service=PortfolioCalculationService(rng=np.random.default_rng(42)),
        watchlist_service=WatchlistService(),
        clock=lambda: NOW,
    )


@pytest_asyncio.fixture
async def client(container: Container) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTP client for the FastAPI app
    """
    app.dependency_overrides[get_container] = lambda: container

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
    reset_container()


@pytest.fixture
def sample_watchlist_item():
    """Add-to-watchlist request body"""
    return {
        "symbol": "msft",
        "notes": "Cloud growth",
        "targetPrice": "450.00",
        "alertEnabled": True,
    }
