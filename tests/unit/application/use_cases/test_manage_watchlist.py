"""
ManageWatchlistUseCase Tests
"""
import pytest
from datetime import datetime, timedelta
from unittest.mock import AsyncMock

from dashboard.application.dto.watchlist import (
    CreateWatchlistItemDto,
    UpdateWatchlistItemDto,
    WatchlistWithStocksDto,
)
from dashboard.application.ports.outbound.stock_repository_port import StockRepositoryPort
from dashboard.application.ports.outbound.watchlist_repository_port import WatchlistRepositoryPort
from dashboard.application.use_cases.manage_watchlist import ManageWatchlistUseCase
from dashboard.domain.entities.stock import Stock
from dashboard.domain.entities.watchlist_item import WatchlistItem
from dashboard.domain.services.watchlist_service import WatchlistService
from dashboard.exceptions import (
    InvalidInputError,
    UseCaseError,
    WatchlistItemExistsError,
    WatchlistItemNotFoundError,
)

NOW = datetime(2024, 3, 15, 12, 0, 0)


def make_item(id_, symbol, days_ago, user_id=1, **extra):
    data = {
        "id": id_,
        "user_id": user_id,
        "symbol": symbol,
        "added_at": NOW - timedelta(days=days_ago),
    }
    data.update(extra)
    return WatchlistItem.from_data(data)


def make_stock(id_, symbol, price, change_percent):
    return Stock.from_data({
        "id": id_,
        "symbol": symbol,
        "name": symbol,
        "price": price,
        "change": "1",
        "change_percent": change_percent,
        "volume": 1_000_000,
        "market_cap": "$1T",
    })


@pytest.fixture
def items():
    return [
        make_item(1, "AAPL", 7, notes="Strong fundamentals", target_price="180.00", alert_enabled=True),
        make_item(2, "TSLA", 3),
        make_item(3, "NVDA", 1, target_price="880.00", alert_enabled=True),
    ]


@pytest.fixture
def watchlist_repository(items):
    repository = AsyncMock(spec=WatchlistRepositoryPort)
    repository.get_by_user_id.return_value = items
    repository.get_by_user_id_and_symbol.return_value = None
    repository.get_by_id.return_value = items[0]

    async def create(data):
        return WatchlistItem.from_data({"id": 4, **data})

    async def update(item):
        return item

    repository.create.side_effect = create
    repository.update.side_effect = update
    return repository


@pytest.fixture
def stock_repository():
    repository = AsyncMock(spec=StockRepositoryPort)
    repository.get_all.return_value = [
        make_stock(1, "AAPL", "189.75", "2.95"),
        make_stock(5, "TSLA", "251.82", "-1.65"),
        make_stock(6, "NVDA", "875.42", "3.40"),
    ]
    return repository


@pytest.fixture
def use_case(watchlist_repository, stock_repository):
    return ManageWatchlistUseCase(
        watchlist_repository=watchlist_repository,
        stock_repository=stock_repository,
        watchlist_service=WatchlistService(),
        clock=lambda: NOW,
    )


class TestGetUserWatchlist:
    """get_user_watchlist"""

    @pytest.mark.asyncio
    async def test_items_with_day_counts(self, use_case):
        result = await use_case.get_user_watchlist(1)

        assert isinstance(result, WatchlistWithStocksDto)
        assert [i.symbol for i in result.items] == ["AAPL", "TSLA", "NVDA"]
        assert [i.days_since_added for i in result.items] == [7, 3, 1]
        assert result.items[0].target_price == "$180.00"
        assert result.items[0].has_notes is True
        assert result.items[1].has_target_price is False
        assert len(result.stocks) == 3

    @pytest.mark.asyncio
    async def test_performance_summary(self, use_case):
        performance = (await use_case.get_user_watchlist(1)).performance

        assert performance.total_items == 3
        assert performance.items_with_alerts == 1
        assert performance.average_days_held == 4
        assert performance.top_performer.symbol == "NVDA"
        assert performance.top_performer.change == "+3.40%"

    @pytest.mark.asyncio
    async def test_alerts(self, use_case):
        """Given: AAPL 189.75 vs target 180 When: get Then: above_target alert"""
        alerts = (await use_case.get_user_watchlist(1)).alerts

        # NVDA 875.42 vs 900 stays inside the 2% band
        assert len(alerts) == 1
        assert alerts[0].item_id == 1
        assert alerts[0].alert_type == "above_target"
        assert alerts[0].current_price == "$189.75"
        assert alerts[0].target_price == "$180.00"

    @pytest.mark.asyncio
    async def test_empty_watchlist(self, use_case, watchlist_repository):
        watchlist_repository.get_by_user_id.return_value = []

        result = await use_case.get_user_watchlist(2)

        assert result.items == []
        assert result.performance.total_items == 0
        assert result.performance.top_performer is None

    @pytest.mark.asyncio
    async def test_repository_failure_wrapped(self, use_case, stock_repository):
        stock_repository.get_all.side_effect = RuntimeError("boom")

        with pytest.raises(UseCaseError):
            await use_case.get_user_watchlist(1)


class TestAddToWatchlist:
    """add_to_watchlist"""

    @pytest.mark.asyncio
    async def test_creates_item(self, use_case, watchlist_repository):
        """Given: new symbol When: add Then: stored upper-case with added_at=now"""
        result = await use_case.add_to_watchlist(
            1,
            CreateWatchlistItemDto(
                symbol="msft",
                notes="  Cloud growth  ",
                target_price="450",
                alert_enabled=True,
            ),
        )

        assert result.id == 4
        assert result.symbol == "MSFT"
        assert result.notes == "Cloud growth"
        assert result.target_price == "$450.00"
        assert result.alert_enabled is True
        assert result.added_at == NOW.isoformat()
        assert result.days_since_added == 0

        data = watchlist_repository.create.await_args.args[0]
        assert data["user_id"] == 1
        assert data["symbol"] == "MSFT"
        assert data["added_at"] == NOW

    @pytest.mark.asyncio
    async def test_defaults(self, use_case):
        result = await use_case.add_to_watchlist(1, CreateWatchlistItemDto(symbol="AMD"))

        assert result.notes == ""
        assert result.target_price is None
        assert result.alert_enabled is False

    @pytest.mark.asyncio
    async def test_duplicate_symbol_rejected(self, use_case, watchlist_repository, items):
        """Given: symbol already listed When: add Then: WatchlistItemExistsError"""
        watchlist_repository.get_by_user_id_and_symbol.return_value = items[0]

        with pytest.raises(WatchlistItemExistsError, match="Stock already in watchlist"):
            await use_case.add_to_watchlist(1, CreateWatchlistItemDto(symbol="AAPL"))

        watchlist_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("symbol", ["", "   ", "TOOLONGSYMBOL", "AA-PL"])
    async def test_invalid_symbol(self, use_case, watchlist_repository, symbol):
        with pytest.raises(InvalidInputError):
            await use_case.add_to_watchlist(1, CreateWatchlistItemDto(symbol=symbol))

        watchlist_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("target_price", ["abc", "-5"])
    async def test_invalid_target_price(self, use_case, target_price):
        with pytest.raises(InvalidInputError):
            await use_case.add_to_watchlist(
                1, CreateWatchlistItemDto(symbol="AMD", target_price=target_price)
            )

    @pytest.mark.asyncio
    async def test_repository_failure_wrapped(self, use_case, watchlist_repository):
        watchlist_repository.create.side_effect = RuntimeError("disk full")

        with pytest.raises(UseCaseError):
            await use_case.add_to_watchlist(1, CreateWatchlistItemDto(symbol="AMD"))


class TestUpdateWatchlistItem:
    """update_watchlist_item"""

    @pytest.mark.asyncio
    async def test_partial_update(self, use_case, watchlist_repository):
        """Given: only notes When: update Then: other fields unchanged"""
        result = await use_case.update_watchlist_item(
            1, 1, UpdateWatchlistItemDto(notes="Waiting for a dip")
        )

        assert result.notes == "Waiting for a dip"
        assert result.target_price == "$180.00"
        assert result.alert_enabled is True
        watchlist_repository.update.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_all_fields(self, use_case):
        result = await use_case.update_watchlist_item(
            1,
            1,
            UpdateWatchlistItemDto(notes="", target_price="210.50", alert_enabled=False),
        )

        assert result.notes == ""
        assert result.has_notes is False
        assert result.target_price == "$210.50"
        assert result.alert_enabled is False

    @pytest.mark.asyncio
    async def test_other_users_item_not_found(self, use_case, watchlist_repository):
        """Given: item owned by user 1 When: user 2 updates Then: not found"""
        with pytest.raises(WatchlistItemNotFoundError):
            await use_case.update_watchlist_item(2, 1, UpdateWatchlistItemDto(notes="x"))

        watchlist_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_item(self, use_case, watchlist_repository):
        watchlist_repository.get_by_id.return_value = None

        with pytest.raises(WatchlistItemNotFoundError, match="Watchlist item not found"):
            await use_case.update_watchlist_item(1, 99, UpdateWatchlistItemDto(notes="x"))

    @pytest.mark.asyncio
    async def test_invalid_target_price(self, use_case):
        with pytest.raises(InvalidInputError):
            await use_case.update_watchlist_item(
                1, 1, UpdateWatchlistItemDto(target_price="not a price")
            )


class TestRemoveFromWatchlist:
    """remove_from_watchlist"""

    @pytest.mark.asyncio
    async def test_removes_owned_item(self, use_case, watchlist_repository):
        await use_case.remove_from_watchlist(1, 1)

        watchlist_repository.delete.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_other_users_item_not_found(self, use_case, watchlist_repository):
        with pytest.raises(WatchlistItemNotFoundError):
            await use_case.remove_from_watchlist(2, 1)

        watchlist_repository.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_item(self, use_case, watchlist_repository):
        watchlist_repository.get_by_id.return_value = None

        with pytest.raises(WatchlistItemNotFoundError):
            await use_case.remove_from_watchlist(1, 99)
