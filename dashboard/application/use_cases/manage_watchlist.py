"""
ManageWatchlistUseCase - Watchlist reads and edits.

Items are owned by a single user; an item belonging to someone else is
treated exactly like a missing one.
"""
import asyncio
from datetime import datetime
import logging
from typing import Callable, Optional

from dashboard.application.dto.portfolio import StockDto
from dashboard.application.dto.watchlist import (
    CreateWatchlistItemDto,
    UpdateWatchlistItemDto,
    WatchlistAlertDto,
    WatchlistItemDto,
    WatchlistPerformanceDto,
    WatchlistWithStocksDto,
)
from dashboard.application.ports.outbound.stock_repository_port import StockRepositoryPort
from dashboard.application.ports.outbound.watchlist_repository_port import WatchlistRepositoryPort
from dashboard.domain.entities.watchlist_item import WatchlistItem
from dashboard.domain.exceptions import DomainError
from dashboard.domain.services.watchlist_service import WatchlistService
from dashboard.domain.value_objects.money import Money
from dashboard.domain.value_objects.stock_symbol import StockSymbol
from dashboard.exceptions import (
    DashboardError,
    InvalidInputError,
    UseCaseError,
    WatchlistItemExistsError,
    WatchlistItemNotFoundError,
)

logger = logging.getLogger(__name__)


class ManageWatchlistUseCase:
    """Use case for a user's watchlist."""

    def __init__(
        self,
        watchlist_repository: WatchlistRepositoryPort,
        stock_repository: StockRepositoryPort,
        watchlist_service: WatchlistService,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Args:
            watchlist_repository: Watchlist storage
            stock_repository: Quote storage, for prices and performance
            watchlist_service: Alert and summary calculations
            clock: Source of "now" for added_at and day counts
        """
        self.watchlist_repository = watchlist_repository
        self.stock_repository = stock_repository
        self.watchlist_service = watchlist_service
        self.clock = clock

    async def get_user_watchlist(self, user_id: int) -> WatchlistWithStocksDto:
        """
        Get a user's watchlist with quotes, summary figures and alerts.

        Args:
            user_id: Owner

        Returns:
            WatchlistWithStocksDto
        """
        try:
            items, stocks = await asyncio.gather(
                self.watchlist_repository.get_by_user_id(user_id),
                self.stock_repository.get_all(),
            )

            now = self.clock()
            performance = self.watchlist_service.calculate_watchlist_performance(
                items, stocks, now=now
            )
            alerts = self.watchlist_service.check_alerts(items, stocks)

            return WatchlistWithStocksDto(
                items=[WatchlistItemDto.from_entity(item, now) for item in items],
                stocks=[StockDto.from_entity(stock) for stock in stocks],
                performance=WatchlistPerformanceDto.from_performance(performance),
                alerts=[WatchlistAlertDto.from_alert(alert) for alert in alerts],
            )
        except DashboardError:
            raise
        except Exception as e:
            logger.error(f"Failed to get watchlist for user {user_id}: {e}")
            raise UseCaseError(f"Failed to get watchlist: {e}") from e

    async def add_to_watchlist(
        self,
        user_id: int,
        request: CreateWatchlistItemDto,
    ) -> WatchlistItemDto:
        """
        Add a stock to a user's watchlist.

        Raises:
            InvalidInputError: For a malformed symbol or target price
            WatchlistItemExistsError: If the symbol is already listed
        """
        try:
            symbol = StockSymbol(request.symbol)
            target_price = self._parse_target_price(request.target_price)
        except DomainError as e:
            raise InvalidInputError(str(e)) from e

        try:
            existing = await self.watchlist_repository.get_by_user_id_and_symbol(
                user_id, symbol.value
            )
            if existing is not None:
                raise WatchlistItemExistsError(symbol.value)

            now = self.clock()
            item = await self.watchlist_repository.create({
                "user_id": user_id,
                "symbol": symbol.value,
                "notes": (request.notes or "").strip(),
                "target_price": str(target_price.amount) if target_price else None,
                "alert_enabled": request.alert_enabled,
                "added_at": now,
            })
            logger.info(f"Added {symbol.value} to watchlist of user {user_id} (item {item.id})")
            return WatchlistItemDto.from_entity(item, now)
        except DashboardError:
            raise
        except Exception as e:
            logger.error(f"Failed to add {request.symbol} to watchlist of user {user_id}: {e}")
            raise UseCaseError(f"Failed to add to watchlist: {e}") from e

    async def update_watchlist_item(
        self,
        user_id: int,
        item_id: int,
        request: UpdateWatchlistItemDto,
    ) -> WatchlistItemDto:
        """
        Apply a partial update to one of the user's items.

        Raises:
            WatchlistItemNotFoundError: If the item is missing or not the user's
            InvalidInputError: For a malformed target price
        """
        try:
            item = await self._get_owned_item(user_id, item_id)

            try:
                if request.notes is not None:
                    item = item.update_notes(request.notes)
                if request.target_price is not None:
                    item = item.update_target_price(self._parse_target_price(request.target_price))
                if request.alert_enabled is not None:
                    item = item.set_alert(request.alert_enabled)
            except DomainError as e:
                raise InvalidInputError(str(e)) from e

            updated = await self.watchlist_repository.update(item)
            logger.info(f"Updated watchlist item {item_id} of user {user_id}")
            return WatchlistItemDto.from_entity(updated, self.clock())
        except DashboardError:
            raise
        except Exception as e:
            logger.error(f"Failed to update watchlist item {item_id}: {e}")
            raise UseCaseError(f"Failed to update watchlist item: {e}") from e

    async def remove_from_watchlist(self, user_id: int, item_id: int) -> None:
        """
        Remove one of the user's items.

        Raises:
            WatchlistItemNotFoundError: If the item is missing or not the user's
        """
        try:
            await self._get_owned_item(user_id, item_id)
            await self.watchlist_repository.delete(item_id)
            logger.info(f"Removed watchlist item {item_id} of user {user_id}")
        except DashboardError:
            raise
        except Exception as e:
            logger.error(f"Failed to remove watchlist item {item_id}: {e}")
            raise UseCaseError(f"Failed to remove from watchlist: {e}") from e

    # --- Private Methods ---

    async def _get_owned_item(self, user_id: int, item_id: int) -> WatchlistItem:
        item = await self.watchlist_repository.get_by_id(item_id)
        if item is None or item.user_id != user_id:
            raise WatchlistItemNotFoundError(item_id)
        return item

    @staticmethod
    def _parse_target_price(value: Optional[str]) -> Optional[Money]:
        if value is None or not str(value).strip():
            return None
        return Money.from_string(str(value))
