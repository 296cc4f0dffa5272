"""
Watchlist API endpoints
"""
from fastapi import APIRouter, Depends, Response, status

from backend.app.api.deps import (
    get_manage_watchlist_use_case,
    parse_item_id,
    parse_user_id,
    to_http_exception,
)
from backend.app.schemas.watchlist import (
    WatchlistItemCreate,
    WatchlistItemResponse,
    WatchlistItemUpdate,
    WatchlistWithStocksResponse,
)
from backend.app.services.metrics import record_watchlist_alert, record_watchlist_change
from dashboard.application.dto import CreateWatchlistItemDto, UpdateWatchlistItemDto
from dashboard.application.use_cases import ManageWatchlistUseCase
from dashboard.exceptions import DashboardError

router = APIRouter()


@router.get("/{user_id}", response_model=WatchlistWithStocksResponse)
async def get_watchlist(
    user_id: str,
    use_case: ManageWatchlistUseCase = Depends(get_manage_watchlist_use_case),
) -> WatchlistWithStocksResponse:
    """Watchlist with quotes, summary figures and triggered alerts"""
    uid = parse_user_id(user_id)
    try:
        watchlist = await use_case.get_user_watchlist(uid)
    except DashboardError as e:
        raise to_http_exception(e)

    for alert in watchlist.alerts:
        record_watchlist_alert(alert.alert_type)
    return WatchlistWithStocksResponse.model_validate(watchlist)


@router.post(
    "/{user_id}",
    response_model=WatchlistItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_to_watchlist(
    user_id: str,
    request: WatchlistItemCreate,
    use_case: ManageWatchlistUseCase = Depends(get_manage_watchlist_use_case),
) -> WatchlistItemResponse:
    """
    Add a stock to the watchlist

    - **symbol**: ticker, upper-cased before storing
    - **notes**, **targetPrice**, **alertEnabled**: optional
    """
    uid = parse_user_id(user_id)
    try:
        item = await use_case.add_to_watchlist(
            uid,
            CreateWatchlistItemDto(
                symbol=request.symbol,
                notes=request.notes,
                target_price=request.target_price,
                alert_enabled=request.alert_enabled,
            ),
        )
    except DashboardError as e:
        raise to_http_exception(e)

    record_watchlist_change("add")
    return WatchlistItemResponse.model_validate(item)


@router.patch("/{user_id}/{item_id}", response_model=WatchlistItemResponse)
async def update_watchlist_item(
    user_id: str,
    item_id: str,
    request: WatchlistItemUpdate,
    use_case: ManageWatchlistUseCase = Depends(get_manage_watchlist_use_case),
) -> WatchlistItemResponse:
    """Update notes, target price or alert flag of a watchlist item"""
    uid = parse_user_id(user_id)
    iid = parse_item_id(item_id)
    try:
        item = await use_case.update_watchlist_item(
            uid,
            iid,
            UpdateWatchlistItemDto(
                notes=request.notes,
                target_price=request.target_price,
                alert_enabled=request.alert_enabled,
            ),
        )
    except DashboardError as e:
        raise to_http_exception(e)

    record_watchlist_change("update")
    return WatchlistItemResponse.model_validate(item)


@router.delete("/{user_id}/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_from_watchlist(
    user_id: str,
    item_id: str,
    use_case: ManageWatchlistUseCase = Depends(get_manage_watchlist_use_case),
) -> Response:
    """Remove a watchlist item"""
    uid = parse_user_id(user_id)
    iid = parse_item_id(item_id)
    try:
        await use_case.remove_from_watchlist(uid, iid)
    except DashboardError as e:
        raise to_http_exception(e)

    record_watchlist_change("remove")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
