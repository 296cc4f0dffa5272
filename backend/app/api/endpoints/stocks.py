"""
Market data API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends

from backend.app.api.deps import get_market_data_use_case, to_http_exception
from backend.app.schemas.portfolio import StockResponse
from dashboard.application.use_cases import GetMarketDataUseCase
from dashboard.exceptions import DashboardError, StockNotFoundError

router = APIRouter()


@router.get("", response_model=List[StockResponse])
async def get_stocks(
    use_case: GetMarketDataUseCase = Depends(get_market_data_use_case),
) -> List[StockResponse]:
    """All stock quotes"""
    try:
        stocks = await use_case.execute()
    except DashboardError as e:
        raise to_http_exception(e)
    return [StockResponse.model_validate(stock) for stock in stocks]


@router.get("/{symbol}", response_model=StockResponse)
async def get_stock(
    symbol: str,
    use_case: GetMarketDataUseCase = Depends(get_market_data_use_case),
) -> StockResponse:
    """
    Single stock quote

    - **symbol**: ticker, any case
    """
    try:
        stock = await use_case.get_by_symbol(symbol.upper())
    except DashboardError as e:
        raise to_http_exception(e)

    if stock is None:
        raise to_http_exception(StockNotFoundError(symbol.upper()))
    return StockResponse.model_validate(stock)
