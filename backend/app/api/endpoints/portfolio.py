"""
Portfolio API endpoints
"""
from fastapi import APIRouter, Depends

from backend.app.api.deps import get_portfolio_use_case, parse_user_id, to_http_exception
from backend.app.schemas.portfolio import PortfolioResponse
from dashboard.application.use_cases import GetPortfolioUseCase
from dashboard.exceptions import DashboardError, PortfolioNotFoundError

router = APIRouter()


@router.get("/{user_id}", response_model=PortfolioResponse)
async def get_portfolio(
    user_id: str,
    use_case: GetPortfolioUseCase = Depends(get_portfolio_use_case),
) -> PortfolioResponse:
    """
    Portfolio summary for a user

    - **user_id**: positive integer
    """
    uid = parse_user_id(user_id)
    try:
        portfolio = await use_case.execute(uid)
    except DashboardError as e:
        raise to_http_exception(e)

    if portfolio is None:
        raise to_http_exception(PortfolioNotFoundError(uid))
    return PortfolioResponse.model_validate(portfolio)
