"""
Dashboard API endpoint
"""
from fastapi import APIRouter, Depends

from backend.app.api.deps import get_dashboard_data_use_case, parse_user_id, to_http_exception
from backend.app.schemas.portfolio import DashboardDataResponse
from dashboard.application.use_cases import GetDashboardDataUseCase
from dashboard.exceptions import DashboardError

router = APIRouter()


@router.get("/{user_id}", response_model=DashboardDataResponse)
async def get_dashboard(
    user_id: str,
    use_case: GetDashboardDataUseCase = Depends(get_dashboard_data_use_case),
) -> DashboardDataResponse:
    """
    Everything the dashboard renders: portfolio, quotes, transactions,
    allocation, performance history, risk figures and computed metrics
    """
    uid = parse_user_id(user_id)
    try:
        data = await use_case.execute(uid)
    except DashboardError as e:
        raise to_http_exception(e)
    return DashboardDataResponse.model_validate(data)
