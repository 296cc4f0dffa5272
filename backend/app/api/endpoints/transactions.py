"""
Transaction API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, Query

from backend.app.api.deps import get_transactions_use_case, parse_user_id, to_http_exception
from backend.app.schemas.portfolio import TransactionResponse
from dashboard.application.use_cases import GetTransactionsUseCase
from dashboard.exceptions import DashboardError

router = APIRouter()


@router.get("/{user_id}", response_model=List[TransactionResponse])
async def get_transactions(
    user_id: str,
    limit: int | None = Query(None, description="Return only the latest N transactions"),
    use_case: GetTransactionsUseCase = Depends(get_transactions_use_case),
) -> List[TransactionResponse]:
    """
    Transaction history for a user

    - **user_id**: positive integer
    - **limit**: when given, the newest `limit` transactions, newest first
    """
    uid = parse_user_id(user_id)
    try:
        if limit is None:
            transactions = await use_case.execute(uid)
        else:
            transactions = await use_case.get_recent(uid, limit)
    except DashboardError as e:
        raise to_http_exception(e)
    return [TransactionResponse.model_validate(t) for t in transactions]
