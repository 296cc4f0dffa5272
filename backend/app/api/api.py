"""
API router
Aggregates all endpoint routers.
"""
from fastapi import APIRouter

from backend.app.api.endpoints import dashboard, portfolio, stocks, transactions, watchlist

api_router = APIRouter()

api_router.include_router(
    portfolio.router,
    prefix="/portfolio",
    tags=["portfolio"]
)

api_router.include_router(
    stocks.router,
    prefix="/stocks",
    tags=["stocks"]
)

api_router.include_router(
    transactions.router,
    prefix="/transactions",
    tags=["transactions"]
)

api_router.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["dashboard"]
)

api_router.include_router(
    watchlist.router,
    prefix="/watchlist",
    tags=["watchlist"]
)
