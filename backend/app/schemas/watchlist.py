"""
Watchlist schemas
Pydantic models used for API requests and responses.
"""
from typing import Optional
from pydantic import Field

from backend.app.schemas.base import CamelModel
from backend.app.schemas.portfolio import StockResponse


class WatchlistItemCreate(CamelModel):
    """Add-to-watchlist request"""
    symbol: str = Field(..., min_length=1, description="Ticker symbol")
    notes: str = Field(default="", description="Free-form notes")
    target_price: Optional[str] = Field(None, description="Alert price, e.g. 200.00")
    alert_enabled: bool = Field(default=False, description="Enable price alert")


class WatchlistItemUpdate(CamelModel):
    """Partial update request; omitted fields are left unchanged"""
    notes: Optional[str] = None
    target_price: Optional[str] = None
    alert_enabled: Optional[bool] = None


class WatchlistItemResponse(CamelModel):
    """Watchlist entry"""
    id: int
    symbol: str
    added_at: str = Field(..., description="ISO-8601 timestamp")
    notes: str
    target_price: Optional[str] = None
    alert_enabled: bool
    days_since_added: int
    has_target_price: bool
    has_notes: bool


class TopPerformerResponse(CamelModel):
    symbol: str
    change: str = Field(..., description="Signed change, e.g. +3.40%")


class WatchlistPerformanceResponse(CamelModel):
    total_items: int
    items_with_alerts: int
    average_days_held: int
    top_performer: Optional[TopPerformerResponse] = None


class WatchlistAlertResponse(CamelModel):
    """Triggered price alert"""
    item_id: int
    symbol: str
    alert_type: str = Field(..., description="above_target / below_target")
    current_price: str
    target_price: str


class WatchlistWithStocksResponse(CamelModel):
    """Watchlist with quotes and summary"""
    items: list[WatchlistItemResponse]
    stocks: list[StockResponse]
    performance: WatchlistPerformanceResponse
    alerts: list[WatchlistAlertResponse]
