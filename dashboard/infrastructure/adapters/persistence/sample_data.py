"""
Sample records for the in-memory adapters.

Timestamps are relative to the moment the records are built so the
activity feed always looks recent.
"""
from datetime import datetime, timedelta
from typing import List, Optional

from dashboard.domain.entities.portfolio import PortfolioData
from dashboard.domain.entities.stock import StockData
from dashboard.domain.entities.transaction import TransactionData
from dashboard.domain.entities.watchlist_item import WatchlistItemData


SAMPLE_PORTFOLIOS = [
    # (user_id, total_value, daily_pnl, success_rate, active_positions)
    (1, "1247893.75", "8432.50", "82.40", 28),
    (2, "567234.20", "-2341.80", "74.20", 15),
    (3, "2156789.45", "15678.90", "89.60", 42),
]

SAMPLE_STOCKS = [
    # (symbol, name, price, change, change_percent, volume, market_cap)
    ("AAPL", "Apple Inc.", "189.75", "5.42", "2.95", 52_300_000, "$2.9T"),
    ("MSFT", "Microsoft Corp.", "412.85", "8.15", "2.01", 28_900_000, "$3.1T"),
    ("GOOGL", "Alphabet Inc.", "142.65", "3.28", "2.35", 31_200_000, "$1.8T"),
    ("AMZN", "Amazon.com Inc.", "168.92", "6.45", "3.97", 41_500_000, "$1.7T"),
    ("TSLA", "Tesla Inc.", "251.82", "-4.23", "-1.65", 89_600_000, "$801B"),
    ("NVDA", "NVIDIA Corp.", "875.42", "28.75", "3.40", 45_800_000, "$2.2T"),
    ("META", "Meta Platforms Inc.", "485.23", "12.89", "2.73", 19_400_000, "$1.2T"),
    ("NFLX", "Netflix Inc.", "612.45", "-8.92", "-1.44", 8_900_000, "$271B"),
    ("AMD", "Advanced Micro Devices", "142.78", "4.56", "3.30", 67_200_000, "$231B"),
    ("CRM", "Salesforce Inc.", "289.34", "7.23", "2.56", 12_300_000, "$287B"),
    ("ORCL", "Oracle Corp.", "118.67", "2.45", "2.11", 15_600_000, "$327B"),
    ("ADBE", "Adobe Inc.", "567.89", "-3.45", "-0.60", 7_800_000, "$259B"),
]

SAMPLE_TRANSACTIONS = [
    # (user_id, type, symbol, amount, shares, minutes_ago)
    (1, "buy", "AAPL", "9487.50", 50, 2),
    (1, "sell", "TSLA", "7554.60", 30, 15),
    (1, "dividend", "MSFT", "412.50", None, 60),
    (1, "buy", "NVDA", "17508.40", 20, 120),
    (1, "buy", "GOOGL", "7133.00", 50, 240),
    (1, "sell", "META", "9704.60", 20, 360),
    (1, "dividend", "AAPL", "125.00", None, 720),
    (1, "buy", "AMD", "7139.00", 50, 1440),
    (1, "buy", "CRM", "8680.20", 30, 2880),
    (1, "sell", "NFLX", "12249.00", 20, 4320),
    (2, "buy", "MSFT", "8257.00", 20, 30),
    (2, "sell", "AAPL", "5692.50", 30, 45),
    (2, "dividend", "ORCL", "89.60", None, 90),
    (3, "buy", "NVDA", "43771.00", 50, 10),
    (3, "buy", "TSLA", "25182.00", 100, 25),
    (3, "dividend", "MSFT", "1250.00", None, 120),
]

SAMPLE_WATCHLIST = [
    # (user_id, symbol, days_ago, notes, target_price, alert_enabled)
    (1, "AAPL", 7, "Strong fundamentals, waiting for dip", "200.00", True),
    (1, "TSLA", 3, "Watching for earnings announcement", None, False),
    (1, "NVDA", 1, "AI growth potential", "900.00", True),
]


def build_portfolios() -> List[PortfolioData]:
    return [
        PortfolioData(
            id=index,
            user_id=user_id,
            total_value=total_value,
            daily_pnl=daily_pnl,
            success_rate=success_rate,
            active_positions=active_positions,
        )
        for index, (user_id, total_value, daily_pnl, success_rate, active_positions)
        in enumerate(SAMPLE_PORTFOLIOS, start=1)
    ]


def build_stocks() -> List[StockData]:
    return [
        StockData(
            id=index,
            symbol=symbol,
            name=name,
            price=price,
            change=change,
            change_percent=change_percent,
            volume=volume,
            market_cap=market_cap,
        )
        for index, (symbol, name, price, change, change_percent, volume, market_cap)
        in enumerate(SAMPLE_STOCKS, start=1)
    ]


def build_transactions(now: Optional[datetime] = None) -> List[TransactionData]:
    now = now or datetime.now()
    return [
        TransactionData(
            id=index,
            user_id=user_id,
            type=type_,
            symbol=symbol,
            amount=amount,
            shares=shares,
            timestamp=now - timedelta(minutes=minutes_ago),
        )
        for index, (user_id, type_, symbol, amount, shares, minutes_ago)
        in enumerate(SAMPLE_TRANSACTIONS, start=1)
    ]


def build_watchlist(now: Optional[datetime] = None) -> List[WatchlistItemData]:
    now = now or datetime.now()
    return [
        WatchlistItemData(
            id=index,
            user_id=user_id,
            symbol=symbol,
            added_at=now - timedelta(days=days_ago),
            notes=notes,
            target_price=target_price,
            alert_enabled=alert_enabled,
        )
        for index, (user_id, symbol, days_ago, notes, target_price, alert_enabled)
        in enumerate(SAMPLE_WATCHLIST, start=1)
    ]
