"""
Tests for PortfolioCalculationService.
"""
import pytest
from datetime import datetime, timedelta
from decimal import Decimal

import numpy as np

from dashboard.domain.entities.portfolio import Portfolio
from dashboard.domain.entities.stock import Stock
from dashboard.domain.entities.transaction import Transaction
from dashboard.domain.exceptions import CurrencyMismatchError
from dashboard.domain.services.portfolio_calculator import PortfolioCalculationService
from dashboard.domain.value_objects.money import Money
from dashboard.domain.value_objects.percentage import Percentage
from dashboard.domain.value_objects.stock_symbol import StockSymbol

NOW = datetime(2024, 3, 15, 12, 0, 0)


def tx(id_, type_, symbol, amount, shares, age):
    return Transaction(
        id=id_,
        user_id=1,
        type=type_,
        symbol=StockSymbol(symbol),
        amount=Money(Decimal(amount)),
        shares=shares,
        timestamp=NOW - age,
    )


@pytest.fixture
def transactions():
    """Newest first, as repositories return them."""
    return [
        tx(4, "dividend", "MSFT", "50", None, timedelta(minutes=10)),
        tx(3, "sell", "AAPL", "2000", 10, timedelta(hours=1)),
        tx(2, "buy", "AAPL", "3000", 20, timedelta(days=2)),
        tx(1, "buy", "MSFT", "2000", 5, timedelta(days=3)),
    ]


@pytest.fixture
def prices():
    return {
        "AAPL": Money(Decimal("189.75")),
        "MSFT": Money(Decimal("412.85")),
    }


@pytest.fixture
def service():
    return PortfolioCalculationService(rng=np.random.default_rng(42))


class TestCalculatePortfolioMetrics:
    """calculate_portfolio_metrics"""

    def test_values_from_net_positions(self, service, transactions, prices):
        metrics = service.calculate_portfolio_metrics(transactions, prices, now=NOW)

        # AAPL 10 x 189.75 + MSFT 5 x 412.85
        assert metrics.total_value == Money(Decimal("3961.75"))
        assert metrics.total_invested == Money(Decimal("5000"))
        assert metrics.active_positions == 2

    def test_total_pnl_carries_sign(self, service, transactions, prices):
        metrics = service.calculate_portfolio_metrics(transactions, prices, now=NOW)

        assert metrics.total_pnl == Money(Decimal("1038.25"))
        assert metrics.total_pnl_negative

    def test_daily_pnl_counts_only_today(self, service, transactions, prices):
        metrics = service.calculate_portfolio_metrics(transactions, prices, now=NOW)

        # sell 2,000 + dividend 50 today; both buys are older
        assert metrics.daily_pnl == Money(Decimal("2050"))
        assert not metrics.daily_pnl_negative

    def test_daily_pnl_negative_for_buys_today(self, service, prices):
        buys = [tx(1, "buy", "AAPL", "500", 2, timedelta(minutes=5))]
        metrics = service.calculate_portfolio_metrics(buys, prices, now=NOW)

        assert metrics.daily_pnl == Money(Decimal("500"))
        assert metrics.daily_pnl_negative

    def test_success_rate_compares_with_earlier_buy(self, service, transactions, prices):
        metrics = service.calculate_portfolio_metrics(transactions, prices, now=NOW)

        # sold at 200/share after buying at 150/share
        assert metrics.success_rate == Percentage(Decimal("100"))

    def test_sell_without_earlier_buy_counts_as_unsuccessful(self, service, prices):
        transactions = [
            tx(2, "buy", "AAPL", "3000", 10, timedelta(hours=1)),
            tx(1, "sell", "AAPL", "4000", 10, timedelta(hours=2)),
        ]
        metrics = service.calculate_portfolio_metrics(transactions, prices, now=NOW)

        assert metrics.success_rate.is_zero()

    def test_success_rate_uses_first_matching_buy_in_list_order(self, service, prices):
        transactions = [
            tx(3, "sell", "AAPL", "1700", 10, timedelta(hours=1)),
            tx(2, "buy", "AAPL", "1600", 10, timedelta(days=1)),
            tx(1, "buy", "AAPL", "1800", 10, timedelta(days=2)),
        ]
        metrics = service.calculate_portfolio_metrics(transactions, prices, now=NOW)

        # 170 beats the 160 buy listed first, not the 180 one
        assert metrics.success_rate == Percentage(Decimal("100"))

    def test_no_sells_means_zero_success_rate(self, service, prices):
        buys = [tx(1, "buy", "AAPL", "500", 2, timedelta(days=1))]
        assert service.calculate_portfolio_metrics(buys, prices, now=NOW).success_rate.is_zero()

    def test_empty_history(self, service, prices):
        metrics = service.calculate_portfolio_metrics([], prices, now=NOW)

        assert metrics.total_value.is_zero()
        assert metrics.total_pnl.is_zero()
        assert metrics.active_positions == 0

    def test_sums_kept_in_price_currency(self, transactions, prices):
        """Given: EUR configured, USD data When: metrics Then: USD totals, no mismatch"""
        service = PortfolioCalculationService(rng=np.random.default_rng(42), currency="EUR")

        metrics = service.calculate_portfolio_metrics(transactions, prices, now=NOW)

        assert metrics.total_value == Money(Decimal("3961.75"))
        assert metrics.total_invested.currency == "USD"
        assert metrics.total_pnl.currency == "USD"
        assert metrics.daily_pnl.currency == "USD"

    def test_configured_currency_only_for_empty_sums(self, prices):
        service = PortfolioCalculationService(rng=np.random.default_rng(42), currency="EUR")

        metrics = service.calculate_portfolio_metrics([], prices, now=NOW)

        assert metrics.total_value == Money.zero("EUR")

    def test_prices_and_transactions_in_different_currencies(self, service, transactions):
        eur_prices = {"AAPL": Money(Decimal("175"), "EUR"), "MSFT": Money(Decimal("380"), "EUR")}

        with pytest.raises(CurrencyMismatchError):
            service.calculate_portfolio_metrics(transactions, eur_prices, now=NOW)


class TestCalculateAllocation:
    """calculate_allocation"""

    def test_slices_sorted_by_amount(self, service, transactions, prices):
        allocation = service.calculate_allocation(transactions, prices)

        assert [s.name for s in allocation] == ["MSFT", "AAPL"]
        assert allocation[0].value == Percentage(Decimal("52.10"))
        assert allocation[1].value == Percentage(Decimal("47.90"))
        assert allocation[0].amount == Money(Decimal("2064.25"))

    def test_colors(self, service, transactions, prices):
        colors = {s.name: s.color for s in service.calculate_allocation(transactions, prices)}
        assert colors == {"MSFT": "#a855f7", "AAPL": "#3b82f6"}

    def test_unknown_symbol_gets_default_color(self, service):
        holdings = [tx(1, "buy", "ORCL", "1000", 10, timedelta(days=1))]
        allocation = service.calculate_allocation(holdings, {"ORCL": Money(100)})

        assert allocation[0].color == "#6b7280"
        assert allocation[0].value == Percentage(Decimal("100"))

    def test_symbols_without_price_skipped(self, service, transactions):
        allocation = service.calculate_allocation(transactions, {"AAPL": Money(100)})
        assert [s.name for s in allocation] == ["AAPL"]

    def test_no_holdings(self, service):
        assert service.calculate_allocation([], {}) == []


class TestCalculatePerformanceHistory:
    """calculate_performance_history"""

    def test_thirty_daily_points_ending_now(self, service):
        history = service.calculate_performance_history([], {}, now=NOW)

        assert len(history) == 30
        assert history[-1].date == NOW
        assert history[0].date == NOW - timedelta(days=29)

    def test_values_within_noise_and_trend_bounds(self, service):
        history = service.calculate_performance_history([], {}, now=NOW)

        low = Decimal("1000000") * Decimal("0.97")
        high = Decimal("1000000") * Decimal("1.03") * Decimal("1.029")
        for point in history:
            assert low <= point.value.amount <= high
            assert point.pnl.amount == abs(point.value.amount - Decimal("1000000"))

    def test_same_seed_same_series(self):
        first = PortfolioCalculationService(rng=np.random.default_rng(7))
        second = PortfolioCalculationService(rng=np.random.default_rng(7))

        assert (
            first.calculate_performance_history([], {}, now=NOW)
            == second.calculate_performance_history([], {}, now=NOW)
        )

    def test_history_length_configurable(self):
        service = PortfolioCalculationService(rng=np.random.default_rng(1), history_days=7)
        assert len(service.calculate_performance_history([], {}, now=NOW)) == 7


class TestCalculateRiskMetrics:
    """calculate_risk_metrics"""

    @pytest.fixture
    def portfolio(self):
        # 2% daily return
        return Portfolio(
            id=1,
            user_id=1,
            total_value=Money(Decimal("102000")),
            daily_pnl=Money(Decimal("2000")),
            success_rate=Percentage(Decimal("80")),
            active_positions=5,
        )

    @pytest.fixture
    def stocks(self):
        def stock(id_, symbol, change_percent):
            return Stock.from_data({
                "id": id_,
                "symbol": symbol,
                "name": symbol,
                "price": "100",
                "change": "1",
                "change_percent": change_percent,
                "volume": 1000,
                "market_cap": "$1B",
            })
        return [stock(1, "AAPL", "2.95"), stock(2, "TSLA", "-1.65")]

    def test_volatility_is_mean_absolute_move(self, service, portfolio, stocks):
        risk = service.calculate_risk_metrics(portfolio, stocks)
        assert risk.volatility == Percentage(Decimal("2.30"))

    def test_sharpe_ratio(self, service, portfolio, stocks):
        risk = service.calculate_risk_metrics(portfolio, stocks)
        assert risk.sharpe_ratio == pytest.approx(2 / 2.3, abs=1e-4)

    def test_low_volatility_floored_at_one(self, service, portfolio):
        risk = service.calculate_risk_metrics(portfolio, [])

        assert risk.volatility.is_zero()
        assert risk.sharpe_ratio == pytest.approx(2.0)

    def test_placeholders(self, service, portfolio, stocks):
        risk = service.calculate_risk_metrics(portfolio, stocks)

        assert risk.max_drawdown.to_formatted_string() == "5.00%"
        assert risk.beta == 1.0
