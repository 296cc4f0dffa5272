"""
Tests for Portfolio entity.
"""
import pytest
from decimal import Decimal

from dashboard.domain.entities.portfolio import Portfolio, PerformanceStatus
from dashboard.domain.exceptions import InvalidValueError
from dashboard.domain.value_objects.money import Money
from dashboard.domain.value_objects.percentage import Percentage


def make_portfolio(
    total_value="102000",
    daily_pnl="2000",
    success_rate="80",
    active_positions=5,
    negative=False,
) -> Portfolio:
    return Portfolio(
        id=1,
        user_id=1,
        total_value=Money(Decimal(total_value)),
        daily_pnl=Money(Decimal(daily_pnl)),
        success_rate=Percentage(Decimal(success_rate)),
        active_positions=active_positions,
        daily_pnl_negative=negative,
    )


class TestPortfolioCreation:
    """Construction and validation."""

    def test_from_data_parses_negative_pnl(self):
        portfolio = Portfolio.from_data({
            "id": 2,
            "user_id": 2,
            "total_value": "567234.20",
            "daily_pnl": "-2341.80",
            "success_rate": "74.20",
            "active_positions": 15,
        })

        assert portfolio.daily_pnl == Money(Decimal("2341.80"))
        assert portfolio.daily_pnl_negative
        assert portfolio.signed_daily_pnl == Decimal("-2341.80")

    def test_to_data_restores_sign(self):
        portfolio = make_portfolio(daily_pnl="10", negative=True)
        assert portfolio.to_data()["daily_pnl"] == "-10.00"

    def test_zero_pnl_is_never_negative(self):
        assert not make_portfolio(daily_pnl="0", negative=True).daily_pnl_negative

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({"id": 0}, "Portfolio ID must be positive"),
            ({"user_id": -1}, "User ID must be positive"),
            ({"active_positions": -1}, "Active positions cannot be negative"),
            ({"success_rate": Percentage(Decimal("100.01"))}, "between 0 and 100"),
        ],
    )
    def test_validation(self, kwargs, message):
        fields = {
            "id": 1,
            "user_id": 1,
            "total_value": Money(1),
            "daily_pnl": Money(0),
            "success_rate": Percentage(50),
            "active_positions": 1,
        }
        fields.update(kwargs)
        with pytest.raises(InvalidValueError, match=message):
            Portfolio(**fields)


class TestPortfolioBusinessLogic:
    """Derived figures."""

    def test_daily_return_percentage(self):
        # 2,000 on a previous value of 100,000
        assert make_portfolio().daily_return_percentage() == Percentage(Decimal("2"))

    def test_daily_return_zero_when_total_is_zero(self):
        portfolio = make_portfolio(total_value="0", daily_pnl="0")
        assert portfolio.daily_return_percentage().is_zero()

    def test_daily_return_zero_when_previous_value_not_positive(self):
        portfolio = make_portfolio(total_value="100", daily_pnl="100")
        assert portfolio.daily_return_percentage().is_zero()

    def test_average_position_value(self):
        portfolio = make_portfolio(total_value="1247893.75", active_positions=28)
        assert portfolio.average_position_value().to_formatted_string() == "$44,567.63"

    def test_average_position_value_without_positions(self):
        assert make_portfolio(active_positions=0).average_position_value().is_zero()

    @pytest.mark.parametrize("positions,expected", [(4, False), (5, True), (28, True)])
    def test_is_diversified(self, positions, expected):
        assert make_portfolio(active_positions=positions).is_diversified() is expected

    def test_is_performing_well(self):
        assert make_portfolio(success_rate="70").is_performing_well()
        assert not make_portfolio(success_rate="69.99").is_performing_well()
        assert not make_portfolio(negative=True).is_performing_well()


class TestPerformanceStatus:
    """Status cascade, best tier first."""

    @pytest.mark.parametrize(
        "total,pnl,rate,negative,expected",
        [
            ("102000", "2000", "80", False, PerformanceStatus.EXCELLENT),
            ("102000", "2000", "79.99", False, PerformanceStatus.GOOD),
            ("101000", "1000", "70", False, PerformanceStatus.GOOD),
            ("101000", "1000", "69.99", False, PerformanceStatus.AVERAGE),
            ("100000", "0", "60", False, PerformanceStatus.AVERAGE),
            ("100000", "0", "59.99", False, PerformanceStatus.POOR),
            ("99000", "1000", "95", True, PerformanceStatus.POOR),
        ],
    )
    def test_cascade(self, total, pnl, rate, negative, expected):
        portfolio = make_portfolio(
            total_value=total, daily_pnl=pnl, success_rate=rate, negative=negative
        )
        assert portfolio.performance_status() == expected
