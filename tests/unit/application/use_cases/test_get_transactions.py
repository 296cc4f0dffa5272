"""
GetTransactionsUseCase Tests
"""
import pytest
from datetime import datetime, timedelta
from unittest.mock import AsyncMock

from dashboard.application.ports.outbound.transaction_repository_port import TransactionRepositoryPort
from dashboard.application.use_cases.get_transactions import GetTransactionsUseCase
from dashboard.domain.entities.transaction import Transaction
from dashboard.exceptions import InvalidInputError, UseCaseError

NOW = datetime(2024, 3, 15, 12, 0, 0)


@pytest.fixture
def transactions():
    return [
        Transaction.from_data({
            "id": 1,
            "user_id": 1,
            "type": "buy",
            "symbol": "AAPL",
            "amount": "9487.50",
            "shares": 50,
            "timestamp": NOW - timedelta(minutes=2),
        }),
        Transaction.from_data({
            "id": 3,
            "user_id": 1,
            "type": "dividend",
            "symbol": "MSFT",
            "amount": "412.50",
            "shares": None,
            "timestamp": NOW - timedelta(hours=1),
        }),
    ]


@pytest.fixture
def mock_repository(transactions):
    repository = AsyncMock(spec=TransactionRepositoryPort)
    repository.get_by_user_id.return_value = transactions
    repository.get_recent_by_user_id.return_value = transactions[:1]
    return repository


@pytest.fixture
def use_case(mock_repository):
    return GetTransactionsUseCase(
        transaction_repository=mock_repository,
        default_limit=10,
        clock=lambda: NOW,
    )


class TestGetTransactionsExecute:
    """execute"""

    @pytest.mark.asyncio
    async def test_returns_display_rows(self, use_case):
        result = await use_case.execute(1)

        assert len(result) == 2
        buy, dividend = result
        assert buy.formatted_title == "Bought AAPL"
        assert buy.amount == "$9,487.50"
        assert buy.time_ago == "2 mins ago"
        assert buy.price_per_share == "$189.75"
        assert buy.icon_color_class == "text-green-400"
        assert dividend.formatted_title == "MSFT Dividend"
        assert dividend.time_ago == "1 hour ago"
        assert dividend.price_per_share is None

    @pytest.mark.asyncio
    async def test_repository_failure_wrapped(self, use_case, mock_repository):
        mock_repository.get_by_user_id.side_effect = RuntimeError("boom")

        with pytest.raises(UseCaseError):
            await use_case.execute(1)


class TestGetRecent:
    """get_recent"""

    @pytest.mark.asyncio
    async def test_default_limit(self, use_case, mock_repository):
        result = await use_case.get_recent(1)

        assert len(result) == 1
        mock_repository.get_recent_by_user_id.assert_awaited_once_with(1, 10)

    @pytest.mark.asyncio
    async def test_explicit_limit(self, use_case, mock_repository):
        await use_case.get_recent(1, limit=3)

        mock_repository.get_recent_by_user_id.assert_awaited_once_with(1, 3)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, -5])
    async def test_non_positive_limit_rejected(self, use_case, mock_repository, limit):
        """Given: limit <= 0 When: get_recent Then: InvalidInputError, no query"""
        with pytest.raises(InvalidInputError, match="Limit must be positive"):
            await use_case.get_recent(1, limit=limit)

        mock_repository.get_recent_by_user_id.assert_not_awaited()
