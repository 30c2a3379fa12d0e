"""Unit tests for ExpenseApplicationService using a mock repository."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.ft_common.cache import ReadThroughCache
from src.ft_common.errors import ExpenseNotFoundError, StoreUnavailableError
from src.ft_expense.application.service import ExpenseApplicationService
from src.ft_expense.domain.models import Expense

NOW = datetime(2026, 3, 14, 9, 30, tzinfo=UTC)


def _make_expense(**kwargs) -> Expense:
    defaults = dict(
        id="e-1", user_id="u1", description="Coffee", amount_cents=500,
        spent_at=NOW, created_at=NOW, updated_at=NOW,
    )
    defaults.update(kwargs)
    return Expense(**defaults)


@pytest.fixture
def db() -> MagicMock:
    db = MagicMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    return db


@pytest.fixture
def mock_repo() -> MagicMock:
    return MagicMock()


@pytest.fixture
def cache(fake_store) -> ReadThroughCache:
    return ReadThroughCache(fake_store)


class TestListExpenses:
    async def test_first_call_reads_repo(self, db, mock_repo, cache) -> None:
        mock_repo.list_by_user = AsyncMock(return_value=[_make_expense()])
        svc = ExpenseApplicationService(repo=mock_repo)

        resp = await svc.list_expenses(db, cache, "u1")

        assert len(resp.items) == 1
        assert resp.items[0].description == "Coffee"
        assert resp.items[0].amount_display == "$5.00"
        mock_repo.list_by_user.assert_awaited_once_with(db, "u1")

    async def test_second_call_served_from_cache(self, db, mock_repo, cache) -> None:
        mock_repo.list_by_user = AsyncMock(return_value=[_make_expense()])
        svc = ExpenseApplicationService(repo=mock_repo)

        first = await svc.list_expenses(db, cache, "u1")
        mock_repo.list_by_user = AsyncMock(return_value=[])
        second = await svc.list_expenses(db, cache, "u1")

        assert second == first
        mock_repo.list_by_user.assert_not_awaited()

    async def test_cached_under_user_scoped_key(self, db, mock_repo, cache, fake_store) -> None:
        mock_repo.list_by_user = AsyncMock(return_value=[])
        svc = ExpenseApplicationService(repo=mock_repo)

        await svc.list_expenses(db, cache, "u1")
        await svc.list_expenses(db, cache, "u2")

        assert [c[0] for c in fake_store.setex_calls] == ["expenses:u1", "expenses:u2"]
        assert mock_repo.list_by_user.await_count == 2

    async def test_store_down_does_not_query_repo(self, db, mock_repo) -> None:
        store = MagicMock()
        store.get = AsyncMock(side_effect=StoreUnavailableError())
        mock_repo.list_by_user = AsyncMock(return_value=[])
        svc = ExpenseApplicationService(repo=mock_repo)

        with pytest.raises(StoreUnavailableError):
            await svc.list_expenses(db, ReadThroughCache(store), "u1")
        mock_repo.list_by_user.assert_not_awaited()

    async def test_create_does_not_invalidate_listing(self, db, mock_repo, cache) -> None:
        mock_repo.list_by_user = AsyncMock(return_value=[])
        mock_repo.create = AsyncMock(return_value=_make_expense(id="e-2"))
        svc = ExpenseApplicationService(repo=mock_repo)

        await svc.list_expenses(db, cache, "u1")
        await svc.create_expense(db, "u1", "Coffee", 500, None)
        resp = await svc.list_expenses(db, cache, "u1")

        assert resp.items == []


class TestCreateExpense:
    async def test_commits_and_returns_item(self, db, mock_repo) -> None:
        mock_repo.create = AsyncMock(return_value=_make_expense(amount_cents=-250))
        svc = ExpenseApplicationService(repo=mock_repo)

        item = await svc.create_expense(db, "u1", "Refund", -250, None)

        assert item.amount_cents == -250
        assert item.amount_display == "-$2.50"
        mock_repo.create.assert_awaited_once_with(db, "u1", "Refund", -250, None)
        db.commit.assert_awaited_once()

    async def test_rolls_back_on_failure(self, db, mock_repo) -> None:
        mock_repo.create = AsyncMock(side_effect=RuntimeError("insert failed"))
        svc = ExpenseApplicationService(repo=mock_repo)

        with pytest.raises(RuntimeError):
            await svc.create_expense(db, "u1", "Coffee", 500, None)
        db.rollback.assert_awaited_once()
        db.commit.assert_not_awaited()


class TestUpdateExpense:
    async def test_returns_updated_item(self, db, mock_repo) -> None:
        mock_repo.update = AsyncMock(return_value=_make_expense(description="Tea"))
        svc = ExpenseApplicationService(repo=mock_repo)

        item = await svc.update_expense(db, "u1", "e-1", "Tea", None, None)

        assert item.description == "Tea"
        db.commit.assert_awaited_once()

    async def test_missing_expense_raises_not_found(self, db, mock_repo) -> None:
        mock_repo.update = AsyncMock(return_value=None)
        svc = ExpenseApplicationService(repo=mock_repo)

        with pytest.raises(ExpenseNotFoundError):
            await svc.update_expense(db, "u1", "e-404", "Tea", None, None)
        db.rollback.assert_awaited_once()


class TestDeleteExpense:
    async def test_deletes(self, db, mock_repo) -> None:
        mock_repo.delete = AsyncMock(return_value=True)
        svc = ExpenseApplicationService(repo=mock_repo)

        await svc.delete_expense(db, "u1", "e-1")

        mock_repo.delete.assert_awaited_once_with(db, "u1", "e-1")
        db.commit.assert_awaited_once()

    async def test_missing_expense_raises_not_found(self, db, mock_repo) -> None:
        mock_repo.delete = AsyncMock(return_value=False)
        svc = ExpenseApplicationService(repo=mock_repo)

        with pytest.raises(ExpenseNotFoundError):
            await svc.delete_expense(db, "u1", "e-404")
