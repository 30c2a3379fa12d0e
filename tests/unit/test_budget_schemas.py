"""Unit tests for ft_budget schemas and BudgetRepository."""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import ValidationError

from src.ft_budget.application.schemas import CreateBudgetRequest, UpdateBudgetRequest
from src.ft_budget.infrastructure.persistence import BudgetRepository


class TestCreateBudgetRequest:
    def test_valid(self) -> None:
        req = CreateBudgetRequest(
            category="Food", amount_cents=300000,
            start_date="2026-03-01", end_date="2026-03-31",
        )
        assert req.start_date == date(2026, 3, 1)

    def test_single_day_period_allowed(self) -> None:
        CreateBudgetRequest(
            category="Food", amount_cents=1, start_date="2026-03-01", end_date="2026-03-01"
        )

    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CreateBudgetRequest(
                category="Food", amount_cents=1,
                start_date="2026-03-31", end_date="2026-03-01",
            )

    def test_category_required(self) -> None:
        with pytest.raises(ValidationError):
            CreateBudgetRequest(
                category="", amount_cents=1, start_date="2026-03-01", end_date="2026-03-31"
            )

    def test_bad_date_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CreateBudgetRequest(
                category="Food", amount_cents=1, start_date="March", end_date="2026-03-31"
            )


class TestUpdateBudgetRequest:
    def test_single_date_is_not_checked(self) -> None:
        assert UpdateBudgetRequest(end_date="2020-01-01").end_date == date(2020, 1, 1)

    def test_both_dates_checked(self) -> None:
        with pytest.raises(ValidationError):
            UpdateBudgetRequest(start_date="2026-03-31", end_date="2026-03-01")


class TestSumAmountOverlapping:
    async def test_passes_inclusive_range(self) -> None:
        result = MagicMock()
        result.scalar_one.return_value = 0
        db = MagicMock()
        db.execute = AsyncMock(return_value=result)

        total = await BudgetRepository().sum_amount_overlapping(
            db, "u1", date(2026, 1, 1), date(2026, 12, 31)
        )

        assert total == 0
        assert db.execute.call_args.args[1] == {
            "user_id": "u1",
            "active_from": date(2026, 1, 1),
            "active_to": date(2026, 12, 31),
        }
