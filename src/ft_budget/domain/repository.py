"""Repository Protocol for budgets — injected as a mock in unit tests."""

from datetime import date
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.ft_budget.domain.models import Budget


class BudgetRepositoryProtocol(Protocol):
    async def list_by_user(self, db: AsyncSession, user_id: str) -> list[Budget]: ...

    async def create(
        self,
        db: AsyncSession,
        user_id: str,
        category: str,
        amount_cents: int,
        start_date: date,
        end_date: date,
    ) -> Budget: ...

    async def update(
        self,
        db: AsyncSession,
        user_id: str,
        budget_id: str,
        category: str | None,
        amount_cents: int | None,
        start_date: date | None,
        end_date: date | None,
    ) -> Budget | None: ...

    async def delete(self, db: AsyncSession, user_id: str, budget_id: str) -> bool: ...

    async def sum_amount_overlapping(
        self, db: AsyncSession, user_id: str, active_from: date, active_to: date
    ) -> int: ...
