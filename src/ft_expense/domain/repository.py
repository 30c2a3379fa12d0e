"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from datetime import datetime
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.ft_expense.domain.models import Expense


class ExpenseRepositoryProtocol(Protocol):
    async def list_by_user(self, db: AsyncSession, user_id: str) -> list[Expense]: ...

    async def create(
        self,
        db: AsyncSession,
        user_id: str,
        description: str,
        amount_cents: int,
        spent_at: datetime | None,
    ) -> Expense: ...

    async def update(
        self,
        db: AsyncSession,
        user_id: str,
        expense_id: str,
        description: str | None,
        amount_cents: int | None,
        spent_at: datetime | None,
    ) -> Expense | None: ...

    async def delete(self, db: AsyncSession, user_id: str, expense_id: str) -> bool: ...

    async def sum_amount_between(
        self, db: AsyncSession, user_id: str, start: datetime, end: datetime
    ) -> int: ...
