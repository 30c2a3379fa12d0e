"""ExpenseApplicationService — thin composition layer.

list_expenses reads through the result cache under expenses:{user_id}.
Mutations commit/rollback themselves and do NOT touch the cache: a listing
may lag a create/update/delete by up to one cache TTL.
"""

from datetime import datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.ft_common.cache import ReadThroughCache, expenses_key
from src.ft_common.errors import ExpenseNotFoundError
from src.ft_expense.application.schemas import ExpenseItem, ExpenseListResponse
from src.ft_expense.domain.repository import ExpenseRepositoryProtocol
from src.ft_expense.infrastructure.persistence import ExpenseRepository


class ExpenseApplicationService:
    def __init__(self, repo: ExpenseRepositoryProtocol | None = None) -> None:
        self._repo: ExpenseRepositoryProtocol = repo or ExpenseRepository()

    async def list_expenses(
        self, db: AsyncSession, cache: ReadThroughCache, user_id: str
    ) -> ExpenseListResponse:
        async def fetch() -> list[dict[str, Any]]:
            expenses = await self._repo.list_by_user(db, user_id)
            return [ExpenseItem.from_domain(e).model_dump() for e in expenses]

        rows = await cache.get_or_compute(expenses_key(user_id), fetch)
        return ExpenseListResponse(items=[ExpenseItem.model_validate(r) for r in rows])

    async def create_expense(
        self,
        db: AsyncSession,
        user_id: str,
        description: str,
        amount_cents: int,
        spent_at: datetime | None,
    ) -> ExpenseItem:
        try:
            expense = await self._repo.create(db, user_id, description, amount_cents, spent_at)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        return ExpenseItem.from_domain(expense)

    async def update_expense(
        self,
        db: AsyncSession,
        user_id: str,
        expense_id: str,
        description: str | None,
        amount_cents: int | None,
        spent_at: datetime | None,
    ) -> ExpenseItem:
        try:
            expense = await self._repo.update(
                db, user_id, expense_id, description, amount_cents, spent_at
            )
            if expense is None:
                raise ExpenseNotFoundError(expense_id)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        return ExpenseItem.from_domain(expense)

    async def delete_expense(self, db: AsyncSession, user_id: str, expense_id: str) -> None:
        try:
            deleted = await self._repo.delete(db, user_id, expense_id)
            if not deleted:
                raise ExpenseNotFoundError(expense_id)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
