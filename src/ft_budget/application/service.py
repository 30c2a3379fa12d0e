"""BudgetApplicationService — thin composition layer over BudgetRepository.

Budget listing is read straight from the database (not cached).
"""

from datetime import date

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.ft_budget.application.schemas import BudgetItem, BudgetListResponse
from src.ft_budget.domain.repository import BudgetRepositoryProtocol
from src.ft_budget.infrastructure.persistence import BudgetRepository
from src.ft_common.errors import BudgetNotFoundError, InvalidBudgetPeriodError


class BudgetApplicationService:
    def __init__(self, repo: BudgetRepositoryProtocol | None = None) -> None:
        self._repo: BudgetRepositoryProtocol = repo or BudgetRepository()

    async def list_budgets(self, db: AsyncSession, user_id: str) -> BudgetListResponse:
        budgets = await self._repo.list_by_user(db, user_id)
        return BudgetListResponse(items=[BudgetItem.from_domain(b) for b in budgets])

    async def create_budget(
        self,
        db: AsyncSession,
        user_id: str,
        category: str,
        amount_cents: int,
        start_date: date,
        end_date: date,
    ) -> BudgetItem:
        try:
            budget = await self._repo.create(
                db, user_id, category, amount_cents, start_date, end_date
            )
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            raise InvalidBudgetPeriodError() from exc
        except Exception:
            await db.rollback()
            raise
        return BudgetItem.from_domain(budget)

    async def update_budget(
        self,
        db: AsyncSession,
        user_id: str,
        budget_id: str,
        category: str | None,
        amount_cents: int | None,
        start_date: date | None,
        end_date: date | None,
    ) -> BudgetItem:
        try:
            budget = await self._repo.update(
                db, user_id, budget_id, category, amount_cents, start_date, end_date
            )
            if budget is None:
                raise BudgetNotFoundError(budget_id)
            await db.commit()
        except IntegrityError as exc:
            # ck_budgets_period: one date sent, the other kept from the stored row
            await db.rollback()
            raise InvalidBudgetPeriodError() from exc
        except Exception:
            await db.rollback()
            raise
        return BudgetItem.from_domain(budget)

    async def delete_budget(self, db: AsyncSession, user_id: str, budget_id: str) -> None:
        try:
            if not await self._repo.delete(db, user_id, budget_id):
                raise BudgetNotFoundError(budget_id)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
