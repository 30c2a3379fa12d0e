"""ReportApplicationService — monthly / yearly totals through the result cache.

Cache keys are reports:{user_id}:monthly and reports:{user_id}:yearly. The
key does not carry the month or year, so a summary computed just before a
boundary is served into the next period until the entry expires.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.ft_budget.domain.repository import BudgetRepositoryProtocol
from src.ft_budget.infrastructure.persistence import BudgetRepository
from src.ft_common.cache import ReadThroughCache, ReportPeriod, report_key
from src.ft_common.datetime_utils import utc_now
from src.ft_expense.domain.repository import ExpenseRepositoryProtocol
from src.ft_expense.infrastructure.persistence import ExpenseRepository
from src.ft_report.application.schemas import ReportSummary
from src.ft_report.domain.periods import ReportWindow, monthly_window, yearly_window

_WINDOWS: dict[ReportPeriod, Callable[[datetime], ReportWindow]] = {
    "monthly": monthly_window,
    "yearly": yearly_window,
}


class ReportApplicationService:
    def __init__(
        self,
        expense_repo: ExpenseRepositoryProtocol | None = None,
        budget_repo: BudgetRepositoryProtocol | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._expenses: ExpenseRepositoryProtocol = expense_repo or ExpenseRepository()
        self._budgets: BudgetRepositoryProtocol = budget_repo or BudgetRepository()
        self._clock = clock

    async def summary(
        self,
        db: AsyncSession,
        cache: ReadThroughCache,
        user_id: str,
        period: ReportPeriod,
    ) -> ReportSummary:
        window = _WINDOWS[period](self._clock())

        async def compute() -> dict[str, Any]:
            expenses = await self._expenses.sum_amount_between(
                db, user_id, window.expense_from, window.expense_to
            )
            budgets = await self._budgets.sum_amount_overlapping(
                db, user_id, window.budget_from, window.budget_to
            )
            return ReportSummary.from_totals(expenses, budgets).model_dump()

        data = await cache.get_or_compute(report_key(user_id, period), compute)
        return ReportSummary.model_validate(data)

    async def monthly(
        self, db: AsyncSession, cache: ReadThroughCache, user_id: str
    ) -> ReportSummary:
        return await self.summary(db, cache, user_id, "monthly")

    async def yearly(
        self, db: AsyncSession, cache: ReadThroughCache, user_id: str
    ) -> ReportSummary:
        return await self.summary(db, cache, user_id, "yearly")
