"""BudgetRepository — concrete implementation of BudgetRepositoryProtocol.

Raw text() SQL, every statement scoped by user_id.
"""

from datetime import date

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.ft_budget.domain.models import Budget

_COLUMNS = "id, user_id, category, amount_cents, start_date, end_date, created_at, updated_at"

_LIST_BY_USER_SQL = text(f"""
    SELECT {_COLUMNS}
    FROM budgets
    WHERE user_id = CAST(:user_id AS UUID)
    ORDER BY start_date DESC, created_at DESC
""")

_INSERT_SQL = text(f"""
    INSERT INTO budgets (user_id, category, amount_cents, start_date, end_date)
    VALUES (CAST(:user_id AS UUID), :category, :amount_cents, :start_date, :end_date)
    RETURNING {_COLUMNS}
""")

_UPDATE_SQL = text(f"""
    UPDATE budgets SET
        category     = COALESCE(CAST(:category AS TEXT), category),
        amount_cents = COALESCE(CAST(:amount_cents AS BIGINT), amount_cents),
        start_date   = COALESCE(CAST(:start_date AS DATE), start_date),
        end_date     = COALESCE(CAST(:end_date AS DATE), end_date)
    WHERE id = CAST(:budget_id AS UUID)
      AND user_id = CAST(:user_id AS UUID)
    RETURNING {_COLUMNS}
""")

_DELETE_SQL = text("""
    DELETE FROM budgets
    WHERE id = CAST(:budget_id AS UUID)
      AND user_id = CAST(:user_id AS UUID)
    RETURNING id
""")

# A budget counts when its [start_date, end_date] range overlaps [active_from, active_to]
_SUM_OVERLAPPING_SQL = text("""
    SELECT COALESCE(SUM(amount_cents), 0) AS total
    FROM budgets
    WHERE user_id = CAST(:user_id AS UUID)
      AND start_date <= :active_to
      AND end_date >= :active_from
""")


def _row_to_budget(row: object) -> Budget:
    return Budget(
        id=str(row.id),  # type: ignore[attr-defined]
        user_id=str(row.user_id),  # type: ignore[attr-defined]
        category=row.category,  # type: ignore[attr-defined]
        amount_cents=row.amount_cents,  # type: ignore[attr-defined]
        start_date=row.start_date,  # type: ignore[attr-defined]
        end_date=row.end_date,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
        updated_at=row.updated_at,  # type: ignore[attr-defined]
    )


class BudgetRepository:
    async def list_by_user(self, db: AsyncSession, user_id: str) -> list[Budget]:
        result = await db.execute(_LIST_BY_USER_SQL, {"user_id": user_id})
        return [_row_to_budget(row) for row in result.fetchall()]

    async def create(
        self,
        db: AsyncSession,
        user_id: str,
        category: str,
        amount_cents: int,
        start_date: date,
        end_date: date,
    ) -> Budget:
        result = await db.execute(
            _INSERT_SQL,
            {
                "user_id": user_id,
                "category": category,
                "amount_cents": amount_cents,
                "start_date": start_date,
                "end_date": end_date,
            },
        )
        return _row_to_budget(result.fetchone())

    async def update(
        self,
        db: AsyncSession,
        user_id: str,
        budget_id: str,
        category: str | None,
        amount_cents: int | None,
        start_date: date | None,
        end_date: date | None,
    ) -> Budget | None:
        result = await db.execute(
            _UPDATE_SQL,
            {
                "user_id": user_id,
                "budget_id": budget_id,
                "category": category,
                "amount_cents": amount_cents,
                "start_date": start_date,
                "end_date": end_date,
            },
        )
        row = result.fetchone()
        return _row_to_budget(row) if row is not None else None

    async def delete(self, db: AsyncSession, user_id: str, budget_id: str) -> bool:
        result = await db.execute(_DELETE_SQL, {"user_id": user_id, "budget_id": budget_id})
        return result.fetchone() is not None

    async def sum_amount_overlapping(
        self, db: AsyncSession, user_id: str, active_from: date, active_to: date
    ) -> int:
        result = await db.execute(
            _SUM_OVERLAPPING_SQL,
            {"user_id": user_id, "active_from": active_from, "active_to": active_to},
        )
        return int(result.scalar_one())
