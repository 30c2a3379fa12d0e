"""ExpenseRepository — concrete implementation of ExpenseRepositoryProtocol.

All queries use raw text() SQL (no ORM) and are scoped by user_id, so a
caller can never read, change or delete another user's expense.
asyncpg NULL parameter pattern: CAST(:param AS TYPE) is required wherever a
parameter may be None.
"""

from datetime import datetime

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.ft_expense.domain.models import Expense

# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

_COLUMNS = "id, user_id, description, amount_cents, spent_at, created_at, updated_at"

_LIST_BY_USER_SQL = text(f"""
    SELECT {_COLUMNS}
    FROM expenses
    WHERE user_id = CAST(:user_id AS UUID)
    ORDER BY spent_at DESC, created_at DESC
""")

_INSERT_SQL = text(f"""
    INSERT INTO expenses (user_id, description, amount_cents, spent_at)
    VALUES (
        CAST(:user_id AS UUID),
        :description,
        :amount_cents,
        COALESCE(CAST(:spent_at AS TIMESTAMPTZ), NOW())
    )
    RETURNING {_COLUMNS}
""")

_UPDATE_SQL = text(f"""
    UPDATE expenses SET
        description  = COALESCE(CAST(:description AS TEXT), description),
        amount_cents = COALESCE(CAST(:amount_cents AS BIGINT), amount_cents),
        spent_at     = COALESCE(CAST(:spent_at AS TIMESTAMPTZ), spent_at)
    WHERE id = CAST(:expense_id AS UUID)
      AND user_id = CAST(:user_id AS UUID)
    RETURNING {_COLUMNS}
""")

_DELETE_SQL = text("""
    DELETE FROM expenses
    WHERE id = CAST(:expense_id AS UUID)
      AND user_id = CAST(:user_id AS UUID)
    RETURNING id
""")

_SUM_BETWEEN_SQL = text("""
    SELECT COALESCE(SUM(amount_cents), 0) AS total
    FROM expenses
    WHERE user_id = CAST(:user_id AS UUID)
      AND spent_at >= :start
      AND spent_at < :end
""")


def _row_to_expense(row: object) -> Expense:
    return Expense(
        id=str(row.id),  # type: ignore[attr-defined]
        user_id=str(row.user_id),  # type: ignore[attr-defined]
        description=row.description,  # type: ignore[attr-defined]
        amount_cents=row.amount_cents,  # type: ignore[attr-defined]
        spent_at=row.spent_at,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
        updated_at=row.updated_at,  # type: ignore[attr-defined]
    )


class ExpenseRepository:
    """Concrete repository. Writes are not committed here; the caller owns the transaction."""

    async def list_by_user(self, db: AsyncSession, user_id: str) -> list[Expense]:
        result = await db.execute(_LIST_BY_USER_SQL, {"user_id": user_id})
        return [_row_to_expense(row) for row in result.fetchall()]

    async def create(
        self,
        db: AsyncSession,
        user_id: str,
        description: str,
        amount_cents: int,
        spent_at: datetime | None,
    ) -> Expense:
        result = await db.execute(
            _INSERT_SQL,
            {
                "user_id": user_id,
                "description": description,
                "amount_cents": amount_cents,
                "spent_at": spent_at,
            },
        )
        return _row_to_expense(result.fetchone())

    async def update(
        self,
        db: AsyncSession,
        user_id: str,
        expense_id: str,
        description: str | None,
        amount_cents: int | None,
        spent_at: datetime | None,
    ) -> Expense | None:
        result = await db.execute(
            _UPDATE_SQL,
            {
                "user_id": user_id,
                "expense_id": expense_id,
                "description": description,
                "amount_cents": amount_cents,
                "spent_at": spent_at,
            },
        )
        row = result.fetchone()
        return _row_to_expense(row) if row is not None else None

    async def delete(self, db: AsyncSession, user_id: str, expense_id: str) -> bool:
        result = await db.execute(
            _DELETE_SQL, {"user_id": user_id, "expense_id": expense_id}
        )
        return result.fetchone() is not None

    async def sum_amount_between(
        self, db: AsyncSession, user_id: str, start: datetime, end: datetime
    ) -> int:
        """Sum of amount_cents with start <= spent_at < end. 0 when no rows match."""
        result = await db.execute(
            _SUM_BETWEEN_SQL, {"user_id": user_id, "start": start, "end": end}
        )
        return int(result.scalar_one())
