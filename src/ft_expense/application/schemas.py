"""Pydantic schemas for ft_expense API."""

from datetime import datetime

from pydantic import BaseModel, Field

from src.ft_common.cents import cents_to_display
from src.ft_expense.domain.models import Expense

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class CreateExpenseRequest(BaseModel):
    description: str = Field(..., min_length=1, max_length=500)
    amount_cents: int = Field(..., description="Amount in cents; negative for refunds")
    spent_at: datetime | None = Field(None, description="Defaults to now")


class UpdateExpenseRequest(BaseModel):
    """Partial update: omitted fields keep their stored value."""

    description: str | None = Field(None, min_length=1, max_length=500)
    amount_cents: int | None = None
    spent_at: datetime | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class ExpenseItem(BaseModel):
    id: str
    description: str
    amount_cents: int
    amount_display: str
    spent_at: str      # ISO8601
    created_at: str    # ISO8601
    updated_at: str    # ISO8601

    @classmethod
    def from_domain(cls, e: Expense) -> "ExpenseItem":
        return cls(
            id=e.id,
            description=e.description,
            amount_cents=e.amount_cents,
            amount_display=cents_to_display(e.amount_cents),
            spent_at=e.spent_at.isoformat(),
            created_at=e.created_at.isoformat(),
            updated_at=e.updated_at.isoformat(),
        )


class ExpenseListResponse(BaseModel):
    items: list[ExpenseItem]
