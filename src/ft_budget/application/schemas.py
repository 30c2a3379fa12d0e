"""Pydantic schemas for ft_budget API."""

from datetime import date

from pydantic import BaseModel, Field, model_validator

from src.ft_budget.domain.models import Budget
from src.ft_common.cents import cents_to_display


class CreateBudgetRequest(BaseModel):
    category: str = Field(..., min_length=1, max_length=100)
    amount_cents: int
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_period(self) -> "CreateBudgetRequest":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class UpdateBudgetRequest(BaseModel):
    """Partial update. The period check only applies when both dates are sent;
    a single date that conflicts with the stored one is rejected by the
    budgets CHECK constraint and answered with InvalidBudgetPeriodError."""

    category: str | None = Field(None, min_length=1, max_length=100)
    amount_cents: int | None = None
    start_date: date | None = None
    end_date: date | None = None

    @model_validator(mode="after")
    def check_period(self) -> "UpdateBudgetRequest":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class BudgetItem(BaseModel):
    id: str
    category: str
    amount_cents: int
    amount_display: str
    start_date: str   # YYYY-MM-DD
    end_date: str     # YYYY-MM-DD
    created_at: str

    @classmethod
    def from_domain(cls, b: Budget) -> "BudgetItem":
        return cls(
            id=b.id,
            category=b.category,
            amount_cents=b.amount_cents,
            amount_display=cents_to_display(b.amount_cents),
            start_date=b.start_date.isoformat(),
            end_date=b.end_date.isoformat(),
            created_at=b.created_at.isoformat(),
        )


class BudgetListResponse(BaseModel):
    items: list[BudgetItem]
