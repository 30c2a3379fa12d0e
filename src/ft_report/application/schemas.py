"""Pydantic schemas for ft_report API."""

from pydantic import BaseModel

from src.ft_common.cents import cents_to_display


class ReportSummary(BaseModel):
    total_expenses_cents: int
    total_expenses_display: str
    total_budgets_cents: int
    total_budgets_display: str

    @classmethod
    def from_totals(cls, expenses: int, budgets: int) -> "ReportSummary":
        return cls(
            total_expenses_cents=expenses,
            total_expenses_display=cents_to_display(expenses),
            total_budgets_cents=budgets,
            total_budgets_display=cents_to_display(budgets),
        )
