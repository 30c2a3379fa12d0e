"""Report windows for the current month / year (UTC).

Expenses are matched by a half-open timestamp range [expense_from, expense_to).
Budgets are matched by overlap of their inclusive [start_date, end_date]
with the inclusive [budget_from, budget_to] date range:
  - monthly: budgets active today          (budget_from = budget_to = today)
  - yearly:  budgets touching the year     (Jan 1 .. Dec 31)
"""

from dataclasses import dataclass
from datetime import date, datetime

from src.ft_common.datetime_utils import utc_midnight


@dataclass(frozen=True)
class ReportWindow:
    expense_from: datetime
    expense_to: datetime
    budget_from: date
    budget_to: date


def monthly_window(now: datetime) -> ReportWindow:
    today = now.date()
    month_start = today.replace(day=1)
    if month_start.month == 12:
        next_month_start = month_start.replace(year=month_start.year + 1, month=1)
    else:
        next_month_start = month_start.replace(month=month_start.month + 1)
    return ReportWindow(
        expense_from=utc_midnight(month_start),
        expense_to=utc_midnight(next_month_start),
        budget_from=today,
        budget_to=today,
    )


def yearly_window(now: datetime) -> ReportWindow:
    year = now.year
    return ReportWindow(
        expense_from=utc_midnight(date(year, 1, 1)),
        expense_to=utc_midnight(date(year + 1, 1, 1)),
        budget_from=date(year, 1, 1),
        budget_to=date(year, 12, 31),
    )
