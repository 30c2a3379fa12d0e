"""Domain models for ft_expense — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Expense:
    id: str
    user_id: str
    description: str
    amount_cents: int        # may be negative (refunds)
    spent_at: datetime
    created_at: datetime
    updated_at: datetime
