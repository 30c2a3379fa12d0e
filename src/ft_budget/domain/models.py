"""Domain models for ft_budget — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass
class Budget:
    id: str
    user_id: str
    category: str
    amount_cents: int
    start_date: date
    end_date: date           # inclusive
    created_at: datetime
    updated_at: datetime
