"""003: create budgets table

Revision ID: 003
Revises: 002
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE budgets (
            id              UUID        PRIMARY KEY DEFAULT gen_random_uuid(),
            user_id         UUID        NOT NULL REFERENCES users (id) ON DELETE CASCADE,
            category        TEXT        NOT NULL,
            amount_cents    BIGINT      NOT NULL,
            start_date      DATE        NOT NULL,
            end_date        DATE        NOT NULL,
            created_at      TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at      TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_budgets_category_not_empty CHECK (LENGTH(category) > 0),
            CONSTRAINT ck_budgets_period CHECK (end_date >= start_date)
        );
    """)
    op.execute("CREATE INDEX idx_budgets_user_period ON budgets (user_id, start_date, end_date);")
    op.execute("""
        CREATE TRIGGER trg_budgets_updated_at
            BEFORE UPDATE ON budgets
            FOR EACH ROW EXECUTE FUNCTION fn_touch_updated_at();
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS budgets CASCADE;")
