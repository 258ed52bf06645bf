"""create activity_logs table

Revision: 6
Revises: 5
Create Date: 2026-02-21
"""
from alembic import op
import sqlalchemy as sa

revision = 6
down_revision = 5


def upgrade() -> None:
    op.create_table(
        "activity_logs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("project_id", sa.Uuid(), nullable=False),
        sa.Column("entity_type", sa.String(32), nullable=False),
        sa.Column("action_type", sa.String(32), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        if_not_exists=True,
    )
    op.create_index("ix_activity_logs_project_id", "activity_logs", ["project_id"], if_not_exists=True)
    op.create_index("ix_activity_logs_created_at", "activity_logs", ["created_at"], if_not_exists=True)
