"""create work_logs table

Revision: 5
Revises: 4
Create Date: 2026-02-20
"""
from alembic import op
import sqlalchemy as sa

revision = 5
down_revision = 4


def upgrade() -> None:
    op.create_table(
        "work_logs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("project_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("linked_checklist_item_id", sa.Uuid(), nullable=True),
        sa.Column("total_minutes", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        if_not_exists=True,
    )
    op.create_index("ix_work_logs_project_id", "work_logs", ["project_id"], if_not_exists=True)
