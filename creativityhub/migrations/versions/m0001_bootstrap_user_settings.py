"""bootstrap: migrations ledger, user_settings, default currency

Revision: 1
Revises: -
Create Date: 2026-02-17
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from creativityhub.config import get_settings
from creativityhub.domain.currency import Currency
from creativityhub.domain.user_settings import UserSettingKey

revision = 1
down_revision = None


def upgrade() -> None:
    # The runner creates the ledger before reading the version; repeated here
    # so the unit is complete on its own.
    op.create_table(
        "migrations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        if_not_exists=True,
    )
    op.create_table(
        "user_settings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("key", sa.String(128), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("key", name="uq_user_settings_key"),
        if_not_exists=True,
    )

    settings = op.get_context().opts.get("settings") or get_settings()
    currency = Currency(settings.DEFAULT_CURRENCY)
    _seed_setting(UserSettingKey.CURRENCY.value, currency.value)


def _seed_setting(key: str, value: str) -> None:
    settings_table = sa.table(
        "user_settings",
        sa.column("key", sa.String),
        sa.column("value", sa.Text),
    )
    stmt = sqlite_insert(settings_table).values(key=key, value=value)
    stmt = stmt.on_conflict_do_update(
        index_elements=["key"],
        set_={"value": stmt.excluded["value"]},
    )
    bind = op.get_bind()
    bind.execute(stmt)

    stored = bind.execute(
        sa.select(settings_table.c.value).where(settings_table.c.key == key)
    ).scalar()
    if stored != value:
        raise RuntimeError(f"Failed to seed user setting '{key}'")
