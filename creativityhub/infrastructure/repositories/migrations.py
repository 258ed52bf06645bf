"""
Schema-version ledger: one row per applied migration unit.

The highest ``id`` is the current schema version; 0 means empty store.
"""
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from creativityhub.infrastructure.db.models import MigrationModel

logger = logging.getLogger(__name__)


class MigrationLedgerRepository:
    def __init__(self, db: Session):
        self.db = db

    def create_table_if_not_exists(self) -> bool:
        try:
            MigrationModel.__table__.create(bind=self.db.connection(), checkfirst=True)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to create migrations table")
            return False
        return True

    def latest_version(self) -> int:
        """Highest recorded unit id, or 0 when nothing (or no table) exists."""
        try:
            value = self.db.execute(select(func.max(MigrationModel.id))).scalar()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to read latest migration version")
            return 0
        return value or 0

    def add_version(self, version: int, applied_at: Optional[datetime] = None) -> bool:
        try:
            self.db.add(MigrationModel(id=version, date=applied_at or datetime.now()))
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to record migration %s", version)
            return False
        return True
