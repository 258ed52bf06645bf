"""
Base Repository - the CRUD/query contract every entity repository implements.

Every public method swallows storage errors, including rows the database
returns but that cannot be read back (malformed ids or timestamps written
by another process): the failure is logged, the session is rolled back and the caller gets False / None / [] / 0. Feature
code checks the return value and treats False as "change not saved".
Each write commits on its own; nothing here spans several statements.
"""
import logging
import uuid
from dataclasses import fields
from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar

from sqlalchemy import String, delete, func, or_, select, type_coerce, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from creativityhub.config import get_settings

logger = logging.getLogger(__name__)

E = TypeVar("E")

_IMMUTABLE_FIELDS = ("id", "created_at")

# Result processors raise ValueError/TypeError on malformed stored ids,
# timestamps and numbers.
STORAGE_ERRORS = (SQLAlchemyError, ValueError, TypeError)


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class BaseRepository(Generic[E]):
    """
    Generic repository over one table.

    Subclasses set ``model``, ``entity_cls`` (a dataclass whose field names
    match the model's attributes), ``label`` for log lines and
    ``search_columns``; they override ``order_by`` for their natural order.
    """

    model: Any
    entity_cls: type
    label: str = "row"
    search_columns: tuple[str, ...] = ()

    def __init__(self, db: Session, search_min_length: Optional[int] = None):
        self.db = db
        if search_min_length is None:
            search_min_length = get_settings().SEARCH_MIN_QUERY_LENGTH
        self.search_min_length = search_min_length

    # ------------------------------------------------------------------
    # Ordering / mapping hooks
    # ------------------------------------------------------------------

    def order_by(self) -> list:
        return [self.model.created_at.asc(), self.model.id.asc()]

    def _to_entity(self, row) -> Optional[E]:
        return self.entity_cls(**{f.name: getattr(row, f.name) for f in fields(self.entity_cls)})

    def _to_values(self, entity: E) -> Dict[str, Any]:
        return {f.name: getattr(entity, f.name) for f in fields(self.entity_cls)}

    def _has_updated_at(self) -> bool:
        return hasattr(self.model, "updated_at")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _fetch_list(self, stmt, what: str) -> List[E]:
        result = self._try_fetch_list(stmt, what)
        return [] if result is None else result

    def _try_fetch_list(self, stmt, what: str) -> Optional[List[E]]:
        """Like ``_fetch_list`` but returns None on failure so callers can tell it from no rows."""
        try:
            rows = self.db.execute(stmt).scalars().all()
            return [e for e in (self._to_entity(r) for r in rows) if e is not None]
        except STORAGE_ERRORS:
            self.db.rollback()
            logger.exception("Failed to fetch %s", what)
            return None

    def _fetch_one(self, stmt, what: str) -> Optional[E]:
        try:
            row = self.db.execute(stmt).scalars().first()
            return self._to_entity(row) if row is not None else None
        except STORAGE_ERRORS:
            self.db.rollback()
            logger.exception("Failed to fetch %s", what)
            return None

    def _scalar(self, stmt, what: str, default=0):
        try:
            value = self.db.execute(stmt).scalar()
        except STORAGE_ERRORS:
            self.db.rollback()
            logger.exception("Failed to compute %s", what)
            return default
        return default if value is None else value

    def _write(self, stmt, what: str) -> Optional[int]:
        """Execute and commit one statement; returns rowcount or None on failure."""
        try:
            result = self.db.execute(stmt)
            self.db.commit()
        except STORAGE_ERRORS:
            self.db.rollback()
            logger.exception("Failed to %s", what)
            return None
        return result.rowcount

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    def insert(self, entity: E) -> bool:
        try:
            self.db.add(self.model(**self._to_values(entity)))
            self.db.commit()
        except STORAGE_ERRORS:
            self.db.rollback()
            logger.exception("Failed to insert %s %s", self.label, entity.id)
            return False
        logger.info("Inserted %s: %s", self.label, entity.id)
        return True

    def update(self, entity: E) -> bool:
        """Replace every mutable column of the row with ``entity``'s values."""
        values = {k: v for k, v in self._to_values(entity).items() if k not in _IMMUTABLE_FIELDS}
        if self._has_updated_at():
            values["updated_at"] = datetime.now()
        stmt = update(self.model).where(self.model.id == entity.id).values(**values)
        count = self._write(stmt, f"update {self.label} {entity.id}")
        if not count:
            if count == 0:
                logger.warning("Cannot update %s %s: not found", self.label, entity.id)
            return False
        logger.info("Updated %s: %s", self.label, entity.id)
        return True

    def delete(self, entity_id: uuid.UUID) -> bool:
        stmt = delete(self.model).where(self.model.id == entity_id)
        if self._write(stmt, f"delete {self.label} {entity_id}") is None:
            return False
        logger.info("Deleted %s: %s", self.label, entity_id)
        return True

    def delete_all(self) -> bool:
        count = self._write(delete(self.model), f"delete all {self.label} rows")
        if count is None:
            return False
        logger.info("Deleted all %s rows (%d)", self.label, count)
        return True

    def fetch_by_id(self, entity_id: uuid.UUID) -> Optional[E]:
        stmt = select(self.model).where(self.model.id == entity_id)
        return self._fetch_one(stmt, f"{self.label} by id {entity_id}")

    def fetch_all(self) -> List[E]:
        stmt = select(self.model).order_by(*self.order_by())
        return self._fetch_list(stmt, f"all {self.label} rows")

    def search(self, query: str) -> List[E]:
        """
        Case-insensitive substring match across ``search_columns``.

        Blank or too-short queries return nothing rather than the whole table.
        """
        term = (query or "").strip()
        if not term or len(term) < self.search_min_length or not self.search_columns:
            return []
        pattern = f"%{escape_like(term)}%"
        # Enum columns are matched on their stored text
        conditions = [
            type_coerce(getattr(self.model, column), String).ilike(pattern, escape="\\")
            for column in self.search_columns
        ]
        stmt = select(self.model).where(or_(*conditions)).order_by(*self.order_by())
        return self._fetch_list(stmt, f"{self.label} rows matching '{term}'")

    def count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        return self._scalar(stmt, f"{self.label} count")


class ProjectScopedRepository(BaseRepository[E]):
    """Repository for tables carrying a ``project_id`` column."""

    def fetch_by_project_id(self, project_id: uuid.UUID) -> List[E]:
        stmt = (
            select(self.model)
            .where(self.model.project_id == project_id)
            .order_by(*self.order_by())
        )
        return self._fetch_list(stmt, f"{self.label} rows for project {project_id}")

    def delete_by_project_id(self, project_id: uuid.UUID) -> bool:
        stmt = delete(self.model).where(self.model.project_id == project_id)
        count = self._write(stmt, f"delete {self.label} rows for project {project_id}")
        if count is None:
            return False
        logger.info("Deleted %d %s row(s) for project: %s", count, self.label, project_id)
        return True

    def count_by_project_id(self, project_id: uuid.UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(self.model)
            .where(self.model.project_id == project_id)
        )
        return self._scalar(stmt, f"{self.label} count for project {project_id}")

    def fetch_ids_by_project_id(self, project_id: uuid.UUID) -> Optional[List[uuid.UUID]]:
        """Ids of the project's rows, or None when they could not be read."""
        stmt = (
            select(self.model.id)
            .where(self.model.project_id == project_id)
            .order_by(*self.order_by())
        )
        try:
            return list(self.db.execute(stmt).scalars().all())
        except STORAGE_ERRORS:
            self.db.rollback()
            logger.exception("Failed to fetch %s ids for project %s", self.label, project_id)
            return None
