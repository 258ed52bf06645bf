"""
Migration runner.

Brings the schema from the version recorded in the ledger up to the latest
registered unit. Units run in order on the shared connection through
Alembic's ``op`` proxy and read the runner's settings from
``op.get_context().opts["settings"]``. After each successful unit exactly
one ledger row is appended and committed, so an interrupted run resumes at
the first unrecorded unit.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from alembic.operations import Operations
from alembic.runtime.migration import MigrationContext
from sqlalchemy.orm import Session

from creativityhub.config import Settings, get_settings
from creativityhub.infrastructure.repositories.migrations import MigrationLedgerRepository
from creativityhub.migrations.registry import MigrationRegistry, default_registry

logger = logging.getLogger(__name__)


class MigrationError(Exception):
    """Base for schema errors surfaced to startup code."""


class VersionSkewError(MigrationError):
    """The store was written by a newer build than this one."""

    def __init__(self, stored_version: int, latest_version: int):
        self.stored_version = stored_version
        self.latest_version = latest_version
        super().__init__(
            f"Schema version {stored_version} is newer than the latest known version {latest_version}"
        )


class MigrationUnitError(MigrationError):
    def __init__(self, revision: int, name: str, cause: BaseException):
        self.revision = revision
        self.name = name
        self.cause = cause
        super().__init__(f"Migration {revision} ({name}) failed: {cause}")


class MigrationStatus(str, Enum):
    UP_TO_DATE = "up_to_date"
    MIGRATED = "migrated"
    VERSION_SKEW = "version_skew"
    UNIT_FAILED = "unit_failed"


@dataclass
class MigrationResult:
    status: MigrationStatus
    from_version: int
    to_version: int
    failed_revision: Optional[int] = None
    error: Optional[MigrationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_status(self) -> None:
        if self.error is not None:
            raise self.error


class MigrationRunner:
    def __init__(
        self,
        db: Session,
        registry: MigrationRegistry | None = None,
        ledger: MigrationLedgerRepository | None = None,
        settings: Settings | None = None,
    ):
        self.db = db
        self.settings = settings or get_settings()
        self.registry = registry or default_registry()
        self.ledger = ledger or MigrationLedgerRepository(db)

    def current_version(self) -> int:
        return self.ledger.latest_version()

    def migrate_to_latest(self) -> MigrationResult:
        self.ledger.create_table_if_not_exists()
        current = self.ledger.latest_version()
        latest = self.registry.latest_version

        if current == latest:
            logger.info("Schema is up to date (version %d)", current)
            return MigrationResult(MigrationStatus.UP_TO_DATE, current, current)

        if current > latest:
            error = VersionSkewError(current, latest)
            logger.warning("%s; leaving schema untouched", error)
            return MigrationResult(MigrationStatus.VERSION_SKEW, current, current, error=error)

        version = current
        for unit in self.registry.units_after(current):
            try:
                self._apply(unit.upgrade)
            except Exception as exc:
                self.db.rollback()
                error = MigrationUnitError(unit.revision, unit.name, exc)
                logger.exception("Migration %d (%s) failed", unit.revision, unit.name)
                return MigrationResult(
                    MigrationStatus.UNIT_FAILED,
                    current,
                    version,
                    failed_revision=unit.revision,
                    error=error,
                )

            if not self.ledger.add_version(unit.revision):
                error = MigrationUnitError(
                    unit.revision, unit.name, RuntimeError("could not record the unit in the ledger")
                )
                return MigrationResult(
                    MigrationStatus.UNIT_FAILED,
                    current,
                    version,
                    failed_revision=unit.revision,
                    error=error,
                )
            version = unit.revision
            logger.info("Applied migration %d: %s", unit.revision, unit.name)

        logger.info("Schema migrated from version %d to %d", current, version)
        return MigrationResult(MigrationStatus.MIGRATED, current, version)

    def _apply(self, upgrade) -> None:
        ctx = MigrationContext.configure(
            connection=self.db.connection(),
            opts={"settings": self.settings},
        )
        with Operations.context(ctx):
            upgrade()
        self.db.commit()
