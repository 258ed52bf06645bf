"""
DatabaseManager - application-lifetime owner of the store.

Holds the single engine/session pair and hands the same session to every
repository. Call ``bootstrap()`` once at startup before using repositories.
"""
import logging
import uuid
from functools import lru_cache
from pathlib import Path

from sqlalchemy.orm import Session

from creativityhub.application.activity_analytics import ActivityAnalyticsService
from creativityhub.application.activity_log import ActivityLogService
from creativityhub.application.project_cleanup import CascadeReport, ProjectCleanupService
from creativityhub.config import Settings, get_settings
from creativityhub.infrastructure import container
from creativityhub.infrastructure.db.migrator import MigrationResult, MigrationRunner
from creativityhub.infrastructure.db.session import (
    create_db_engine,
    create_session_factory,
    resolve_database_url,
)
from creativityhub.infrastructure.repositories.activity_logs import ActivityLogRepository
from creativityhub.infrastructure.repositories.checklists import (
    ChecklistItemRepository,
    ChecklistRepository,
)
from creativityhub.infrastructure.repositories.documents import DocumentRepository
from creativityhub.infrastructure.repositories.expenses import (
    ExpenseCategoryRepository,
    ExpenseRepository,
)
from creativityhub.infrastructure.repositories.ideas import IdeaRepository
from creativityhub.infrastructure.repositories.migrations import MigrationLedgerRepository
from creativityhub.infrastructure.repositories.notes import NoteRepository
from creativityhub.infrastructure.repositories.projects import ProjectRepository
from creativityhub.infrastructure.repositories.reminders import ReminderRepository
from creativityhub.infrastructure.repositories.tags import TagRepository
from creativityhub.infrastructure.repositories.user_settings import UserSettingsRepository
from creativityhub.infrastructure.repositories.work_logs import WorkLogRepository
from creativityhub.migrations.registry import MigrationRegistry

logger = logging.getLogger(__name__)


class DatabaseManager:
    def __init__(
        self,
        url: str | None = None,
        settings: Settings | None = None,
        registry: MigrationRegistry | None = None,
    ):
        self.settings = settings or get_settings()
        self.url = url or resolve_database_url(self.settings)
        self.engine = create_db_engine(self.url, echo=self.settings.DEBUG)
        self.db: Session = create_session_factory(self.engine)()

        min_len = self.settings.SEARCH_MIN_QUERY_LENGTH
        self.migrations = MigrationLedgerRepository(self.db)
        self.user_settings = UserSettingsRepository(self.db)
        self.projects = ProjectRepository(self.db, min_len)
        self.checklists = ChecklistRepository(self.db, min_len)
        self.checklist_items = ChecklistItemRepository(self.db, min_len)
        self.ideas = IdeaRepository(self.db, min_len)
        self.tags = TagRepository(self.db, min_len)
        self.expense_categories = ExpenseCategoryRepository(self.db, min_len)
        self.expenses = ExpenseRepository(self.db, min_len)
        self.notes = NoteRepository(self.db, min_len)
        self.documents = DocumentRepository(self.db, min_len)
        self.reminders = ReminderRepository(self.db, min_len)
        self.work_logs = WorkLogRepository(self.db, min_len)
        self.activity_logs = ActivityLogRepository(self.db, min_len)

        self.migrator = MigrationRunner(self.db, registry, self.migrations, self.settings)
        self.cleanup = ProjectCleanupService(self)
        self.activity = ActivityLogService(self.activity_logs, self.user_settings, self.settings)
        self.analytics = ActivityAnalyticsService(self.activity_logs)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def bootstrap(self) -> MigrationResult:
        """Bring the schema to the latest version; the result is never raised."""
        result = self.migrator.migrate_to_latest()
        if not result.ok:
            logger.error("Database bootstrap finished with %s: %s", result.status.value, result.error)
        return result

    def current_schema_version(self) -> int:
        return self.migrator.current_version()

    def documents_dir(self) -> Path:
        """Directory for imported document files, next to the database."""
        return container.documents_dir(self.settings)

    def close(self) -> None:
        self.db.close()
        self.engine.dispose()

    # ------------------------------------------------------------------
    # Cross-table operations
    # ------------------------------------------------------------------

    def delete_project_cascade(self, project_id: uuid.UUID) -> bool:
        return self.cleanup.delete_project_cascade(project_id)

    def delete_project_cascade_report(self, project_id: uuid.UUID) -> CascadeReport:
        return self.cleanup.delete_project_cascade_report(project_id)

    def delete_all_data(self) -> bool:
        return self.cleanup.delete_all_data()


@lru_cache
def get_database_manager() -> DatabaseManager:
    """Process-wide manager for the application; bootstraps on first use."""
    manager = DatabaseManager()
    manager.bootstrap()
    return manager
