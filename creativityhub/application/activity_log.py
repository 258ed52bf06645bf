"""
Activity log service: records project activity and enforces retention.
"""
import logging
import uuid
from datetime import date, datetime, time

from creativityhub.application.activity_analytics import subtract_months
from creativityhub.config import Settings, get_settings
from creativityhub.domain.activity_log import ActivityActionType, ActivityEntityType, ActivityLog
from creativityhub.domain.user_settings import UserSettingKey
from creativityhub.infrastructure.repositories.activity_logs import ActivityLogRepository
from creativityhub.infrastructure.repositories.user_settings import UserSettingsRepository

logger = logging.getLogger(__name__)


class ActivityLogService:
    def __init__(
        self,
        activity_logs: ActivityLogRepository,
        user_settings: UserSettingsRepository,
        settings: Settings | None = None,
    ):
        self.activity_logs = activity_logs
        self.user_settings = user_settings
        self.settings = settings or get_settings()

    def log(
        self,
        project_id: uuid.UUID,
        entity_type: ActivityEntityType,
        action_type: ActivityActionType,
        created_at: datetime | None = None,
    ) -> bool:
        entry = ActivityLog(
            project_id=project_id,
            entity_type=entity_type,
            action_type=action_type,
            created_at=created_at or datetime.now(),
        )
        return self.activity_logs.insert(entry)

    def cleanup_older_than(
        self,
        months: int | None = None,
        reference_date: date | datetime | None = None,
    ) -> int:
        """
        Delete entries older than ``months`` before the reference date and
        remember when the cleanup ran and how much it removed.
        """
        if months is None:
            months = self.settings.ACTIVITY_LOG_RETENTION_MONTHS
        now = reference_date or datetime.now()
        today = now.date() if isinstance(now, datetime) else now
        cutoff = datetime.combine(subtract_months(today, months), time.min)

        removed = self.activity_logs.delete_older_than(cutoff)

        run_at = now if isinstance(now, datetime) else datetime.combine(now, time.min)
        self.user_settings.upsert_value(UserSettingKey.ACTIVITY_LOG_CLEANUP_LAST_RUN_AT, run_at.isoformat())
        self.user_settings.upsert_value(UserSettingKey.ACTIVITY_LOG_CLEANUP_LAST_REMOVED_COUNT, str(removed))
        logger.info("Activity log cleanup removed %d entries older than %s", removed, cutoff.date())
        return removed
