"""
Activity log repository.

Rows whose entity or action type is unknown to this build are skipped on
read; they still count toward per-day totals.
"""
import logging
import uuid
from datetime import date, datetime, time
from typing import Dict, Optional

from sqlalchemy import delete, func, select

from creativityhub.domain.activity_log import ActivityLog
from creativityhub.infrastructure.db.models import ActivityLogModel
from creativityhub.infrastructure.repositories.base import STORAGE_ERRORS, ProjectScopedRepository

logger = logging.getLogger(__name__)


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


class ActivityLogRepository(ProjectScopedRepository[ActivityLog]):
    model = ActivityLogModel
    entity_cls = ActivityLog
    label = "activity log"
    search_columns = ("entity_type", "action_type")

    def order_by(self) -> list:
        return [ActivityLogModel.created_at.asc(), ActivityLogModel.id.asc()]

    def _to_entity(self, row) -> Optional[ActivityLog]:
        if row.entity_type is None or row.action_type is None:
            return None
        return super()._to_entity(row)

    def fetch_daily_counts_by_project_id(
        self,
        project_id: uuid.UUID,
        since: date | datetime,
        until: date | datetime,
    ) -> Dict[date, int]:
        """
        Number of entries per calendar day in ``[since, until)``.

        Days without entries are absent from the result.
        """
        day = func.date(ActivityLogModel.created_at)
        stmt = (
            select(day.label("day"), func.count().label("total"))
            .where(
                ActivityLogModel.project_id == project_id,
                ActivityLogModel.created_at >= _as_datetime(since),
                ActivityLogModel.created_at < _as_datetime(until),
            )
            .group_by(day)
        )
        counts: Dict[date, int] = {}
        try:
            for row in self.db.execute(stmt).all():
                # Unparsable timestamps have no day
                if row.day is None:
                    continue
                key = row.day if isinstance(row.day, date) else date.fromisoformat(row.day)
                counts[key] = counts.get(key, 0) + row.total
        except STORAGE_ERRORS:
            self.db.rollback()
            logger.exception("Failed to fetch daily activity counts for project %s", project_id)
            return {}
        return counts

    def delete_older_than(self, cutoff: date | datetime) -> int:
        """Remove entries created before ``cutoff``; returns the number removed."""
        stmt = delete(ActivityLogModel).where(ActivityLogModel.created_at < _as_datetime(cutoff))
        count = self._write(stmt, f"delete activity logs older than {cutoff}")
        if count is None:
            return 0
        logger.info("Deleted %d activity log(s) older than %s", count, cutoff)
        return count
