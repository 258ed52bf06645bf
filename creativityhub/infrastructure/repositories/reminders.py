"""
Reminder repository
"""
import logging
import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select, update

from creativityhub.domain.reminder import Reminder
from creativityhub.infrastructure.db.models import ReminderModel
from creativityhub.infrastructure.repositories.base import ProjectScopedRepository

logger = logging.getLogger(__name__)


class ReminderRepository(ProjectScopedRepository[Reminder]):
    model = ReminderModel
    entity_cls = Reminder
    label = "reminder"
    search_columns = ("title", "notes")

    def order_by(self) -> list:
        # Open reminders first, then by due date with undated ones last
        return [
            ReminderModel.is_completed.asc(),
            ReminderModel.due_date.is_(None).asc(),
            ReminderModel.due_date.asc(),
            ReminderModel.created_at.asc(),
            ReminderModel.id.asc(),
        ]

    def toggle_completed(self, reminder_id: uuid.UUID) -> bool:
        reminder = self.fetch_by_id(reminder_id)
        if reminder is None:
            logger.warning("Cannot toggle reminder %s: not found", reminder_id)
            return False
        stmt = (
            update(ReminderModel)
            .where(ReminderModel.id == reminder_id)
            .values(is_completed=not reminder.is_completed, updated_at=datetime.now())
        )
        return bool(self._write(stmt, f"toggle reminder {reminder_id}"))

    def fetch_upcoming(self, limit: int = 5, now: Optional[datetime] = None) -> List[Reminder]:
        """Open reminders due from ``now`` on, soonest first."""
        now = now or datetime.now()
        stmt = (
            select(ReminderModel)
            .where(
                ReminderModel.is_completed.is_(False),
                ReminderModel.due_date.is_not(None),
                ReminderModel.due_date >= now,
            )
            .order_by(ReminderModel.due_date.asc(), ReminderModel.id.asc())
            .limit(limit)
        )
        return self._fetch_list(stmt, "upcoming reminders")

    def fetch_overdue(self, now: Optional[datetime] = None) -> List[Reminder]:
        now = now or datetime.now()
        stmt = (
            select(ReminderModel)
            .where(
                ReminderModel.is_completed.is_(False),
                ReminderModel.due_date.is_not(None),
                ReminderModel.due_date < now,
            )
            .order_by(ReminderModel.due_date.asc(), ReminderModel.id.asc())
        )
        return self._fetch_list(stmt, "overdue reminders")
