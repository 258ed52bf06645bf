"""
Checklist and checklist item repositories.

Items hang off a checklist, not a project; the cascade removes them per
checklist before the checklist row itself.
"""
import logging
import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, func, select, update

from creativityhub.domain.checklist import Checklist, ChecklistItem
from creativityhub.infrastructure.db.models import ChecklistItemModel, ChecklistModel
from creativityhub.infrastructure.repositories.base import BaseRepository, ProjectScopedRepository

logger = logging.getLogger(__name__)


class ChecklistRepository(ProjectScopedRepository[Checklist]):
    model = ChecklistModel
    entity_cls = Checklist
    label = "checklist"
    search_columns = ("name",)

    def order_by(self) -> list:
        return [ChecklistModel.sort_order.asc(), ChecklistModel.created_at.asc(), ChecklistModel.id.asc()]


class ChecklistItemRepository(BaseRepository[ChecklistItem]):
    model = ChecklistItemModel
    entity_cls = ChecklistItem
    label = "checklist item"
    search_columns = ("name", "notes")

    def order_by(self) -> list:
        return [
            ChecklistItemModel.sort_order.asc(),
            ChecklistItemModel.created_at.asc(),
            ChecklistItemModel.id.asc(),
        ]

    def fetch_by_checklist_id(self, checklist_id: uuid.UUID) -> List[ChecklistItem]:
        stmt = (
            select(ChecklistItemModel)
            .where(ChecklistItemModel.checklist_id == checklist_id)
            .order_by(*self.order_by())
        )
        return self._fetch_list(stmt, f"items of checklist {checklist_id}")

    def delete_by_checklist_id(self, checklist_id: uuid.UUID) -> bool:
        stmt = delete(ChecklistItemModel).where(ChecklistItemModel.checklist_id == checklist_id)
        count = self._write(stmt, f"delete items of checklist {checklist_id}")
        if count is None:
            return False
        logger.info("Deleted %d item(s) of checklist: %s", count, checklist_id)
        return True

    def count_by_checklist_id(self, checklist_id: uuid.UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(ChecklistItemModel)
            .where(ChecklistItemModel.checklist_id == checklist_id)
        )
        return self._scalar(stmt, f"item count of checklist {checklist_id}")

    def completed_count_by_checklist_id(self, checklist_id: uuid.UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(ChecklistItemModel)
            .where(
                ChecklistItemModel.checklist_id == checklist_id,
                ChecklistItemModel.is_completed.is_(True),
            )
        )
        return self._scalar(stmt, f"completed item count of checklist {checklist_id}")

    def toggle_completion(self, item_id: uuid.UUID) -> bool:
        item = self.fetch_by_id(item_id)
        if item is None:
            logger.warning("Cannot toggle completion: checklist item %s not found", item_id)
            return False
        stmt = (
            update(ChecklistItemModel)
            .where(ChecklistItemModel.id == item_id)
            .values(is_completed=not item.is_completed, updated_at=datetime.now())
        )
        return bool(self._write(stmt, f"toggle completion of checklist item {item_id}"))

    def fetch_overdue_items(self, now: Optional[datetime] = None) -> List[ChecklistItem]:
        """Incomplete items whose due date has passed, earliest first."""
        now = now or datetime.now()
        stmt = (
            select(ChecklistItemModel)
            .where(
                ChecklistItemModel.is_completed.is_(False),
                ChecklistItemModel.due_date.is_not(None),
                ChecklistItemModel.due_date < now,
            )
            .order_by(ChecklistItemModel.due_date.asc(), ChecklistItemModel.id.asc())
        )
        return self._fetch_list(stmt, "overdue checklist items")
