"""
Work log repository
"""
import logging
import uuid
from datetime import datetime
from typing import List

from sqlalchemy import func, select, update

from creativityhub.domain.work_log import WorkLog
from creativityhub.infrastructure.db.models import WorkLogModel
from creativityhub.infrastructure.repositories.base import ProjectScopedRepository

logger = logging.getLogger(__name__)


class WorkLogRepository(ProjectScopedRepository[WorkLog]):
    model = WorkLogModel
    entity_cls = WorkLog
    label = "work log"
    search_columns = ("title",)

    def order_by(self) -> list:
        return [WorkLogModel.created_at.desc(), WorkLogModel.id.asc()]

    def fetch_by_checklist_item_id(self, item_id: uuid.UUID) -> List[WorkLog]:
        stmt = (
            select(WorkLogModel)
            .where(WorkLogModel.linked_checklist_item_id == item_id)
            .order_by(*self.order_by())
        )
        return self._fetch_list(stmt, f"work logs for checklist item {item_id}")

    def total_minutes_by_project_id(self, project_id: uuid.UUID) -> int:
        stmt = select(func.sum(WorkLogModel.total_minutes)).where(WorkLogModel.project_id == project_id)
        return self._scalar(stmt, f"work minutes for project {project_id}")

    def total_minutes_all(self) -> int:
        return self._scalar(select(func.sum(WorkLogModel.total_minutes)), "work minutes")

    def detach_checklist_item(self, item_id: uuid.UUID) -> bool:
        """Clear the link to a checklist item that is being deleted; logs stay."""
        stmt = (
            update(WorkLogModel)
            .where(WorkLogModel.linked_checklist_item_id == item_id)
            .values(linked_checklist_item_id=None, updated_at=datetime.now())
        )
        count = self._write(stmt, f"detach checklist item {item_id} from work logs")
        if count is None:
            return False
        if count:
            logger.info("Detached checklist item %s from %d work log(s)", item_id, count)
        return True
