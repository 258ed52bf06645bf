"""
Project repository
"""
import logging
import uuid
from datetime import datetime
from typing import List

from sqlalchemy import select, update

from creativityhub.domain.project import Project, ProjectStatus
from creativityhub.infrastructure.db.models import ProjectModel
from creativityhub.infrastructure.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ProjectRepository(BaseRepository[Project]):
    model = ProjectModel
    entity_cls = Project
    label = "project"
    search_columns = ("name", "description")

    def order_by(self) -> list:
        return [
            ProjectModel.is_pinned.desc(),
            ProjectModel.updated_at.desc(),
            ProjectModel.created_at.asc(),
            ProjectModel.id.asc(),
        ]

    def fetch_by_status(self, status: ProjectStatus) -> List[Project]:
        stmt = (
            select(ProjectModel)
            .where(ProjectModel.status == status)
            .order_by(*self.order_by())
        )
        return self._fetch_list(stmt, f"projects with status {status.value}")

    def toggle_pin(self, project_id: uuid.UUID) -> bool:
        project = self.fetch_by_id(project_id)
        if project is None:
            logger.warning("Cannot toggle pin: project %s not found", project_id)
            return False
        stmt = (
            update(ProjectModel)
            .where(ProjectModel.id == project_id)
            .values(is_pinned=not project.is_pinned, updated_at=datetime.now())
        )
        return bool(self._write(stmt, f"toggle pin of project {project_id}"))

    def update_status(self, project_id: uuid.UUID, status: ProjectStatus) -> bool:
        stmt = (
            update(ProjectModel)
            .where(ProjectModel.id == project_id)
            .values(status=status, updated_at=datetime.now())
        )
        if not self._write(stmt, f"update status of project {project_id}"):
            return False
        logger.info("Project %s status -> %s", project_id, status.value)
        return True

    def touch_updated_at(self, project_id: uuid.UUID) -> bool:
        """Bump the project to the top of the recent list after a child changed."""
        stmt = (
            update(ProjectModel)
            .where(ProjectModel.id == project_id)
            .values(updated_at=datetime.now())
        )
        return bool(self._write(stmt, f"touch project {project_id}"))
