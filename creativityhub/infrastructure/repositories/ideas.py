"""
Idea repository
"""
from creativityhub.domain.idea import Idea
from creativityhub.infrastructure.db.models import IdeaModel
from creativityhub.infrastructure.repositories.base import ProjectScopedRepository


class IdeaRepository(ProjectScopedRepository[Idea]):
    model = IdeaModel
    entity_cls = Idea
    label = "idea"
    search_columns = ("title", "notes", "url")

    def order_by(self) -> list:
        return [IdeaModel.created_at.desc(), IdeaModel.id.asc()]
