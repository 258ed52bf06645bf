"""
Note repository
"""
from creativityhub.domain.note import Note
from creativityhub.infrastructure.db.models import NoteModel
from creativityhub.infrastructure.repositories.base import ProjectScopedRepository


class NoteRepository(ProjectScopedRepository[Note]):
    model = NoteModel
    entity_cls = Note
    label = "note"
    search_columns = ("title", "content")

    def order_by(self) -> list:
        return [
            NoteModel.is_pinned.desc(),
            NoteModel.updated_at.desc(),
            NoteModel.created_at.asc(),
            NoteModel.id.asc(),
        ]
