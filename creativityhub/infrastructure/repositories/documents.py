"""
Document metadata repository.

Only the rows are managed here; files in the documents directory are the
caller's concern.
"""
from creativityhub.domain.document import Document
from creativityhub.infrastructure.db.models import DocumentModel
from creativityhub.infrastructure.repositories.base import ProjectScopedRepository


class DocumentRepository(ProjectScopedRepository[Document]):
    model = DocumentModel
    entity_cls = Document
    label = "document"
    search_columns = ("file_name", "name", "notes")

    def order_by(self) -> list:
        return [DocumentModel.created_at.desc(), DocumentModel.id.asc()]
