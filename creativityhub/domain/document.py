"""Document metadata (the file itself lives in the shared documents directory)"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class DocumentType(str, Enum):
    PDF = "pdf"
    IMAGE = "image"
    TEXT = "text"
    SPREADSHEET = "spreadsheet"
    PRESENTATION = "presentation"
    ARCHIVE = "archive"
    OTHER = "other"

    @classmethod
    def from_extension(cls, extension: str) -> "DocumentType":
        return _EXTENSIONS.get(extension.lower().lstrip("."), cls.OTHER)


_EXTENSIONS = {
    "pdf": DocumentType.PDF,
    "png": DocumentType.IMAGE,
    "jpg": DocumentType.IMAGE,
    "jpeg": DocumentType.IMAGE,
    "heic": DocumentType.IMAGE,
    "gif": DocumentType.IMAGE,
    "webp": DocumentType.IMAGE,
    "txt": DocumentType.TEXT,
    "md": DocumentType.TEXT,
    "rtf": DocumentType.TEXT,
    "doc": DocumentType.TEXT,
    "docx": DocumentType.TEXT,
    "csv": DocumentType.SPREADSHEET,
    "xls": DocumentType.SPREADSHEET,
    "xlsx": DocumentType.SPREADSHEET,
    "numbers": DocumentType.SPREADSHEET,
    "ppt": DocumentType.PRESENTATION,
    "pptx": DocumentType.PRESENTATION,
    "key": DocumentType.PRESENTATION,
    "zip": DocumentType.ARCHIVE,
}


@dataclass
class Document:
    project_id: uuid.UUID
    file_name: str
    name: str | None = None
    file_type: DocumentType = DocumentType.OTHER
    file_size: int = 0
    notes: str | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def display_name(self) -> str:
        return self.name or self.file_name
