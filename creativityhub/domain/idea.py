"""Ideas, tags and the idea<->tag link"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class IdeaSourceType(str, Enum):
    INSTAGRAM = "instagram"
    TIKTOK = "tiktok"
    PINTEREST = "pinterest"
    YOUTUBE = "youtube"
    WEBSITE = "website"
    OTHER = "other"

    @classmethod
    def detect(cls, url: str) -> "IdeaSourceType":
        """Guess the source platform from a shared URL."""
        lowered = url.lower()
        if "instagram.com" in lowered or "instagr.am" in lowered:
            return cls.INSTAGRAM
        if "tiktok.com" in lowered:
            return cls.TIKTOK
        if "pinterest.com" in lowered or "pin.it" in lowered:
            return cls.PINTEREST
        if "youtube.com" in lowered or "youtu.be" in lowered:
            return cls.YOUTUBE
        if "http" in lowered:
            return cls.WEBSITE
        return cls.OTHER


NOTES_PREVIEW_LENGTH = 100


@dataclass
class Idea:
    project_id: uuid.UUID
    title: str
    url: str | None = None
    thumbnail_url: str | None = None
    source_domain: str | None = None
    source_type: IdeaSourceType = IdeaSourceType.OTHER
    notes: str | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def notes_preview(self) -> str | None:
        if not self.notes:
            return None
        if len(self.notes) <= NOTES_PREVIEW_LENGTH:
            return self.notes
        return self.notes[:NOTES_PREVIEW_LENGTH] + "..."


@dataclass
class Tag:
    name: str
    color: str = "blue"
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(frozen=True)
class IdeaTagLink:
    idea_id: uuid.UUID
    tag_id: uuid.UUID
