import uuid
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class WorkLog:
    project_id: uuid.UUID
    total_minutes: int
    title: str | None = None
    linked_checklist_item_id: uuid.UUID | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def formatted_duration(self) -> str:
        """'1d 2h 5m' style; zero minutes renders as '0m'."""
        days, rest = divmod(self.total_minutes, 1440)
        hours, minutes = divmod(rest, 60)
        parts = []
        if days:
            parts.append(f"{days}d")
        if hours:
            parts.append(f"{hours}h")
        if minutes or not parts:
            parts.append(f"{minutes}m")
        return " ".join(parts)
