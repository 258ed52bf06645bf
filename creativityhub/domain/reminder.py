import uuid
from dataclasses import dataclass, field
from datetime import datetime

from creativityhub.domain.checklist import ItemPriority


@dataclass
class Reminder:
    project_id: uuid.UUID
    title: str
    notes: str | None = None
    due_date: datetime | None = None
    is_completed: bool = False
    priority: ItemPriority = ItemPriority.NONE
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def is_overdue(self, now: datetime | None = None) -> bool:
        if self.due_date is None or self.is_completed:
            return False
        return self.due_date < (now or datetime.now())
