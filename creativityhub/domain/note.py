import uuid
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Note:
    project_id: uuid.UUID
    title: str
    content: str = ""
    is_pinned: bool = False
    sort_order: int = 0
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
