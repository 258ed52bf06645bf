"""Checklists and their items"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from creativityhub.domain.currency import Currency


class ItemPriority(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def sort_value(self) -> int:
        return _PRIORITY_ORDER[self]


_PRIORITY_ORDER = {
    ItemPriority.NONE: 0,
    ItemPriority.LOW: 1,
    ItemPriority.MEDIUM: 2,
    ItemPriority.HIGH: 3,
}


@dataclass
class Checklist:
    project_id: uuid.UUID
    name: str
    sort_order: int = 0
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)


@dataclass
class ChecklistItem:
    checklist_id: uuid.UUID
    name: str
    is_completed: bool = False
    due_date: datetime | None = None
    priority: ItemPriority = ItemPriority.NONE
    estimated_cost: Decimal | None = None
    estimated_cost_currency: Currency | None = None
    notes: str | None = None
    sort_order: int = 0
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def is_overdue(self, now: datetime | None = None) -> bool:
        if self.due_date is None or self.is_completed:
            return False
        return self.due_date < (now or datetime.now())
