"""Project - root aggregate of everything else in the store"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from creativityhub.domain.currency import Currency


class ProjectStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    ARCHIVED = "archived"


@dataclass
class Project:
    name: str
    description: str | None = None
    cover_color: str | None = None
    cover_image_path: str | None = None
    status: ProjectStatus = ProjectStatus.ACTIVE
    start_date: datetime | None = None
    target_date: datetime | None = None
    budget: Decimal | None = None
    budget_currency: Currency | None = None
    is_pinned: bool = False
    sort_order: int = 0
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def is_active(self) -> bool:
        return self.status == ProjectStatus.ACTIVE

    @property
    def has_budget(self) -> bool:
        return self.budget is not None and self.budget_currency is not None

    @property
    def formatted_budget(self) -> str | None:
        if not self.has_budget:
            return None
        return self.budget_currency.format(self.budget)

    @property
    def has_date_range(self) -> bool:
        return self.start_date is not None or self.target_date is not None
