"""Expenses and expense categories"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from creativityhub.domain.currency import Currency


class ExpenseStatus(str, Enum):
    PLANNED = "planned"
    PAID = "paid"
    REFUNDED = "refunded"


@dataclass
class ExpenseCategory:
    project_id: uuid.UUID
    name: str
    budget_limit: Decimal | None = None
    budget_currency: Currency | None = None
    color: str = "blue"
    sort_order: int = 0
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def has_budget_limit(self) -> bool:
        return self.budget_limit is not None and self.budget_currency is not None


@dataclass
class Expense:
    project_id: uuid.UUID
    amount: Decimal
    currency: Currency
    date: datetime = field(default_factory=datetime.now)
    category_id: uuid.UUID | None = None
    vendor: str | None = None
    status: ExpenseStatus = ExpenseStatus.PLANNED
    receipt_image_path: str | None = None
    notes: str | None = None
    linked_checklist_item_id: uuid.UUID | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def formatted_amount(self) -> str:
        return self.currency.format(self.amount)

    @property
    def is_paid(self) -> bool:
        return self.status == ExpenseStatus.PAID
