"""
Expense and expense category repositories.

Amounts live in TEXT columns, so totals are summed as Decimal in Python
rather than with SQL SUM (which would go through REAL).
"""
import uuid
from collections import defaultdict
from decimal import Decimal
from typing import Dict, List, Optional

from sqlalchemy import select

from creativityhub.domain.currency import Currency
from creativityhub.domain.expense import Expense, ExpenseCategory, ExpenseStatus
from creativityhub.infrastructure.db.models import ExpenseCategoryModel, ExpenseModel
from creativityhub.infrastructure.repositories.base import ProjectScopedRepository

_ZERO = Decimal("0")


class ExpenseCategoryRepository(ProjectScopedRepository[ExpenseCategory]):
    model = ExpenseCategoryModel
    entity_cls = ExpenseCategory
    label = "expense category"
    search_columns = ("name",)

    def order_by(self) -> list:
        return [
            ExpenseCategoryModel.sort_order.asc(),
            ExpenseCategoryModel.created_at.asc(),
            ExpenseCategoryModel.id.asc(),
        ]


class ExpenseRepository(ProjectScopedRepository[Expense]):
    model = ExpenseModel
    entity_cls = Expense
    label = "expense"
    search_columns = ("vendor", "notes")

    def order_by(self) -> list:
        return [ExpenseModel.date.desc(), ExpenseModel.created_at.asc(), ExpenseModel.id.asc()]

    def _to_entity(self, row) -> Optional[Expense]:
        # Unparsable amounts read back as None; such rows are skipped
        if row.amount is None:
            return None
        return super()._to_entity(row)

    def fetch_by_category_id(self, category_id: uuid.UUID) -> List[Expense]:
        stmt = (
            select(ExpenseModel)
            .where(ExpenseModel.category_id == category_id)
            .order_by(*self.order_by())
        )
        return self._fetch_list(stmt, f"expenses of category {category_id}")

    def total_by_project_id(
        self,
        project_id: uuid.UUID,
        status: ExpenseStatus | None = None,
    ) -> Decimal:
        """Sum of amounts regardless of currency, optionally for one status."""
        stmt = select(ExpenseModel).where(ExpenseModel.project_id == project_id)
        if status is not None:
            stmt = stmt.where(ExpenseModel.status == status)
        expenses = self._fetch_list(stmt, f"expenses for project {project_id} total")
        return sum((e.amount for e in expenses), _ZERO)

    def totals_by_currency(self, project_id: uuid.UUID) -> Dict[Currency, Decimal]:
        """Paid totals per currency."""
        stmt = select(ExpenseModel).where(
            ExpenseModel.project_id == project_id,
            ExpenseModel.status == ExpenseStatus.PAID,
        )
        totals: Dict[Currency, Decimal] = defaultdict(lambda: _ZERO)
        for expense in self._fetch_list(stmt, f"paid expenses for project {project_id}"):
            totals[expense.currency] += expense.amount
        return dict(totals)
