"""
SQLAlchemy ORM models.

The schema itself is created by the numbered migration units in
``creativityhub/migrations/versions``; these mappings must stay in sync with
them. No ForeignKey is declared anywhere: parent/child integrity is kept by
the repositories and the project cleanup orchestrator.
"""
import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Table, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from creativityhub.domain.activity_log import ActivityActionType, ActivityEntityType
from creativityhub.domain.checklist import ItemPriority
from creativityhub.domain.currency import Currency
from creativityhub.domain.document import DocumentType
from creativityhub.domain.expense import ExpenseStatus
from creativityhub.domain.idea import IdeaSourceType
from creativityhub.domain.project import ProjectStatus
from creativityhub.infrastructure.db.session import Base
from creativityhub.infrastructure.db.types import DecimalString, EnumString


# ============================================================================
# Bookkeeping
# ============================================================================


class MigrationModel(Base):
    """Ledger: one row per applied migration unit, max(id) is the schema version"""
    __tablename__ = "migrations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class UserSettingModel(Base):
    __tablename__ = "user_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    key: Mapped[str] = mapped_column(String(128), unique=True, nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False)


# ============================================================================
# Entities
# ============================================================================


class ProjectModel(Base):
    __tablename__ = "projects"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    cover_color: Mapped[str | None] = mapped_column(String(32), nullable=True)
    cover_image_path: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[ProjectStatus] = mapped_column(
        EnumString(ProjectStatus, default=ProjectStatus.ACTIVE), nullable=False, server_default="active"
    )
    start_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    target_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    budget: Mapped[Decimal | None] = mapped_column(DecimalString, nullable=True)
    budget_currency: Mapped[Currency | None] = mapped_column(EnumString(Currency), nullable=True)
    is_pinned: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default="0")
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class ChecklistModel(Base):
    __tablename__ = "checklists"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    project_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class ChecklistItemModel(Base):
    __tablename__ = "checklist_items"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    checklist_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    is_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default="0")
    due_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    priority: Mapped[ItemPriority] = mapped_column(
        EnumString(ItemPriority, default=ItemPriority.NONE), nullable=False, server_default="none"
    )
    estimated_cost: Mapped[Decimal | None] = mapped_column(DecimalString, nullable=True)
    estimated_cost_currency: Mapped[Currency | None] = mapped_column(EnumString(Currency), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class IdeaModel(Base):
    __tablename__ = "ideas"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    project_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    url: Mapped[str | None] = mapped_column(Text, nullable=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    thumbnail_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    source_domain: Mapped[str | None] = mapped_column(String(255), nullable=True)
    source_type: Mapped[IdeaSourceType] = mapped_column(
        EnumString(IdeaSourceType, default=IdeaSourceType.OTHER), nullable=False, server_default="other"
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class TagModel(Base):
    __tablename__ = "tags"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    color: Mapped[str] = mapped_column(String(32), nullable=False, server_default="blue")


# Join table without a primary key: duplicate (idea_id, tag_id) pairs are
# possible and are tolerated by every reader, so it is not ORM-mapped.
idea_tags = Table(
    "idea_tags",
    Base.metadata,
    Column("idea_id", Uuid, nullable=False, index=True),
    Column("tag_id", Uuid, nullable=False, index=True),
)


class ExpenseCategoryModel(Base):
    __tablename__ = "expense_categories"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    project_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    budget_limit: Mapped[Decimal | None] = mapped_column(DecimalString, nullable=True)
    budget_currency: Mapped[Currency | None] = mapped_column(EnumString(Currency), nullable=True)
    color: Mapped[str] = mapped_column(String(32), nullable=False, server_default="blue")
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class ExpenseModel(Base):
    __tablename__ = "expenses"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    project_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    category_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True, index=True)
    amount: Mapped[Decimal] = mapped_column(DecimalString, nullable=False)
    currency: Mapped[Currency] = mapped_column(EnumString(Currency, default=Currency.USD), nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    vendor: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[ExpenseStatus] = mapped_column(
        EnumString(ExpenseStatus, default=ExpenseStatus.PLANNED), nullable=False, server_default="planned"
    )
    receipt_image_path: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    linked_checklist_item_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class NoteModel(Base):
    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    project_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    is_pinned: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default="0")
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class DocumentModel(Base):
    __tablename__ = "documents"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    project_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    file_type: Mapped[DocumentType] = mapped_column(
        EnumString(DocumentType, default=DocumentType.OTHER), nullable=False, server_default="other"
    )
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_size: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class ReminderModel(Base):
    __tablename__ = "reminders"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    project_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    due_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    is_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default="0")
    priority: Mapped[ItemPriority] = mapped_column(
        EnumString(ItemPriority, default=ItemPriority.NONE), nullable=False, server_default="none"
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class WorkLogModel(Base):
    __tablename__ = "work_logs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    project_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    linked_checklist_item_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    total_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class ActivityLogModel(Base):
    __tablename__ = "activity_logs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    project_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    entity_type: Mapped[ActivityEntityType] = mapped_column(EnumString(ActivityEntityType), nullable=False)
    action_type: Mapped[ActivityActionType] = mapped_column(EnumString(ActivityActionType), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
