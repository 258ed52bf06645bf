"""Activity log entries - one row per meaningful change inside a project"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class ActivityEntityType(str, Enum):
    PROJECT = "project"
    WORK_LOG = "workLog"
    IDEA = "idea"
    CHECKLIST = "checklist"
    CHECKLIST_ITEM = "checklistItem"
    DOCUMENT = "document"
    NOTE = "note"
    EXPENSE = "expense"
    EXPENSE_CATEGORY = "expenseCategory"
    REMINDER = "reminder"


class ActivityActionType(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    STATUS_CHANGED = "statusChanged"
    LINKED = "linked"
    UNLINKED = "unlinked"


@dataclass
class ActivityLog:
    project_id: uuid.UUID
    entity_type: ActivityEntityType
    action_type: ActivityActionType
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=datetime.now)
