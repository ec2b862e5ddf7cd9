"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CategoryId, TaskId wrap UUIDs; never use bare UUID in domain logic
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

CategoryId = NewType("CategoryId", UUID)
TaskId = NewType("TaskId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class TaskStatus(str, Enum):
    """Task status, maps to DB `status` column. No transition restrictions."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    DONE = "done"


# Labels accepted by earlier clients, normalised on input
LEGACY_STATUS_LABELS: dict[str, TaskStatus] = {
    "Pending": TaskStatus.PENDING,
    "InProgress": TaskStatus.IN_PROGRESS,
    "Completed": TaskStatus.DONE,
}


class Resource(str, Enum):
    """Public resource groups exposed over HTTP."""
    CATEGORY = "category"
    TASK = "task"


class Action(str, Enum):
    """Controller actions, one per CRUD operation."""
    CREATE = "create"
    GET_ALL = "get_all"
    GET_ONE = "get_one"
    UPDATE = "update"
    DELETE = "delete"


class CategoryProjection(str, Enum):
    """How a task's category is rendered in responses."""
    NAME = "name"        # list views: category name string or null
    NESTED = "nested"    # detail views: full category object
