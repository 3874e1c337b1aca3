"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TaskId, UserId wrap ints — identity values are never arbitrary numbers
    - All valid task states and priorities encoded as Enums — no raw string matching
    - Enum values are the exact strings stored in the DB and sent over the wire

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TaskId = NewType("TaskId", int)
UserId = NewType("UserId", int)


# ─── Enums ───────────────────────────────────────────────────────

class TaskStatus(str, Enum):
    """Task workflow states — maps to DB `status` column."""
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class TaskPriority(str, Enum):
    """Task priority levels — maps to DB `priority` column."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


DEFAULT_TASK_STATUS = TaskStatus.TODO
DEFAULT_TASK_PRIORITY = TaskPriority.MEDIUM
