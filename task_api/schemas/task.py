"""Task Schemas — Pydantic models with field-level validation for task endpoints.

Invariants:
    - title: 3-100 chars, not blank (whitespace-only rejected)
    - description: at most 500 chars
    - status/priority: None means "not supplied"; services decide the fallback
    - assigned_to_id: None means "no assignee" (create: leave unassigned, update: clear)
    - UpdateStatusRequest.status is required

Design Decisions:
    - camelCase aliases on the wire, snake_case in Python (populate_by_name accepts both)
    - Create and update share one field set: PUT is a full replace of the same fields
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from task_api.core.domain_types import TaskPriority, TaskStatus
from task_api.schemas.user import UserResponse


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskWriteRequest(CamelModel):
    """Fields shared by create and full-update requests."""
    title: str = Field(min_length=3, max_length=100)
    description: str | None = Field(None, max_length=500)
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    due_date: date | None = None
    assigned_to_id: int | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title is required")
        return v


class CreateTaskRequest(TaskWriteRequest):
    """Task creation — unset status/priority default to TODO/MEDIUM."""


class UpdateTaskRequest(TaskWriteRequest):
    """Full task update — unset status/priority keep current values, unset assignee clears."""


class UpdateStatusRequest(CamelModel):
    """Status-only update."""
    status: TaskStatus


class TaskResponse(CamelModel):
    """Task response — public-facing task data with embedded assignee."""
    id: int
    title: str
    description: str | None = None
    status: TaskStatus
    priority: TaskPriority
    due_date: date | None = None
    created_at: datetime
    updated_at: datetime
    assigned_to: UserResponse | None = None
