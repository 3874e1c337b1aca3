"""DTO Mapping — pure conversions from ORM entities to response schemas.

Invariants:
    - No IO: callers must have loaded every attribute read here
    - Unassigned task maps to assigned_to=None
"""

from task_api.core.domain_types import TaskPriority, TaskStatus
from task_api.models.task import Task
from task_api.models.user import User
from task_api.schemas.task import TaskResponse
from task_api.schemas.user import UserResponse


def user_to_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, name=user.name, email=user.email)


def task_to_response(task: Task) -> TaskResponse:
    assignee = task.assigned_to
    return TaskResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        status=TaskStatus(task.status),
        priority=TaskPriority(task.priority),
        due_date=task.due_date,
        created_at=task.created_at,
        updated_at=task.updated_at,
        assigned_to=user_to_response(assignee) if assignee else None,
    )
