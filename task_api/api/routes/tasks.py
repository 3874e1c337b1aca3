"""Task Routes — CRUD and status endpoints over /api/tasks.

Invariants:
    - Routes bind parameters and delegate to TaskService, nothing more
    - 201 on create, 200 on read/update, 204 with empty body on delete
    - Query filters are optional and independent

Design Decisions:
    - Sort parsed here (not in the service): an unknown field is a request error,
      reported with the query parameter name
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from task_api.api.dependencies import get_task_service
from task_api.core.domain_types import TaskId, TaskPriority, TaskStatus
from task_api.core.pagination import (
    DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, PageRequest, TaskFilters, parse_sort,
)
from task_api.repositories.task_repository import TASK_SORT_FIELDS
from task_api.schemas.page import PageResponse
from task_api.schemas.task import (
    CreateTaskRequest, TaskResponse, UpdateStatusRequest, UpdateTaskRequest,
)
from task_api.services.task_service import TaskService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.post(
    "", response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: CreateTaskRequest,
    service: TaskService = Depends(get_task_service),
):
    """Create a task. Unset status/priority default to TODO/MEDIUM."""
    return await service.create_task(body)


@router.get("", response_model=PageResponse[TaskResponse])
async def get_all_tasks(
    status_filter: TaskStatus | None = Query(None, alias="status"),
    priority: TaskPriority | None = Query(None),
    assigned_to_id: int | None = Query(None, alias="assignedToId"),
    page: int = Query(0, ge=0),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    sort: str = Query("createdAt"),
    service: TaskService = Depends(get_task_service),
):
    """List tasks with optional filters, pagination and sorting."""
    filters = TaskFilters(
        status=status_filter, priority=priority, assigned_to_id=assigned_to_id,
    )
    page_request = PageRequest(
        page=page, size=size, sort=parse_sort(sort, TASK_SORT_FIELDS),
    )
    return await service.get_all_tasks(filters, page_request)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int, service: TaskService = Depends(get_task_service),
):
    return await service.get_task_by_id(TaskId(task_id))


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: int,
    body: UpdateTaskRequest,
    service: TaskService = Depends(get_task_service),
):
    """Full replace. Omitting assignedToId unassigns the task."""
    return await service.update_task(TaskId(task_id), body)


@router.patch("/{task_id}/status", response_model=TaskResponse)
async def update_task_status(
    task_id: int,
    body: UpdateStatusRequest,
    service: TaskService = Depends(get_task_service),
):
    return await service.update_task_status(TaskId(task_id), body)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: int, service: TaskService = Depends(get_task_service),
):
    await service.delete_task(TaskId(task_id))
