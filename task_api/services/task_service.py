"""Task Service — create, list, read, update, status-change and delete tasks.

Invariants:
    - Mutations run inside transaction(): commit on success, rollback on any exception
    - Reads run inside transaction(read_only=True): never commit
    - A missing assignee aborts the operation before anything is flushed
    - create: unset status/priority become TODO/MEDIUM, unset assignee stays unassigned
    - update: unset status/priority keep current values, unset assignee CLEARS the assignment
    - DTOs built inside the transaction block (rollback expires ORM instances)

Design Decisions:
    - Repositories injected as Protocols: tests can swap in fakes without a DB
    - Create/update assignee asymmetry kept as-is: clients rely on PUT being a full replace
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from task_api.core.domain_types import (
    DEFAULT_TASK_PRIORITY, DEFAULT_TASK_STATUS, TaskId, UserId,
)
from task_api.core.errors import ResourceNotFoundError
from task_api.core.pagination import PageRequest, TaskFilters, count_pages
from task_api.core.repository_protocols import TaskRepository, UserRepository
from task_api.infrastructure.database import transaction
from task_api.models.task import Task
from task_api.schemas.page import PageResponse
from task_api.schemas.task import (
    CreateTaskRequest, TaskResponse, UpdateStatusRequest, UpdateTaskRequest,
)
from task_api.services.dto_mapping import task_to_response

logger = logging.getLogger(__name__)


class TaskService:
    """Task use cases over injected task and user repositories."""

    def __init__(
        self,
        db: AsyncSession,
        task_repository: TaskRepository,
        user_repository: UserRepository,
    ):
        self.db = db
        self.tasks = task_repository
        self.users = user_repository

    async def create_task(self, request: CreateTaskRequest) -> TaskResponse:
        async with transaction(self.db):
            assignee = await self._resolve_assignee(request.assigned_to_id)
            task = Task(
                title=request.title,
                description=request.description,
                status=(request.status or DEFAULT_TASK_STATUS).value,
                priority=(request.priority or DEFAULT_TASK_PRIORITY).value,
                due_date=request.due_date,
                assigned_to=assignee,
            )
            task = await self.tasks.save(task)
            logger.info("Task created", extra={"task_id": task.id})
            return task_to_response(task)

    async def get_all_tasks(
        self, filters: TaskFilters, page_request: PageRequest,
    ) -> PageResponse[TaskResponse]:
        async with transaction(self.db, read_only=True):
            tasks, total = await self.tasks.find_by_filters(filters, page_request)
            return PageResponse[TaskResponse](
                content=[task_to_response(t) for t in tasks],
                page=page_request.page,
                size=page_request.size,
                total_elements=total,
                total_pages=count_pages(total, page_request.size),
            )

    async def get_task_by_id(self, task_id: TaskId) -> TaskResponse:
        async with transaction(self.db, read_only=True):
            task = await self._get_task_or_404(task_id)
            return task_to_response(task)

    async def update_task(
        self, task_id: TaskId, request: UpdateTaskRequest,
    ) -> TaskResponse:
        async with transaction(self.db):
            task = await self._get_task_or_404(task_id)
            assignee = await self._resolve_assignee(request.assigned_to_id)

            task.title = request.title
            task.description = request.description
            if request.status is not None:
                task.status = request.status.value
            if request.priority is not None:
                task.priority = request.priority.value
            task.due_date = request.due_date
            task.assigned_to = assignee

            task = await self.tasks.save(task)
            logger.info("Task updated", extra={"task_id": task.id})
            return task_to_response(task)

    async def update_task_status(
        self, task_id: TaskId, request: UpdateStatusRequest,
    ) -> TaskResponse:
        async with transaction(self.db):
            task = await self._get_task_or_404(task_id)
            task.status = request.status.value
            task = await self.tasks.save(task)
            logger.info(
                f"Task status set to {request.status.value}",
                extra={"task_id": task.id},
            )
            return task_to_response(task)

    async def delete_task(self, task_id: TaskId) -> None:
        async with transaction(self.db):
            if not await self.tasks.exists_by_id(task_id):
                raise ResourceNotFoundError("Task", task_id)
            await self.tasks.delete_by_id(task_id)
            logger.info("Task deleted", extra={"task_id": task_id})

    async def _get_task_or_404(self, task_id: TaskId) -> Task:
        task = await self.tasks.find_by_id(task_id)
        if task is None:
            raise ResourceNotFoundError("Task", task_id)
        return task

    async def _resolve_assignee(self, user_id: int | None):
        """None stays None; an unknown id raises ResourceNotFoundError."""
        if user_id is None:
            return None
        user = await self.users.find_by_id(UserId(user_id))
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        return user
