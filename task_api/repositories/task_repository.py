"""Task Repository — SQLAlchemy implementation of core TaskRepository.

Invariants:
    - Never commits: flush only, the calling service owns the transaction
    - find_by_filters applies only the filters that are set (None = no constraint)
    - Sort is always followed by id as tie-breaker: pages are stable
    - save() stamps updated_at on every call and created_at only once

Design Decisions:
    - Count query built from the same filtered statement: total and page can't disagree
"""

from datetime import datetime, timezone

from sqlalchemy import Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.core.domain_types import SortDirection, TaskId
from task_api.core.pagination import PageRequest, TaskFilters
from task_api.models.task import Task


SORTABLE_COLUMNS = {
    "id": Task.id,
    "title": Task.title,
    "status": Task.status,
    "priority": Task.priority,
    "dueDate": Task.due_date,
    "createdAt": Task.created_at,
    "updatedAt": Task.updated_at,
}
TASK_SORT_FIELDS = frozenset(SORTABLE_COLUMNS)


def build_filtered_query(filters: TaskFilters) -> Select:
    """Select tasks matching every supplied filter."""
    query = select(Task)
    if filters.status is not None:
        query = query.where(Task.status == filters.status.value)
    if filters.priority is not None:
        query = query.where(Task.priority == filters.priority.value)
    if filters.assigned_to_id is not None:
        query = query.where(Task.assigned_to_id == filters.assigned_to_id)
    return query


class SqlTaskRepository:
    """Task persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, task_id: TaskId) -> Task | None:
        result = await self.db.execute(select(Task).where(Task.id == task_id))
        return result.scalar_one_or_none()

    async def exists_by_id(self, task_id: TaskId) -> bool:
        result = await self.db.execute(
            select(func.count()).select_from(Task).where(Task.id == task_id),
        )
        return result.scalar_one() > 0

    async def find_by_filters(
        self, filters: TaskFilters, page_request: PageRequest,
    ) -> tuple[list[Task], int]:
        """Return one page of matching tasks and the total match count."""
        query = build_filtered_query(filters)

        total = (await self.db.execute(
            select(func.count()).select_from(query.subquery()),
        )).scalar_one()

        column = SORTABLE_COLUMNS[page_request.sort.field]
        order = (
            column.desc() if page_request.sort.direction == SortDirection.DESC
            else column.asc()
        )
        query = (
            query.order_by(order, Task.id.asc())
            .limit(page_request.size)
            .offset(page_request.offset)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all()), total

    async def save(self, task: Task) -> Task:
        now = datetime.now(timezone.utc)
        if task.created_at is None:
            task.created_at = now
        task.updated_at = now
        self.db.add(task)
        await self.db.flush()
        return task

    async def delete_by_id(self, task_id: TaskId) -> None:
        await self.db.execute(delete(Task).where(Task.id == task_id))
