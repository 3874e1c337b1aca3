"""Task Service — defaults, assignee semantics and transactional rollback.

Invariants:
    - Omitted status/priority stored as TODO/MEDIUM
    - Update without assignee clears it; create without assignee leaves it unset
    - NotFound on assignee leaves the table untouched
    - Status update touches status only
"""

from datetime import datetime, timezone

import pytest
from sqlalchemy import func, select

from task_api.core.domain_types import (
    SortDirection, TaskId, TaskPriority, TaskStatus,
)
from task_api.core.errors import ResourceNotFoundError
from task_api.core.pagination import PageRequest, SortOrder, TaskFilters
from task_api.models.task import Task
from task_api.schemas.task import (
    CreateTaskRequest, UpdateStatusRequest, UpdateTaskRequest,
)


async def _task_count(db) -> int:
    return (await db.execute(select(func.count()).select_from(Task))).scalar_one()


async def test_create_applies_defaults(task_service, test_db):
    created = await task_service.create_task(CreateTaskRequest(title="Fix bug"))
    assert created.status == TaskStatus.TODO
    assert created.priority == TaskPriority.MEDIUM
    assert created.assigned_to is None

    row = (await test_db.execute(select(Task).where(Task.id == created.id))).scalar_one()
    assert row.status == "TODO"
    assert row.priority == "MEDIUM"


async def test_create_keeps_explicit_status_and_priority(task_service):
    created = await task_service.create_task(CreateTaskRequest(
        title="Ship it", status=TaskStatus.DONE, priority=TaskPriority.LOW,
    ))
    assert created.status == TaskStatus.DONE
    assert created.priority == TaskPriority.LOW


async def test_create_embeds_assignee(task_service, alice):
    created = await task_service.create_task(
        CreateTaskRequest(title="Review PR", assigned_to_id=alice.id),
    )
    assert created.assigned_to == alice


async def test_create_with_missing_assignee_writes_nothing(task_service, test_db):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await task_service.create_task(
            CreateTaskRequest(title="Nobody's", assigned_to_id=404),
        )
    assert exc_info.value.resource_type == "User"
    assert exc_info.value.http_status == 404
    assert await _task_count(test_db) == 0


async def test_update_clears_assignee_when_omitted(task_service, alice):
    created = await task_service.create_task(
        CreateTaskRequest(title="Assigned", assigned_to_id=alice.id),
    )
    updated = await task_service.update_task(
        TaskId(created.id), UpdateTaskRequest(title="Assigned"),
    )
    assert updated.assigned_to is None

    fetched = await task_service.get_task_by_id(TaskId(created.id))
    assert fetched.assigned_to is None


async def test_update_with_missing_assignee_rolls_back(task_service, alice):
    created = await task_service.create_task(
        CreateTaskRequest(title="Original", assigned_to_id=alice.id),
    )
    with pytest.raises(ResourceNotFoundError):
        await task_service.update_task(
            TaskId(created.id),
            UpdateTaskRequest(title="Mutated", assigned_to_id=999),
        )
    fetched = await task_service.get_task_by_id(TaskId(created.id))
    assert fetched.title == "Original"
    assert fetched.assigned_to == alice


async def test_update_falls_back_to_existing_status_and_priority(task_service):
    created = await task_service.create_task(CreateTaskRequest(
        title="Sticky", status=TaskStatus.IN_PROGRESS, priority=TaskPriority.HIGH,
    ))
    updated = await task_service.update_task(
        TaskId(created.id), UpdateTaskRequest(title="Sticky v2"),
    )
    assert updated.status == TaskStatus.IN_PROGRESS
    assert updated.priority == TaskPriority.HIGH
    assert updated.title == "Sticky v2"


async def test_update_status_changes_only_status(task_service, alice):
    created = await task_service.create_task(CreateTaskRequest(
        title="Focus", description="keep me", assigned_to_id=alice.id,
    ))
    updated = await task_service.update_task_status(
        TaskId(created.id), UpdateStatusRequest(status=TaskStatus.DONE),
    )
    assert updated.status == TaskStatus.DONE
    assert updated.title == "Focus"
    assert updated.description == "keep me"
    assert updated.assigned_to == alice


async def test_delete_removes_task(task_service, test_db):
    created = await task_service.create_task(CreateTaskRequest(title="Temp"))
    await task_service.delete_task(TaskId(created.id))
    assert await _task_count(test_db) == 0
    with pytest.raises(ResourceNotFoundError):
        await task_service.get_task_by_id(TaskId(created.id))


async def test_delete_missing_task_raises(task_service):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await task_service.delete_task(TaskId(12))
    assert exc_info.value.message == "Task not found with id: 12"


async def test_get_all_tasks_filters_and_counts(task_service, alice):
    await task_service.create_task(CreateTaskRequest(title="One", status=TaskStatus.DONE))
    await task_service.create_task(CreateTaskRequest(title="Two", assigned_to_id=alice.id))
    await task_service.create_task(CreateTaskRequest(title="Three", status=TaskStatus.DONE))

    page = await task_service.get_all_tasks(
        TaskFilters(status=TaskStatus.DONE),
        PageRequest(page=0, size=1, sort=SortOrder("title", SortDirection.ASC)),
    )
    assert page.total_elements == 2
    assert page.total_pages == 2
    assert [t.title for t in page.content] == ["One"]

    assigned = await task_service.get_all_tasks(
        TaskFilters(assigned_to_id=alice.id), PageRequest(sort=SortOrder("createdAt")),
    )
    assert [t.title for t in assigned.content] == ["Two"]


async def test_get_all_tasks_empty_page(task_service):
    page = await task_service.get_all_tasks(TaskFilters(), PageRequest())
    assert page.content == []
    assert page.total_elements == 0
    assert page.total_pages == 0


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes for timezone-aware columns
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


async def test_updated_at_moves_on_every_write(task_service):
    created = await task_service.create_task(CreateTaskRequest(title="Timestamps"))

    updated = await task_service.update_task(
        TaskId(created.id), UpdateTaskRequest(title="Timestamps v2"),
    )
    assert _as_utc(updated.updated_at) > _as_utc(created.updated_at)
    assert _as_utc(updated.created_at) == _as_utc(created.created_at)

    patched = await task_service.update_task_status(
        TaskId(created.id), UpdateStatusRequest(status=TaskStatus.DONE),
    )
    assert _as_utc(patched.updated_at) > _as_utc(updated.updated_at)
    assert _as_utc(patched.created_at) == _as_utc(created.created_at)
