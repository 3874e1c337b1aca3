"""Task schema validation — bounds, aliases and required fields."""

from datetime import date

import pytest
from pydantic import ValidationError

from task_api.core.domain_types import TaskStatus
from task_api.schemas.task import (
    CreateTaskRequest, UpdateStatusRequest, UpdateTaskRequest,
)
from task_api.schemas.user import CreateUserRequest


def test_create_accepts_camel_case_aliases():
    req = CreateTaskRequest.model_validate({
        "title": "Plan sprint", "dueDate": "2026-11-30", "assignedToId": 4,
    })
    assert req.due_date == date(2026, 11, 30)
    assert req.assigned_to_id == 4


def test_create_leaves_status_and_priority_unset():
    req = CreateTaskRequest(title="Plan sprint")
    assert req.status is None
    assert req.priority is None


@pytest.mark.parametrize("title", ["abc", "x" * 100])
def test_title_bounds_inclusive(title):
    assert CreateTaskRequest(title=title).title == title


@pytest.mark.parametrize("title", ["ab", "x" * 101, "    "])
def test_title_out_of_bounds_or_blank_rejected(title):
    with pytest.raises(ValidationError):
        UpdateTaskRequest(title=title)


def test_description_limit():
    CreateTaskRequest(title="Valid", description="d" * 500)
    with pytest.raises(ValidationError):
        CreateTaskRequest(title="Valid", description="d" * 501)


def test_status_request_requires_status():
    with pytest.raises(ValidationError):
        UpdateStatusRequest.model_validate({})
    assert UpdateStatusRequest(status="IN_PROGRESS").status == TaskStatus.IN_PROGRESS


def test_user_name_stripped_and_email_case_kept():
    req = CreateUserRequest(name="  Linus ", email="Linus@Example.COM")
    assert req.name == "Linus"
    assert req.email == "Linus@Example.COM"
