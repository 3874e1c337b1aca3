"""Service test fixtures — services wired to the in-memory test session."""

import pytest

from task_api.repositories.task_repository import SqlTaskRepository
from task_api.repositories.user_repository import SqlUserRepository
from task_api.schemas.user import CreateUserRequest
from task_api.services.task_service import TaskService
from task_api.services.user_service import UserService


@pytest.fixture
def task_service(test_db):
    return TaskService(test_db, SqlTaskRepository(test_db), SqlUserRepository(test_db))


@pytest.fixture
def user_service(test_db):
    return UserService(test_db, SqlUserRepository(test_db))


@pytest.fixture
async def alice(user_service):
    return await user_service.create_user(
        CreateUserRequest(name="Alice", email="alice@example.com"),
    )
