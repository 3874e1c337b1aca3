"""Service Dependencies — per-request wiring of repositories into services.

Invariants:
    - One AsyncSession per request, shared by the service and its repositories
    - Routes receive services, never sessions or repositories
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.infrastructure.database import get_db
from task_api.repositories.task_repository import SqlTaskRepository
from task_api.repositories.user_repository import SqlUserRepository
from task_api.services.task_service import TaskService
from task_api.services.user_service import UserService


def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    return TaskService(db, SqlTaskRepository(db), SqlUserRepository(db))


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db, SqlUserRepository(db))
