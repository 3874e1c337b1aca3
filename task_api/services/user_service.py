"""User Service — register, list and read users.

Invariants:
    - Email uniqueness checked before insert; duplicate raises ConflictError
    - A unique-constraint hit at flush also raises ConflictError, never DatabaseError
    - No user update or delete operation exists
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.core.domain_types import UserId
from task_api.core.errors import ConflictError, ResourceNotFoundError
from task_api.core.pagination import PageRequest, count_pages
from task_api.core.repository_protocols import UserRepository
from task_api.infrastructure.database import transaction
from task_api.models.user import User
from task_api.schemas.page import PageResponse
from task_api.schemas.user import CreateUserRequest, UserResponse
from task_api.services.dto_mapping import user_to_response

logger = logging.getLogger(__name__)


class UserService:
    """User use cases over an injected user repository."""

    def __init__(self, db: AsyncSession, user_repository: UserRepository):
        self.db = db
        self.users = user_repository

    async def create_user(self, request: CreateUserRequest) -> UserResponse:
        async with transaction(self.db):
            if await self.users.exists_by_email(request.email):
                raise ConflictError(
                    f"Email already exists: {request.email}", "email",
                )
            try:
                user = await self.users.save(
                    User(name=request.name, email=request.email),
                )
            except IntegrityError:
                # concurrent insert won the race between the check and the flush
                raise ConflictError(
                    f"Email already exists: {request.email}", "email",
                )
            logger.info("User created", extra={"user_id": user.id})
            return user_to_response(user)

    async def get_all_users(
        self, page_request: PageRequest,
    ) -> PageResponse[UserResponse]:
        async with transaction(self.db, read_only=True):
            users, total = await self.users.find_all(page_request)
            return PageResponse[UserResponse](
                content=[user_to_response(u) for u in users],
                page=page_request.page,
                size=page_request.size,
                total_elements=total,
                total_pages=count_pages(total, page_request.size),
            )

    async def get_user_by_id(self, user_id: UserId) -> UserResponse:
        async with transaction(self.db, read_only=True):
            user = await self.users.find_by_id(user_id)
            if user is None:
                raise ResourceNotFoundError("User", user_id)
            return user_to_response(user)
