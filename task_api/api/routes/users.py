"""User Routes — register, list and read users over /api/users."""

from fastapi import APIRouter, Depends, Query, status

from task_api.api.dependencies import get_user_service
from task_api.core.domain_types import UserId
from task_api.core.pagination import (
    DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, PageRequest, parse_sort,
)
from task_api.repositories.user_repository import USER_SORT_FIELDS
from task_api.schemas.page import PageResponse
from task_api.schemas.user import CreateUserRequest, UserResponse
from task_api.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: CreateUserRequest,
    service: UserService = Depends(get_user_service),
):
    """Register a user. Duplicate email → 409."""
    return await service.create_user(body)


@router.get("", response_model=PageResponse[UserResponse])
async def get_all_users(
    page: int = Query(0, ge=0),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    sort: str = Query("id"),
    service: UserService = Depends(get_user_service),
):
    page_request = PageRequest(
        page=page, size=size, sort=parse_sort(sort, USER_SORT_FIELDS),
    )
    return await service.get_all_users(page_request)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int, service: UserService = Depends(get_user_service),
):
    return await service.get_user_by_id(UserId(user_id))
