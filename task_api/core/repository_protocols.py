"""Boundary Protocols — persistence contracts consumed by the service layer.

Invariants:
    - Services depend on these Protocols, never on a concrete repository class
    - All IO operations accessed through Protocol types
    - Implementations provided by repositories/ via dependency injection
    - Repositories flush but never commit; the service owns the transaction

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Entities typed as object: core never imports the ORM models
"""

from typing import Any, Protocol

from task_api.core.domain_types import TaskId, UserId
from task_api.core.pagination import PageRequest, TaskFilters


class TaskRepository(Protocol):
    """Contract for task persistence — implemented by repositories/task_repository.py."""
    async def find_by_id(self, task_id: TaskId) -> Any | None: ...
    async def exists_by_id(self, task_id: TaskId) -> bool: ...
    async def find_by_filters(
        self, filters: TaskFilters, page_request: PageRequest,
    ) -> tuple[list[Any], int]: ...
    async def save(self, task: Any) -> Any: ...
    async def delete_by_id(self, task_id: TaskId) -> None: ...


class UserRepository(Protocol):
    """Contract for user persistence — implemented by repositories/user_repository.py."""
    async def find_by_id(self, user_id: UserId) -> Any | None: ...
    async def exists_by_email(self, email: str) -> bool: ...
    async def find_all(self, page_request: PageRequest) -> tuple[list[Any], int]: ...
    async def save(self, user: Any) -> Any: ...
