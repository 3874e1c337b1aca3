"""User Repository — SQLAlchemy implementation of core UserRepository.

Invariants:
    - Never commits: flush only, the calling service owns the transaction
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.core.domain_types import SortDirection, UserId
from task_api.core.pagination import PageRequest
from task_api.models.user import User

SORTABLE_COLUMNS = {
    "id": User.id,
    "name": User.name,
    "email": User.email,
}
USER_SORT_FIELDS = frozenset(SORTABLE_COLUMNS)


class SqlUserRepository:
    """User persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, user_id: UserId) -> User | None:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        result = await self.db.execute(
            select(func.count()).select_from(User).where(User.email == email),
        )
        return result.scalar_one() > 0

    async def find_all(self, page_request: PageRequest) -> tuple[list[User], int]:
        total = (await self.db.execute(
            select(func.count()).select_from(User),
        )).scalar_one()

        column = SORTABLE_COLUMNS[page_request.sort.field]
        order = (
            column.desc() if page_request.sort.direction == SortDirection.DESC
            else column.asc()
        )
        result = await self.db.execute(
            select(User)
            .order_by(order, User.id.asc())
            .limit(page_request.size)
            .offset(page_request.offset),
        )
        return list(result.scalars().all()), total

    async def save(self, user: User) -> User:
        self.db.add(user)
        await self.db.flush()
        return user
