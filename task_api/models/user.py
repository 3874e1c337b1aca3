"""User ORM — persists a person tasks can be assigned to.

Invariants:
    - id is an autoincrement integer primary key
    - email is unique across all users (DB constraint backs the service check)
"""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from task_api.db.base import Base


class User(Base):
    """User entity — assignee of tasks."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
