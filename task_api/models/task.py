"""Task ORM — persists a unit of work optionally assigned to a user.

Invariants:
    - id is an autoincrement integer primary key
    - title is non-nullable, at most 100 chars (lower bound enforced by request schema)
    - status/priority store TaskStatus/TaskPriority values
    - assigned_to_id is nullable; NULL means unassigned
    - created_at never changes after insert; updated_at moves on every write (stamped by the repository)

Design Decisions:
    - String columns for enums: values readable in the DB, no native ENUM migrations
    - assigned_to loaded with selectin: async sessions cannot lazy-load on attribute access
    - No back-reference on User: nothing reads a user's task collection
"""

from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy import String, Text, Date, DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from task_api.core.domain_types import DEFAULT_TASK_PRIORITY, DEFAULT_TASK_STATUS
from task_api.db.base import Base


class Task(Base):
    """Task entity — a titled unit of work with workflow status."""
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=DEFAULT_TASK_STATUS.value,
    )
    priority: Mapped[str] = mapped_column(
        String(20), nullable=False, default=DEFAULT_TASK_PRIORITY.value,
    )
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    assigned_to_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True, index=True,
    )

    # Relationships
    assigned_to: Mapped[Optional["User"]] = relationship(
        "User", lazy="selectin",
    )
