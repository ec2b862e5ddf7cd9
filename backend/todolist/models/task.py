"""Task ORM — a todo item owned by exactly one category.

Invariants:
    - category_id is non-nullable and references categories.id
    - ON DELETE CASCADE: hard-deleting a category removes its tasks
    - status is one of TaskStatus values, default "pending"

Design Decisions:
    - Table keeps the historical name "todos"
    - status stored as String(20) rather than a DB enum: transitions are
      unrestricted and the value set is enforced at the API boundary
"""

import uuid
from typing import Optional

from sqlalchemy import String, Text, Uuid, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from todolist.core.domain_types import TaskStatus
from todolist.db.base import Base, TimestampMixin


class Task(TimestampMixin, Base):
    """Task entity."""
    __tablename__ = "todos"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=TaskStatus.PENDING.value,
    )
    category_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )

    category: Mapped[Optional["Category"]] = relationship(
        "Category", back_populates="tasks", lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Task {self.id} {self.title!r} [{self.status}]>"
