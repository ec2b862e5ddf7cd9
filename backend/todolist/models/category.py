"""Category ORM — a named bucket that tasks belong to.

Invariants:
    - id is UUID primary key (client-side default)
    - name is non-nullable text; a live category never has an empty name
    - deleted_at set means soft-deleted; the row stays for recovery

Design Decisions:
    - tasks relationship is lazy="raise": services query the task table
      directly, so an implicit load fails loudly
"""

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from todolist.db.base import Base, TimestampMixin


class Category(TimestampMixin, Base):
    """Category entity."""
    __tablename__ = "categories"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    tasks: Mapped[list["Task"]] = relationship(
        "Task", back_populates="category",
        passive_deletes=True, lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Category {self.id} {self.name!r}>"
