"""SQLAlchemy Declarative Base — shared base class and timestamp columns for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - TimestampMixin owns created_at/updated_at/deleted_at for every entity

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - deleted_at is a plain nullable column, not a query filter: services decide visibility
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all todo-list ORM models."""
    pass


class TimestampMixin:
    """created_at/updated_at maintained on write; deleted_at marks a soft delete."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=utcnow, onupdate=utcnow,
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
