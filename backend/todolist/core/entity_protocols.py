"""Boundary Protocols — structural contracts between core and the ORM shell.

Invariants:
    - Core NEVER imports from models/ or db/; dependency arrows point inward only
    - Projections and envelopes accept anything shaped like these Protocols

Design Decisions:
    - Protocol over ABC: structural subtyping, ORM rows and test doubles both fit
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID


class CategoryLike(Protocol):
    """Structural contract for Category rows passed to projections."""
    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None


class TaskLike(Protocol):
    """Structural contract for Task rows passed to projections.

    `category` is the loaded association; it may be None when the row was
    fetched without it or the parent no longer exists.
    """
    id: UUID
    title: str
    description: str | None
    status: str
    category_id: UUID
    category: CategoryLike | None
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None
