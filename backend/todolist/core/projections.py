"""Projections — the single place that decides how entities look on the wire.

Invariants:
    - Output keys are camelCase (createdAt, categoryId, ...)
    - List projections never expose deletedAt
    - A task's category is a name string (or None) in CategoryProjection.NAME mode
      and a full category object (or None) in CategoryProjection.NESTED mode

Design Decisions:
    - One mode-flagged function for the task/category asymmetry, so list and
      detail call sites trace back to the same decision point
    - Values stay as UUID/datetime; jsonable_encoder serializes at the HTTP edge
"""

from typing import Any

from todolist.core.domain_types import CategoryProjection
from todolist.core.entity_protocols import CategoryLike, TaskLike


def project_category(category: CategoryLike, include_deleted_at: bool = True) -> dict:
    """Full category (detail views) or list summary without deletedAt."""
    data: dict[str, Any] = {
        "id": category.id,
        "name": category.name,
        "createdAt": category.created_at,
        "updatedAt": category.updated_at,
    }
    if include_deleted_at:
        data["deletedAt"] = category.deleted_at
    return data


def project_task_category(
    category: CategoryLike | None, mode: CategoryProjection,
) -> str | dict | None:
    if category is None:
        return None
    if mode is CategoryProjection.NAME:
        return category.name
    return project_category(category)


def project_task(task: TaskLike, mode: CategoryProjection) -> dict:
    """Project a task; `mode` decides the shape of its category field."""
    data: dict[str, Any] = {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "status": task.status,
        "category": project_task_category(task.category, mode),
        "createdAt": task.created_at,
        "updatedAt": task.updated_at,
    }
    if mode is CategoryProjection.NESTED:
        data["categoryId"] = task.category_id
        data["deletedAt"] = task.deleted_at
    return data
