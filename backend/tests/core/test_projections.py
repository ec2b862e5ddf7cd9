"""Projections — wire shapes for categories and the task category asymmetry.

Tests:
    - List projection of a category omits deletedAt, detail includes it
    - NAME mode renders task.category as the name string, NESTED as an object
    - Missing category renders as None in both modes
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest

from todolist.core.domain_types import CategoryProjection
from todolist.core.projections import project_category, project_task

NOW = datetime(2026, 3, 1, tzinfo=timezone.utc)


def _category(name="Study"):
    return SimpleNamespace(
        id=uuid4(), name=name, created_at=NOW, updated_at=NOW, deleted_at=None,
    )


def _task(category):
    return SimpleNamespace(
        id=uuid4(), title="Read", description=None, status="pending",
        category=category, category_id=category.id if category else uuid4(),
        created_at=NOW, updated_at=NOW, deleted_at=None,
    )


def test_project_category_detail_includes_deleted_at():
    data = project_category(_category())
    assert set(data) == {"id", "name", "createdAt", "updatedAt", "deletedAt"}


def test_project_category_list_omits_deleted_at():
    data = project_category(_category(), include_deleted_at=False)
    assert "deletedAt" not in data


def test_task_name_mode_renders_category_name():
    data = project_task(_task(_category("Study")), CategoryProjection.NAME)
    assert data["category"] == "Study"
    assert "deletedAt" not in data


def test_task_nested_mode_renders_category_object():
    category = _category("Study")
    data = project_task(_task(category), CategoryProjection.NESTED)
    assert data["category"]["id"] == category.id
    assert data["category"]["name"] == "Study"
    assert data["categoryId"] == category.id


@pytest.mark.parametrize("mode", list(CategoryProjection))
def test_task_without_category_renders_none(mode):
    assert project_task(_task(None), mode)["category"] is None
