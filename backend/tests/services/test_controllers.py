"""Controllers — envelope shape and the flat (resource, action) status mapping.

Tests cover:
    - Success envelopes carry the action message and projected data
    - Failures map to the action's fixed status regardless of error kind
    - page/limit parsing defaults to 1/25 for absent or non-numeric input

Services are AsyncMocks; no database involved.
"""

import json
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from todolist.api.controllers.category_controller import CategoryController
from todolist.api.controllers.task_controller import TaskController
from todolist.core.errors import ReferentialIntegrityError, ResourceNotFoundError


def _body(response) -> dict:
    return json.loads(response.body)


def _make_category(**overrides):
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    data = dict(
        id=uuid4(), name="Sample category",
        created_at=now, updated_at=now, deleted_at=None,
    )
    data.update(overrides)
    return SimpleNamespace(**data)


def _make_task(**overrides):
    category = _make_category()
    now = datetime(2026, 1, 2, tzinfo=timezone.utc)
    data = dict(
        id=uuid4(), title="Sample Task", description=None, status="pending",
        category=category, category_id=category.id,
        created_at=now, updated_at=now, deleted_at=None,
    )
    data.update(overrides)
    return SimpleNamespace(**data)


@pytest.fixture
def task_service():
    return AsyncMock()


@pytest.fixture
def category_service():
    return AsyncMock()


# --- TaskController ----------------------------------------------------------

async def test_create_task_returns_201_with_nested_category(task_service):
    task = _make_task(title="New Task")
    task_service.create.return_value = task
    fields = {"title": "New Task", "category_id": task.category_id}

    res = await TaskController(task_service).create(fields)

    task_service.create.assert_awaited_once_with(fields)
    assert res.status_code == 201
    body = _body(res)
    assert body["message"] == "Task successfully created"
    assert body["data"]["title"] == "New Task"
    assert body["data"]["category"]["name"] == "Sample category"
    assert body["data"]["categoryId"] == str(task.category_id)


async def test_create_task_failure_returns_400(task_service):
    task_service.create.side_effect = ReferentialIntegrityError("Category missing")

    res = await TaskController(task_service).create({"title": "x"})

    assert res.status_code == 400
    assert _body(res) == {"message": "Failed to create task", "error": "Category missing"}


async def test_get_all_tasks_passes_parsed_paging(task_service):
    page = {"data": [], "meta": {"total": 10, "page": 1, "limit": 10}}
    task_service.get_all.return_value = page

    res = await TaskController(task_service).get_all("1", "10")

    task_service.get_all.assert_awaited_once_with(1, 10)
    assert res.status_code == 200
    assert _body(res) == {"message": "Tasks fetched successfully", "data": page}


@pytest.mark.parametrize(
    "page, limit",
    [(None, None), ("abc", "xyz"), ("0", "-5"), ("", "")],
)
async def test_get_all_tasks_defaults_paging(task_service, page, limit):
    task_service.get_all.return_value = {"data": [], "meta": {}}

    await TaskController(task_service).get_all(page, limit)

    task_service.get_all.assert_awaited_once_with(1, 25)


async def test_get_all_tasks_failure_returns_500(task_service):
    task_service.get_all.side_effect = RuntimeError("Fetching failed")

    res = await TaskController(task_service).get_all()

    assert res.status_code == 500
    assert _body(res) == {"message": "Failed to fetch tasks", "error": "Fetching failed"}


async def test_get_task_not_found_returns_404(task_service):
    task_id = uuid4()
    task_service.get_one.side_effect = ResourceNotFoundError("Task", str(task_id))

    res = await TaskController(task_service).get_one(task_id)

    assert res.status_code == 404
    assert _body(res) == {
        "message": "Failed to fetch task",
        "error": f"Task with ID {task_id} not found",
    }


async def test_update_task_not_found_returns_400_not_404(task_service):
    task_id = uuid4()
    task_service.update.side_effect = ResourceNotFoundError("Task", str(task_id))

    res = await TaskController(task_service).update(task_id, {"title": "Updated"})

    task_service.update.assert_awaited_once_with(task_id, {"title": "Updated"})
    assert res.status_code == 400
    assert _body(res)["message"] == "Failed to update task"


async def test_update_task_success_returns_200(task_service):
    task = _make_task(title="Updated Task", status="done")
    task_service.update.return_value = task

    res = await TaskController(task_service).update(task.id, {"status": "done"})

    assert res.status_code == 200
    body = _body(res)
    assert body["message"] == "Task updated successfully"
    assert body["data"]["status"] == "done"


async def test_delete_task_success_has_no_data(task_service):
    task_service.delete.return_value = None
    task_id = uuid4()

    res = await TaskController(task_service).delete(task_id)

    task_service.delete.assert_awaited_once_with(task_id)
    assert res.status_code == 200
    assert _body(res) == {"message": "Task deleted successfully"}


async def test_delete_task_failure_returns_400(task_service):
    task_service.delete.side_effect = Exception("Delete failed")

    res = await TaskController(task_service).delete(uuid4())

    assert res.status_code == 400
    assert _body(res) == {"message": "Failed to delete task", "error": "Delete failed"}


# --- CategoryController ------------------------------------------------------

async def test_create_category_returns_201(category_service):
    category = _make_category(name="Study")
    category_service.create.return_value = category

    res = await CategoryController(category_service).create("Study")

    category_service.create.assert_awaited_once_with("Study")
    assert res.status_code == 201
    body = _body(res)
    assert body["message"] == "Category successfully created"
    assert body["data"]["name"] == "Study"
    assert body["data"]["deletedAt"] is None


async def test_get_category_not_found_returns_404(category_service):
    category_service.get_one.side_effect = ResourceNotFoundError("Category", "x")

    res = await CategoryController(category_service).get_one(uuid4())

    assert res.status_code == 404
    assert _body(res)["message"] == "Failed to fetch category"


async def test_get_all_categories_failure_returns_500(category_service):
    category_service.get_all.side_effect = RuntimeError("db down")

    res = await CategoryController(category_service).get_all("2", "5")

    category_service.get_all.assert_awaited_once_with(2, 5)
    assert res.status_code == 500
    assert _body(res) == {"message": "Failed to fetch categories", "error": "db down"}


async def test_update_category_not_found_returns_400(category_service):
    category_service.update.side_effect = ResourceNotFoundError("Category", "x")

    res = await CategoryController(category_service).update(uuid4(), {"name": "n"})

    assert res.status_code == 400
    assert _body(res)["message"] == "Failed to update category"


async def test_delete_category_returns_200(category_service):
    res = await CategoryController(category_service).delete(uuid4())

    assert res.status_code == 200
    assert _body(res) == {"message": "Category deleted successfully"}
