"""Task Routes — HTTP surface for tasks.

Invariants:
    - Path ids are parsed as UUID before the controller runs (400 on failure)
    - Bodies validated by schemas/task.py; update forwards only supplied fields
    - page/limit outside their integer range answer 400 before the controller
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from todolist.api.controllers.task_controller import TaskController
from todolist.api.dependencies import get_task_controller
from todolist.core.pagination import MAX_LIMIT, MAX_PAGE
from todolist.schemas.task import TaskCreate, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post("/new")
async def create_task(
    body: TaskCreate,
    controller: TaskController = Depends(get_task_controller),
):
    """Create a new task."""
    return await controller.create(body.to_fields())


@router.get("")
async def list_tasks(
    page: int | None = Query(None, ge=1, le=MAX_PAGE),
    limit: int | None = Query(None, ge=1, le=MAX_LIMIT),
    controller: TaskController = Depends(get_task_controller),
):
    """List live tasks with pagination; category rendered as its name."""
    return await controller.get_all(page, limit)


@router.get("/{task_id}")
async def get_task(
    task_id: UUID,
    controller: TaskController = Depends(get_task_controller),
):
    """Get a task by ID with its category nested."""
    return await controller.get_one(task_id)


@router.put("/update/{task_id}")
async def update_task(
    task_id: UUID,
    body: TaskUpdate,
    controller: TaskController = Depends(get_task_controller),
):
    """Partially update a task by ID."""
    return await controller.update(task_id, body.to_fields())


@router.delete("/delete/{task_id}")
async def delete_task(
    task_id: UUID,
    controller: TaskController = Depends(get_task_controller),
):
    """Soft delete a task by ID."""
    return await controller.delete(task_id)
