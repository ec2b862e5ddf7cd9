"""Category Routes — HTTP surface for categories.

Invariants:
    - Path ids are parsed as UUID before the controller runs (400 on failure)
    - Bodies validated by schemas/category.py before the controller runs
    - page/limit must be integers in range (400 otherwise); the controller
      applies the 1/25 defaults when they are absent

Design Decisions:
    - Action-style paths (/new, /update/{id}, /delete/{id}) kept for client compatibility
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from todolist.api.controllers.category_controller import CategoryController
from todolist.api.dependencies import get_category_controller
from todolist.core.pagination import MAX_LIMIT, MAX_PAGE
from todolist.schemas.category import CategoryCreate, CategoryUpdate

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post("/new")
async def create_category(
    body: CategoryCreate,
    controller: CategoryController = Depends(get_category_controller),
):
    """Create a new category."""
    return await controller.create(body.name)


@router.get("")
async def list_categories(
    page: int | None = Query(None, ge=1, le=MAX_PAGE),
    limit: int | None = Query(None, ge=1, le=MAX_LIMIT),
    controller: CategoryController = Depends(get_category_controller),
):
    """List live categories with pagination."""
    return await controller.get_all(page, limit)


@router.get("/{category_id}")
async def get_category(
    category_id: UUID,
    controller: CategoryController = Depends(get_category_controller),
):
    """Get a category by ID."""
    return await controller.get_one(category_id)


@router.put("/update/{category_id}")
async def update_category(
    category_id: UUID,
    body: CategoryUpdate,
    controller: CategoryController = Depends(get_category_controller),
):
    """Update a category by ID."""
    return await controller.update(category_id, body.model_dump())


@router.delete("/delete/{category_id}")
async def delete_category(
    category_id: UUID,
    controller: CategoryController = Depends(get_category_controller),
):
    """Soft delete a category (and its tasks) by ID."""
    return await controller.delete(category_id)
