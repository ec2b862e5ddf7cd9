"""Composition Root — builds session → service → controller for each request.

Invariants:
    - Services receive their AsyncSession through the constructor
    - Nothing below this module reaches into infrastructure.database globals

Design Decisions:
    - FastAPI Depends chain over a DI container: per-request lifetimes come for free
      and tests override get_db alone
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from todolist.api.controllers.category_controller import CategoryController
from todolist.api.controllers.task_controller import TaskController
from todolist.infrastructure.database import get_db
from todolist.services.category_service import CategoryService
from todolist.services.task_service import TaskService


def get_category_service(db: AsyncSession = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    return TaskService(db)


def get_category_controller(
    service: CategoryService = Depends(get_category_service),
) -> CategoryController:
    return CategoryController(service)


def get_task_controller(
    service: TaskService = Depends(get_task_service),
) -> TaskController:
    return TaskController(service)
