"""Task Service — CRUD and pagination for tasks with soft-delete visibility and category association.

Invariants:
    - Every read filters deleted_at IS NULL; soft-deleted rows are invisible
    - category_id must reference a live category on create and on re-assignment,
      otherwise ReferentialIntegrityError (FK IntegrityError on commit maps to the same)
    - get_all projects category to its name; get_one/update return the nested category
    - update/delete match only live rows; zero affected rows → ResourceNotFoundError

Design Decisions:
    - AsyncSession injected via constructor, never pulled from global state
    - category eagerly loaded (joinedload for lists, selectinload for single rows):
      Task.category is lazy="raise" so a missed load fails loudly
    - create returns the re-fetched task so callers always see the nested category
"""

import logging
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from todolist.core.domain_types import CategoryProjection, TaskId, TaskStatus
from todolist.core.errors import ReferentialIntegrityError, ResourceNotFoundError
from todolist.core.pagination import build_page, offset_for
from todolist.core.projections import project_task
from todolist.db.base import utcnow
from todolist.models.category import Category
from todolist.models.task import Task

logger = logging.getLogger(__name__)


class TaskService:
    """Task CRUD over an injected AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _ensure_category(self, category_id: UUID) -> None:
        found = await self.db.scalar(
            select(Category.id)
            .where(Category.id == category_id)
            .where(Category.deleted_at.is_(None)),
        )
        if found is None:
            raise ReferentialIntegrityError(
                f"Category with ID {category_id} does not exist",
            )

    async def create(self, fields: dict) -> Task:
        """Persist a task (status defaults to pending) in an existing category."""
        logger.info(
            f"Creating task: {fields.get('title')}",
            extra={"method": "TaskService.create"},
        )
        try:
            await self._ensure_category(fields["category_id"])
            task = Task(
                title=fields["title"],
                description=fields.get("description"),
                status=fields.get("status") or TaskStatus.PENDING.value,
                category_id=fields["category_id"],
            )
            self.db.add(task)
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.error(
                "Error while creating task",
                extra={"method": "TaskService.create", "error_code": "REFERENTIAL_INTEGRITY"},
            )
            raise ReferentialIntegrityError(
                f"Category with ID {fields.get('category_id')} does not exist",
            ) from e
        except Exception:
            await self.db.rollback()
            logger.error(
                "Error while creating task",
                extra={"method": "TaskService.create"}, exc_info=True,
            )
            raise
        logger.info(
            f"Task created successfully: {task.id}",
            extra={"method": "TaskService.create", "entity_id": task.id},
        )
        return await self.get_one(task.id)

    async def get_all(self, page: int = 1, limit: int = 25) -> dict:
        """One page of live tasks; each item's category is its name (or None)."""
        logger.info(
            f"Fetching tasks - Page: {page}, Limit: {limit}",
            extra={"method": "TaskService.get_all"},
        )
        live = Task.deleted_at.is_(None)
        try:
            total = await self.db.scalar(
                select(func.count()).select_from(Task).where(live),
            )
            result = await self.db.execute(
                select(Task)
                .options(joinedload(Task.category))
                .where(live)
                .order_by(Task.created_at, Task.id)
                .offset(offset_for(page, limit))
                .limit(limit),
            )
            tasks = result.scalars().all()
        except Exception:
            logger.error(
                "Error while fetching tasks",
                extra={"method": "TaskService.get_all"}, exc_info=True,
            )
            raise
        logger.info(
            f"Tasks fetched successfully - Total: {total}",
            extra={"method": "TaskService.get_all"},
        )
        return build_page(
            [project_task(t, CategoryProjection.NAME) for t in tasks],
            total or 0, page, limit,
        )

    async def get_one(self, task_id: TaskId | UUID) -> Task:
        """Live task with its category loaded."""
        logger.info(
            f"Fetching task with ID: {task_id}",
            extra={"method": "TaskService.get_one"},
        )
        result = await self.db.execute(
            select(Task)
            .options(selectinload(Task.category))
            .where(Task.id == task_id)
            .where(Task.deleted_at.is_(None))
            .execution_options(populate_existing=True),
        )
        task = result.scalar_one_or_none()
        if task is None:
            logger.error(
                "Error while fetching task",
                extra={
                    "method": "TaskService.get_one",
                    "entity_id": task_id,
                    "error_code": "RESOURCE_NOT_FOUND",
                },
            )
            raise ResourceNotFoundError("Task", str(task_id))
        logger.info(
            f"Task fetched successfully: {task_id}",
            extra={"method": "TaskService.get_one"},
        )
        return task

    async def update(self, task_id: TaskId | UUID, fields: dict) -> Task:
        """Apply only the supplied fields, refresh updated_at, return via get_one."""
        logger.info(
            f"Updating task with ID: {task_id}",
            extra={"method": "TaskService.update"},
        )
        try:
            if fields.get("category_id") is not None:
                await self._ensure_category(fields["category_id"])
            result = await self.db.execute(
                update(Task)
                .where(Task.id == task_id)
                .where(Task.deleted_at.is_(None))
                .values(**fields, updated_at=utcnow())
                .execution_options(synchronize_session=False),
            )
            if result.rowcount == 0:
                raise ResourceNotFoundError("Task", str(task_id))
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.error(
                "Error while updating task",
                extra={"method": "TaskService.update", "error_code": "REFERENTIAL_INTEGRITY"},
            )
            raise ReferentialIntegrityError(
                f"Category with ID {fields.get('category_id')} does not exist",
            ) from e
        except Exception:
            await self.db.rollback()
            logger.error(
                "Error while updating task",
                extra={"method": "TaskService.update", "entity_id": task_id},
                exc_info=True,
            )
            raise
        task = await self.get_one(task_id)
        logger.info(
            f"Task updated successfully: {task_id}",
            extra={"method": "TaskService.update", "entity_id": task_id},
        )
        return task

    async def delete(self, task_id: TaskId | UUID) -> None:
        """Soft delete: set deleted_at on the live row matching id."""
        logger.info(
            f"Soft deleting task with ID: {task_id}",
            extra={"method": "TaskService.delete"},
        )
        try:
            result = await self.db.execute(
                update(Task)
                .where(Task.id == task_id)
                .where(Task.deleted_at.is_(None))
                .values(deleted_at=utcnow())
                .execution_options(synchronize_session=False),
            )
            if result.rowcount == 0:
                raise ResourceNotFoundError("Task", str(task_id))
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.error(
                "Error while soft deleting task",
                extra={"method": "TaskService.delete", "entity_id": task_id},
                exc_info=True,
            )
            raise
        logger.info(
            f"Task soft deleted successfully: {task_id}",
            extra={"method": "TaskService.delete", "entity_id": task_id},
        )
