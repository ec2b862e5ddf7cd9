"""Category Service — CRUD and pagination for categories with soft-delete visibility.

Invariants:
    - Every read filters deleted_at IS NULL; soft-deleted rows are invisible
    - update/delete match only live rows; zero affected rows → ResourceNotFoundError
    - delete soft-deletes the category's live tasks in the same transaction
    - Raises on first failure; the session is rolled back, never partially committed

Design Decisions:
    - AsyncSession injected via constructor (composition root in api/dependencies.py),
      never pulled from the process-wide db_manager
    - Bulk UPDATE statements for update/delete: one round trip, rowcount tells
      whether the id matched
    - A second delete of the same id fails (the match ignores deleted rows)
"""

import logging
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from todolist.core.domain_types import CategoryId
from todolist.core.errors import ResourceNotFoundError
from todolist.core.pagination import build_page, offset_for
from todolist.core.projections import project_category
from todolist.db.base import utcnow
from todolist.models.category import Category
from todolist.models.task import Task

logger = logging.getLogger(__name__)


class CategoryService:
    """Category CRUD over an injected AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, name: str) -> Category:
        """Persist a new category and return it with generated id and timestamps."""
        logger.info(
            f"Creating category with name: {name}",
            extra={"method": "CategoryService.create"},
        )
        try:
            category = Category(name=name)
            self.db.add(category)
            await self.db.commit()
            await self.db.refresh(category)
        except Exception:
            await self.db.rollback()
            logger.error(
                "Error while creating category",
                extra={"method": "CategoryService.create"}, exc_info=True,
            )
            raise
        logger.info(
            f"Category created successfully: {category.name}",
            extra={"method": "CategoryService.create", "entity_id": category.id},
        )
        return category

    async def get_all(self, page: int = 1, limit: int = 25) -> dict:
        """One page of live categories plus the total live count."""
        logger.info(
            f"Fetching categories - Page: {page}, Limit: {limit}",
            extra={"method": "CategoryService.get_all"},
        )
        live = Category.deleted_at.is_(None)
        try:
            total = await self.db.scalar(
                select(func.count()).select_from(Category).where(live),
            )
            result = await self.db.execute(
                select(Category)
                .where(live)
                .order_by(Category.created_at, Category.id)
                .offset(offset_for(page, limit))
                .limit(limit),
            )
            categories = result.scalars().all()
        except Exception:
            logger.error(
                "Error while fetching categories",
                extra={"method": "CategoryService.get_all"}, exc_info=True,
            )
            raise
        logger.info(
            f"Categories fetched successfully - Total: {total}",
            extra={"method": "CategoryService.get_all"},
        )
        return build_page(
            [project_category(c, include_deleted_at=False) for c in categories],
            total or 0, page, limit,
        )

    async def get_one(self, category_id: CategoryId | UUID) -> Category:
        """Live category by id; ResourceNotFoundError when absent or deleted."""
        logger.info(
            f"Fetching category with ID: {category_id}",
            extra={"method": "CategoryService.get_one"},
        )
        result = await self.db.execute(
            select(Category)
            .where(Category.id == category_id)
            .where(Category.deleted_at.is_(None))
            .execution_options(populate_existing=True),
        )
        category = result.scalar_one_or_none()
        if category is None:
            logger.error(
                "Error while fetching category",
                extra={
                    "method": "CategoryService.get_one",
                    "entity_id": category_id,
                    "error_code": "RESOURCE_NOT_FOUND",
                },
            )
            raise ResourceNotFoundError("Category", str(category_id))
        logger.info(
            f"Category fetched successfully: {category_id}",
            extra={"method": "CategoryService.get_one"},
        )
        return category

    async def update(
        self, category_id: CategoryId | UUID, fields: dict,
    ) -> Category:
        """Apply only the supplied fields, refresh updated_at, return the re-fetched row."""
        logger.info(
            f"Updating category with ID: {category_id}",
            extra={"method": "CategoryService.update"},
        )
        try:
            result = await self.db.execute(
                update(Category)
                .where(Category.id == category_id)
                .where(Category.deleted_at.is_(None))
                .values(**fields, updated_at=utcnow())
                .execution_options(synchronize_session=False),
            )
            if result.rowcount == 0:
                raise ResourceNotFoundError("Category", str(category_id))
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.error(
                "Error while updating category",
                extra={"method": "CategoryService.update", "entity_id": category_id},
                exc_info=True,
            )
            raise

        # A concurrent delete between commit and re-fetch surfaces as the same not-found
        category = await self.get_one(category_id)
        logger.info(
            f"Category updated successfully: {category.id}",
            extra={"method": "CategoryService.update", "entity_id": category.id},
        )
        return category

    async def delete(self, category_id: CategoryId | UUID) -> None:
        """Soft-delete the category and its live tasks."""
        logger.info(
            f"Soft deleting category with ID: {category_id}",
            extra={"method": "CategoryService.delete"},
        )
        now = utcnow()
        try:
            result = await self.db.execute(
                update(Category)
                .where(Category.id == category_id)
                .where(Category.deleted_at.is_(None))
                .values(deleted_at=now)
                .execution_options(synchronize_session=False),
            )
            if result.rowcount == 0:
                raise ResourceNotFoundError("Category", str(category_id))
            cascaded = await self.db.execute(
                update(Task)
                .where(Task.category_id == category_id)
                .where(Task.deleted_at.is_(None))
                .values(deleted_at=now)
                .execution_options(synchronize_session=False),
            )
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.error(
                "Error while soft deleting category",
                extra={"method": "CategoryService.delete", "entity_id": category_id},
                exc_info=True,
            )
            raise
        logger.info(
            f"Category soft deleted successfully: {category_id} "
            f"({cascaded.rowcount} task(s) cascaded)",
            extra={"method": "CategoryService.delete", "entity_id": category_id},
        )
