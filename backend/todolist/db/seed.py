"""Seed Data — inserts demo categories and tasks into an empty database.

Usage:
    python -m todolist.db.seed

Invariants:
    - Idempotent: categories are skipped when any seed name exists, tasks when any seed title exists
    - Tasks are seeded into the "Study" category; missing category skips task seeding

Design Decisions:
    - Uses create_session_factory (db/session.py), not the FastAPI db_manager
"""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from todolist.config import get_settings
from todolist.db.session import create_session_factory
from todolist.infrastructure.observability import setup_logging
from todolist.models.category import Category
from todolist.models.task import Task

logger = logging.getLogger(__name__)

SEED_CATEGORIES = ["Study", "Personal", "Shopping"]

SEED_TASKS = [
    {"title": "Review Sorting Algorithm", "description": "Understand mergeSort"},
    {
        "title": "Explain the problem out loud",
        "description": "Improve problem-solving and communication skills",
    },
    {
        "title": "Time Drills",
        "description": "Stick to 5 mins/easy, 10 mins/medium, and 15 mins/hard problems",
    },
]


async def seed_categories(db: AsyncSession) -> int:
    """Insert seed categories unless any already exist. Returns rows inserted."""
    existing = await db.execute(
        select(Category.id).where(Category.name.in_(SEED_CATEGORIES)),
    )
    if existing.first() is not None:
        logger.info("Categories already exist!", extra={"method": "seed_categories"})
        return 0
    db.add_all([Category(name=name) for name in SEED_CATEGORIES])
    await db.commit()
    logger.info("Categories seeded successfully!", extra={"method": "seed_categories"})
    return len(SEED_CATEGORIES)


async def seed_tasks(db: AsyncSession) -> int:
    """Insert seed tasks into the Study category. Returns rows inserted."""
    study = await db.scalar(
        select(Category)
        .where(Category.name == "Study")
        .where(Category.deleted_at.is_(None)),
    )
    if study is None:
        logger.error(
            "'Study' category not found. Skipping task seeding.",
            extra={"method": "seed_tasks"},
        )
        return 0
    titles = [t["title"] for t in SEED_TASKS]
    existing = await db.execute(select(Task.id).where(Task.title.in_(titles)))
    if existing.first() is not None:
        logger.info(
            "Tasks already exist. Skipping task seeding.",
            extra={"method": "seed_tasks"},
        )
        return 0
    db.add_all([Task(category_id=study.id, **t) for t in SEED_TASKS])
    await db.commit()
    logger.info("Tasks seeded successfully!", extra={"method": "seed_tasks"})
    return len(SEED_TASKS)


async def run_seeder(database_url: str) -> None:
    session_factory = create_session_factory(database_url)
    logger.info("Starting database seeding...", extra={"method": "run_seeder"})
    try:
        async with session_factory() as db:
            await seed_categories(db)
            await seed_tasks(db)
    finally:
        await session_factory.kw["bind"].dispose()
    logger.info("Database seeding completed successfully!", extra={"method": "run_seeder"})


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    asyncio.run(run_seeder(settings.database_url))


if __name__ == "__main__":
    main()
