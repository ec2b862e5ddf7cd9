"""Health probes and seed data.

Tests cover:
    - Liveness always 200, readiness 200 when the database answers
    - Seeding inserts categories and Study tasks once, then skips
"""

from sqlalchemy import func, select

from todolist.db.seed import SEED_CATEGORIES, SEED_TASKS, seed_categories, seed_tasks
from todolist.models.task import Task


async def test_liveness_returns_200(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_returns_200_with_database(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_seed_is_idempotent(test_db):
    assert await seed_categories(test_db) == len(SEED_CATEGORIES)
    assert await seed_tasks(test_db) == len(SEED_TASKS)

    assert await seed_categories(test_db) == 0
    assert await seed_tasks(test_db) == 0
    assert await test_db.scalar(select(func.count()).select_from(Task)) == len(SEED_TASKS)


async def test_seed_tasks_without_study_category_skips(test_db):
    assert await seed_tasks(test_db) == 0
