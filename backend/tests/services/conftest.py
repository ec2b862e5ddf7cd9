"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys on
    - get_db dependency overridden to use the test DB
    - db_manager patched for the readiness probe, which bypasses get_db

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Services under test get test_db injected directly, the same way the
      composition root injects a request session
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from todolist.db.base import Base
from todolist.db.session import enable_sqlite_foreign_keys
from todolist.infrastructure.database import get_db, DatabaseSessionManager
from todolist.models.category import Category
from todolist.models.task import Task
from todolist.services.category_service import CategoryService
from todolist.services.task_service import TaskService
import todolist.infrastructure.database as db_module
from todolist.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def category_service(test_db):
    return CategoryService(test_db)


@pytest.fixture
def task_service(test_db):
    return TaskService(test_db)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def study_category(test_db):
    """Insert a live "Study" category directly into the test DB."""
    category = Category(name="Study")
    test_db.add(category)
    await test_db.commit()
    await test_db.refresh(category)
    return category


@pytest.fixture
async def read_task(test_db, study_category):
    """Insert a pending "Read" task in the Study category."""
    task = Task(title="Read", description="Chapter 1", category_id=study_category.id)
    test_db.add(task)
    await test_db.commit()
    await test_db.refresh(task)
    return task
