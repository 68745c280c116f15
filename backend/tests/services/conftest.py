"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB sessions
    - db_manager patched so readiness probes see the test engine
    - unavailable_service simulates a store that fails every call

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from todo_api.core.errors import DatabaseError
from todo_api.db.base import Base
from todo_api.infrastructure.database import get_db, DatabaseSessionManager
from todo_api.infrastructure.todo_repository import SqlTodoRepository
from todo_api.models.todo import Todo
from todo_api.services.todo_service import TodoService
import todo_api.infrastructure.database as db_module
from todo_api.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
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
def repository(test_db):
    return SqlTodoRepository(test_db)


@pytest.fixture
def service(repository):
    return TodoService(repository)


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
async def seed_todo(test_db):
    """Insert a single open todo directly into the test DB."""
    todo = Todo(title="Water plants", completed=False)
    test_db.add(todo)
    await test_db.commit()
    await test_db.refresh(todo)
    return todo


@pytest.fixture
def todo_count(test_session_factory):
    """Async callable returning the number of stored todos (fresh session)."""
    async def _count() -> int:
        async with test_session_factory() as session:
            result = await session.execute(
                select(func.count()).select_from(Todo),
            )
            return result.scalar_one()
    return _count


class UnavailableRepository:
    """Store whose every IO call fails with a connectivity fault."""

    def __init__(self):
        self.calls: list[str] = []

    def is_valid_id(self, todo_id: str) -> bool:
        return True

    async def _fail(self, operation: str):
        self.calls.append(operation)
        raise DatabaseError("Connection refused", operation)

    async def insert(self, record):
        await self._fail("insert")

    async def find_all(self):
        await self._fail("find_all")

    async def find_by_id(self, todo_id):
        await self._fail("find_by_id")

    async def update_by_id(self, todo_id, fields):
        await self._fail("update_by_id")

    async def delete_by_id(self, todo_id):
        await self._fail("delete_by_id")


@pytest.fixture
def unavailable_service():
    return TodoService(UnavailableRepository())
