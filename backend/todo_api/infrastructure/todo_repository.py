"""SQL Todo Repository — TodoRepository implementation on an AsyncSession.

Invariants:
    - Identifiers are UUIDs in canonical form (lowercase, hyphenated); every other
      spelling is structurally invalid, so one todo has exactly one URL
    - Every write commits before returning (no buffering across calls)
    - Every read goes to the database (no in-process cache)
    - find_all returns insertion order (Todo.seq)
    - SQLAlchemy and connection faults roll back and raise DatabaseError
    - Absent records are reported as None / False, never as exceptions

Design Decisions:
    - One repository per request session: FastAPI dependency wires it to get_db
    - Records leave as plain dicts (TodoRecord), never as ORM instances
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.core.domain_types import TodoId, TodoRecord
from todo_api.core.errors import DatabaseError, ErrorContext
from todo_api.models.todo import Todo

logger = logging.getLogger(__name__)

_WRITABLE_FIELDS = ("title", "completed")


def _to_record(todo: Todo) -> TodoRecord:
    return TodoRecord(
        id=TodoId(str(todo.id)), title=todo.title, completed=todo.completed,
    )


class SqlTodoRepository:
    """Todo persistence backed by the relational database."""

    def __init__(self, db: AsyncSession):
        self._db = db

    def is_valid_id(self, todo_id: str) -> bool:
        try:
            return str(UUID(todo_id)) == todo_id
        except (TypeError, ValueError, AttributeError):
            return False

    async def insert(self, record: dict) -> TodoId:
        todo = Todo(**{k: v for k, v in record.items() if k in _WRITABLE_FIELDS})
        async with self._operation("insert"):
            self._db.add(todo)
            await self._db.commit()
        return TodoId(str(todo.id))

    async def find_all(self) -> list[TodoRecord]:
        async with self._operation("find_all"):
            result = await self._db.execute(
                select(Todo).order_by(Todo.seq),
            )
            return [_to_record(t) for t in result.scalars().all()]

    async def find_by_id(self, todo_id: TodoId) -> TodoRecord | None:
        async with self._operation("find_by_id", todo_id):
            todo = await self._get(todo_id)
            return _to_record(todo) if todo else None

    async def update_by_id(
        self, todo_id: TodoId, fields: dict,
    ) -> TodoRecord | None:
        async with self._operation("update_by_id", todo_id):
            todo = await self._get(todo_id)
            if not todo:
                return None
            for name in _WRITABLE_FIELDS:
                if name in fields:
                    setattr(todo, name, fields[name])
            await self._db.commit()
            return _to_record(todo)

    async def delete_by_id(self, todo_id: TodoId) -> bool:
        async with self._operation("delete_by_id", todo_id):
            todo = await self._get(todo_id)
            if not todo:
                return False
            await self._db.delete(todo)
            await self._db.commit()
            return True

    async def _get(self, todo_id: TodoId) -> Todo | None:
        # populate_existing: a fresh read even if the identity map holds the row
        result = await self._db.execute(
            select(Todo)
            .where(Todo.id == UUID(todo_id))
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    @asynccontextmanager
    async def _operation(
        self, operation: str, todo_id: str | None = None,
    ) -> AsyncIterator[None]:
        try:
            yield
        except (SQLAlchemyError, OSError) as e:
            await self._db.rollback()
            logger.error(
                f"Todo store {operation} failed: {e}",
                extra={"operation": operation, "todo_id": todo_id},
            )
            raise DatabaseError(
                "Todo store unavailable", operation,
                ErrorContext(todo_id=todo_id, operation=operation),
            ) from e
