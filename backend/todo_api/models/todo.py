"""Todo ORM — the sole persisted entity.

Invariants:
    - seq is an auto-incrementing surrogate key; its order is insertion order
    - id is a unique UUID assigned at insert, never reassigned or reused
    - title is non-nullable text; completed is non-nullable, defaults to False

Design Decisions:
    - Integer primary key for ordering, UUID for the public handle: timestamps tie
      within a microsecond, a database sequence never does
    - Generic Uuid type: native UUID on PostgreSQL, CHAR(32) on SQLite test databases
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from todo_api.db.base import Base


class Todo(Base):
    """Todo item."""
    __tablename__ = "todos"

    seq: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), unique=True, nullable=False, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
