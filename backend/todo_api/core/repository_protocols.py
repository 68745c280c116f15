"""Boundary Protocols — contract between the Resource Service and the document store.

Invariants:
    - Service NEVER imports a concrete store — it receives one via dependency injection
    - Identifiers cross this boundary as opaque strings
    - "absent" outcomes are None/False return values, never exceptions;
      connectivity faults surface as DatabaseError

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - is_valid_id is synchronous: structural checks do no IO
"""

from typing import Protocol

from todo_api.core.domain_types import TodoId, TodoRecord


class TodoRepository(Protocol):
    """Contract for todo persistence — implemented by infrastructure."""
    def is_valid_id(self, todo_id: str) -> bool: ...
    async def insert(self, record: dict) -> TodoId: ...
    async def find_all(self) -> list[TodoRecord]: ...
    async def find_by_id(self, todo_id: TodoId) -> TodoRecord | None: ...
    async def update_by_id(
        self, todo_id: TodoId, fields: dict,
    ) -> TodoRecord | None: ...
    async def delete_by_id(self, todo_id: TodoId) -> bool: ...
