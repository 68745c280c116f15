"""Todo Service — CRUD contract between HTTP routes and the document store.

Invariants:
    - Single place deciding whether an input shape or identifier makes sense
    - Identifier structure is judged by the store (repository.is_valid_id)
    - Never logs, never swallows: every failure leaves as a TodoApiError subclass
    - No state between calls; every operation goes straight to the store
    - Validation happens before any write, so a rejected call persists nothing

Design Decisions:
    - Pydantic ValidationError translated to InputValidationError here, so the
      routes never see library exceptions
    - Malformed id on update is a validation failure; on delete it is not-found
"""

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from todo_api.core.domain_types import TodoId
from todo_api.core.errors import (
    ErrorContext, InputValidationError, ResourceNotFoundError,
)
from todo_api.core.repository_protocols import TodoRepository
from todo_api.schemas.todo import TodoCreate, TodoResponse, TodoUpdate

RESOURCE = "Todo"

M = TypeVar("M", bound=BaseModel)


class TodoService:
    """Resource Service for todos."""

    def __init__(self, repository: TodoRepository):
        self._repo = repository

    async def list_todos(self) -> list[TodoResponse]:
        records = await self._repo.find_all()
        return [TodoResponse(**r) for r in records]

    async def create_todo(self, payload: object) -> TodoResponse:
        data = _validate(TodoCreate, payload)
        fields = data.model_dump()
        todo_id = await self._repo.insert(fields)
        return TodoResponse(id=todo_id, **fields)

    async def update_todo(self, todo_id: str, payload: object) -> TodoResponse:
        if not self._repo.is_valid_id(todo_id):
            raise InputValidationError(
                f"Malformed todo id '{todo_id}'", "id",
                ErrorContext(todo_id=todo_id, operation="update"),
            )
        patch = _validate(TodoUpdate, payload).model_dump(exclude_unset=True)
        record = await self._repo.update_by_id(TodoId(todo_id), patch)
        if record is None:
            raise ResourceNotFoundError(
                RESOURCE, todo_id,
                ErrorContext(todo_id=todo_id, operation="update"),
            )
        return TodoResponse(**record)

    async def delete_todo(self, todo_id: str) -> None:
        context = ErrorContext(todo_id=todo_id, operation="delete")
        if not self._repo.is_valid_id(todo_id):
            raise ResourceNotFoundError(RESOURCE, todo_id, context)
        if not await self._repo.delete_by_id(TodoId(todo_id)):
            raise ResourceNotFoundError(RESOURCE, todo_id, context)


def _validate(model: type[M], payload: object) -> M:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"]) or "body"
        raise InputValidationError(first["msg"], field) from e
