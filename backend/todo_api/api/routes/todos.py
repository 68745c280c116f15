"""Todo Routes — HTTP adapter over TodoService for /api/todos.

Invariants:
    - One service call and one response per request (no retries, no partial writes)
    - Every failure on an endpoint collapses to that endpoint's fixed status/body:
        GET    /api/todos        500 {"error": "Failed to fetch todos"}
        POST   /api/todos        400 {"error": "Failed to create todo"}
        PUT    /api/todos/{id}   404 {"error": "Todo not found"}
        DELETE /api/todos/{id}   404 {"error": "Todo not found"}
    - Failure kind is never inspected and never echoed to the client

Design Decisions:
    - Bodies read from the Request, not declared as Pydantic parameters: FastAPI's
      RequestValidationError would bypass the per-endpoint mapping above
    - Empty body parses as {} (PUT with no body is a no-op update)
    - Request schemas still published to OpenAPI via openapi_extra
"""

import json
import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.infrastructure.database import get_db
from todo_api.infrastructure.todo_repository import SqlTodoRepository
from todo_api.schemas.todo import ErrorResponse, TodoCreate, TodoResponse, TodoUpdate
from todo_api.services.todo_service import TodoService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/todos", tags=["todos"])

FETCH_FAILED = "Failed to fetch todos"
CREATE_FAILED = "Failed to create todo"
NOT_FOUND = "Todo not found"


def get_todo_service(db: AsyncSession = Depends(get_db)) -> TodoService:
    """FastAPI dependency — one service per request, bound to its DB session."""
    return TodoService(SqlTodoRepository(db))


def _json_body(model) -> dict:
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": model.model_json_schema()},
            },
        },
    }


async def _read_json(request: Request) -> object:
    raw = await request.body()
    if not raw.strip():
        return {}
    return json.loads(raw)


def _failure(
    request: Request, exc: Exception, status_code: int, message: str,
) -> JSONResponse:
    logger.warning(
        f"{request.method} {request.url.path} failed: {exc}",
        extra={
            "error_code": getattr(exc, "code", type(exc).__name__),
            "path": request.url.path,
            "method": request.method,
        },
    )
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get(
    "",
    response_model=list[TodoResponse],
    summary="Get all todos",
    responses={500: {"model": ErrorResponse, "description": "Server error"}},
)
async def list_todos(
    request: Request, service: TodoService = Depends(get_todo_service),
):
    """List of all todos, in store order."""
    try:
        return await service.list_todos()
    except Exception as e:
        return _failure(
            request, e, status.HTTP_500_INTERNAL_SERVER_ERROR, FETCH_FAILED,
        )


@router.post(
    "",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new todo",
    responses={400: {"model": ErrorResponse, "description": "Invalid request body"}},
    openapi_extra=_json_body(TodoCreate),
)
async def create_todo(
    request: Request, service: TodoService = Depends(get_todo_service),
):
    """Create a todo; completed defaults to false."""
    try:
        return await service.create_todo(await _read_json(request))
    except Exception as e:
        return _failure(request, e, status.HTTP_400_BAD_REQUEST, CREATE_FAILED)


@router.put(
    "/{todo_id}",
    response_model=TodoResponse,
    summary="Update a todo by ID",
    responses={404: {"model": ErrorResponse, "description": "Todo not found"}},
    openapi_extra=_json_body(TodoUpdate),
)
async def update_todo(
    todo_id: str,
    request: Request,
    service: TodoService = Depends(get_todo_service),
):
    """Partial update — fields absent from the body are left unchanged."""
    try:
        return await service.update_todo(todo_id, await _read_json(request))
    except Exception as e:
        return _failure(request, e, status.HTTP_404_NOT_FOUND, NOT_FOUND)


@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a todo by ID",
    responses={404: {"model": ErrorResponse, "description": "Todo not found"}},
)
async def delete_todo(
    todo_id: str,
    request: Request,
    service: TodoService = Depends(get_todo_service),
):
    """Permanently remove a todo."""
    try:
        await service.delete_todo(todo_id)
    except Exception as e:
        return _failure(request, e, status.HTTP_404_NOT_FOUND, NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
