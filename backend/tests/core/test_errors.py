"""Error hierarchy — status codes, categories and REST envelope."""

from todo_api.core.errors import (
    DatabaseError, ErrorCategory, ErrorContext, ErrorSeverity,
    InputValidationError, ResourceNotFoundError, TodoApiError,
)


def test_all_errors_share_base():
    for exc in (
        InputValidationError("bad", "title"),
        ResourceNotFoundError("Todo", "abc"),
        DatabaseError("down", "insert"),
    ):
        assert isinstance(exc, TodoApiError)


def test_validation_error():
    exc = InputValidationError("title cannot be empty", "title")
    assert exc.http_status == 400
    assert exc.category is ErrorCategory.VALIDATION
    assert exc.field == "title"


def test_not_found_error_message():
    exc = ResourceNotFoundError("Todo", "abc")
    assert exc.http_status == 404
    assert exc.message == "Todo 'abc' not found"
    assert exc.resource_id == "abc"


def test_database_error_is_critical():
    exc = DatabaseError("Connection refused", "find_all")
    assert exc.http_status == 503
    assert exc.severity is ErrorSeverity.CRITICAL
    assert exc.message == "Database find_all failed: Connection refused"


def test_to_response_envelope():
    exc = ResourceNotFoundError("Todo", "abc", ErrorContext(todo_id="abc"))
    body = exc.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "error"
    assert "timestamp" in body
