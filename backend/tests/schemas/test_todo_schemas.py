"""Todo schemas — create/update validation rules.

Invariants:
    - title must be non-empty and is kept exactly as sent
    - completed must be a real boolean
    - TodoUpdate keeps only supplied fields and refuses explicit nulls
"""

import pytest
from pydantic import ValidationError

from todo_api.schemas.todo import TodoCreate, TodoResponse, TodoUpdate


# --- TodoCreate ---------------------------------------------------------------

def test_create_defaults_completed():
    assert TodoCreate(title="A").completed is False


def test_create_keeps_title_verbatim():
    assert TodoCreate(title="  Buy milk  ").title == "  Buy milk  "


def test_create_accepts_whitespace_title():
    assert TodoCreate(title="   ").title == "   "


def test_create_rejects_empty_title():
    with pytest.raises(ValidationError):
        TodoCreate(title="")


def test_create_requires_title():
    with pytest.raises(ValidationError):
        TodoCreate.model_validate({"completed": True})


def test_create_rejects_non_boolean_completed():
    with pytest.raises(ValidationError):
        TodoCreate.model_validate({"title": "A", "completed": "true"})


def test_create_ignores_unknown_fields():
    todo = TodoCreate.model_validate({"title": "A", "id": "x", "owner": "me"})
    assert todo.model_dump() == {"title": "A", "completed": False}


# --- TodoUpdate ---------------------------------------------------------------

def test_update_empty_patch():
    assert TodoUpdate.model_validate({}).model_dump(exclude_unset=True) == {}


def test_update_keeps_only_supplied_fields():
    patch = TodoUpdate.model_validate({"completed": True})
    assert patch.model_dump(exclude_unset=True) == {"completed": True}


def test_update_keeps_title_verbatim():
    patch = TodoUpdate.model_validate({"title": " B "})
    assert patch.model_dump(exclude_unset=True) == {"title": " B "}


@pytest.mark.parametrize("body", [
    {"title": ""},
    {"title": None},
    {"completed": None},
    {"completed": 1},
])
def test_update_rejects_invalid_values(body):
    with pytest.raises(ValidationError):
        TodoUpdate.model_validate(body)


# --- TodoResponse -------------------------------------------------------------

def test_response_shape():
    todo = TodoResponse(id="abc", title="A", completed=True)
    assert todo.model_dump() == {"id": "abc", "title": "A", "completed": True}
