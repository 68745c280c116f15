"""Todo Schemas — Pydantic models with field-level validation for the todo contract.

Invariants:
    - TodoCreate.title: required, non-empty, stored exactly as sent; completed defaults to False
    - TodoUpdate: every field optional, but a supplied field must carry a real value
    - Strict types: "true" is not a boolean, 42 is not a title
    - Unknown fields are ignored, so "id" in a body can never reassign an identifier

Design Decisions:
    - Titles are never trimmed or normalised: list echoes what create received
    - TodoUpdate.model_dump(exclude_unset=True) is the partial patch handed to the store
"""

from typing import Annotated

from pydantic import BaseModel, Field, StrictBool, StrictStr, model_validator

Title = Annotated[StrictStr, Field(min_length=1)]


class TodoCreate(BaseModel):
    """Create input — title required, completed optional."""
    title: Title
    completed: StrictBool = False


class TodoUpdate(BaseModel):
    """Partial update — only supplied fields change."""
    title: Title | None = None
    completed: StrictBool | None = None

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        for name in sorted(self.model_fields_set):
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class TodoResponse(BaseModel):
    """Todo as exposed over HTTP."""
    id: str = Field(description="Store-assigned identifier")
    title: str = Field(description="The title of the todo")
    completed: bool = Field(False, description="Whether the todo is completed")


class ErrorResponse(BaseModel):
    """Failure body on todo routes."""
    error: str
