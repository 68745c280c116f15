"""Domain Types — identifier and record types shared across layers.

Invariants:
    - TodoId is an opaque string handle; only the store decides whether it is well-formed
    - TodoRecord always carries id, title, completed once persisted
"""

from typing import NewType, TypedDict

TodoId = NewType("TodoId", str)


class TodoRecord(TypedDict):
    """Plain record shape exchanged with the document store."""
    id: TodoId
    title: str
    completed: bool
