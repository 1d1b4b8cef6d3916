from __future__ import annotations

from typing import TypedDict


# PUBLIC_INTERFACE
class TaskEntity(TypedDict):
    """
    Storage-level record for a ToDo task.

    Fields:
    - id: Unique string identifier, assigned on creation and never changed
    - label: Human-readable description of the task
    - completed: Completion flag, False on creation
    """

    id: str
    label: str
    completed: bool
