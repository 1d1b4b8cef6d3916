from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

_ID_DESCRIPTION = "Unique identifier of the task"
_LABEL_DESCRIPTION = "Human-readable description of the task"
_COMPLETED_DESCRIPTION = "Whether or not the task is completed"


# PUBLIC_INTERFACE
class Task(BaseModel):
    """
    Represents an entity of ToDo item
    """

    model_config = ConfigDict(
        title="Task",
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "label": "Buy Zippo",
                "completed": True,
            }
        },
    )

    id: str = Field(..., description=_ID_DESCRIPTION, examples=["550e8400-e29b-41d4-a716-446655440000"])
    label: str = Field(..., description=_LABEL_DESCRIPTION, examples=["Buy Zippo"])
    completed: bool = Field(..., description=_COMPLETED_DESCRIPTION, examples=[True])


# PUBLIC_INTERFACE
class TaskCreate(BaseModel):
    """
    Request body for creating a task. Only the label is supplied by the caller;
    id and completion status are assigned by the server.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"label": "Buy Zippo"}})

    label: str = Field(..., description=_LABEL_DESCRIPTION, examples=["Buy Zippo"])


# PUBLIC_INTERFACE
class TaskUpdate(BaseModel):
    """
    Request body for updating a task.
    All fields are optional; only provided fields will be updated.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"label": "Buy Zippo and lighter fluid", "completed": True}}
    )

    # Omittable but not nullable: None is only ever the unset default
    label: str = Field(default=None, description=_LABEL_DESCRIPTION, examples=["Buy Zippo"])
    completed: bool = Field(default=None, description=_COMPLETED_DESCRIPTION, examples=[True])

    def changes(self) -> Dict[str, Any]:
        """Return only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


# PUBLIC_INTERFACE
class ValidationErrorResponse(BaseModel):
    """
    Body returned when a request fails validation.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "ValidationError",
                "message": "Request validation failed",
                "detail": [{"type": "missing", "loc": ["body", "label"], "msg": "Field required"}],
            }
        }
    )

    error: str = Field(default="ValidationError", description="Error category")
    message: str = Field(default="Request validation failed", description="Human-readable summary")
    detail: List[Dict[str, Any]] = Field(..., description="Field-level errors reported by the validator")
