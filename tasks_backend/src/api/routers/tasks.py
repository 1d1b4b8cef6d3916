from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, Response, status

from ..repositories import Repository
from ..schemas import Task, TaskCreate, TaskUpdate, ValidationErrorResponse

router = APIRouter(
    prefix="/tasks",
    tags=["Task"],
    responses={422: {"model": ValidationErrorResponse, "description": "Request validation failed"}},
)

_ID_DESCRIPTION = "Unique identifier of the task"
_ID_EXAMPLES = ["550e8400-e29b-41d4-a716-446655440000"]


# PUBLIC_INTERFACE
def get_repository(request: Request) -> Repository:
    """
    Return the task store owned by the running application.
    """
    return request.app.state.store


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[Task],
    summary="List tasks",
    description=(
        "Retrieve a list of tasks. You can optionally filter completed tasks "
        "using the `hideCompleted` query parameter."
    ),
    responses={200: {"description": "Retrieve a list of tasks"}},
)
def list_tasks(
    hide_completed: Optional[str] = Query(
        None,
        alias="hideCompleted",
        description="Whether or not to exclude completed tasks from the list",
        examples=["true"],
    ),
    repo: Repository = Depends(get_repository),
) -> List[Task]:
    """
    List all tasks in insertion order. Only the literal string "true" hides
    completed tasks; any other value is treated as no filter.
    """
    items = repo.list()
    if hide_completed == "true":
        items = [t for t in items if not t["completed"]]
    return [Task(**it) for it in items]


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    description="Create a new task using the content of request body.",
    responses={201: {"description": "New task is successfully created"}},
)
def create_task(payload: TaskCreate, repo: Repository = Depends(get_repository)) -> Task:
    """
    Create a new task. The server assigns the id and sets completed to false.
    """
    created = repo.create(payload.label)
    return Task(**created)


# PUBLIC_INTERFACE
@router.get(
    "/{id}",
    response_model=Task,
    summary="Retrieve a task",
    responses={
        200: {"description": "The requested task"},
        404: {"description": "The requested task is not found"},
    },
)
def get_task(
    id: str = Path(..., description=_ID_DESCRIPTION, examples=_ID_EXAMPLES),
    repo: Repository = Depends(get_repository),
) -> Task:
    item = repo.find_by_id(id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return Task(**item)


# PUBLIC_INTERFACE
@router.put(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update a task",
    responses={204: {"description": "Successfully updated"}},
)
def update_task(
    payload: TaskUpdate,
    id: str = Path(..., description=_ID_DESCRIPTION, examples=_ID_EXAMPLES),
    repo: Repository = Depends(get_repository),
) -> None:
    """
    Merge the supplied fields onto the task. An unknown id is a no-op and
    still answers 204.
    """
    repo.update(id, payload.changes())
    return None


# PUBLIC_INTERFACE
@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a task",
    responses={204: {"description": "Successfully deleted"}},
)
def delete_task(
    id: str = Path(..., description=_ID_DESCRIPTION, examples=_ID_EXAMPLES),
    repo: Repository = Depends(get_repository),
) -> None:
    """
    Delete a task. Deleting an unknown or already deleted id still answers 204.
    """
    repo.delete(id)
    return None
