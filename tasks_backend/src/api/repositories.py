from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from threading import RLock
from typing import Any, Iterable, List, Mapping, Optional

from .logging_config import get_logger
from .models import TaskEntity

logger = get_logger(__name__)

_MUTABLE_FIELDS = ("label", "completed")


# PUBLIC_INTERFACE
class Repository(ABC):
    """Abstract repository contract for task storage."""

    @abstractmethod
    def list(self) -> List[TaskEntity]:
        """Return all tasks in insertion order."""

    @abstractmethod
    def find_by_id(self, task_id: str) -> Optional[TaskEntity]:
        """Return a TaskEntity by id, or None if not found."""

    @abstractmethod
    def append(self, task: TaskEntity) -> None:
        """Add one task. The id must not already be present."""

    @abstractmethod
    def replace_all(self, tasks: Iterable[TaskEntity]) -> None:
        """Swap the whole collection for a new one."""

    @abstractmethod
    def create(self, label: str) -> TaskEntity:
        """Create, store and return a new task with a fresh id."""

    @abstractmethod
    def update(self, task_id: str, changes: Mapping[str, Any]) -> bool:
        """
        Merge the supplied fields onto the task with the given id.
        Return True if a task matched, False otherwise (nothing changes).
        """

    @abstractmethod
    def delete(self, task_id: str) -> bool:
        """Remove the task with the given id. Return True if one was removed."""


class InMemoryRepository(Repository):
    """
    Thread-safe in-memory task store.

    Tasks are kept in a single ordered list. Update and delete build a new
    list (map/filter) and swap it in with replace_all while holding the lock,
    so a read-modify-write never interleaves with another request.
    """

    def __init__(self, tasks: Optional[Iterable[TaskEntity]] = None) -> None:
        self._lock = RLock()
        self._items: List[TaskEntity] = []
        if tasks:
            for task in tasks:
                self.append(task)

    def _new_id(self) -> str:
        return str(uuid.uuid4())

    def list(self) -> List[TaskEntity]:
        with self._lock:
            return [t.copy() for t in self._items]

    def find_by_id(self, task_id: str) -> Optional[TaskEntity]:
        with self._lock:
            for item in self._items:
                if item["id"] == task_id:
                    return item.copy()
            return None

    def append(self, task: TaskEntity) -> None:
        with self._lock:
            if any(t["id"] == task["id"] for t in self._items):
                raise ValueError(f"Task with id {task['id']!r} already exists")
            self._items = [*self._items, task.copy()]

    def replace_all(self, tasks: Iterable[TaskEntity]) -> None:
        new_items = [t.copy() for t in tasks]
        with self._lock:
            self._items = new_items

    def create(self, label: str) -> TaskEntity:
        entity: TaskEntity = {"id": self._new_id(), "label": label, "completed": False}
        self.append(entity)
        logger.info("Created task %s", entity["id"])
        return entity.copy()

    def update(self, task_id: str, changes: Mapping[str, Any]) -> bool:
        # Only label/completed are mutable; id is never reassigned
        patch = {k: v for k, v in changes.items() if k in _MUTABLE_FIELDS}
        with self._lock:
            matched = False
            updated: List[TaskEntity] = []
            for item in self._items:
                if item["id"] == task_id:
                    matched = True
                    merged = item.copy()
                    merged.update(patch)  # type: ignore[typeddict-item]
                    updated.append(merged)
                else:
                    updated.append(item)
            if matched:
                self.replace_all(updated)
        if matched:
            logger.info("Updated task %s (%s)", task_id, ", ".join(sorted(patch)) or "no fields")
        else:
            logger.debug("Update ignored, task %s not found", task_id)
        return matched

    def delete(self, task_id: str) -> bool:
        with self._lock:
            remaining = [t for t in self._items if t["id"] != task_id]
            removed = len(remaining) != len(self._items)
            if removed:
                self.replace_all(remaining)
        if removed:
            logger.info("Deleted task %s", task_id)
        else:
            logger.debug("Delete ignored, task %s not found", task_id)
        return removed
