from __future__ import annotations

import asyncio
import logging

from src.taskboard.domain.exceptions import TaskNotFoundError
from src.taskboard.domain.models.task import Task, TaskDraft, TaskUpdate
from src.taskboard.domain.repositories import TaskStore

logger = logging.getLogger(__name__)


class InMemoryTaskStore(TaskStore):
    """In-process task storage owning the canonical collection and id counter.

    Every operation runs under one lock, so callers never observe a
    half-applied mutation. Tasks leave the store only as deep copies.
    """

    def __init__(self, first_id: int = 1) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_id = first_id
        self._lock = asyncio.Lock()

    async def list_all(self) -> list[Task]:
        """Return copies of all tasks in insertion order."""
        async with self._lock:
            return [task.model_copy(deep=True) for task in self._tasks.values()]

    async def create(self, draft: TaskDraft) -> Task:
        """Assign the next id to ``draft``, persist it and return a copy."""
        async with self._lock:
            task_id = self._next_id
            # A Task passed in as a draft keeps its fields but never its id.
            task = Task(**draft.model_dump(exclude={"id"}), id=task_id)
            self._tasks[task_id] = task
            # Ids are never reused, so the next create cannot overwrite this one.
            self._next_id = task_id + 1
            logger.debug("Task created", extra={"task_id": task_id})
            return task.model_copy(deep=True)

    async def update(self, task_id: int, changes: TaskUpdate) -> Task:
        """Merge set fields into the stored task, keeping its id and position."""
        async with self._lock:
            current = self._tasks.get(task_id)
            if current is None:
                raise TaskNotFoundError(task_id)

            fields = changes.changes()
            fields.pop("id", None)
            updated = current.model_copy(update=fields, deep=True)
            self._tasks[task_id] = updated
            logger.debug(
                "Task updated",
                extra={"task_id": task_id, "fields": sorted(fields)},
            )
            return updated.model_copy(deep=True)

    async def delete(self, task_id: int) -> bool:
        async with self._lock:
            removed = self._tasks.pop(task_id, None) is not None
        logger.debug("Task delete", extra={"task_id": task_id, "removed": removed})
        return removed

    async def count(self) -> int:
        async with self._lock:
            return len(self._tasks)
