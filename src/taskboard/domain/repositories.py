from __future__ import annotations

from typing import Protocol

from src.taskboard.domain.models.task import Task, TaskDraft, TaskUpdate


class TaskStore(Protocol):
    """Repository contract for the authoritative task collection."""

    async def list_all(self) -> list[Task]:
        """Return copies of every stored task in insertion order."""

    async def create(self, draft: TaskDraft) -> Task:
        """Store ``draft`` under a freshly assigned id and return the new task."""

    async def update(self, task_id: int, changes: TaskUpdate) -> Task:
        """Merge the set fields of ``changes`` into the task identified by ``task_id``.

        Raises ``TaskNotFoundError`` when no such task exists.
        """

    async def delete(self, task_id: int) -> bool:
        """Remove the task identified by ``task_id`` and report whether one was removed."""

    async def count(self) -> int:
        """Return the number of stored tasks."""
