from __future__ import annotations

import asyncio

from src.taskboard.domain.models.task import Task, TaskDraft, TaskUpdate
from src.taskboard.domain.repositories import TaskStore


class DelayedTaskStore(TaskStore):
    """Wrap another store and wait before each call to imitate a remote backend."""

    def __init__(
        self,
        inner: TaskStore,
        read_delay: float = 0.1,
        write_delay: float = 0.15,
    ) -> None:
        if read_delay < 0 or write_delay < 0:
            raise ValueError("Delays must be non-negative.")
        self._inner = inner
        self._read_delay = read_delay
        self._write_delay = write_delay

    @property
    def inner(self) -> TaskStore:
        return self._inner

    async def list_all(self) -> list[Task]:
        await asyncio.sleep(self._read_delay)
        return await self._inner.list_all()

    async def create(self, draft: TaskDraft) -> Task:
        await asyncio.sleep(self._write_delay)
        return await self._inner.create(draft)

    async def update(self, task_id: int, changes: TaskUpdate) -> Task:
        await asyncio.sleep(self._write_delay)
        return await self._inner.update(task_id, changes)

    async def delete(self, task_id: int) -> bool:
        await asyncio.sleep(self._write_delay)
        return await self._inner.delete(task_id)

    async def count(self) -> int:
        await asyncio.sleep(self._read_delay)
        return await self._inner.count()
