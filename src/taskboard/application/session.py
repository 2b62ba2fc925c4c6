from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from functools import partial
from typing import TypeVar

import inject

from src.taskboard.application.forms import TaskForm
from src.taskboard.application.views import SessionView, filter_tasks, summarize
from src.taskboard.domain.exceptions import TaskValidationError
from src.taskboard.domain.models.status_filter import StatusFilter
from src.taskboard.domain.models.task import Task, TaskUpdate
from src.taskboard.domain.models.task_status import TaskStatus
from src.taskboard.domain.models.task_summary import TaskSummary
from src.taskboard.domain.repositories import TaskStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TaskSessionController:
    """Keeps one UI session in sync with a task store.

    Every mutation is followed by a full ``list_all`` read that replaces the
    snapshot, so the displayed list is never a locally patched copy. At most
    one mutation is in flight: a second ``submit`` is ignored, while
    ``remove`` and ``set_status`` wait for the running one to finish.
    """

    def __init__(self, store: TaskStore | None = None) -> None:
        self._store = store or inject.instance(TaskStore)
        self._snapshot: list[Task] = []
        self._filter = StatusFilter.ALL
        self._form: TaskForm | None = None
        self._editing_id: int | None = None
        self._mutation_lock = asyncio.Lock()
        self._form_submitting = False
        self._pending_reads = 0
        self.last_error: str | None = None

    # ---- observable state ----

    @property
    def snapshot(self) -> list[Task]:
        return [task.model_copy(deep=True) for task in self._snapshot]

    @property
    def active_filter(self) -> StatusFilter:
        return self._filter

    @property
    def is_composing(self) -> bool:
        return self._form is not None

    @property
    def is_submitting(self) -> bool:
        return self._mutation_lock.locked()

    @property
    def is_loading(self) -> bool:
        return self._pending_reads > 0

    @property
    def draft(self) -> TaskForm | None:
        return self._form

    @property
    def editing_id(self) -> int | None:
        return self._editing_id

    @property
    def visible_tasks(self) -> list[Task]:
        return filter_tasks(self.snapshot, self._filter)

    @property
    def summary(self) -> TaskSummary:
        return summarize(self._snapshot)

    def view(self) -> SessionView:
        snapshot = self.snapshot
        return SessionView(
            snapshot=snapshot,
            active_filter=self._filter,
            is_composing=self.is_composing,
            editing_id=self._editing_id,
            draft=self._form.model_copy() if self._form is not None else None,
            is_submitting=self.is_submitting,
            is_loading=self.is_loading,
            last_error=self.last_error,
            visible_tasks=filter_tasks(snapshot, self._filter),
            summary=self.summary,
        )

    # ---- store reads ----

    async def refresh(self) -> list[Task]:
        """Replace the snapshot with the store's current contents."""
        self._pending_reads += 1
        try:
            self._snapshot = await self._store.list_all()
        finally:
            self._pending_reads -= 1
        return self.snapshot

    # ---- form state ----

    def begin_create(self) -> None:
        self._open_form(TaskForm(), editing_id=None)

    def begin_edit(self, task: Task) -> None:
        self._open_form(TaskForm.from_task(task), editing_id=task.id)

    def toggle_form(self) -> None:
        """Open an empty create form, or discard the open one."""
        if self.is_composing:
            self.cancel()
        else:
            self.begin_create()

    def update_draft_field(self, name: str, value: object) -> None:
        if self._form is None:
            raise RuntimeError("No task form is open.")
        self._form.set_field(name, value)

    def cancel(self) -> None:
        self._close_form()

    def set_filter(self, criterion: StatusFilter | str) -> None:
        self._filter = StatusFilter(criterion)

    def _open_form(self, form: TaskForm, editing_id: int | None) -> None:
        if self._form_submitting:
            logger.warning("Ignoring form open while a submit is in flight")
            return
        self._form = form
        self._editing_id = editing_id
        self.last_error = None

    def _close_form(self) -> None:
        self._form = None
        self._editing_id = None

    # ---- mutations ----

    async def submit(self) -> Task | None:
        """Create or update a task from the open form.

        Returns the saved task, or ``None`` when nothing was sent to the
        store (no form open, empty title, or a submit already running).
        """
        if self.is_submitting:
            logger.warning("Ignoring re-entrant submit", extra={"task_id": self._editing_id})
            return None
        if self._form is None:
            return None

        async with self._mutation_lock:
            form, editing_id = self._form, self._editing_id
            operation: Callable[[], Awaitable[Task]]
            try:
                if editing_id is None:
                    operation = partial(self._store.create, form.to_draft())
                else:
                    operation = partial(self._store.update, editing_id, form.to_update())
            except TaskValidationError as exc:
                # The form stays open with the entered values.
                self.last_error = str(exc)
                logger.info("Task form rejected", extra={"field": exc.field})
                return None

            self._form_submitting = True
            try:
                return await self._run_mutation(operation, "submit", editing_id)
            finally:
                self._form_submitting = False
                self._close_form()

    async def remove(self, task_id: int) -> bool:
        """Delete a task; a missing id is reported as ``False``, not raised."""
        async with self._mutation_lock:
            removed = await self._run_mutation(
                partial(self._store.delete, task_id), "delete", task_id
            )
        if not removed:
            logger.info("No task removed", extra={"task_id": task_id})
        return removed

    async def set_status(self, task_id: int, status: TaskStatus | str) -> Task:
        changes = TaskUpdate(status=status)
        async with self._mutation_lock:
            return await self._run_mutation(
                partial(self._store.update, task_id, changes), "status change", task_id
            )

    async def _run_mutation(
        self,
        operation: Callable[[], Awaitable[T]],
        action: str,
        task_id: int | None,
    ) -> T:
        try:
            result = await operation()
        except Exception as exc:
            self.last_error = str(exc)
            logger.exception(
                "Task %s failed",
                action,
                extra={"task_id": task_id},
            )
            raise
        finally:
            # Reconcile even after a failure so the snapshot matches the store.
            await self.refresh()
        self.last_error = None
        return result
