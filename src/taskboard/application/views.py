from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field

from src.taskboard.application.forms import TaskForm
from src.taskboard.domain.models.status_filter import StatusFilter
from src.taskboard.domain.models.task import Task
from src.taskboard.domain.models.task_status import TaskStatus
from src.taskboard.domain.models.task_summary import TaskSummary


def filter_tasks(tasks: Sequence[Task], criterion: StatusFilter) -> list[Task]:
    """Tasks matching ``criterion``, in snapshot order."""
    return [task for task in tasks if criterion.matches(task.status)]


def summarize(tasks: Sequence[Task]) -> TaskSummary:
    return TaskSummary(
        total=len(tasks),
        completed=sum(1 for task in tasks if task.status == TaskStatus.COMPLETED),
    )


class SessionView(BaseModel):
    """Everything a UI needs to render one session."""

    snapshot: list[Task] = Field(description="Last full copy of the store contents.")
    active_filter: StatusFilter = Field(description="Selected status filter.")
    is_composing: bool = Field(description="Whether a create/edit form is open.")
    editing_id: int | None = Field(
        default=None, description="Task being edited, or None when creating."
    )
    draft: TaskForm | None = Field(default=None, description="Open form values.")
    is_submitting: bool = Field(description="Whether a mutation is in flight.")
    is_loading: bool = Field(description="Whether a snapshot read is in flight.")
    last_error: str | None = Field(default=None, description="Most recent failure message.")
    visible_tasks: list[Task] = Field(description="Snapshot filtered by active_filter.")
    summary: TaskSummary = Field(description="Counts computed from the snapshot.")
