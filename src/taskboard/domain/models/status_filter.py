from __future__ import annotations

from enum import Enum

from src.taskboard.domain.models.task_status import TaskStatus


class StatusFilter(str, Enum):
    """Which subset of the snapshot a view renders."""

    ALL = "all"
    TODO = TaskStatus.TODO.value
    IN_PROGRESS = TaskStatus.IN_PROGRESS.value
    COMPLETED = TaskStatus.COMPLETED.value

    def matches(self, status: TaskStatus) -> bool:
        return self is StatusFilter.ALL or self.value == TaskStatus(status).value
