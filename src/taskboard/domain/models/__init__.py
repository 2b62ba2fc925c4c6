from src.taskboard.domain.models.status_filter import StatusFilter
from src.taskboard.domain.models.task import Task, TaskDraft, TaskUpdate
from src.taskboard.domain.models.task_priority import TaskPriority
from src.taskboard.domain.models.task_status import TaskStatus
from src.taskboard.domain.models.task_summary import TaskSummary

__all__ = [
    "Task",
    "TaskDraft",
    "TaskUpdate",
    "TaskStatus",
    "TaskPriority",
    "StatusFilter",
    "TaskSummary",
]
