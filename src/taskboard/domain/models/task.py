from pydantic import BaseModel, ConfigDict, Field

from src.taskboard.domain.models.task_priority import TaskPriority
from src.taskboard.domain.models.task_status import TaskStatus


class TaskDraft(BaseModel):
    """Task fields minus the store-assigned id."""

    title: str = Field(min_length=1, description="Short task title.")
    description: str = Field(default="", description="Free-form details.")
    status: TaskStatus = Field(default=TaskStatus.TODO, description="Lifecycle status.")
    priority: TaskPriority = Field(
        default=TaskPriority.MEDIUM, description="Relative importance."
    )
    due_date: str | None = Field(
        default=None, description="Opaque calendar date, e.g. 2025-10-15."
    )
    tags: list[str] = Field(
        default_factory=list, description="Ordered tag tokens; duplicates allowed."
    )


class Task(TaskDraft):
    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Store-assigned identifier, immutable once set.")


class TaskUpdate(BaseModel):
    """Partial task fields; only explicitly set fields are applied."""

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    due_date: str | None = None
    tags: list[str] | None = None

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        # due_date is the only field that may be cleared back to None.
        return {k: v for k, v in data.items() if v is not None or k == "due_date"}
