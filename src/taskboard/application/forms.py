from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from src.taskboard.domain.exceptions import TaskValidationError
from src.taskboard.domain.models.task import Task, TaskDraft, TaskUpdate
from src.taskboard.domain.models.task_priority import TaskPriority
from src.taskboard.domain.models.task_status import TaskStatus

TAG_SEPARATOR = ","


def parse_tags(raw: str) -> list[str]:
    """Split comma-separated input into trimmed, non-empty tags.

    Order and duplicates are kept: ``"work, , urgent,work"`` gives
    ``["work", "urgent", "work"]``.
    """
    return [tag.strip() for tag in raw.split(TAG_SEPARATOR) if tag.strip()]


def format_tags(tags: list[str]) -> str:
    return f"{TAG_SEPARATOR} ".join(tags)


class TaskForm(BaseModel):
    """Editable field values of an open create/edit form."""

    model_config = ConfigDict(validate_assignment=True)

    title: str = Field(default="", description="Raw title input.")
    description: str = Field(default="", description="Raw description input.")
    status: TaskStatus = Field(default=TaskStatus.TODO)
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM)
    due_date: str = Field(default="", description="Date input; empty means no due date.")
    tags: str = Field(default="", description="Comma-separated tag input.")

    @classmethod
    def from_task(cls, task: Task) -> TaskForm:
        return cls(
            title=task.title,
            description=task.description,
            status=task.status,
            priority=task.priority,
            due_date=task.due_date or "",
            tags=format_tags(task.tags),
        )

    def set_field(self, name: str, value: object) -> None:
        if name not in type(self).model_fields:
            raise KeyError(f"Unknown form field '{name}'.")
        setattr(self, name, value)

    def _validated_fields(self) -> dict:
        if not self.title.strip():
            raise TaskValidationError("title", "must not be empty")
        return {
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "priority": self.priority,
            "due_date": self.due_date or None,
            "tags": parse_tags(self.tags),
        }

    def to_draft(self) -> TaskDraft:
        """Build a draft for ``create``; raises ``TaskValidationError`` on an empty title."""
        return TaskDraft(**self._validated_fields())

    def to_update(self) -> TaskUpdate:
        """Build a full-field update for editing an existing task."""
        return TaskUpdate(**self._validated_fields())
