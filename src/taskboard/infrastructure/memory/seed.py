from __future__ import annotations

import logging
from collections.abc import Iterable

from src.taskboard.domain.models.task import Task, TaskDraft
from src.taskboard.domain.models.task_priority import TaskPriority
from src.taskboard.domain.models.task_status import TaskStatus
from src.taskboard.domain.repositories import TaskStore

logger = logging.getLogger(__name__)


def demo_tasks() -> list[TaskDraft]:
    """Sample tasks covering every status, for demos and manual testing."""
    return [
        TaskDraft(
            title="Complete project proposal",
            description="Write and submit Q4 proposal",
            status=TaskStatus.TODO,
            priority=TaskPriority.HIGH,
            due_date="2025-10-15",
            tags=["work"],
        ),
        TaskDraft(
            title="Review code changes",
            description="Review PRs from team",
            status=TaskStatus.IN_PROGRESS,
            priority=TaskPriority.MEDIUM,
            due_date="2025-10-10",
            tags=["code", "review"],
        ),
        TaskDraft(
            title="Update documentation",
            description="Add API docs",
            status=TaskStatus.COMPLETED,
            priority=TaskPriority.LOW,
            due_date="2025-10-08",
            tags=["docs"],
        ),
    ]


async def seed_store(store: TaskStore, drafts: Iterable[TaskDraft] | None = None) -> list[Task]:
    """Create ``drafts`` (the demo tasks by default) in order and return them."""
    if drafts is None:
        drafts = demo_tasks()
    created = [await store.create(draft) for draft in drafts]
    logger.info("Seeded task store", extra={"count": len(created)})
    return created
