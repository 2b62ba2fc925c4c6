from src.taskboard.infrastructure.memory.delayed import DelayedTaskStore
from src.taskboard.infrastructure.memory.repositories import InMemoryTaskStore
from src.taskboard.infrastructure.memory.seed import demo_tasks, seed_store

__all__ = [
    "InMemoryTaskStore",
    "DelayedTaskStore",
    "demo_tasks",
    "seed_store",
]
