from __future__ import annotations

import inject
import pytest
import pytest_asyncio

from src.taskboard.application.session import TaskSessionController
from src.taskboard.infrastructure.memory import InMemoryTaskStore, demo_tasks, seed_store


@pytest.fixture
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest_asyncio.fixture
async def seeded_store(store: InMemoryTaskStore) -> InMemoryTaskStore:
    """Store holding the three demo tasks (ids 1-3: todo, in-progress, completed)."""
    await seed_store(store, demo_tasks())
    return store


@pytest_asyncio.fixture
async def controller(seeded_store: InMemoryTaskStore) -> TaskSessionController:
    session = TaskSessionController(seeded_store)
    await session.refresh()
    return session


@pytest.fixture
def clean_injector():
    """Reset the global injector around tests that configure DI."""
    inject.clear()
    yield
    inject.clear()
