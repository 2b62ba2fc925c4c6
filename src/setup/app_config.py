import logging

import inject

from src.setup.logging_config import LoggingSettings, configure_logging
from src.setup.store_config import StoreSettings
from src.taskboard.application.session import TaskSessionController
from src.taskboard.domain.repositories import TaskStore
from src.taskboard.infrastructure.memory import DelayedTaskStore, InMemoryTaskStore, seed_store

logger = logging.getLogger(__name__)


def build_task_store(settings: StoreSettings | None = None) -> TaskStore:
    """Create the in-memory store, delayed when latency is configured."""
    if settings is None:
        settings = StoreSettings()
    store: TaskStore = InMemoryTaskStore()
    if settings.READ_DELAY_SEC > 0 or settings.WRITE_DELAY_SEC > 0:
        store = DelayedTaskStore(
            store,
            read_delay=settings.READ_DELAY_SEC,
            write_delay=settings.WRITE_DELAY_SEC,
        )
    return store


def configure_di(settings: StoreSettings | None = None) -> TaskStore:
    """Build one task store and bind it as the ``TaskStore`` dependency."""
    store = build_task_store(settings)

    def _config(binder: inject.Binder) -> None:
        binder.bind(TaskStore, store)

    inject.clear_and_configure(_config)
    return store


async def build_session_controller(
    settings: StoreSettings | None = None,
    logging_settings: LoggingSettings | None = None,
) -> TaskSessionController:
    """Configure logging, wire a controller to the bound store and load its first snapshot."""
    configure_logging(logging_settings)
    if settings is None:
        settings = StoreSettings()
    if not inject.is_configured():
        configure_di(settings)

    controller = TaskSessionController()
    if settings.SEED_DEMO_TASKS:
        store = inject.instance(TaskStore)
        if await store.count() == 0:
            await seed_store(store)
    await controller.refresh()
    logger.info("Task session ready", extra={"tasks": controller.summary.total})
    return controller
