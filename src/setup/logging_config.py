import logging

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class LoggingSettings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    model_config = ConfigDict(env_file=".env", extra="ignore")


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Install a root handler once; call early from the composition root."""
    if settings is None:
        settings = LoggingSettings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{settings.LOG_LEVEL}'.")
    logging.basicConfig(level=level, format=settings.LOG_FORMAT, force=True)
