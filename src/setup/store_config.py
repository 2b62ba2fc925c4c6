from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class StoreSettings(BaseSettings):
    """Configuration for the in-process task store."""
    SEED_DEMO_TASKS: bool = False
    READ_DELAY_SEC: float = 0.0
    WRITE_DELAY_SEC: float = 0.0

    model_config = ConfigDict(env_file=".env", extra="ignore")


def get_store_settings() -> StoreSettings:
    """Return a fresh store settings instance."""
    return StoreSettings()
