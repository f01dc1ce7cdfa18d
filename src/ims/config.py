from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="IMS_", env_file=".env", extra="ignore"
    )

    # ==============================
    # Storage
    # ==============================
    DATA_DIR: Path = Path("data")

    # ==============================
    # Security
    # ==============================
    ADMIN_PASSWORD: str = "admin"

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
