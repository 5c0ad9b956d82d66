from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from fruitstand import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Fruit Stand"
    app_version: str = __version__
    debug: bool = False

    # Server (used by `python -m fruitstand`)
    host: str = "127.0.0.1"
    port: int = 8000

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None  # e.g., "fruitstand.log"

    model_config = SettingsConfigDict(
        env_prefix="FRUITSTAND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
