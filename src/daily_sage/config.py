"""Configuration settings for daily-sage."""

import logging
from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory (project root / data)
DATA_DIR = Path(__file__).parent.parent.parent / "data"


class BackendKind(str, Enum):
    """Persistence backend selected for the process lifetime."""

    LOCAL = "local"  # Mock mode: SQLite key/value file
    REMOTE = "remote"  # MongoDB document database


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env."""

    model_config = SettingsConfigDict(
        env_prefix="DAILY_SAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Remote document database
    mongo_uri: str = ""
    mongo_db: str = "daily_sage"
    session_id: str = "default"

    # Local (mock mode) storage
    data_dir: Path = DATA_DIR

    # Generative model
    openai_api_key: str = Field(default="", validation_alias="OPENAI_API_KEY")
    model: str = "gpt-4o-mini"
    temperature: float = 0.7

    log_level: str = "INFO"

    @property
    def backend(self) -> BackendKind:
        """Remote backend when a database URI is configured, mock mode otherwise."""
        return BackendKind.REMOTE if self.mongo_uri else BackendKind.LOCAL

    @property
    def generation_enabled(self) -> bool:
        return bool(self.openai_api_key)

    @property
    def db_path(self) -> Path:
        """SQLite file used in mock mode."""
        return self.data_dir / "daily_sage.db"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging once for CLI and web entrypoints."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
