"""
Application configuration using Pydantic Settings
"""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings shared by the main application and the share extension
    """
    # Storage
    DATA_DIR: str = "~/.local/share/creativityhub"
    DATABASE_FILENAME: str = "creativity_hub.sqlite3"
    DOCUMENTS_DIRNAME: str = "CreativityHubDocuments"
    DATABASE_URL: str = ""  # overrides DATA_DIR/DATABASE_FILENAME, e.g. sqlite:///:memory:

    # Defaults seeded into user_settings by the bootstrap migration
    DEFAULT_CURRENCY: str = "USD"

    # Repositories
    SEARCH_MIN_QUERY_LENGTH: int = 2

    # Activity log retention
    ACTIVITY_LOG_RETENTION_MONTHS: int = 6

    # Diagnostics
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False  # echo SQL statements

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    def get_data_dir(self) -> Path:
        return Path(self.DATA_DIR).expanduser()


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings instance (singleton)
    """
    return Settings()
