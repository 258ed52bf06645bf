"""
Shared container locations (database file and documents directory).

The main application and the share extension both resolve their storage
through these helpers so they always open the same database file.
"""
import logging
from pathlib import Path

from creativityhub.config import Settings, get_settings

logger = logging.getLogger(__name__)


def container_dir(settings: Settings | None = None) -> Path:
    settings = settings or get_settings()
    path = settings.get_data_dir()
    if not path.exists():
        path.mkdir(parents=True, exist_ok=True)
        logger.info("Created shared container at %s", path)
    return path


def database_path(settings: Settings | None = None) -> Path:
    settings = settings or get_settings()
    return container_dir(settings) / settings.DATABASE_FILENAME


def documents_dir(settings: Settings | None = None) -> Path:
    """Directory holding imported document files (created on first access)."""
    settings = settings or get_settings()
    path = container_dir(settings) / settings.DOCUMENTS_DIRNAME
    path.mkdir(parents=True, exist_ok=True)
    return path
