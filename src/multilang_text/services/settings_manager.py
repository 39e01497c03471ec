"""Settings Manager - Handles language, catalog and logging configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


DEFAULT_LANGUAGE = "en"


class SettingsManager:
    """
    Manages settings loaded from the environment.

    Reads a .env file in the project root, then falls back to process
    environment variables and built-in defaults.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, uses the current working directory.
        """
        if project_root is None:
            project_root = Path.cwd()

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_language(self) -> Optional[str]:
        """Get the explicitly configured display language, if any."""
        return self._get_stripped("MULTILANG_TEXT_LANGUAGE")

    def get_default_language(self) -> str:
        """Get the fallback language used when nothing else resolves."""
        return self._get_stripped("MULTILANG_TEXT_DEFAULT_LANGUAGE") or DEFAULT_LANGUAGE

    def get_catalog_dir(self) -> Optional[Path]:
        """Get a directory overriding the bundled message catalogs."""
        value = self._get_stripped("MULTILANG_TEXT_CATALOG_DIR")
        if value is None:
            return None
        path = Path(value)
        return path if path.is_absolute() else self._project_root / path

    def get_log_level(self) -> int:
        """Get the logging level (LOG_LEVEL name, default WARNING)."""
        name = (self._get_stripped("LOG_LEVEL") or "WARNING").upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.WARNING

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get_stripped(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
