"""Settings Manager - Handles endpoint, timing and logging configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from pocket_translator.services.translation.completion_client import (
    DEFAULT_ENDPOINT,
    DEFAULT_RETRY_DELAY_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)


class SettingsManager:
    """
    Manages translator settings.

    Reads values from a .env file in the project root, falling back to
    built-in defaults when a variable is missing, blank or invalid.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_endpoint(self) -> str:
        """Get the completion endpoint URL."""
        value = os.getenv("TRANSLATOR_ENDPOINT")
        return value.strip() if value and value.strip() else DEFAULT_ENDPOINT

    def get_timeout_seconds(self) -> float:
        """Get the per-attempt deadline in seconds."""
        return self._get_positive_float("TRANSLATOR_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)

    def get_retry_delay_seconds(self) -> float:
        """Get the wait before the second attempt in seconds."""
        return self._get_positive_float("TRANSLATOR_RETRY_DELAY_SECONDS", DEFAULT_RETRY_DELAY_SECONDS)

    def is_web_hosted(self) -> bool:
        """True if running inside a browser host (changes network error wording)."""
        value = os.getenv("TRANSLATOR_WEB_HOSTED", "false")
        return value.strip().lower() in ("1", "true", "yes")

    def get_log_level(self) -> int:
        """Get the logging level, WARNING by default."""
        name = os.getenv("TRANSLATOR_LOG_LEVEL", "").strip().upper()
        level = logging.getLevelName(name) if name else logging.WARNING
        return level if isinstance(level, int) else logging.WARNING

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get_positive_float(name: str, default: float) -> float:
        value = os.getenv(name)
        if not value or not value.strip():
            return default
        try:
            parsed = float(value)
        except ValueError:
            logger.warning("Ignoring invalid %s=%r", name, value)
            return default
        return parsed if parsed > 0 else default
