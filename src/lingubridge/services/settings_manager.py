"""Settings Manager - Handles API key and application configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from PySide6.QtCore import QStandardPaths

from lingubridge.services.translation import GeminiTranslationService


class SettingsManager:
    """
    Manages settings and API key configuration.

    Reads values from a .env file in the project root, with real
    environment variables taking precedence.
    """

    API_KEY_VARIABLES = ("GEMINI_API_KEY", "API_KEY")

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

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment (GEMINI_API_KEY, then API_KEY)."""
        for name in self.API_KEY_VARIABLES:
            key = self._get_stripped(name)
            if key:
                return key
        return None

    def get_model_name(self) -> str:
        """Get the Gemini model used for translation."""
        return self._get_stripped("GEMINI_MODEL") or GeminiTranslationService.DEFAULT_MODEL

    def get_download_dir(self) -> Path:
        """Get the directory exported documents are saved to."""
        configured = self._get_stripped("LINGUBRIDGE_DOWNLOAD_DIR")
        if configured:
            return Path(configured).expanduser()

        location = QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.DownloadLocation
        )
        if location:
            return Path(location)
        return Path.home() / "Downloads"

    def get_log_level(self) -> str:
        """Get the logging level name."""
        return (self._get_stripped("LOG_LEVEL") or "INFO").upper()

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get_stripped(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
