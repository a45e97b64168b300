"""Settings Manager - Handles provider selection, API keys and runtime options."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class SettingsManager:
    """
    Manages settings and API key configuration.

    Reads values from a .env file in the project root, falling back to the
    process environment.
    """

    DEFAULT_PROVIDER = "google"
    DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
    DEFAULT_LOG_LEVEL = "WARNING"

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

    def get_translation_provider(self) -> str:
        """Name of the translation provider to use ("google" or "gemini")."""
        provider = os.getenv("TRANSLATION_PROVIDER", "")
        return provider.strip().lower() or self.DEFAULT_PROVIDER

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment."""
        key = os.getenv("GEMINI_API_KEY")
        return key.strip() if key and key.strip() else None

    def get_gemini_model(self) -> str:
        model = os.getenv("GEMINI_MODEL", "")
        return model.strip() or self.DEFAULT_GEMINI_MODEL

    def get_language_catalog_path(self) -> Optional[Path]:
        """Optional override for the bundled language catalog."""
        path = os.getenv("LANGUAGE_CATALOG_PATH", "")
        return Path(path.strip()).expanduser() if path.strip() else None

    def get_log_level(self) -> str:
        level = os.getenv("LOG_LEVEL", "")
        return level.strip().upper() or self.DEFAULT_LOG_LEVEL

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
