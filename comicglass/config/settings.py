"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from comicglass.entities.library import Library, default_allowed_extensions
from comicglass.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_LIBRARY_ROOT = os.path.join(".", "books")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self, library_root: str | None = None):
        raw_root = library_root or self._get_env("COMICGLASS_LIBRARY_ROOT", "")
        if not raw_root.strip():
            raw_root = DEFAULT_LIBRARY_ROOT
        self.library_root: str = os.path.abspath(os.path.expanduser(raw_root))
        self.host: str = self._get_env("COMICGLASS_HOST", "0.0.0.0")
        self.port: int = self._get_int_env("COMICGLASS_PORT", 3000)
        self.log_level: str = self._get_env("COMICGLASS_LOG_LEVEL", "INFO").upper()
        self.reload: bool = self._get_env("COMICGLASS_RELOAD", "0").lower() in {
            "1",
            "true",
            "yes",
        }

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(self, key: str, default: int) -> int:
        """Get an integer environment variable, raise error if malformed."""
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer")

    def library(self) -> Library:
        """Build the immutable library configuration."""
        return Library(
            root=self.library_root,
            allowed_extensions=default_allowed_extensions(),
        )
