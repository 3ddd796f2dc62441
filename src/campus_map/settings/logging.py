"""
Logging-related settings for campus_map.
"""

import logging
from pathlib import Path

from .base import SettingsSection

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/campus_map.csv"
VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(SettingsSection):
    """Manages logging-related settings."""

    # === CONSOLE LOGGING SETTINGS ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._get_bool("logging/console_enabled", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set("logging/console_enabled", value)

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._get_str("logging/console_level", "INFO")

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        """Set console logging level."""
        if value.upper() in VALID_LEVELS:
            self._set("logging/console_level", value.upper())
        else:
            logger.warning(
                f"Invalid console log level: {value}, keeping current: {self.console_log_level}"
            )

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._get_bool("logging/console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._set("logging/console_use_colors", value)

    # === FILE LOGGING SETTINGS ===

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._get_bool("logging/file_enabled", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set("logging/file_enabled", value)

    @property
    def log_file_path(self) -> str:
        """Get log file path (read-only, always returns constant)."""
        return LOG_FILE_PATH

    @property
    def log_file_absolute_path(self) -> Path:
        """Get absolute path to log file."""
        return Path(LOG_FILE_PATH).resolve()
