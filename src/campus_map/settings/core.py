"""
Core settings management for campus_map.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings

from .types import ConfigVersion, ValidationResult
from .validation import SettingsValidator
from .paths import PathSettings
from .map import MapSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to application settings with automatic
    cross-platform storage and validation.
    """

    def __init__(
        self,
        profile: str = "default",
        settings_file: Optional[Union[str, Path]] = None,
    ):
        """Initialize settings with organization, application name, and profile.

        Args:
            profile: Settings profile name (default: "default")
            settings_file: Explicit INI file to use instead of the platform store
        """
        if settings_file is not None:
            self.settings = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings("campus_map", "campus_map")
        self.profile = profile

        # Use profile as a group: campus_map/default/...
        self.settings.beginGroup(profile)

        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._map = MapSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        self._ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    def _ensure_version(self) -> None:
        """Write the configuration version on first run."""
        if not str(self.settings.value("app/version", "")):
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")

    # === SUBSYSTEM ACCESS ===

    @property
    def paths(self) -> PathSettings:
        """Access path settings subsystem."""
        return self._paths

    @property
    def map(self) -> MapSettings:
        """Access map view settings subsystem."""
        return self._map

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def version(self) -> str:
        """Get configuration version."""
        value = self.settings.value("app/version", ConfigVersion.CURRENT.value)
        return str(value) if value is not None else ConfigVersion.CURRENT.value

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def drawing_path(self) -> Path:
        """Get SVG drawing path."""
        return self._paths.drawing_path

    @drawing_path.setter
    def drawing_path(self, value: Optional[Path]) -> None:
        self._paths.drawing_path = value

    @property
    def manifest_path(self) -> Path:
        """Get campus manifest path."""
        return self._paths.manifest_path

    @manifest_path.setter
    def manifest_path(self, value: Optional[Path]) -> None:
        self._paths.manifest_path = value

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        """Get log file path (read-only)."""
        return self._logging.log_file_path

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
