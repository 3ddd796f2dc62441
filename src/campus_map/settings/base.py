"""
Shared helpers for settings subsystems.
"""

from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class SettingsSection:
    """Base class for a group of related settings stored in QSettings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_bool(self, key: str, default: bool = False) -> bool:
        """Type-safe boolean retrieval from settings."""
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _get_float(self, key: str, default: float = 0.0) -> float:
        """Type-safe float retrieval from settings."""
        value = self.settings.value(key, default)
        try:
            if value is None:
                return default
            return float(cast(str | float, value))
        except (ValueError, TypeError):
            return default

    def _set(self, key: str, value: object) -> None:
        self.settings.setValue(key, value)
        self.settings.sync()
