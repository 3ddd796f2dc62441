"""
Settings package for campus_map.

Type-safe configuration on top of Qt's QSettings.

Usage:
    from campus_map.settings import AppSettings

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ValidationResult
from .paths import PathSettings
from .map import MapSettings
from .logging import LoggingSettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ValidationResult",
    "PathSettings",
    "MapSettings",
    "LoggingSettings",
]
