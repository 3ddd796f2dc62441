"""
Resources for campus_map.

Provides helpers to access packaged assets: the sample campus drawing and
manifest, and the application icon.
"""

from functools import lru_cache
from importlib import resources as importlib_resources
from pathlib import Path

import qtawesome as qta  # type: ignore
from PySide6.QtGui import QIcon

APP_ICON_NAME = "mdi.map-marker-radius"


def bundled_path(name: str) -> Path:
    """Return the filesystem path of a packaged resource file."""
    return Path(str(importlib_resources.files(__name__) / name))


@lru_cache(maxsize=1)
def get_app_icon() -> QIcon:
    """Return the shared application icon.

    Requires a running QApplication.
    """
    return qta.icon(APP_ICON_NAME)  # type: ignore[no-any-return]
