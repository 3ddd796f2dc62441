"""
Path-related settings for campus_map.
"""

from pathlib import Path

from ..resources import bundled_path
from .base import SettingsSection

DEFAULT_DRAWING = "campus.svg"
DEFAULT_MANIFEST = "campus.json"


class PathSettings(SettingsSection):
    """Manages drawing and manifest locations.

    Unset paths fall back to the sample campus bundled with the package.
    """

    @property
    def drawing_path(self) -> Path:
        """Get path of the SVG drawing."""
        path_str = self._get_str("paths/drawing", "")
        return Path(path_str) if path_str else bundled_path(DEFAULT_DRAWING)

    @drawing_path.setter
    def drawing_path(self, value: Path | None) -> None:
        """Set path of the SVG drawing (None restores the bundled one)."""
        self._set("paths/drawing", str(value) if value else "")

    @property
    def manifest_path(self) -> Path:
        """Get path of the campus manifest JSON."""
        path_str = self._get_str("paths/manifest", "")
        return Path(path_str) if path_str else bundled_path(DEFAULT_MANIFEST)

    @manifest_path.setter
    def manifest_path(self, value: Path | None) -> None:
        """Set path of the campus manifest (None restores the bundled one)."""
        self._set("paths/manifest", str(value) if value else "")
