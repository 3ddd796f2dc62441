"""
Map view settings for campus_map: starting pose, zoom and rotation limits,
label fading.
"""

import logging

from ..errors import ConfigError
from .base import SettingsSection

logger = logging.getLogger(__name__)


class MapSettings(SettingsSection):
    """Manages map view settings."""

    @property
    def initial_translation(self) -> tuple[float, float]:
        """Get starting screen offset of the drawing centre."""
        return (
            self._get_float("map/initial_translation_x", 500.0),
            self._get_float("map/initial_translation_y", 350.0),
        )

    @initial_translation.setter
    def initial_translation(self, value: tuple[float, float]) -> None:
        """Set starting screen offset of the drawing centre."""
        self.settings.setValue("map/initial_translation_x", float(value[0]))
        self._set("map/initial_translation_y", float(value[1]))

    @property
    def initial_scale(self) -> float:
        """Get starting zoom factor."""
        return self._get_float("map/initial_scale", 1.0)

    @initial_scale.setter
    def initial_scale(self, value: float) -> None:
        """Set starting zoom factor."""
        self._set("map/initial_scale", float(value))

    @property
    def min_scale(self) -> float:
        """Get minimum zoom factor."""
        return self._get_float("map/min_scale", 1.0)

    @min_scale.setter
    def min_scale(self, value: float) -> None:
        """Set minimum zoom factor (must be positive)."""
        if value <= 0:
            raise ConfigError(f"Minimum scale must be positive, got {value}")
        self._set("map/min_scale", float(value))

    @property
    def max_scale(self) -> float:
        """Get maximum zoom factor."""
        return self._get_float("map/max_scale", 30.0)

    @max_scale.setter
    def max_scale(self, value: float) -> None:
        """Set maximum zoom factor (must be positive)."""
        if value <= 0:
            raise ConfigError(f"Maximum scale must be positive, got {value}")
        self._set("map/max_scale", float(value))

    @property
    def min_rotation(self) -> float:
        """Get minimum rotation in degrees."""
        return self._get_float("map/min_rotation", 0.0)

    @min_rotation.setter
    def min_rotation(self, value: float) -> None:
        self._set("map/min_rotation", float(value))

    @property
    def max_rotation(self) -> float:
        """Get maximum rotation in degrees."""
        return self._get_float("map/max_rotation", 0.0)

    @max_rotation.setter
    def max_rotation(self, value: float) -> None:
        self._set("map/max_rotation", float(value))

    @property
    def label_min_scale(self) -> float:
        """Get zoom factor at which building labels become fully opaque."""
        return self._get_float("map/label_min_scale", 0.0)

    @label_min_scale.setter
    def label_min_scale(self, value: float) -> None:
        self._set("map/label_min_scale", float(value))

    @property
    def label_fade_range(self) -> float:
        """Get zoom span below label_min_scale over which labels fade out."""
        return max(0.0, self._get_float("map/label_fade_range", 0.0))

    @label_fade_range.setter
    def label_fade_range(self, value: float) -> None:
        if value < 0:
            logger.warning(f"Invalid label fade range: {value}, keeping current: {self.label_fade_range}")
            return
        self._set("map/label_fade_range", float(value))

    @property
    def zoom_step(self) -> float:
        """Get zoom change per wheel notch, as a fraction of the current scale (0.01-1)."""
        return max(0.01, min(1.0, self._get_float("map/zoom_step", 0.1)))

    @zoom_step.setter
    def zoom_step(self, value: float) -> None:
        self._set("map/zoom_step", max(0.01, min(1.0, float(value))))
