"""
Settings validation for campus_map.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        # Input files
        if not self.settings.drawing_path.exists():
            errors.append(f"Drawing file does not exist: {self.settings.drawing_path}")
        elif self.settings.drawing_path.suffix.lower() != ".svg":
            warnings.append(f"Drawing file is not an .svg: {self.settings.drawing_path}")

        if not self.settings.manifest_path.exists():
            errors.append(f"Campus manifest does not exist: {self.settings.manifest_path}")

        # Zoom and rotation limits
        map_settings = self.settings.map
        if map_settings.min_scale <= 0:
            errors.append(f"Minimum scale must be positive, got {map_settings.min_scale}")
        if map_settings.min_scale > map_settings.max_scale:
            errors.append(
                f"Minimum scale {map_settings.min_scale} exceeds maximum {map_settings.max_scale}"
            )
        elif not map_settings.min_scale <= map_settings.initial_scale <= map_settings.max_scale:
            warnings.append(
                f"Initial scale {map_settings.initial_scale} outside "
                f"{map_settings.min_scale}-{map_settings.max_scale}, it will be clamped"
            )
        if map_settings.min_rotation > map_settings.max_rotation:
            errors.append(
                f"Minimum rotation {map_settings.min_rotation} exceeds maximum {map_settings.max_rotation}"
            )

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
