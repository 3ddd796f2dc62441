"""Live pan/zoom/rotation transform for the map view.

The transform maps centred display coordinates (the drawing scaled to the
view width, origin at the drawing centre) to screen pixels::

    screen = translate(translation) * rotate(rotation) * scale(scale) * point

Rotation is in degrees, matching ``QTransform.rotate``.
"""

from typing import TYPE_CHECKING

from PySide6.QtCore import QPointF
from PySide6.QtGui import QTransform

from ..drawing import Point

if TYPE_CHECKING:
    from ..settings import AppSettings


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class AffineTransform:
    """Similarity transform (translation, uniform scale, rotation) with clamping.

    Scale and rotation are clamped into their configured ranges on every
    update; translation is unbounded. Because the minimum scale is positive
    the transform is always invertible.
    """

    def __init__(
        self,
        translation: Point = (0.0, 0.0),
        scale: float = 1.0,
        rotation: float = 0.0,
        scale_range: tuple[float, float] = (0.1, 100.0),
        rotation_range: tuple[float, float] = (0.0, 0.0),
    ):
        """Initialize the transform with a starting pose.

        Args:
            translation: Screen offset of the drawing centre in pixels
            scale: Zoom factor (clamped into scale_range)
            rotation: Rotation in degrees (clamped into rotation_range)
            scale_range: (min_scale, max_scale), min_scale must be > 0
            rotation_range: (min_rotation, max_rotation) in degrees; a single
                value range disables rotation

        Raises:
            ValueError: If a range is empty or min_scale is not positive
        """
        min_scale, max_scale = scale_range
        min_rotation, max_rotation = rotation_range
        if min_scale <= 0:
            raise ValueError(f"Minimum scale must be positive, got {min_scale}")
        if min_scale > max_scale:
            raise ValueError(f"Invalid scale range: {scale_range}")
        if min_rotation > max_rotation:
            raise ValueError(f"Invalid rotation range: {rotation_range}")

        self.min_scale = float(min_scale)
        self.max_scale = float(max_scale)
        self.min_rotation = float(min_rotation)
        self.max_rotation = float(max_rotation)

        self.translation: Point = (float(translation[0]), float(translation[1]))
        self.scale = _clamp(float(scale), self.min_scale, self.max_scale)
        self.rotation = _clamp(float(rotation), self.min_rotation, self.max_rotation)

        self._initial_pose = (self.translation, self.scale, self.rotation)

    @staticmethod
    def from_settings(settings: "AppSettings") -> "AffineTransform":
        """Create transform with the configured starting pose and ranges."""
        map_settings = settings.map
        return AffineTransform(
            translation=map_settings.initial_translation,
            scale=map_settings.initial_scale,
            rotation=0.0,
            scale_range=(map_settings.min_scale, map_settings.max_scale),
            rotation_range=(map_settings.min_rotation, map_settings.max_rotation),
        )

    # === MATRICES ===

    def compose(self) -> QTransform:
        """Forward matrix from translation, rotation and scale."""
        tx, ty = self.translation
        return QTransform().translate(tx, ty).rotate(self.rotation).scale(self.scale, self.scale)

    def inverse(self) -> QTransform:
        """Exact algebraic inverse of compose()."""
        tx, ty = self.translation
        inv_scale = 1.0 / self.scale
        return QTransform().scale(inv_scale, inv_scale).rotate(-self.rotation).translate(-tx, -ty)

    def apply(self, point: Point) -> Point:
        """Map a point through the forward transform."""
        mapped = self.compose().map(QPointF(point[0], point[1]))
        return (mapped.x(), mapped.y())

    def apply_inverse(self, point: Point) -> Point:
        """Map a point through the inverse transform."""
        mapped = self.inverse().map(QPointF(point[0], point[1]))
        return (mapped.x(), mapped.y())

    # === UPDATES ===

    def update_translation(self, delta: Point) -> None:
        """Pan by ``delta`` screen pixels (unclamped)."""
        self.translation = (self.translation[0] + delta[0], self.translation[1] + delta[1])

    def update_scale(self, delta: float) -> None:
        """Change scale by ``delta``, clamped into [min_scale, max_scale]."""
        self.scale = _clamp(self.scale + delta, self.min_scale, self.max_scale)

    def update_rotation(self, delta: float) -> None:
        """Rotate by ``delta`` degrees, clamped into [min_rotation, max_rotation]."""
        self.rotation = _clamp(self.rotation + delta, self.min_rotation, self.max_rotation)

    def set_pose(self, translation: Point, scale: float, rotation: float = 0.0) -> None:
        """Set an absolute pose (scale and rotation are clamped)."""
        self.translation = (float(translation[0]), float(translation[1]))
        self.scale = _clamp(float(scale), self.min_scale, self.max_scale)
        self.rotation = _clamp(float(rotation), self.min_rotation, self.max_rotation)

    def reset(self) -> None:
        """Return to the starting pose."""
        self.set_pose(*self._initial_pose)

    def __repr__(self) -> str:
        tx, ty = self.translation
        return (
            f"AffineTransform(translation=({tx:.2f}, {ty:.2f}), "
            f"scale={self.scale:.3f}, rotation={self.rotation:.1f})"
        )
