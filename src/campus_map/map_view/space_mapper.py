"""Coordinate transformations between screen space and map space.

Map space:
    Fixed logical coordinates of the drawing (its SVG user units). The
    top-left corner is the drawing origin, the viewBox (min-x, min-y),
    usually (0, 0). The extent is the drawing's native size.

Screen space:
    Pixel coordinates of the view, (0, 0) at the top-left and extending to
    the current view size.

Between the two sits the display normalization: the drawing is scaled to
the view width and centred on display point (0, 0) before the live
AffineTransform is applied.
"""

import logging

from PySide6.QtCore import QRectF

from ..drawing import Point
from ..errors import NotReadyError
from .transform import AffineTransform


class SpaceMapper:
    """Converts points between screen space and map space.

    The mapper holds a reference to the live transform and reads it on every
    call, so pan/zoom updates take effect immediately.
    """

    def __init__(
        self,
        transform: AffineTransform,
        native_size: tuple[float, float],
        origin: Point = (0.0, 0.0),
    ):
        """Initialize the mapper.

        Args:
            transform: Live pan/zoom transform (shared, never copied)
            native_size: (width, height) of the drawing in map-space units
            origin: Map-space point drawn at the top-left of the display
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        if native_size[0] <= 0 or native_size[1] <= 0:
            raise ValueError(f"Invalid native drawing size: {native_size}")

        self.transform = transform
        self.native_size = native_size
        self.origin = origin

        # Unknown until the first view measurement
        self.view_size: tuple[float, float] = (0.0, 0.0)
        self.display_scale: float = 0.0
        self.display_size: tuple[float, float] = (0.0, 0.0)

    @property
    def is_ready(self) -> bool:
        """Check whether the view has been measured."""
        return self.display_scale > 0

    def set_view_size(self, size: tuple[float, float]) -> None:
        """Record a new view size and recompute the display scale.

        A non-positive width puts the mapper back into the not-ready state.
        """
        width, height = float(size[0]), float(size[1])
        self.view_size = (width, height)

        if width <= 0:
            self.display_scale = 0.0
            self.display_size = (0.0, 0.0)
            self.logger.debug(f"View size {width}x{height} unusable, mapper not ready")
            return

        native_w, native_h = self.native_size
        self.display_scale = width / native_w
        self.display_size = (native_w * self.display_scale, native_h * self.display_scale)
        self.logger.debug(
            f"View size {width:g}x{height:g}, display scale {self.display_scale:.4f}"
        )

    def _require_ready(self) -> None:
        if not self.is_ready:
            raise NotReadyError("View size is not known yet")

    def screen_to_map(self, screen_point: Point) -> Point:
        """Convert a screen point to map space.

        Raises:
            NotReadyError: If called before the view size is known
        """
        self._require_ready()
        inv_x, inv_y = self.transform.apply_inverse(screen_point)
        width, height = self.display_size
        origin_x, origin_y = self.origin
        return (
            (inv_x + width / 2) / self.display_scale + origin_x,
            (inv_y + height / 2) / self.display_scale + origin_y,
        )

    def map_to_screen(self, map_point: Point) -> Point:
        """Convert a map point to screen space.

        Raises:
            NotReadyError: If called before the view size is known
        """
        self._require_ready()
        width, height = self.display_size
        origin_x, origin_y = self.origin
        display_point = (
            (map_point[0] - origin_x) * self.display_scale - width / 2,
            (map_point[1] - origin_y) * self.display_scale - height / 2,
        )
        return self.transform.apply(display_point)

    def display_rect(self) -> QRectF:
        """Rectangle the drawing is painted into before the transform is applied."""
        self._require_ready()
        width, height = self.display_size
        return QRectF(-width / 2, -height / 2, width, height)
