"""Map context: the single object holding all live map state.

Everything the gesture adapter can change (transform, view size, selection)
lives here and is passed explicitly to the view, so the whole core can be
driven from tests by constructing a context and feeding it events.
"""

import logging
from typing import TYPE_CHECKING, Optional

from ..drawing import Drawing, Point, load_drawing
from ..errors import NotReadyError
from ..scene import SceneBuilder, SceneGraph, load_manifest
from .labels import LabelPlacer
from .selection import SelectionController, SelectionState
from .space_mapper import SpaceMapper
from .transform import AffineTransform

if TYPE_CHECKING:
    from ..settings import AppSettings

logger = logging.getLogger(__name__)


class MapContext:
    """Live map state plus the gesture-adapter entry points."""

    def __init__(
        self,
        drawing: Drawing,
        scene: SceneGraph,
        transform: AffineTransform,
        label_min_scale: float = 0.0,
        label_fade_range: float = 0.0,
        title: str = "",
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.drawing = drawing
        self.scene = scene
        self.transform = transform
        self.title = title

        self.mapper = SpaceMapper(transform, drawing.native_size, drawing.origin)
        self.controller = SelectionController(scene, self.mapper)
        self.labels = LabelPlacer(
            scene,
            self.controller,
            self.mapper,
            transform,
            label_min_scale=label_min_scale,
            label_fade_range=label_fade_range,
        )

    @classmethod
    def from_settings(
        cls, drawing: Drawing, scene: SceneGraph, settings: "AppSettings", title: str = ""
    ) -> "MapContext":
        """Create context with transform and label options from settings."""
        return cls(
            drawing,
            scene,
            AffineTransform.from_settings(settings),
            label_min_scale=settings.map.label_min_scale,
            label_fade_range=settings.map.label_fade_range,
            title=title,
        )

    # === GESTURE INPUT ===

    def on_transform_delta(
        self, translation_delta: Point = (0.0, 0.0), scale_delta: float = 0.0, rotation_delta: float = 0.0
    ) -> None:
        """Apply a decoded pan/zoom/rotate gesture step."""
        if translation_delta != (0.0, 0.0):
            self.transform.update_translation(translation_delta)
        if scale_delta:
            self.transform.update_scale(scale_delta)
        if rotation_delta:
            self.transform.update_rotation(rotation_delta)

    def on_tap(self, screen_point: Point) -> Optional[SelectionState]:
        """Handle a tap. Taps before the first view measurement are ignored."""
        try:
            return self.controller.on_tap(screen_point)
        except NotReadyError:
            self.logger.debug(f"Ignoring tap at {screen_point}: view not measured yet")
            return None

    def on_view_resize(self, size: tuple[float, float]) -> None:
        """Handle a layout change of the view."""
        self.mapper.set_view_size(size)

    def zoom_at(self, screen_point: Point, scale_delta: float) -> None:
        """Zoom while keeping the map point under ``screen_point`` fixed on screen."""
        if not self.mapper.is_ready:
            self.transform.update_scale(scale_delta)
            return

        anchor = self.mapper.screen_to_map(screen_point)
        self.transform.update_scale(scale_delta)
        moved_x, moved_y = self.mapper.map_to_screen(anchor)
        self.transform.update_translation((screen_point[0] - moved_x, screen_point[1] - moved_y))

    def reset_view(self) -> None:
        """Return the transform to its starting pose."""
        self.transform.reset()


def load_context(settings: "AppSettings") -> MapContext:
    """Load drawing and manifest from configured paths and build the context.

    Raises:
        DrawingLoadError: If the drawing can't be read
        ManifestError: If the manifest can't be read or is invalid
        SceneBuildError: If the drawing doesn't match the manifest
    """
    drawing = load_drawing(settings.drawing_path)
    manifest = load_manifest(settings.manifest_path)
    scene = SceneBuilder(drawing).build(manifest.buildings)
    logger.info(f"Map context ready for '{manifest.name}'")
    return MapContext.from_settings(drawing, scene, settings, title=manifest.name)
