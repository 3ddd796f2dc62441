"""Label anchors for the map overlay.

The core only decides where labels go and how opaque they are; shaping and
drawing the text is left to the view.
"""

from dataclasses import dataclass
from typing import Optional

from ..drawing import Point
from ..scene import SceneGraph
from .selection import SelectionController
from .space_mapper import SpaceMapper
from .transform import AffineTransform


@dataclass(frozen=True)
class BuildingLabel:
    """Building name placed at its hit-region midpoint."""

    screen_point: Point
    text: str
    opacity: float


@dataclass(frozen=True)
class RoomLabel:
    """Room name on the open floor."""

    screen_point: Point
    text: str


@dataclass(frozen=True)
class PopupSummary:
    """What the selection popup shows."""

    building_name: str
    floor_number: int
    floor_count: int


class LabelPlacer:
    """Computes label anchors, opacity and the popup summary."""

    def __init__(
        self,
        scene: SceneGraph,
        controller: SelectionController,
        mapper: SpaceMapper,
        transform: AffineTransform,
        label_min_scale: float = 0.0,
        label_fade_range: float = 0.0,
    ):
        """Initialize the placer.

        Args:
            scene: Campus scene
            controller: Selection state source
            mapper: Map-to-screen conversion
            transform: Live transform (its scale drives label opacity)
            label_min_scale: Scale at and above which labels are fully opaque
            label_fade_range: Scale span below label_min_scale over which
                labels fade out; 0 makes the cutoff a step
        """
        self.scene = scene
        self.controller = controller
        self.mapper = mapper
        self.transform = transform
        self.label_min_scale = label_min_scale
        self.label_fade_range = max(0.0, label_fade_range)

    def label_opacity(self) -> float:
        """Opacity hint for building labels at the current zoom."""
        scale = self.transform.scale
        if scale >= self.label_min_scale:
            return 1.0
        if self.label_fade_range == 0:
            return 0.0
        fade_start = self.label_min_scale - self.label_fade_range
        return max(0.0, (scale - fade_start) / self.label_fade_range)

    def building_anchors(self) -> list[tuple[Point, str]]:
        """Map-space anchors for every building that is not open."""
        active = self.controller.active_building
        return [
            (building.midpoint, building.name)
            for building in self.scene
            if building is not active
        ]

    def room_anchors(self) -> list[tuple[Point, str]]:
        """Map-space anchors for the rooms of the open floor."""
        floor = self.controller.state.floor
        if floor is None:
            return []
        return [(room.position, room.name) for room in floor.rooms]

    def building_labels(self) -> list[BuildingLabel]:
        if not self.mapper.is_ready:
            return []
        opacity = self.label_opacity()
        return [
            BuildingLabel(self.mapper.map_to_screen(point), text, opacity)
            for point, text in self.building_anchors()
        ]

    def room_labels(self) -> list[RoomLabel]:
        if not self.mapper.is_ready:
            return []
        return [
            RoomLabel(self.mapper.map_to_screen(point), text)
            for point, text in self.room_anchors()
        ]

    def popup_summary(self) -> Optional[PopupSummary]:
        """Active building name and floor number, or None when Idle."""
        state = self.controller.state
        if state.building is None or state.floor is None:
            return None
        return PopupSummary(
            building_name=state.building.name,
            floor_number=state.floor.level,
            floor_count=state.building.floor_count,
        )
