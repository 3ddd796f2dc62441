"""Typed scene construction from the drawing.

Element ids follow a fixed convention derived from each building's short id:

- ``{id}_HitBox``: tap rectangle (must be a ``<rect>``)
- ``{id}_Roof``: roof layer
- ``{id}_F{level}``: floor layer, level counted from 1
- ``{id}_F{level}_{room_id}``: room marker (``<rect>`` or ``<circle>``)
"""

import logging
from typing import Iterable, Optional

from ..drawing import Drawing, Point, Rect, Shape, ShapeKind
from ..errors import SceneBuildError
from .manifest import BuildingSpec
from .models import Building, Floor, Room, SceneGraph


def hit_box_id(building_id: str) -> str:
    return f"{building_id}_HitBox"


def roof_id(building_id: str) -> str:
    return f"{building_id}_Roof"


def floor_id(building_id: str, level: int) -> str:
    return f"{building_id}_F{level}"


def room_id(building_id: str, level: int, room: str) -> str:
    return f"{building_id}_F{level}_{room}"


class SceneBuilder:
    """Builds a SceneGraph from a drawing and building specs.

    Construction is all-or-nothing: every element is resolved first, and the
    initial layer visibility (roofs shown, floors and hit boxes hidden) is
    only applied once the whole scene resolved without errors.
    """

    def __init__(self, drawing: Drawing):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.drawing = drawing

    def build(self, specs: Iterable[BuildingSpec]) -> SceneGraph:
        """Resolve all buildings and return the finished scene.

        Raises:
            SceneBuildError: If an element is missing or has the wrong kind
        """
        buildings: list[Building] = []
        hit_boxes: list[Shape] = []
        seen: set[str] = set()

        for spec in specs:
            if spec.building_id in seen:
                raise SceneBuildError(f"Duplicate building id '{spec.building_id}'")
            seen.add(spec.building_id)

            building, hit_box = self._build_building(spec)
            buildings.append(building)
            hit_boxes.append(hit_box)

        scene = SceneGraph(tuple(buildings))
        self._apply_resting_state(scene, hit_boxes)

        self.logger.info(f"Scene built with {len(scene)} building(s)")
        return scene

    def _require(self, element_id: str, kinds: Optional[tuple[ShapeKind, ...]] = None) -> Shape:
        shape = self.drawing.find(element_id)
        if shape is None:
            raise SceneBuildError(f"Drawing has no element '{element_id}'", element_id)
        if kinds is not None and shape.kind not in kinds:
            expected = "/".join(kind.value for kind in kinds)
            raise SceneBuildError(
                f"Element '{element_id}' is a {shape.kind.value}, expected {expected}",
                element_id,
            )
        return shape

    def _build_building(self, spec: BuildingSpec) -> tuple[Building, Shape]:
        if spec.floor_count < 1:
            raise SceneBuildError(f"Building '{spec.building_id}' must have at least one floor")
        if not 0 <= spec.default_floor_index < spec.floor_count:
            raise SceneBuildError(
                f"Building '{spec.building_id}' default floor {spec.default_floor_index} "
                f"out of range 0..{spec.floor_count - 1}"
            )

        hit_box = self._require(hit_box_id(spec.building_id), (ShapeKind.RECT,))
        roof = self._require(roof_id(spec.building_id))

        floors = tuple(
            Floor(
                level=level,
                layer=self._require(floor_id(spec.building_id, level)),
                building_id=spec.building_id,
                rooms=self._build_rooms(spec, level),
            )
            for level in range(1, spec.floor_count + 1)
        )

        building = Building(
            name=spec.name,
            building_id=spec.building_id,
            hit_region=_rect_of(hit_box),
            roof=roof,
            floors=floors,
            default_floor_index=spec.default_floor_index,
        )
        self.logger.debug(
            f"Resolved building '{spec.building_id}': {len(floors)} floor(s), "
            f"{sum(len(f.rooms) for f in floors)} room(s)"
        )
        return building, hit_box

    def _build_rooms(self, spec: BuildingSpec, level: int) -> tuple[Room, ...]:
        declared = spec.room_names(level)
        if declared is not None:
            return tuple(
                Room(name=name, room_id=short_id, position=self._room_position(spec, level, short_id))
                for short_id, name in declared.items()
            )

        # Not declared: discover markers by id prefix
        prefix = room_id(spec.building_id, level, "")
        rooms: list[Room] = []
        for element_id in self.drawing.ids_with_prefix(prefix):
            short_id = element_id[len(prefix):]
            if not short_id:
                continue
            rooms.append(
                Room(
                    name=short_id.replace("_", " "),
                    room_id=short_id,
                    position=self._room_position(spec, level, short_id),
                )
            )
        return tuple(rooms)

    def _room_position(self, spec: BuildingSpec, level: int, short_id: str) -> Point:
        marker = self._require(
            room_id(spec.building_id, level, short_id), (ShapeKind.RECT, ShapeKind.CIRCLE)
        )
        if marker.center is None:
            raise SceneBuildError(
                f"Room marker '{marker.element_id}' has no usable position", marker.element_id
            )
        return marker.center

    def _apply_resting_state(self, scene: SceneGraph, hit_boxes: list[Shape]) -> None:
        """Everything closed: roofs visible, floors and hit boxes hidden."""
        for building in scene:
            building.roof.visible = True
            for floor in building.floors:
                floor.layer.visible = False
        for hit_box in hit_boxes:
            hit_box.visible = False


def _rect_of(shape: Shape) -> Rect:
    """Get rectangle geometry of a RECT shape."""
    if shape.rect is None:
        raise SceneBuildError(f"Element '{shape.element_id}' has no rectangle geometry", shape.element_id)
    return shape.rect
