"""
Campus scene model: buildings, floors and rooms.

The scene is built once from the drawing and is read-only afterwards. The
only state that changes at runtime is the visibility of the roof and floor
layers, and that lives on the drawing's shapes, not here.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..drawing import Point, Rect, Shape


@dataclass(frozen=True)
class Room:
    """A named room marker on a floor.

    Attributes:
        name: Display name
        room_id: Short id used in the element id (``{building}_F{level}_{room_id}``)
        position: Marker centre in map space
    """

    name: str
    room_id: str
    position: Point


@dataclass(frozen=True, eq=False)
class Floor:
    """One floor of a building.

    Attributes:
        level: 1-based floor number (index 0 in the building is level 1)
        layer: Drawing element that shows this floor's interior
        rooms: Rooms on this floor in drawing order
        building_id: Id of the owning building (lookup key, not a reference)
    """

    level: int
    layer: Shape
    building_id: str
    rooms: tuple[Room, ...] = ()


@dataclass(frozen=True, eq=False)
class Building:
    """A building that can be opened to reveal its floors.

    Attributes:
        name: Display name
        building_id: Short id used to derive element ids
        hit_region: Tap-sensitive rectangle in map space
        roof: Drawing element covering the building when closed
        floors: Floors from ground (index 0) upwards, never empty
        default_floor_index: Floor shown when the building is opened
    """

    name: str
    building_id: str
    hit_region: Rect
    roof: Shape
    floors: tuple[Floor, ...]
    default_floor_index: int = 0

    def __post_init__(self) -> None:
        """Validate floor list and default floor."""
        if not self.floors:
            raise ValueError(f"Building '{self.building_id}' has no floors")
        if not 0 <= self.default_floor_index < len(self.floors):
            raise ValueError(
                f"Building '{self.building_id}' default floor {self.default_floor_index} "
                f"out of range 0..{len(self.floors) - 1}"
            )
        for floor in self.floors:
            if floor.building_id != self.building_id:
                raise ValueError(
                    f"Floor {floor.level} belongs to '{floor.building_id}', not '{self.building_id}'"
                )

    @property
    def midpoint(self) -> Point:
        """Centre of the hit region, used to anchor the building label."""
        return self.hit_region.center

    @property
    def floor_count(self) -> int:
        return len(self.floors)

    def __repr__(self) -> str:
        return f"Building({self.building_id!r}, floors={len(self.floors)})"


@dataclass(frozen=True)
class SceneGraph:
    """Ordered, read-only collection of buildings."""

    buildings: tuple[Building, ...]
    _by_id: dict[str, Building] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_by_id", {b.building_id: b for b in self.buildings})

    def __iter__(self) -> Iterator[Building]:
        return iter(self.buildings)

    def __len__(self) -> int:
        return len(self.buildings)

    def get(self, building_id: str) -> Optional[Building]:
        """Get building by id, or None."""
        return self._by_id.get(building_id)

    def owner_of(self, floor: Floor) -> Building:
        """Resolve a floor's owning building through its back-reference key."""
        return self._by_id[floor.building_id]

    def hit_test(self, map_point: Point) -> Optional[Building]:
        """Find the first building, in scene order, whose hit region contains the point.

        Returns None when the point misses every building.
        """
        for building in self.buildings:
            if building.hit_region.contains(map_point):
                return building
        return None
