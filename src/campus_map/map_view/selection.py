"""Tap-driven building/floor selection.

Two states:

- Idle: every building closed (roof shown, floors hidden)
- BuildingActive(building, floor): that building's roof is hidden and
  exactly one of its floors is shown

Tapping a different building (or empty space) closes the active one and
opens the tapped one. Tapping the open building again cycles its floors.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..drawing import Point
from ..scene import Building, Floor, SceneGraph
from .space_mapper import SpaceMapper


@dataclass(frozen=True)
class SelectionState:
    """Snapshot of the current selection."""

    building: Optional[Building] = None
    floor_index: int = 0

    @property
    def is_idle(self) -> bool:
        return self.building is None

    @property
    def floor(self) -> Optional[Floor]:
        if self.building is None:
            return None
        return self.building.floors[self.floor_index]


class SelectionController:
    """State machine deciding which building and floor are open.

    The only side effects are visibility changes on roof/floor layers of the
    scene and the controller's own active-selection fields.
    """

    def __init__(self, scene: SceneGraph, mapper: SpaceMapper):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.scene = scene
        self.mapper = mapper

        self._active_building: Optional[Building] = None
        self._selected_floor_index: int = 0

    # === STATE ===

    @property
    def active_building(self) -> Optional[Building]:
        return self._active_building

    @property
    def selected_floor_index(self) -> int:
        """Index of the shown floor; meaningless while Idle."""
        return self._selected_floor_index

    @property
    def state(self) -> SelectionState:
        if self._active_building is None:
            return SelectionState()
        return SelectionState(self._active_building, self._selected_floor_index)

    # === INPUT ===

    def hit_test(self, map_point: Point) -> Optional[Building]:
        """Get the first building whose hit region contains ``map_point``."""
        return self.scene.hit_test(map_point)

    def on_tap(self, screen_point: Point) -> SelectionState:
        """Handle a tap at ``screen_point``.

        Raises:
            NotReadyError: If the view has not been measured yet
        """
        map_point = self.mapper.screen_to_map(screen_point)
        tapped = self.hit_test(map_point)
        self.logger.debug(
            f"Tap at screen ({screen_point[0]:.1f}, {screen_point[1]:.1f}) -> "
            f"map ({map_point[0]:.1f}, {map_point[1]:.1f}), hit: "
            f"{tapped.building_id if tapped else None}"
        )

        if tapped is not self._active_building:
            self.select_building(tapped)
        else:
            self.next_floor()

        return self.state

    def select_building(self, building: Optional[Building]) -> None:
        """Make ``building`` the active one (None closes everything).

        Does nothing if ``building`` is already active.
        """
        if building is self._active_building:
            return

        previous = self._active_building
        if previous is not None:
            previous.roof.visible = True
            previous.floors[self._selected_floor_index].layer.visible = False

        self._active_building = building
        if building is None:
            self._selected_floor_index = 0
            self.logger.info(
                f"Closed '{previous.name if previous else None}', now idle"
            )
            return

        building.roof.visible = False
        self._selected_floor_index = building.default_floor_index
        building.floors[self._selected_floor_index].layer.visible = True
        self.logger.info(
            f"Opened '{building.name}' at floor "
            f"{building.floors[self._selected_floor_index].level}"
        )

    def select_floor(self, index: int) -> None:
        """Show floor ``index`` of the active building (clamped into range).

        Does nothing while Idle.
        """
        building = self._active_building
        if building is None:
            return

        index = max(0, min(building.floor_count - 1, index))
        if index == self._selected_floor_index:
            return

        building.floors[self._selected_floor_index].layer.visible = False
        self._selected_floor_index = index
        building.floors[index].layer.visible = True
        self.logger.debug(f"'{building.name}' now showing floor {building.floors[index].level}")

    def next_floor(self) -> None:
        """Cycle the active building to its next floor, wrapping around."""
        building = self._active_building
        if building is None or building.floor_count < 2:
            return
        self.select_floor((self._selected_floor_index + 1) % building.floor_count)

    def close(self) -> None:
        """Close the active building and return to Idle."""
        self.select_building(None)
