"""Map view package.

This package provides the components of the interactive map:
- AffineTransform: Live pan/zoom/rotation transform
- SpaceMapper: Screen space <-> map space conversion
- SelectionController: Tap-driven building/floor state machine
- LabelPlacer: Label anchors, opacity hint and popup summary
- MapContext: All live map state plus gesture entry points
- MapView: Widget rendering the drawing and label overlay
- FloorPopup: Open-building popup
"""

from .transform import AffineTransform
from .space_mapper import SpaceMapper
from .selection import SelectionController, SelectionState
from .labels import LabelPlacer, BuildingLabel, RoomLabel, PopupSummary
from .context import MapContext, load_context
from .map_view import MapView
from .popup import FloorPopup

__all__ = [
    "AffineTransform",
    "SpaceMapper",
    "SelectionController",
    "SelectionState",
    "LabelPlacer",
    "BuildingLabel",
    "RoomLabel",
    "PopupSummary",
    "MapContext",
    "load_context",
    "MapView",
    "FloorPopup",
]
