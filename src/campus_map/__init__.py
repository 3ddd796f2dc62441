"""
campus_map: interactive campus map with building and floor drill-down.

Renders a campus drawing (SVG) with pan and zoom, and opens buildings and
cycles their floors as the user taps them.
"""

__version__ = "0.1.0"
__author__ = "campus_map Contributors"

from .errors import (
    CampusMapError, DrawingLoadError, ManifestError,
    SceneBuildError, NotReadyError, ConfigError,
)
from .drawing import Drawing, Shape, ShapeKind, Rect, load_drawing
from .scene import Room, Floor, Building, SceneGraph, SceneBuilder, load_manifest
from .map_view.transform import AffineTransform
from .map_view.space_mapper import SpaceMapper
from .map_view.selection import SelectionController, SelectionState
from .map_view.context import MapContext, load_context
from .utils.logging_config import setup_logging

__all__ = [
    # Errors
    'CampusMapError',
    'DrawingLoadError',
    'ManifestError',
    'SceneBuildError',
    'NotReadyError',
    'ConfigError',

    # Drawing
    'Drawing',
    'Shape',
    'ShapeKind',
    'Rect',
    'load_drawing',

    # Scene
    'Room',
    'Floor',
    'Building',
    'SceneGraph',
    'SceneBuilder',
    'load_manifest',

    # Map core
    'AffineTransform',
    'SpaceMapper',
    'SelectionController',
    'SelectionState',
    'MapContext',
    'load_context',

    # Logging
    'setup_logging',
]
