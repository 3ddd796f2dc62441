"""Campus scene: building/floor/room model, manifest and scene builder."""

from .models import Room, Floor, Building, SceneGraph
from .manifest import BuildingSpec, CampusManifest, ManifestSchema, load_manifest, parse_manifest
from .builder import SceneBuilder

__all__ = [
    "Room",
    "Floor",
    "Building",
    "SceneGraph",
    "BuildingSpec",
    "CampusManifest",
    "ManifestSchema",
    "load_manifest",
    "parse_manifest",
    "SceneBuilder",
]
