"""Campus manifest: which buildings the drawing contains.

The manifest is a small JSON file listing buildings by short id together
with their display names, floor counts, default floors and, optionally,
room names per floor level. Element ids in the drawing are derived from it.

Example::

    {
      "name": "Tandem Campus",
      "buildings": [
        {"id": "Main", "name": "Main Building", "floors": 2, "default_floor": 0,
         "rooms": {"1": {"101": "Front Office"}}}
      ]
    }
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, cast

import orjson

from ..errors import ManifestError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildingSpec:
    """Manifest entry for one building.

    Attributes:
        building_id: Short id (prefix of element ids in the drawing)
        name: Display name
        floor_count: Number of floors (>= 1)
        default_floor_index: Floor shown when opened (0-based)
        rooms: Optional room names per floor level: {level: {room_id: name}}.
            A level missing here means rooms are discovered from the drawing.
    """

    building_id: str
    name: str
    floor_count: int = 1
    default_floor_index: int = 0
    rooms: dict[int, dict[str, str]] = field(default_factory=lambda: {})

    def room_names(self, level: int) -> Optional[dict[str, str]]:
        """Get declared rooms for a floor level, or None if not declared."""
        return self.rooms.get(level)


@dataclass(frozen=True)
class CampusManifest:
    """Parsed campus manifest."""

    name: str
    buildings: tuple[BuildingSpec, ...]


class ManifestSchema:
    """Schema validation for manifest JSON."""

    REQUIRED_ROOT_FIELDS = {"name", "buildings"}
    REQUIRED_BUILDING_FIELDS = {"id", "name"}

    @staticmethod
    def validate_building(data: Any) -> list[str]:
        """Validate one building entry.

        Returns:
            List of error messages (empty if valid)
        """
        errors: list[str] = []
        if not isinstance(data, dict):
            return ["must be an object"]
        entry = cast(dict[str, Any], data)

        missing = ManifestSchema.REQUIRED_BUILDING_FIELDS - entry.keys()
        if missing:
            errors.append(f"Missing required fields: {sorted(missing)}")
            return errors

        building_id = entry["id"]
        if not isinstance(building_id, str) or not building_id:
            errors.append(f"'id' must be a non-empty string, got {building_id!r}")
        elif "_" in building_id:
            errors.append(f"'id' must not contain '_', got {building_id!r}")
        if not isinstance(entry["name"], str):
            errors.append("'name' must be a string")

        floors = entry.get("floors", 1)
        if not isinstance(floors, int) or isinstance(floors, bool) or floors < 1:
            errors.append(f"'floors' must be a positive integer, got {floors!r}")
            return errors

        default_floor = entry.get("default_floor", 0)
        if not isinstance(default_floor, int) or isinstance(default_floor, bool):
            errors.append(f"'default_floor' must be an integer, got {default_floor!r}")
        elif not 0 <= default_floor < floors:
            errors.append(f"'default_floor' must be 0-{floors - 1}, got {default_floor}")

        rooms = entry.get("rooms", {})
        if not isinstance(rooms, dict):
            errors.append("'rooms' must be an object")
            return errors
        for level_key, room_map in cast(dict[str, Any], rooms).items():
            if not level_key.isdecimal() or not 1 <= int(level_key) <= floors:
                errors.append(f"'rooms' key {level_key!r} is not a floor level 1-{floors}")
                continue
            if not isinstance(room_map, dict):
                errors.append(f"'rooms.{level_key}' must be an object")
                continue
            for room_id, room_name in cast(dict[str, Any], room_map).items():
                if not isinstance(room_name, str):
                    errors.append(f"'rooms.{level_key}.{room_id}' must be a string")

        return errors

    @staticmethod
    def validate_manifest(data: Any) -> list[str]:
        """Validate complete manifest JSON.

        Returns:
            List of all validation errors (empty if valid)
        """
        if not isinstance(data, dict):
            return ["Manifest root must be an object"]
        root = cast(dict[str, Any], data)

        errors: list[str] = []
        missing = ManifestSchema.REQUIRED_ROOT_FIELDS - root.keys()
        if missing:
            return [f"Missing required fields: {sorted(missing)}"]
        if not isinstance(root["name"], str):
            errors.append("'name' must be a string")
        if not isinstance(root["buildings"], list):
            errors.append("'buildings' must be an array")
            return errors

        seen_ids: set[str] = set()
        for idx, building in enumerate(cast(list[Any], root["buildings"])):
            building_errors = ManifestSchema.validate_building(building)
            errors.extend(f"Building {idx}: {err}" for err in building_errors)

            building_id = building.get("id") if isinstance(building, dict) else None
            if isinstance(building_id, str) and building_id:
                if building_id in seen_ids:
                    errors.append(f"Building {idx}: duplicate 'id' '{building_id}'")
                seen_ids.add(building_id)

        return errors


def parse_manifest(data: Any, source: str = "<data>") -> CampusManifest:
    """Convert manifest JSON data into a CampusManifest.

    Raises:
        ManifestError: If the data doesn't match the schema
    """
    errors = ManifestSchema.validate_manifest(data)
    if errors:
        error_msg = "\n  - ".join(errors)
        raise ManifestError(f"Invalid campus manifest in {source}:\n  - {error_msg}")

    specs: list[BuildingSpec] = []
    for entry in data["buildings"]:
        rooms = {
            int(level): {str(room_id): name for room_id, name in room_map.items()}
            for level, room_map in entry.get("rooms", {}).items()
        }
        specs.append(
            BuildingSpec(
                building_id=entry["id"],
                name=entry["name"],
                floor_count=entry.get("floors", 1),
                default_floor_index=entry.get("default_floor", 0),
                rooms=rooms,
            )
        )

    return CampusManifest(name=data["name"], buildings=tuple(specs))


def load_manifest(path: Path) -> CampusManifest:
    """Load a campus manifest from a JSON file.

    Raises:
        ManifestError: If the file is missing, not JSON, or invalid
    """
    if not path.exists():
        raise ManifestError(f"Campus manifest not found: {path}")

    logger.info(f"Loading campus manifest from: {path}")
    try:
        data = orjson.loads(path.read_bytes())
    except orjson.JSONDecodeError as e:
        raise ManifestError(f"Failed to parse JSON from {path}: {e}")

    manifest = parse_manifest(data, source=str(path))
    logger.info(f"Loaded manifest '{manifest.name}' with {len(manifest.buildings)} building(s)")
    return manifest
