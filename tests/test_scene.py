"""Unit tests for manifest parsing and scene construction."""

from pathlib import Path

import orjson
import pytest

from campus_map.drawing import Drawing, parse_drawing
from campus_map.errors import ManifestError, SceneBuildError
from campus_map.scene import BuildingSpec, ManifestSchema, SceneBuilder, SceneGraph, load_manifest, parse_manifest


class TestSceneFromSample:
    """Scene built from the bundled sample campus."""

    def test_buildings_in_manifest_order(self, scene: SceneGraph) -> None:
        assert [b.building_id for b in scene] == ["Main", "Community", "Art"]
        assert [b.name for b in scene] == ["Main Building", "Community Hall", "Arts Annex"]

    def test_floors_and_back_references(self, scene: SceneGraph) -> None:
        main = scene.get("Main")
        assert main is not None
        assert [f.level for f in main.floors] == [1, 2]
        assert [f.layer.element_id for f in main.floors] == ["Main_F1", "Main_F2"]
        for floor in main.floors:
            assert scene.owner_of(floor) is main

    def test_hit_region_and_midpoint(self, scene: SceneGraph) -> None:
        main = scene.get("Main")
        assert main is not None
        assert (main.hit_region.x, main.hit_region.y) == (100, 100)
        assert main.midpoint == (225.0, 175.0)

    def test_declared_rooms_keep_manifest_names_and_order(self, scene: SceneGraph) -> None:
        main = scene.get("Main")
        assert main is not None
        rooms = main.floors[0].rooms
        assert [r.name for r in rooms] == ["Front Office", "Counseling", "Lobby"]
        assert [r.position for r in rooms] == [(160.0, 140.0), (290.0, 140.0), (225.0, 215.0)]

    def test_undeclared_rooms_discovered_from_drawing(self, scene: SceneGraph) -> None:
        main = scene.get("Main")
        community = scene.get("Community")
        assert main is not None and community is not None
        assert [r.room_id for r in main.floors[1].rooms] == ["201", "Library"]
        assert [r.name for r in community.floors[0].rooms] == ["Great Hall", "Kitchen"]

    def test_resting_state(self, scene: SceneGraph, drawing: Drawing) -> None:
        for building in scene:
            assert building.roof.visible
            assert not any(f.layer.visible for f in building.floors)
            hit_box = drawing.find(f"{building.building_id}_HitBox")
            assert hit_box is not None and not hit_box.visible

    def test_hit_test(self, scene: SceneGraph) -> None:
        main = scene.get("Main")
        assert scene.hit_test((225.0, 175.0)) is main
        assert scene.hit_test((100.0, 100.0)) is main  # edges count
        assert scene.hit_test((900.0, 650.0)) is None


OVERLAP_SVG = b"""<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect id="A_HitBox" x="0" y="0" width="60" height="60"/>
  <g id="A_Roof"/><g id="A_F1"/>
  <rect id="B_HitBox" x="40" y="40" width="60" height="60"/>
  <g id="B_Roof"/><g id="B_F1"/>
  <circle id="C_HitBox" cx="5" cy="5"/>
  <g id="C_Roof"/><g id="C_F1"/>
  <g id="D_HitBox"/>
  <rect id="E_HitBox" x="0" y="0" width="1" height="1"/>
  <g id="E_Roof"/><g id="E_F1"><g id="E_F1_Bad"/></g>
  <rect id="F_HitBox" x="0" y="0" width="50%" height="50%"/>
  <g id="F_Roof"/><g id="F_F1"/>
  <rect id="G_HitBox" x="0" y="0" width="10" height="10"/>
  <g id="G_Roof"/><g id="G_F1"><circle id="G_F1_Desk" cx="10%" cy="5"/></g>
  <rect id="Background" width="100%" height="100%"/>
</svg>
"""


class TestSceneBuildErrors:
    """Construction fails fast and leaves the drawing untouched."""

    def test_first_building_in_scene_order_wins(self) -> None:
        scene = SceneBuilder(parse_drawing(OVERLAP_SVG)).build(
            [BuildingSpec("B", "Bee"), BuildingSpec("A", "Ay")]
        )
        assert scene.hit_test((50.0, 50.0)) is scene.get("B")

    def test_missing_element(self) -> None:
        drawing = parse_drawing(OVERLAP_SVG)
        with pytest.raises(SceneBuildError) as exc_info:
            SceneBuilder(drawing).build([BuildingSpec("A", "Ay", floor_count=2)])
        assert exc_info.value.element_id == "A_F2"

    def test_hit_box_must_be_rectangle(self) -> None:
        drawing = parse_drawing(OVERLAP_SVG)
        with pytest.raises(SceneBuildError) as exc_info:
            SceneBuilder(drawing).build([BuildingSpec("C", "Sea")])
        assert exc_info.value.element_id == "C_HitBox"
        with pytest.raises(SceneBuildError):
            SceneBuilder(drawing).build([BuildingSpec("D", "Dee")])

    def test_room_marker_must_be_rect_or_circle(self) -> None:
        drawing = parse_drawing(OVERLAP_SVG)
        with pytest.raises(SceneBuildError) as exc_info:
            SceneBuilder(drawing).build([BuildingSpec("E", "Ee")])
        assert exc_info.value.element_id == "E_F1_Bad"

    def test_hit_box_needs_absolute_geometry(self) -> None:
        drawing = parse_drawing(OVERLAP_SVG)
        with pytest.raises(SceneBuildError) as exc_info:
            SceneBuilder(drawing).build([BuildingSpec("F", "Eff")])
        assert exc_info.value.element_id == "F_HitBox"

    def test_room_marker_needs_absolute_position(self) -> None:
        drawing = parse_drawing(OVERLAP_SVG)
        with pytest.raises(SceneBuildError) as exc_info:
            SceneBuilder(drawing).build([BuildingSpec("G", "Gee")])
        assert exc_info.value.element_id == "G_F1_Desk"

    def test_unused_relative_elements_are_ignored(self) -> None:
        scene = SceneBuilder(parse_drawing(OVERLAP_SVG)).build([BuildingSpec("A", "Ay")])
        assert scene.hit_test((10.0, 10.0)) is scene.get("A")

    def test_failed_build_does_not_touch_drawing(self, drawing: Drawing) -> None:
        specs = [BuildingSpec("Main", "Main Building", floor_count=2), BuildingSpec("Gym", "Gym")]
        with pytest.raises(SceneBuildError):
            SceneBuilder(drawing).build(specs)
        assert drawing.revision == 0
        main_f1 = drawing.find("Main_F1")
        assert main_f1 is not None and main_f1.visible

    def test_default_floor_out_of_range(self, drawing: Drawing) -> None:
        with pytest.raises(SceneBuildError):
            SceneBuilder(drawing).build([BuildingSpec("Main", "Main", floor_count=2, default_floor_index=2)])

    def test_duplicate_building_ids(self, drawing: Drawing) -> None:
        with pytest.raises(SceneBuildError):
            SceneBuilder(drawing).build([BuildingSpec("Art", "Art"), BuildingSpec("Art", "Art again")])


class TestManifest:
    """Manifest schema validation and loading."""

    def test_parse_valid_manifest(self) -> None:
        manifest = parse_manifest({
            "name": "Campus",
            "buildings": [
                {"id": "Main", "name": "Main", "floors": 3, "default_floor": 1,
                 "rooms": {"2": {"201": "Library"}}},
                {"id": "Gym", "name": "Gym"},
            ],
        })
        main, gym = manifest.buildings
        assert (main.floor_count, main.default_floor_index) == (3, 1)
        assert main.room_names(2) == {"201": "Library"}
        assert main.room_names(1) is None
        assert (gym.floor_count, gym.default_floor_index) == (1, 0)

    def test_collects_every_error(self) -> None:
        errors = ManifestSchema.validate_manifest({
            "name": "Campus",
            "buildings": [
                {"id": "A", "name": "A", "floors": 2, "default_floor": 2},
                {"id": "B_1", "name": "B"},
                {"id": "C", "name": "C", "floors": 0},
                {"id": "A", "name": "A again", "rooms": {"5": {}}},
                "not an object",
            ],
        })
        assert len(errors) == 6
        assert any("default_floor" in e for e in errors)
        assert any("duplicate" in e for e in errors)

    def test_room_level_must_be_decimal(self) -> None:
        for key in ("²", "one", "-1", ""):
            with pytest.raises(ManifestError):
                parse_manifest({
                    "name": "Campus",
                    "buildings": [{"id": "A", "name": "A", "rooms": {key: {"1": "Office"}}}],
                })

    def test_missing_root_fields(self) -> None:
        with pytest.raises(ManifestError):
            parse_manifest({"name": "Campus"})
        with pytest.raises(ManifestError):
            parse_manifest(["not", "an", "object"])

    def test_load_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "campus.json"
        path.write_bytes(orjson.dumps({"name": "C", "buildings": [{"id": "X", "name": "X"}]}))
        manifest = load_manifest(path)
        assert manifest.name == "C"
        assert manifest.buildings[0].building_id == "X"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "campus.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ManifestError):
            load_manifest(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestError):
            load_manifest(tmp_path / "nope.json")
