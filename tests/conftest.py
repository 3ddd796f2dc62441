"""Shared fixtures for campus_map tests."""

import os
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from campus_map.drawing import Drawing, load_drawing  # noqa: E402
from campus_map.map_view import AffineTransform, MapContext  # noqa: E402
from campus_map.resources import bundled_path  # noqa: E402
from campus_map.scene import CampusManifest, SceneBuilder, SceneGraph, load_manifest  # noqa: E402
from campus_map.settings import AppSettings  # noqa: E402

# Map-space points inside the sample campus
MAIN_POINT = (225.0, 175.0)
COMMUNITY_POINT = (550.0, 180.0)
ART_POINT = (230.0, 470.0)
EMPTY_POINT = (900.0, 650.0)


@pytest.fixture
def drawing() -> Drawing:
    """Fresh copy of the bundled sample drawing."""
    return load_drawing(bundled_path("campus.svg"))


@pytest.fixture
def manifest() -> CampusManifest:
    return load_manifest(bundled_path("campus.json"))


@pytest.fixture
def scene(drawing: Drawing, manifest: CampusManifest) -> SceneGraph:
    return SceneBuilder(drawing).build(manifest.buildings)


@pytest.fixture
def context(drawing: Drawing, scene: SceneGraph) -> MapContext:
    """Context measured at the drawing's native size, starting at the default pose."""
    transform = AffineTransform(
        translation=(100.0, 190.0), scale=3.0, scale_range=(3.0, 30.0)
    )
    ctx = MapContext(drawing, scene, transform, title="Sample Campus")
    ctx.on_view_resize((1000.0, 700.0))
    return ctx


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    """Settings stored in a throwaway INI file."""
    return AppSettings(settings_file=tmp_path / "campus_map.ini")


def tap_map(ctx: MapContext, map_point: tuple[float, float]):
    """Tap the screen position currently showing ``map_point``."""
    return ctx.on_tap(ctx.mapper.map_to_screen(map_point))
