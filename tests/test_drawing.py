"""Unit tests for the drawing shape tree and SVG loader."""

from pathlib import Path

import pytest

from campus_map.drawing import ShapeKind, load_drawing, parse_drawing
from campus_map.errors import DrawingLoadError

SMALL_SVG = b"""<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 200 100">
  <g id="A_Roof"><rect x="0" y="0" width="10" height="10"/></g>
  <rect id="A_HitBox" x="5" y="6" width="20px" height="30"/>
  <circle id="A_F1_Kitchen" cx="12.5" cy="7"/>
  <path id="A_F1_Stairs" d="M 0 0 L 1 1"/>
  <rect id="Hidden" x="0" y="0" width="1" height="1" opacity="0"/>
</svg>
"""


class TestSvgLoading:
    """Parsing SVG into shapes."""

    def test_native_size_from_view_box(self) -> None:
        drawing = parse_drawing(SMALL_SVG)
        assert drawing.native_size == (200.0, 100.0)

    def test_native_size_from_width_and_height(self) -> None:
        drawing = parse_drawing(
            b'<svg xmlns="http://www.w3.org/2000/svg" width="640px" height="480"/>'
        )
        assert drawing.native_size == (640.0, 480.0)

    def test_shape_kinds_and_geometry(self) -> None:
        drawing = parse_drawing(SMALL_SVG)

        hit_box = drawing.find("A_HitBox")
        assert hit_box is not None
        assert hit_box.kind is ShapeKind.RECT
        assert hit_box.rect is not None
        assert (hit_box.rect.x, hit_box.rect.y, hit_box.rect.width, hit_box.rect.height) == (5, 6, 20, 30)
        assert hit_box.center == (15.0, 21.0)

        kitchen = drawing.find("A_F1_Kitchen")
        assert kitchen is not None
        assert kitchen.kind is ShapeKind.CIRCLE
        assert kitchen.center == (12.5, 7.0)
        assert kitchen.rect is None

        assert drawing.find("A_Roof").kind is ShapeKind.GROUP  # type: ignore[union-attr]
        assert drawing.find("A_F1_Stairs").kind is ShapeKind.OTHER  # type: ignore[union-attr]
        assert drawing.find("Nope") is None

    def test_ids_with_prefix_in_document_order(self) -> None:
        drawing = parse_drawing(SMALL_SVG)
        assert drawing.ids_with_prefix("A_F1_") == ["A_F1_Kitchen", "A_F1_Stairs"]

    def test_malformed_xml_rejected(self) -> None:
        with pytest.raises(DrawingLoadError):
            parse_drawing(b"<svg><rect></svg>")

    def test_non_svg_root_rejected(self) -> None:
        with pytest.raises(DrawingLoadError):
            parse_drawing(b"<html/>")

    def test_missing_size_rejected(self) -> None:
        with pytest.raises(DrawingLoadError):
            parse_drawing(b'<svg xmlns="http://www.w3.org/2000/svg"/>')

    def test_relative_lengths_leave_geometry_unset(self) -> None:
        drawing = parse_drawing(
            b'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">'
            b'<rect id="Background" width="100%" height="100%"/>'
            b'<circle id="Dot" cx="5%" cy="1"/>'
            b'<rect id="R" x="1" y="2" width="3" height="4"/></svg>'
        )
        background = drawing.find("Background")
        assert background is not None
        assert background.kind is ShapeKind.RECT
        assert background.rect is None and background.center is None
        assert drawing.find("Dot").center is None  # type: ignore[union-attr]
        assert drawing.find("R").rect is not None  # type: ignore[union-attr]

    def test_relative_root_size_without_view_box_rejected(self) -> None:
        with pytest.raises(DrawingLoadError):
            parse_drawing(b'<svg xmlns="http://www.w3.org/2000/svg" width="100%" height="100%"/>')

    def test_view_box_origin_kept(self) -> None:
        drawing = parse_drawing(
            b'<svg xmlns="http://www.w3.org/2000/svg" viewBox="100 -20 300 200"/>'
        )
        assert drawing.origin == (100.0, -20.0)
        assert drawing.native_size == (300.0, 200.0)
        assert parse_drawing(SMALL_SVG).origin == (0.0, 0.0)

    def test_missing_file_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(DrawingLoadError):
            load_drawing(tmp_path / "missing.svg")


class TestVisibility:
    """Visibility is the drawing's only mutable state."""

    def test_hide_and_show_write_through_to_svg(self) -> None:
        drawing = parse_drawing(SMALL_SVG)
        roof = drawing.find("A_Roof")
        assert roof is not None and roof.visible

        roof.visible = False
        assert not roof.visible
        assert b'id="A_Roof" display="none"' in drawing.to_bytes() or b'display="none" id="A_Roof"' in drawing.to_bytes()

        roof.visible = True
        assert roof.visible
        assert b"display" not in drawing.to_bytes()

    def test_revision_counts_real_changes_only(self) -> None:
        drawing = parse_drawing(SMALL_SVG)
        roof = drawing.find("A_Roof")
        assert roof is not None
        assert drawing.revision == 0

        roof.visible = True
        assert drawing.revision == 0
        roof.visible = False
        roof.visible = False
        assert drawing.revision == 1
        roof.visible = True
        assert drawing.revision == 2

    def test_zero_opacity_counts_as_hidden_and_can_be_shown(self) -> None:
        drawing = parse_drawing(SMALL_SVG)
        hidden = drawing.find("Hidden")
        assert hidden is not None
        assert not hidden.visible
        hidden.visible = True
        assert hidden.visible

    def test_serialized_drawing_keeps_default_namespace(self) -> None:
        drawing = parse_drawing(SMALL_SVG)
        data = drawing.to_bytes()
        assert b"ns0:" not in data
        assert parse_drawing(data).native_size == (200.0, 100.0)


STYLED_SVG = b"""<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">
  <g id="Layer" style="display:none;fill:#eee"/>
  <g id="Inline" style="display:inline"/>
  <g id="Ghost" style="fill:red; opacity: 0"/>
  <g id="Hidden" style="visibility:hidden"/>
</svg>
"""


class TestStyleVisibility:
    """Visibility given inside the style attribute, as drawing editors write it."""

    def test_style_declarations_are_read(self) -> None:
        drawing = parse_drawing(STYLED_SVG)
        assert not drawing.find("Layer").visible  # type: ignore[union-attr]
        assert drawing.find("Inline").visible  # type: ignore[union-attr]
        assert not drawing.find("Ghost").visible  # type: ignore[union-attr]
        assert not drawing.find("Hidden").visible  # type: ignore[union-attr]

    def test_show_clears_style_and_keeps_other_declarations(self) -> None:
        drawing = parse_drawing(STYLED_SVG)
        layer = drawing.find("Layer")
        assert layer is not None

        layer.visible = True
        assert layer.visible
        assert drawing.revision == 1
        data = drawing.to_bytes()
        assert b"display:none" not in data
        assert b'style="fill:#eee"' in data

    def test_show_zero_opacity_style(self) -> None:
        drawing = parse_drawing(STYLED_SVG)
        ghost = drawing.find("Ghost")
        hidden = drawing.find("Hidden")
        assert ghost is not None and hidden is not None

        ghost.visible = True
        hidden.visible = True
        assert ghost.visible and hidden.visible
        assert b'style="fill:red;opacity:1"' in drawing.to_bytes()

    def test_hide_overrides_inline_display(self) -> None:
        drawing = parse_drawing(STYLED_SVG)
        inline = drawing.find("Inline")
        assert inline is not None

        inline.visible = False
        assert not inline.visible
        assert b"display:inline" not in drawing.to_bytes()

        inline.visible = True
        assert inline.visible
