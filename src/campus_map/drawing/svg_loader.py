"""Loading the campus drawing from SVG files.

Parses the SVG into a ``Drawing``: every element carrying an ``id`` becomes a
``Shape`` with its kind and, for rectangles and circles, its geometry.
"""

import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from ..errors import DrawingLoadError
from .models import Drawing, Point, Rect, Shape, ShapeKind

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

# Keep the default namespace unprefixed when the drawing is re-serialized
ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)

_LENGTH_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(px)?\s*$")

logger = logging.getLogger(__name__)


def _parse_length(value: Optional[str]) -> Optional[float]:
    """Parse a plain or ``px`` SVG length.

    Missing values count as 0. Returns None for lengths with other units
    (``%``, ``em``, ``mm``...), which have no fixed size in map space.
    """
    if value is None or value == "":
        return 0.0
    match = _LENGTH_RE.match(value)
    if not match:
        return None
    return float(match.group(1))


def _root_length(root: ET.Element, attribute: str) -> float:
    value = root.get(attribute)
    length = _parse_length(value)
    if length is None:
        raise DrawingLoadError(f"Unsupported drawing {attribute} '{value}', use a viewBox")
    return length


def _view_box(root: ET.Element) -> tuple[Point, tuple[float, float]]:
    """Get drawing origin and size from viewBox, falling back to width/height."""
    origin: Point = (0.0, 0.0)
    view_box = root.get("viewBox")
    if view_box:
        parts = re.split(r"[\s,]+", view_box.strip())
        if len(parts) != 4:
            raise DrawingLoadError(f"Malformed viewBox: '{view_box}'")
        try:
            min_x, min_y, width, height = (float(p) for p in parts)
        except ValueError:
            raise DrawingLoadError(f"Malformed viewBox: '{view_box}'")
        origin = (min_x, min_y)
    else:
        width = _root_length(root, "width")
        height = _root_length(root, "height")

    if width <= 0 or height <= 0:
        raise DrawingLoadError(f"Drawing has no usable size ({width}x{height})")
    return origin, (width, height)


def _build_shape(element: ET.Element) -> Shape:
    element_id = element.get("id", "")
    kind = ShapeKind.from_tag(element.tag)

    if kind is ShapeKind.RECT:
        x, y, width, height = (
            _parse_length(element.get(name)) for name in ("x", "y", "width", "height")
        )
        if x is None or y is None or width is None or height is None:
            logger.debug(f"Rect '{element_id}' uses relative lengths, geometry unavailable")
            return Shape(element, kind)
        return Shape(element, kind, rect=Rect(x, y, width, height))

    if kind is ShapeKind.CIRCLE:
        cx = _parse_length(element.get("cx"))
        cy = _parse_length(element.get("cy"))
        if cx is None or cy is None:
            logger.debug(f"Circle '{element_id}' uses relative lengths, geometry unavailable")
            return Shape(element, kind)
        return Shape(element, kind, center=(cx, cy))

    return Shape(element, kind)


def parse_drawing(data: bytes, source: str = "<bytes>") -> Drawing:
    """Parse SVG bytes into a Drawing.

    Args:
        data: Raw SVG document
        source: Name used in error messages

    Returns:
        Drawing with one Shape per element that has an id

    Raises:
        DrawingLoadError: If the document is not a usable SVG
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise DrawingLoadError(f"Failed to parse SVG from {source}: {e}")

    if root.tag.rsplit("}", 1)[-1] != "svg":
        raise DrawingLoadError(f"{source} is not an SVG document (root is '{root.tag}')")

    origin, native_size = _view_box(root)
    shapes = [_build_shape(element) for element in root.iter() if element.get("id")]

    logger.debug(f"Parsed {len(shapes)} named element(s) from {source}")
    return Drawing(root, shapes, native_size, origin)


def load_drawing(path: Path) -> Drawing:
    """Load a drawing from an SVG file.

    Raises:
        DrawingLoadError: If the file is missing or not a usable SVG
    """
    if not path.exists():
        raise DrawingLoadError(f"Drawing file not found: {path}")

    logger.info(f"Loading drawing from: {path}")
    drawing = parse_drawing(path.read_bytes(), source=str(path))
    logger.info(
        f"Loaded drawing {drawing.native_size[0]:g}x{drawing.native_size[1]:g} "
        f"with {len(drawing)} named element(s)"
    )
    return drawing
