"""Vector drawing access: shape tree and SVG loader."""

from .models import Drawing, Point, Rect, Shape, ShapeKind
from .svg_loader import load_drawing, parse_drawing

__all__ = [
    "Drawing",
    "Point",
    "Rect",
    "Shape",
    "ShapeKind",
    "load_drawing",
    "parse_drawing",
]
