"""
Shape tree model for the campus drawing.

The drawing is the only thing the map core mutates: every layer toggle in
the selection state machine ends up as a visibility flip on a ``Shape``.
Geometry is expressed in map space (the drawing's own user units).
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

Point = tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in map space."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Point:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def contains(self, point: Point) -> bool:
        """Check whether ``point`` lies inside the rectangle (edges included)."""
        px, py = point
        return (
            self.x <= px <= self.x + self.width
            and self.y <= py <= self.y + self.height
        )


class ShapeKind(Enum):
    """Kind of drawing element, as far as the map cares."""

    RECT = "rect"
    CIRCLE = "circle"
    GROUP = "group"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag: str) -> "ShapeKind":
        local = tag.rsplit("}", 1)[-1]
        if local == "rect":
            return cls.RECT
        if local == "circle":
            return cls.CIRCLE
        if local == "g":
            return cls.GROUP
        return cls.OTHER


class Shape:
    """A named element of the drawing.

    Wraps the underlying SVG element. Geometry is read once on creation;
    visibility is written straight back to the element so that a
    re-serialized drawing reflects the current layer state.
    """

    def __init__(
        self,
        element: ET.Element,
        kind: ShapeKind,
        rect: Optional[Rect] = None,
        center: Optional[Point] = None,
        on_change: Optional[Callable[["Shape"], None]] = None,
    ):
        self._element = element
        self.kind = kind
        self.rect = rect
        self.center = center if center is not None else (rect.center if rect else None)
        self._on_change = on_change

    @property
    def element_id(self) -> str:
        return self._element.get("id", "")

    def _style(self) -> dict[str, str]:
        """Parse the inline ``style`` attribute into ordered declarations."""
        declarations: dict[str, str] = {}
        for declaration in self._element.get("style", "").split(";"):
            name, sep, value = declaration.partition(":")
            if sep and name.strip():
                declarations[name.strip().lower()] = value.strip()
        return declarations

    def _set_style(self, declarations: dict[str, str]) -> None:
        if declarations:
            self._element.set("style", ";".join(f"{name}:{value}" for name, value in declarations.items()))
        else:
            self._element.attrib.pop("style", None)

    def _property(self, name: str) -> Optional[str]:
        """Effective value of a presentation property (inline style wins)."""
        value = self._style().get(name)
        if value is None:
            value = self._element.get(name)
        return value.strip().lower() if value is not None else None

    @staticmethod
    def _is_transparent(opacity: Optional[str]) -> bool:
        if opacity is None:
            return False
        try:
            return float(opacity) <= 0
        except ValueError:
            return False

    @property
    def visible(self) -> bool:
        """Check if the element is currently displayed.

        Honors ``display``, ``visibility`` and ``opacity`` given either as
        attributes or inside the ``style`` attribute.
        """
        if self._property("display") == "none":
            return False
        if self._property("visibility") == "hidden":
            return False
        return not self._is_transparent(self._property("opacity"))

    @visible.setter
    def visible(self, value: bool) -> None:
        """Show or hide the element. Does nothing if the state is unchanged."""
        if value == self.visible:
            return

        style = self._style()
        style.pop("display", None)
        if value:
            self._element.attrib.pop("display", None)
            self._element.attrib.pop("visibility", None)
            style.pop("visibility", None)
            if self._is_transparent(style.get("opacity")):
                style["opacity"] = "1"
            if self._is_transparent(self._element.get("opacity")):
                self._element.set("opacity", "1")
        else:
            self._element.set("display", "none")
        self._set_style(style)

        if self._on_change:
            self._on_change(self)

    def __repr__(self) -> str:
        return f"Shape({self.element_id!r}, {self.kind.name}, visible={self.visible})"


class Drawing:
    """Queryable-by-id shape tree of an SVG document."""

    def __init__(
        self,
        root: ET.Element,
        shapes: list[Shape],
        native_size: tuple[float, float],
        origin: Point = (0.0, 0.0),
    ):
        """Initialize the drawing.

        Args:
            root: Parsed SVG root element (kept for re-serialization)
            shapes: Named shapes in document order
            native_size: (width, height) of the drawing in map-space units
            origin: Map-space point at the top-left corner (viewBox min-x, min-y)
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._root = root
        self._shapes: dict[str, Shape] = {}
        self.native_size = native_size
        self.origin = origin
        self.revision = 0

        for shape in shapes:
            if shape.element_id in self._shapes:
                self.logger.warning(f"Duplicate element id '{shape.element_id}', keeping first")
                continue
            shape._on_change = self._shape_changed
            self._shapes[shape.element_id] = shape

    def _shape_changed(self, shape: Shape) -> None:
        self.revision += 1
        self.logger.debug(f"Layer '{shape.element_id}' visible={shape.visible} (rev {self.revision})")

    def find(self, element_id: str) -> Optional[Shape]:
        """Get a shape by its element id, or None if the drawing has no such id."""
        return self._shapes.get(element_id)

    def ids_with_prefix(self, prefix: str) -> list[str]:
        """Get all element ids starting with ``prefix``, in document order."""
        return [element_id for element_id in self._shapes if element_id.startswith(prefix)]

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._shapes

    def __len__(self) -> int:
        return len(self._shapes)

    def to_bytes(self) -> bytes:
        """Serialize the drawing with the current layer visibility applied."""
        return ET.tostring(self._root, encoding="utf-8")
