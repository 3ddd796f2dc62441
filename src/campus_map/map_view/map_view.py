"""Main view widget for the campus map.

Paints the drawing under the live transform and overlays building and room
labels positioned through the space mapper. Holds no map state of its own:
everything lives in the MapContext it is given.
"""

import logging
from typing import Optional

from PySide6.QtCore import QByteArray, QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QColor, QFont, QPainter, QPaintEvent
from PySide6.QtSvg import QSvgRenderer
from PySide6.QtWidgets import QWidget

from campus_map.settings import AppSettings

from ..drawing import Point
from .context import MapContext
from .events import MapViewEventHandlers
from .popup import FloorPopup
from .selection import SelectionState


class MapView(MapViewEventHandlers, QWidget):
    """Widget rendering the campus map with pan/zoom and tap selection."""

    selectionChanged = Signal(object)

    BACKGROUND_COLOR = QColor("#7ea65f")
    LABEL_FONT_SIZE = 16
    ROOM_FONT_SIZE = 12
    POPUP_MARGIN = 15

    def __init__(self, context: MapContext, settings: AppSettings, parent: Optional[QWidget] = None):
        """Initialize the map view.

        Args:
            context: Map state (drawing, scene, transform, selection)
            settings: Application settings (zoom step)
            parent: Parent widget
        """
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.context = context
        self.settings = settings
        self.zoom_step = settings.map.zoom_step

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMinimumSize(320, 240)
        if context.title:
            self.setWindowTitle(context.title)

        # Drawing is re-serialized whenever a layer toggles
        self._renderer = QSvgRenderer(self)
        self._rendered_revision = -1
        self._sync_drawing()

        self.popup = FloorPopup(self)
        self.popup.nextFloorRequested.connect(self.next_floor)
        self.popup.closeRequested.connect(self.close_building)

        self.logger.debug("Map view initialized")

    # === SELECTION ===

    def tap(self, screen_point: Point) -> None:
        """Forward a tap to the selection state machine."""
        if self.context.on_tap(screen_point) is not None:
            self._selection_changed()

    def next_floor(self) -> None:
        self.context.controller.next_floor()
        self._selection_changed()

    def previous_floor(self) -> None:
        controller = self.context.controller
        controller.select_floor(controller.selected_floor_index - 1)
        self._selection_changed()

    def close_building(self) -> None:
        self.context.controller.close()
        self._selection_changed()

    def reset_view(self) -> None:
        """Return to the starting pan/zoom."""
        self.context.reset_view()
        self.update()

    def selection_state(self) -> SelectionState:
        return self.context.controller.state

    def _selection_changed(self) -> None:
        self._sync_drawing()
        self.popup.set_summary(self.context.labels.popup_summary())
        self._position_popup()
        self.selectionChanged.emit(self.context.controller.state)
        self.update()

    def _sync_drawing(self) -> None:
        """Reload the SVG renderer if layer visibility changed since last load."""
        drawing = self.context.drawing
        if drawing.revision == self._rendered_revision:
            return
        if not self._renderer.load(QByteArray(drawing.to_bytes())):
            self.logger.error("Failed to load drawing into SVG renderer")
        self._rendered_revision = drawing.revision

    def _position_popup(self) -> None:
        """Keep the popup at the bottom centre of the view."""
        if not hasattr(self, "popup"):
            return
        x_pos = (self.width() - self.popup.width()) // 2
        y_pos = self.height() - self.popup.height() - self.POPUP_MARGIN
        self.popup.move(x_pos, y_pos)

    # === PAINTING ===

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), self.BACKGROUND_COLOR)

        mapper = self.context.mapper
        if not mapper.is_ready:
            painter.end()
            return

        painter.save()
        painter.setTransform(self.context.transform.compose())
        self._renderer.render(painter, mapper.display_rect())
        painter.restore()

        labels = self.context.labels
        building_font = QFont(self.font())
        building_font.setPixelSize(self.LABEL_FONT_SIZE)
        painter.setFont(building_font)
        for label in labels.building_labels():
            if label.opacity > 0:
                self._draw_text(painter, label.text, label.screen_point, label.opacity)

        room_font = QFont(self.font())
        room_font.setPixelSize(self.ROOM_FONT_SIZE)
        painter.setFont(room_font)
        for room in labels.room_labels():
            self._draw_text(painter, room.text, room.screen_point, 1.0)

        painter.end()

    def _draw_text(self, painter: QPainter, text: str, point: Point, opacity: float) -> None:
        """Draw centred text with a one-pixel drop shadow."""
        metrics = painter.fontMetrics()
        width = metrics.horizontalAdvance(text)
        height = metrics.height()
        box = QRectF(point[0] - width / 2, point[1] - height / 2, width, height)

        painter.setOpacity(opacity)
        painter.setPen(QColor.fromHsvF(0, 0, 0.3))
        painter.drawText(box.translated(QPointF(1, 1)), Qt.AlignmentFlag.AlignCenter, text)
        painter.setPen(Qt.GlobalColor.white)
        painter.drawText(box, Qt.AlignmentFlag.AlignCenter, text)
        painter.setOpacity(1.0)
