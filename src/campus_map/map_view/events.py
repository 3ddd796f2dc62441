"""Event handlers for MapView.

This module turns raw Qt input into the decoded gestures the map context
understands: drag to pan, wheel or pinch to zoom about the cursor, trackpad
rotation, click to tap, plus keyboard shortcuts and resize tracking.
"""

from typing import Optional

from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QKeyEvent, QMouseEvent, QNativeGestureEvent, QResizeEvent, QWheelEvent


class MapViewEventHandlers:
    """Mixin class for MapView event handling.

    Handles:
    - Left button: click = tap, drag beyond TAP_SLOP pixels = pan
    - Wheel and pinch: zoom anchored at the cursor
    - Trackpad rotation (clamped by the transform's rotation range)
    - Keys: Escape closes, Space/PageUp/PageDown change floor, Home resets view,
      +/- zoom about the view centre
    - Resize: new view size for the mapper, popup repositioning
    """

    # Max pointer travel in pixels for a press/release to still count as a tap
    TAP_SLOP = 6.0

    _press_pos: Optional[QPointF] = None
    _last_pos: Optional[QPointF] = None
    _is_panning: bool = False

    def resizeEvent(self, event: QResizeEvent) -> None:
        """Record the new view size and reposition overlay UI."""
        super().resizeEvent(event)  # type: ignore
        size = event.size()
        self.context.on_view_resize((size.width(), size.height()))  # type: ignore
        self._position_popup()  # type: ignore

    def mousePressEvent(self, event: QMouseEvent) -> None:
        """Start a tap or pan with the left button."""
        if event.button() == Qt.MouseButton.LeftButton:
            self._press_pos = event.position()
            self._last_pos = event.position()
            self._is_panning = False
            event.accept()
        else:
            super().mousePressEvent(event)  # type: ignore

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        """Pan once the pointer has travelled beyond the tap slop."""
        if self._press_pos is None or self._last_pos is None:
            super().mouseMoveEvent(event)  # type: ignore
            return

        pos = event.position()
        if not self._is_panning:
            travel = pos - self._press_pos
            if abs(travel.x()) + abs(travel.y()) <= self.TAP_SLOP:
                return
            self._is_panning = True
            self.setCursor(Qt.CursorShape.ClosedHandCursor)  # type: ignore

        delta = pos - self._last_pos
        self._last_pos = pos
        self.context.on_transform_delta(translation_delta=(delta.x(), delta.y()))  # type: ignore
        self.update()  # type: ignore
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        """Finish a pan, or deliver a tap if the pointer barely moved."""
        if event.button() != Qt.MouseButton.LeftButton or self._press_pos is None:
            super().mouseReleaseEvent(event)  # type: ignore
            return

        was_panning = self._is_panning
        self._press_pos = None
        self._last_pos = None
        self._is_panning = False
        self.setCursor(Qt.CursorShape.ArrowCursor)  # type: ignore

        if not was_panning:
            pos = event.position()
            self.tap((pos.x(), pos.y()))  # type: ignore
        event.accept()

    def wheelEvent(self, event: QWheelEvent) -> None:
        """Zoom about the cursor, one zoom step per wheel notch."""
        notches = event.angleDelta().y() / 120
        if not notches:
            super().wheelEvent(event)  # type: ignore
            return

        transform = self.context.transform  # type: ignore
        scale_delta = transform.scale * self.zoom_step * notches  # type: ignore
        pos = event.position()
        self.context.zoom_at((pos.x(), pos.y()), scale_delta)  # type: ignore
        self.update()  # type: ignore
        event.accept()

    def event(self, event: QEvent) -> bool:
        """Handle trackpad pinch and rotation gestures."""
        if event.type() == QEvent.Type.NativeGesture and isinstance(event, QNativeGestureEvent):
            gesture = event.gestureType()
            pos = event.position()
            if gesture == Qt.NativeGestureType.ZoomNativeGesture:
                scale_delta = self.context.transform.scale * event.value()  # type: ignore
                self.context.zoom_at((pos.x(), pos.y()), scale_delta)  # type: ignore
            elif gesture == Qt.NativeGestureType.RotateNativeGesture:
                self.context.on_transform_delta(rotation_delta=event.value())  # type: ignore
            else:
                return super().event(event)  # type: ignore
            self.update()  # type: ignore
            return True
        return super().event(event)  # type: ignore

    def keyPressEvent(self, event: QKeyEvent) -> None:
        """Handle key press events for view control."""
        key = event.key()
        if key == Qt.Key.Key_Escape:
            self.close_building()  # type: ignore
        elif key in (Qt.Key.Key_Space, Qt.Key.Key_PageUp):
            self.next_floor()  # type: ignore
        elif key == Qt.Key.Key_PageDown:
            self.previous_floor()  # type: ignore
        elif key == Qt.Key.Key_Home:
            self.reset_view()  # type: ignore
        elif key in (Qt.Key.Key_Plus, Qt.Key.Key_Equal, Qt.Key.Key_Minus):
            direction = -1 if key == Qt.Key.Key_Minus else 1
            center = (self.width() / 2, self.height() / 2)  # type: ignore
            scale_delta = self.context.transform.scale * self.zoom_step * direction  # type: ignore
            self.context.zoom_at(center, scale_delta)  # type: ignore
            self.update()  # type: ignore
        else:
            super().keyPressEvent(event)  # type: ignore
            return
        event.accept()
