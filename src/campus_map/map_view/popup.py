"""Selection popup shown while a building is open."""

import logging
from typing import Optional

import qtawesome as qta  # type: ignore
from PySide6.QtCore import QSize, Signal
from PySide6.QtGui import QPalette
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QToolButton, QVBoxLayout, QWidget

from .labels import PopupSummary


class FloorPopup(QFrame):
    """Shows the open building's name and floor, with next-floor and close buttons."""

    nextFloorRequested = Signal()
    closeRequested = Signal()

    NEXT_ICON = "mdi.stairs-up"
    CLOSE_ICON = "mdi.close"
    ICON_SIZE = 18

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.summary: Optional[PopupSummary] = None

        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setAutoFillBackground(True)

        self._setup_ui()
        self._setup_icons()
        self.next_button.clicked.connect(self.nextFloorRequested.emit)
        self.close_button.clicked.connect(self.closeRequested.emit)

        self.hide()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 6, 6, 6)
        layout.setSpacing(8)

        text_layout = QVBoxLayout()
        text_layout.setSpacing(0)
        self.name_label = QLabel()
        font = self.name_label.font()
        font.setBold(True)
        self.name_label.setFont(font)
        self.floor_label = QLabel()
        text_layout.addWidget(self.name_label)
        text_layout.addWidget(self.floor_label)
        layout.addLayout(text_layout)

        self.next_button = QToolButton()
        self.next_button.setToolTip("Next floor")
        self.close_button = QToolButton()
        self.close_button.setToolTip("Close building")
        for button in (self.next_button, self.close_button):
            button.setIconSize(QSize(self.ICON_SIZE, self.ICON_SIZE))
            button.setAutoRaise(True)
            layout.addWidget(button)

    def _setup_icons(self) -> None:
        """Load button icons respecting the current palette."""
        icon_color = self.palette().color(QPalette.ColorRole.WindowText)
        for button, name in ((self.next_button, self.NEXT_ICON), (self.close_button, self.CLOSE_ICON)):
            try:
                button.setIcon(qta.icon(name, color=icon_color))
            except Exception as e:
                self.logger.warning(f"Failed to load icon {name}: {e}")
                button.setText("⇧" if button is self.next_button else "×")

    def set_summary(self, summary: Optional[PopupSummary]) -> None:
        """Show ``summary``, or hide the popup when None."""
        self.summary = summary
        if summary is None:
            self.hide()
            return

        self.name_label.setText(summary.building_name)
        self.floor_label.setText(f"Floor {summary.floor_number} of {summary.floor_count}")
        self.next_button.setEnabled(summary.floor_count > 1)
        self.adjustSize()
        self.show()
