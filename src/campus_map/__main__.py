"""
Main entry point for the campus map application.
Usage: python -m campus_map
"""

import sys
import logging
from typing import Optional

from PySide6.QtWidgets import QApplication, QMessageBox

from . import __version__
from .errors import CampusMapError
from .settings import AppSettings
from .map_view import MapView, load_context
from .utils.logging_config import setup_logging
from .resources import get_app_icon


def show_error_dialog(title: str, message: str, details: Optional[str] = None) -> None:
    """Show error dialog to user."""
    app = QApplication.instance()
    if not app:
        app = QApplication(sys.argv)

    msg_box = QMessageBox()
    msg_box.setIcon(QMessageBox.Icon.Critical)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)

    if details:
        msg_box.setDetailedText(details)

    msg_box.exec()


def main() -> int:
    """Main application entry point."""
    logger = logging.getLogger(f"{__name__}.main")
    try:
        settings = AppSettings()

        app = QApplication(sys.argv)
        app.setApplicationName("campus_map")
        app.setApplicationVersion(__version__)
        app.setOrganizationName("campus_map")
        app.setWindowIcon(get_app_icon())

        setup_logging(settings)

        logger.info("Starting campus map")
        logger.info(f"Configuration loaded from {settings.get_settings_file_path()}")

        validation = settings.validate()
        if validation.warnings:
            logger.warning("Configuration warnings detected:")
            for warning in validation.warnings:
                logger.warning(f"  {warning}")

        if not validation.is_valid:
            logger.error("Configuration validation failed:")
            for error in validation.errors:
                logger.error(f"  {error}")
            show_error_dialog(
                "Configuration Error",
                "Configuration validation failed. Please check your settings.",
                "\n".join(validation.errors),
            )
            return 1

        try:
            context = load_context(settings)
        except CampusMapError as e:
            logger.error(f"Could not initialize the map: {e}")
            show_error_dialog("Map Error", "The campus map could not be loaded.", str(e))
            return 1

        app.setStyle("Fusion")

        view = MapView(context, settings)
        view.resize(1000, 700)
        view.show()

        logger.info("Application started successfully")
        return app.exec()

    except Exception as e:
        logger.exception("Unhandled exception in main")
        show_error_dialog("Application Error", "An unexpected error occurred.", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
