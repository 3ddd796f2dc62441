"""
Logging configuration for campus_map.
"""

import csv
import io
import logging
import logging.handlers
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..settings import AppSettings

PROJECT_LOGGER = "campus_map"
CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(name)s : %(message)s"

RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[35m",
}


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level column."""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)

        # Record is shared with other handlers
        plain = record.levelname
        record.levelname = f"{color}{plain:<8}{RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = plain


class CSVFormatter(logging.Formatter):
    """File formatter writing one semicolon-separated row per record.

    Columns: time, level, milliseconds since start, logger, line, message
    (with traceback, if any).
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        row = io.StringIO()
        writer = csv.writer(row, delimiter=";", quoting=csv.QUOTE_ALL, lineterminator="")
        writer.writerow(
            [
                self.formatTime(record, self.datefmt),
                record.levelname,
                f"{int(record.relativeCreated)} ms",
                record.name,
                record.lineno,
                message,
            ]
        )
        return row.getvalue()


def setup_logging(settings: "AppSettings") -> None:
    """
    Setup application logging with console and file handlers.

    Args:
        settings: AppSettings instance for all logging configuration
    """
    console_enabled = settings.console_logging
    console_level = settings.console_log_level
    use_colors = settings.console_use_colors
    file_enabled = settings.file_logging
    log_file = settings.log_file_path

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    project_logger = logging.getLogger(PROJECT_LOGGER)
    project_logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    root_logger.handlers.clear()

    if console_enabled:
        formatter_cls = ColoredFormatter if use_colors else logging.Formatter
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper(), logging.INFO))
        console_handler.setFormatter(formatter_cls(fmt=CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        root_logger.addHandler(console_handler)

    log_path = None
    if file_enabled:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(CSVFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
            root_logger.addHandler(file_handler)
        except OSError as e:
            # Keep going with console logging only
            log_path = None
            root_logger.warning(f"Could not setup file logging: {e}")

    logger = logging.getLogger(__name__)
    logger.info("Logging initialized")
    if console_enabled:
        logger.debug(f"Console logging: {console_level} (colors: {use_colors})")
    if log_path:
        logger.debug(f"File logging: DEBUG at {log_path.absolute()}")
