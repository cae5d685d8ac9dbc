"""Logging configuration for vpncheck.

Provides colored console output and optional file logging.
Modules log with % formatting and sanitize interface names first.
"""

import copy
import logging
from pathlib import Path

from colors import LEVEL_COLORS, Color

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ColoredFormatter(logging.Formatter):
    """Add ANSI colors to log levels.

    Formats a copy of the record so other handlers (the log file)
    never receive escape codes.
    """

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        colored = copy.copy(record)
        colored.levelname = f"{color}{record.levelname}{Color.RESET}"
        return super().format(colored)


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    use_colors: bool = True,
) -> None:
    """Configure logging.

    Args:
        verbose: Enable DEBUG level (default: WARNING+ only)
        log_file: Optional file output path (always DEBUG)
        use_colors: Color console level names
    """
    level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if log_file else level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    formatter_class = ColoredFormatter if use_colors else logging.Formatter
    console_handler.setFormatter(formatter_class(CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get logger for module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance for the module.
    """
    return logging.getLogger(name)
