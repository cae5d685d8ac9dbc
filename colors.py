"""ANSI color codes for terminal output.

Colors are optimized for dark terminal backgrounds.
"""

from enum import StrEnum


class Color(StrEnum):
    """Active colors used for table and log output."""

    GREEN = "\033[92m"    # Provider detected / INFO
    CYAN = "\033[96m"     # DEBUG
    YELLOW = "\033[93m"   # WARNING
    RED = "\033[91m"      # ERROR
    MAGENTA = "\033[95m"  # CRITICAL
    DIM = "\033[2m"       # Provider not detected
    RESET = "\033[0m"


# Log level colors (used by logging_config.ColoredFormatter)
LEVEL_COLORS: dict[str, Color] = {
    "DEBUG": Color.CYAN,
    "INFO": Color.GREEN,
    "WARNING": Color.YELLOW,
    "ERROR": Color.RED,
    "CRITICAL": Color.MAGENTA,
}
