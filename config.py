"""Configuration constants for vpncheck.

All configurable values stored here for easy customization.
Provider detection rules live in network/providers.py.
"""

from enum import IntEnum

# Timeout for system commands
TIMEOUT_SECONDS: int = 10

# Required System Commands
REQUIRED_COMMANDS: list[str] = [
    "ip",
]

# Install hints logged when a required command is missing
INSTALL_HINTS: dict[str, str] = {
    "ip": "sudo apt install iproute2",
}

# Linux IFNAMSIZ is 16, but altnames and peer suffixes can be longer
MAX_INTERFACE_NAME_LENGTH: int = 64

# Maximum length of values written to the log
MAX_LOG_VALUE_LENGTH: int = 200

# Table Configuration
TABLE_COLUMNS: list[tuple[str, int]] = [
    ("PROVIDER", 12),
    ("FAMILY", 6),
    ("STATUS", 10),
    ("INTERFACES", 60),
]

COLUMN_SEPARATOR: str = "   "  # 3 spaces

TABLE_WIDTH: int = sum(width for _, width in TABLE_COLUMNS) + len(COLUMN_SEPARATOR) * (
    len(TABLE_COLUMNS) - 1
)


class ExitCode(IntEnum):
    """Standard exit codes for vpncheck."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    MISSING_DEPENDENCIES = 2
    ENUMERATION_FAILED = 3
    INVALID_ARGUMENTS = 4


# Tool Metadata
VERSION: str = "1.0.0"
TOOL_NAME: str = "vpncheck"
