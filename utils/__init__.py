"""Utilities package for vpncheck.

Provides system command execution, input validation, and text formatting.
"""

from .formatters import format_interface_matches, shorten_text
from .system import command_exists, run_command_checked, sanitize_for_log
from .validators import validate_interface_name

__all__ = [
    # System
    "run_command_checked",
    "command_exists",
    "sanitize_for_log",
    # Validators
    "validate_interface_name",
    # Formatters
    "format_interface_matches",
    "shorten_text",
]
