"""Input validation utilities.

Interface names end up as arguments to system commands, so they are
checked before use.
"""

import re

import config

_INTERFACE_NAME_RE = re.compile(r"[a-zA-Z0-9._:@-]+")


def validate_interface_name(name: str) -> bool:
    """Validate interface name (security check).

    Allowed characters: [a-zA-Z0-9._:@-]
    Max length: config.MAX_INTERFACE_NAME_LENGTH
    A leading "-" is rejected so the name can't be read as an option.

    Args:
        name: Interface name to validate

    Returns:
        True if valid, False otherwise.
    """
    if not name or len(name) > config.MAX_INTERFACE_NAME_LENGTH:
        return False

    if name.startswith("-"):
        return False

    return _INTERFACE_NAME_RE.fullmatch(name) is not None
