"""Text formatting utilities for table display."""

from models import InterfaceMatch


def shorten_text(text: str, max_length: int) -> str:
    """Truncate text to fit column width.

    Tries to break at word boundary.
    Adds "..." if truncated.

    Args:
        text: Text to truncate
        max_length: Maximum length (including "..." if truncated)

    Returns:
        Truncated text with "..." if needed.
    """
    if len(text) <= max_length:
        return text

    truncated = text[: max_length - 3]

    # Break at word boundary if it doesn't waste too much of the column
    last_space = truncated.rfind(" ")
    if last_space > max_length * 0.7:
        return truncated[:last_space] + "..."

    return truncated + "..."


def format_interface_matches(matches: list[InterfaceMatch]) -> str:
    """Render matched interfaces as "name (reason)" entries.

    Example:
        [tailscale0 by name, wg0 by address] → "tailscale0 (name), wg0 (address)"

    Args:
        matches: Interfaces matched for one provider

    Returns:
        Comma-separated entries, or "--" if nothing matched.
    """
    if not matches:
        return "--"
    return ", ".join(f"{m.interface.name} ({m.reason.value})" for m in matches)
