"""System command execution utilities.

Provides safe command execution with timeout protection.
Never uses shell=True to prevent command injection.
"""

import re
import shutil
import subprocess
from typing import Any

import config
from exceptions import CommandError


def run_command_checked(cmd: list[str]) -> str:
    """Execute system command, raising on any failure.

    Security:
        - NEVER shell=True
        - Timeout: config.TIMEOUT_SECONDS
        - No root privileges required

    Args:
        cmd: Command as list (e.g., ["ip", "-o", "link", "show"])

    Returns:
        Command output (stripped).

    Raises:
        CommandError: Non-zero exit, timeout, or command not startable.
    """
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=config.TIMEOUT_SECONDS,
            check=False,
            shell=False,  # CRITICAL: Never use shell=True
        )
    except subprocess.TimeoutExpired as e:
        raise CommandError(cmd, stderr=f"timed out after {config.TIMEOUT_SECONDS}s") from e
    except FileNotFoundError as e:
        raise CommandError(cmd, stderr="command not found") from e
    except (OSError, ValueError, RuntimeError) as e:
        raise CommandError(cmd, stderr=str(e)) from e

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise CommandError(cmd, returncode=result.returncode, stderr=stderr)

    return result.stdout.strip()


def command_exists(cmd: str) -> bool:
    """Check if command exists in PATH.

    Args:
        cmd: Command name (e.g., "ip")

    Returns:
        True if command is available, False otherwise.
    """
    return shutil.which(cmd) is not None


def sanitize_for_log(value: Any) -> str:
    """Sanitize values before logging to prevent log injection.

    Removes:
        - Newlines
        - ANSI escape codes
        - Control characters

    Max length: config.MAX_LOG_VALUE_LENGTH

    Args:
        value: Value to sanitize (any type, will be converted to string)

    Returns:
        Sanitized string safe for logging.
    """
    text = str(value)

    text = text.replace("\n", " ").replace("\r", " ")
    text = re.sub(r"\x1b\[[0-9;]*m", "", text)
    text = "".join(c for c in text if c.isprintable() or c.isspace())

    limit = config.MAX_LOG_VALUE_LENGTH
    if len(text) > limit:
        text = text[: limit - 3] + "..."

    return text
