"""Exception hierarchy for vpncheck.

EnumerationError is fatal to a detection call and reaches the caller.
AddressLookupError is recovered inside the matcher (interface skipped).
"""


class VpnCheckError(Exception):
    """Base class for all vpncheck errors."""


class CommandError(VpnCheckError):
    """System command failed, timed out, or could not be started."""

    def __init__(
        self,
        cmd: list[str],
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr

        message = f"command failed: {' '.join(self.cmd)}"
        if returncode is not None:
            message += f" (exit {returncode})"
        if stderr:
            message += f": {stderr}"
        super().__init__(message)


class EnumerationError(VpnCheckError):
    """Listing the host's network interfaces failed."""


class AddressLookupError(VpnCheckError):
    """Fetching the addresses of a single interface failed."""

    def __init__(self, interface_name: str, message: str = "") -> None:
        self.interface_name = interface_name
        super().__init__(
            message or f"failed to get addresses for interface {interface_name}"
        )


class InvalidInputError(VpnCheckError, ValueError):
    """An absent interface reference was passed to the matcher."""
