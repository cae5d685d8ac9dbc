"""Platform network enumeration.

Lists interfaces and their assigned addresses using iproute2.
This is the only part of vpncheck that talks to the operating system.
"""

import ipaddress
import re

from exceptions import AddressLookupError, CommandError, EnumerationError
from logging_config import get_logger
from models import IPAddressValue, NetworkInterface
from utils import run_command_checked, sanitize_for_log, validate_interface_name

logger = get_logger(__name__)

# "3: eth0@if4: <BROADCAST,MULTICAST,UP,LOWER_UP> mtu 1500 ..."
_LINK_LINE_RE = re.compile(r"^(\d+):\s+([^:@\s]+)")

# "5: wg0    inet 100.64.0.3/32 scope global wg0\ ..."
_ADDR_LINE_RE = re.compile(r"\sinet6?\s+(\S+)")


def get_interface_list() -> list[NetworkInterface]:
    """Get list of all network interfaces.

    Command: ip -o link show

    Returns all interfaces regardless of state (UP/DOWN), in kernel order.

    Returns:
        List of interfaces (possibly empty).

    Raises:
        EnumerationError: The interface list could not be obtained.
    """
    try:
        output = run_command_checked(["ip", "-o", "link", "show"])
    except CommandError as e:
        raise EnumerationError(f"failed to list network interfaces: {e}") from e

    interfaces = []
    for line in output.split("\n"):
        match = _LINK_LINE_RE.match(line)
        if not match:
            continue

        # Unusual names are kept; get_interface_addresses() refuses them
        name = match.group(2).strip()
        interfaces.append(NetworkInterface(name=name, index=int(match.group(1))))

    logger.debug("Enumerated %d interfaces", len(interfaces))
    return interfaces


def get_interface_addresses(iface_name: str) -> list[IPAddressValue]:
    """Get all addresses assigned to one interface.

    Command: ip -o addr show dev <interface>

    Only the local address of each line is returned; "peer" addresses of
    point-to-point links are ignored. Tokens that don't parse as an IP
    address are skipped.

    Args:
        iface_name: Interface name

    Returns:
        List of IPv4Interface/IPv6Interface values (address + prefix length).

    Raises:
        AddressLookupError: Name is invalid or the command failed.
    """
    if not validate_interface_name(iface_name):
        raise AddressLookupError(iface_name, f"invalid interface name: {iface_name!r}")

    try:
        output = run_command_checked(["ip", "-o", "addr", "show", "dev", iface_name])
    except CommandError as e:
        raise AddressLookupError(
            iface_name,
            f"failed to get addresses for interface {iface_name}: {e}",
        ) from e

    addresses: list[IPAddressValue] = []
    for line in output.split("\n"):
        match = _ADDR_LINE_RE.search(line)
        if not match:
            continue

        token = match.group(1)
        try:
            addresses.append(ipaddress.ip_interface(token))
        except ValueError:
            logger.debug(
                "[%s] Ignoring unparseable address: %s",
                sanitize_for_log(iface_name),
                sanitize_for_log(token),
            )

    return addresses
