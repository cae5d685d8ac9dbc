"""Type-safe enumerations for vpncheck.

All categorical values use enum types for type safety and consistency.
"""

from enum import Enum


class Provider(str, Enum):
    """Supported VPN and overlay-network providers."""

    AIRVPN = "airvpn"
    CJDNS = "cjdns"          # Mesh overlay (fc00::/8)
    IVPN = "ivpn"
    MULLVAD = "mullvad"
    PROTONVPN = "protonvpn"
    TAILSCALE = "tailscale"
    YGGDRASIL = "yggdrasil"  # Mesh overlay (200::/7)


class AddressFamily(str, Enum):
    """Address family a provider's tunnel addresses belong to.

    IPV4: Address has a 4-byte form (includes IPv4-mapped IPv6)
    IPV6: Address has no 4-byte form
    ANY: Either family is accepted
    """

    IPV4 = "IPv4"
    IPV6 = "IPv6"
    ANY = "any"


class MatchReason(str, Enum):
    """Which heuristic classified an interface."""

    NAME = "name"
    ADDRESS = "address"
