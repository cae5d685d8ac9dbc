"""Network analysis modules for vpncheck.

Provides interface enumeration, the provider rule table, and the
provider matcher.
"""

from .interfaces import get_interface_addresses, get_interface_list
from .matcher import (
    address_family,
    classify_interface,
    find_airvpn_interfaces,
    find_cjdns_interfaces,
    find_ivpn_interfaces,
    find_mullvad_interfaces,
    find_protonvpn_interfaces,
    find_provider_interfaces,
    find_tailscale_interfaces,
    find_yggdrasil_interfaces,
    is_provider_interface,
    match_interfaces,
)
from .providers import PROVIDER_RULES, get_rules

__all__ = [
    # Enumeration
    "get_interface_list",
    "get_interface_addresses",
    # Rules
    "PROVIDER_RULES",
    "get_rules",
    # Matching
    "address_family",
    "classify_interface",
    "is_provider_interface",
    "match_interfaces",
    "find_provider_interfaces",
    "find_airvpn_interfaces",
    "find_cjdns_interfaces",
    "find_ivpn_interfaces",
    "find_mullvad_interfaces",
    "find_protonvpn_interfaces",
    "find_tailscale_interfaces",
    "find_yggdrasil_interfaces",
]
