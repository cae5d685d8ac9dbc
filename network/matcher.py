"""Provider interface matching.

Classifies interfaces against a ProviderRuleSet using two heuristics:

    1. Name: lowercased interface name contains any name pattern
    2. Address: textual form of an address of the provider's family
       starts with any configured prefix

Either heuristic is enough. A failed address lookup on one interface
excludes that interface only; it never fails the whole call.
"""

from collections.abc import Callable, Iterable
from ipaddress import IPv4Interface, IPv6Interface

from enums import AddressFamily, MatchReason, Provider
from exceptions import AddressLookupError, InvalidInputError
from logging_config import get_logger
from models import InterfaceMatch, IPAddressValue, NetworkInterface, ProviderRuleSet
from network.interfaces import get_interface_addresses, get_interface_list
from network.providers import get_rules
from utils import sanitize_for_log

logger = get_logger(__name__)

AddressLookup = Callable[[str], list[IPAddressValue]]


def find_provider_interfaces(provider: Provider) -> list[NetworkInterface]:
    """Find interfaces belonging to a provider.

    Process:
        1. List interfaces (fresh, never cached)
        2. Classify each interface against the provider's rules
        3. Skip interfaces whose addresses can't be read

    Args:
        provider: Provider to look for

    Returns:
        Matching interfaces in enumeration order (possibly empty).

    Raises:
        EnumerationError: Interface list could not be obtained.
    """
    rules = get_rules(provider)
    interfaces = get_interface_list()
    return [match.interface for match in match_interfaces(rules, interfaces)]


def find_airvpn_interfaces() -> list[NetworkInterface]:
    return find_provider_interfaces(Provider.AIRVPN)


def find_cjdns_interfaces() -> list[NetworkInterface]:
    return find_provider_interfaces(Provider.CJDNS)


def find_ivpn_interfaces() -> list[NetworkInterface]:
    return find_provider_interfaces(Provider.IVPN)


def find_mullvad_interfaces() -> list[NetworkInterface]:
    return find_provider_interfaces(Provider.MULLVAD)


def find_protonvpn_interfaces() -> list[NetworkInterface]:
    return find_provider_interfaces(Provider.PROTONVPN)


def find_tailscale_interfaces() -> list[NetworkInterface]:
    return find_provider_interfaces(Provider.TAILSCALE)


def find_yggdrasil_interfaces() -> list[NetworkInterface]:
    return find_provider_interfaces(Provider.YGGDRASIL)


def match_interfaces(
    rules: ProviderRuleSet,
    interfaces: Iterable[NetworkInterface],
    lookup: AddressLookup | None = None,
) -> list[InterfaceMatch]:
    """Classify a list of interfaces against one rule set.

    Args:
        rules: Provider rule set
        interfaces: Interfaces to classify
        lookup: Address fetcher (default: get_interface_addresses)

    Returns:
        InterfaceMatch for every matching interface, in input order.
    """
    matches = []
    for iface in interfaces:
        try:
            reason = classify_interface(rules, iface, lookup)
        except AddressLookupError as e:
            logger.debug(
                "[%s] Skipped for %s: %s",
                sanitize_for_log(e.interface_name),
                rules.display_name,
                sanitize_for_log(str(e)),
            )
            continue

        if reason is not None:
            logger.debug(
                "[%s] Matched %s by %s",
                sanitize_for_log(iface.name),
                rules.display_name,
                reason.value,
            )
            matches.append(InterfaceMatch(interface=iface, reason=reason))

    return matches


def is_provider_interface(
    rules: ProviderRuleSet,
    iface: NetworkInterface | None,
    lookup: AddressLookup | None = None,
) -> bool:
    """Check if an interface belongs to the provider described by rules.

    Raises:
        InvalidInputError: iface is None.
        AddressLookupError: Name didn't match and addresses couldn't be read.
    """
    return classify_interface(rules, iface, lookup) is not None


def classify_interface(
    rules: ProviderRuleSet,
    iface: NetworkInterface | None,
    lookup: AddressLookup | None = None,
) -> MatchReason | None:
    """Classify a single interface.

    Name patterns are checked first; addresses are only fetched when no
    pattern matched.

    Args:
        rules: Provider rule set
        iface: Interface to classify
        lookup: Address fetcher (default: get_interface_addresses)

    Returns:
        MatchReason.NAME, MatchReason.ADDRESS, or None if no rule matched.

    Raises:
        InvalidInputError: iface is None or has no name.
        AddressLookupError: Address retrieval failed.
    """
    if iface is None or not iface.name:
        raise InvalidInputError("no interface provided")

    if _matches_name(rules, iface.name):
        return MatchReason.NAME

    if lookup is None:
        lookup = get_interface_addresses

    try:
        addresses = lookup(iface.name)
    except (OSError, RuntimeError) as e:
        raise AddressLookupError(
            iface.name,
            f"failed to get addresses for interface {iface.name}: {e}",
        ) from e

    if _matches_address(rules, addresses):
        return MatchReason.ADDRESS

    return None


def address_family(address: IPAddressValue) -> tuple[AddressFamily, str]:
    """Determine family and canonical text of an address.

    IPv4-mapped IPv6 addresses (::ffff:a.b.c.d) have a 4-byte form and
    count as IPv4, rendered as the dotted quad.

    Args:
        address: IPv4Interface or IPv6Interface

    Returns:
        Tuple of (family, text) where text has no prefix length.
    """
    ip = address.ip
    if ip.version == 6 and ip.ipv4_mapped is not None:
        return (AddressFamily.IPV4, str(ip.ipv4_mapped))
    if ip.version == 4:
        return (AddressFamily.IPV4, str(ip))
    return (AddressFamily.IPV6, str(ip))


def _matches_name(rules: ProviderRuleSet, name: str) -> bool:
    name_lower = name.lower()
    return any(pattern in name_lower for pattern in rules.name_patterns)


def _matches_address(rules: ProviderRuleSet, addresses: Iterable[object]) -> bool:
    for address in addresses:
        # Only IP interface/network values carry an address to check
        if not isinstance(address, (IPv4Interface, IPv6Interface)):
            continue

        family, text = address_family(address)
        if not rules.accepts_family(family):
            continue

        if text.startswith(rules.ip_prefixes):
            return True

    return False
