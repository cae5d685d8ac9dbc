"""Provider detection rules.

One ProviderRuleSet per supported provider. Adding a provider means adding
a Provider enum member and one entry here; the matcher is generic.

Prefixes are compared as text, so "10.4." also matches 10.45.0.1.
"""

from enums import AddressFamily, Provider
from models import ProviderRuleSet

PROVIDER_RULES: dict[Provider, ProviderRuleSet] = {
    # AirVPN tunnels use 10.4.0.0/16 and 10.30.0.0/16
    Provider.AIRVPN: ProviderRuleSet(
        provider=Provider.AIRVPN,
        display_name="AirVPN",
        name_patterns=("air", "airvpn", "tun-air", "air-"),
        ip_prefixes=("10.4.", "10.30."),
        address_family=AddressFamily.IPV4,
    ),
    # CJDNS uses fc00::/8
    Provider.CJDNS: ProviderRuleSet(
        provider=Provider.CJDNS,
        display_name="CJDNS",
        name_patterns=("cjdns", "tun-cjdns", "cjd", "hyperboria"),
        ip_prefixes=("fc00:",),
        address_family=AddressFamily.IPV6,
    ),
    Provider.IVPN: ProviderRuleSet(
        provider=Provider.IVPN,
        display_name="IVPN",
        name_patterns=("ivpn", "tun-ivpn", "wg-ivpn"),
        ip_prefixes=("172.16.",),
        address_family=AddressFamily.IPV4,
    ),
    Provider.MULLVAD: ProviderRuleSet(
        provider=Provider.MULLVAD,
        display_name="Mullvad",
        name_patterns=("mullvad", "wg-mullvad", "mvd-"),
        ip_prefixes=("10.64.",),
        address_family=AddressFamily.IPV4,
    ),
    Provider.PROTONVPN: ProviderRuleSet(
        provider=Provider.PROTONVPN,
        display_name="ProtonVPN",
        name_patterns=("proton", "pvpn", "protonvpn", "tun-proton"),
        ip_prefixes=("10.2.",),
        address_family=AddressFamily.IPV4,
    ),
    # Tailscale CGNAT range 100.64.0.0/10 (matched loosely as "100.")
    Provider.TAILSCALE: ProviderRuleSet(
        provider=Provider.TAILSCALE,
        display_name="Tailscale",
        name_patterns=("tailscale", "ts", "wg-ts"),
        ip_prefixes=("100.",),
        address_family=AddressFamily.IPV4,
    ),
    # Yggdrasil uses 200::/7
    Provider.YGGDRASIL: ProviderRuleSet(
        provider=Provider.YGGDRASIL,
        display_name="Yggdrasil",
        name_patterns=("ygg", "tun-ygg", "yggdrasil", "ygg0"),
        ip_prefixes=("200:",),
        address_family=AddressFamily.IPV6,
    ),
}


def get_rules(provider: Provider) -> ProviderRuleSet:
    """Look up the rule set for a provider.

    Args:
        provider: Provider enum member (or its string value)

    Returns:
        The provider's ProviderRuleSet.

    Raises:
        ValueError: Unknown provider.
    """
    return PROVIDER_RULES[Provider(provider)]
