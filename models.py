"""Data models for provider rules and interface classification.

Rule sets are frozen dataclasses: defined once at import time and never
mutated. Interfaces are snapshots taken fresh for every detection call.

- ProviderRuleSet: name patterns, IP prefixes and family for one provider
- NetworkInterface: one interface reported by the platform
- InterfaceMatch: an interface plus the heuristic that matched it
- ProviderMatch: all matches for one provider
"""

from dataclasses import dataclass, field
from ipaddress import IPv4Interface, IPv6Interface

from enums import AddressFamily, MatchReason, Provider

# Address value as reported by the platform (address + prefix length)
IPAddressValue = IPv4Interface | IPv6Interface


@dataclass(frozen=True)
class ProviderRuleSet:
    """Static detection rules for a single provider.

    name_patterns are lowercase substrings checked against the lowercased
    interface name. ip_prefixes are compared against the textual form of
    each address of the configured family (str.startswith, not CIDR).
    """

    provider: Provider
    display_name: str
    name_patterns: tuple[str, ...]
    ip_prefixes: tuple[str, ...]
    address_family: AddressFamily

    def __post_init__(self) -> None:
        for pattern in self.name_patterns:
            if not pattern:
                raise ValueError(f"{self.display_name}: empty name pattern")
            if pattern != pattern.lower():
                raise ValueError(
                    f"{self.display_name}: name pattern must be lowercase: {pattern!r}"
                )

    def accepts_family(self, family: AddressFamily) -> bool:
        """Check whether addresses of this family are prefix-checked."""
        return self.address_family in (AddressFamily.ANY, family)


@dataclass(frozen=True)
class NetworkInterface:
    """Network interface as listed by the platform.

    Addresses are not part of the snapshot; they are fetched on demand
    by network.interfaces.get_interface_addresses().
    """

    name: str  # Interface name (tailscale0, wg0, eth0)
    index: int | None = None  # Kernel ifindex or None if unknown


@dataclass(frozen=True)
class InterfaceMatch:
    """Interface attributed to a provider."""

    interface: NetworkInterface
    reason: MatchReason  # NAME or ADDRESS


@dataclass
class ProviderMatch:
    """Detection result for one provider."""

    rules: ProviderRuleSet
    matches: list[InterfaceMatch] = field(default_factory=list)

    @property
    def provider(self) -> Provider:
        return self.rules.provider

    @property
    def detected(self) -> bool:
        """True if at least one interface matched."""
        return bool(self.matches)

    @property
    def interface_names(self) -> list[str]:
        return [match.interface.name for match in self.matches]
