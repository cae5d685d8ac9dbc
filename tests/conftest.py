"""Pytest configuration and shared fixtures.

Provides common test fixtures and configuration for the test suite.
"""

import ipaddress
import sys
from pathlib import Path
from typing import Callable, Generator

import pytest

# Add parent directory to path so imports work
# This allows: from enums import ... to find /project/enums.py
sys.path.insert(0, str(Path(__file__).parent.parent))

from enums import MatchReason, Provider
from exceptions import AddressLookupError
from logging_config import setup_logging
from models import InterfaceMatch, IPAddressValue, NetworkInterface, ProviderMatch
from network.matcher import AddressLookup
from network.providers import PROVIDER_RULES


@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> Generator[None, None, None]:
    """Configure logging once for the whole test session."""
    setup_logging(verbose=False)
    yield


@pytest.fixture
def make_lookup() -> Callable[..., AddressLookup]:
    """Build an address lookup from a {name: ["addr/len", ...]} mapping.

    Names listed in failing raise AddressLookupError; unknown names have
    no addresses.
    """

    def _make(
        addresses: dict[str, list[str]] | None = None,
        failing: tuple[str, ...] = (),
    ) -> AddressLookup:
        parsed = {
            name: [ipaddress.ip_interface(a) for a in values]
            for name, values in (addresses or {}).items()
        }

        def lookup(name: str) -> list[IPAddressValue]:
            if name in failing:
                raise AddressLookupError(name)
            return list(parsed.get(name, []))

        return lookup

    return _make


@pytest.fixture
def sample_interfaces() -> list[NetworkInterface]:
    """Interfaces of a typical host running Tailscale and a WireGuard VPN."""
    return [
        NetworkInterface(name="lo", index=1),
        NetworkInterface(name="eth0", index=2),
        NetworkInterface(name="tailscale0", index=3),
        NetworkInterface(name="wg0", index=4),
    ]


@pytest.fixture
def sample_results() -> list[ProviderMatch]:
    """Detection results with Tailscale and Mullvad detected."""
    return [
        ProviderMatch(
            rules=rules,
            matches={
                Provider.TAILSCALE: [
                    InterfaceMatch(NetworkInterface("tailscale0", 3), MatchReason.NAME),
                ],
                Provider.MULLVAD: [
                    InterfaceMatch(NetworkInterface("wg0", 4), MatchReason.ADDRESS),
                ],
            }.get(provider, []),
        )
        for provider, rules in PROVIDER_RULES.items()
    ]
