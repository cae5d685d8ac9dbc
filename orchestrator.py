"""Orchestrator for provider detection.

Runs one interface enumeration and classifies it against every
selected provider.
"""

from collections.abc import Iterable
from functools import lru_cache

import config
from enums import Provider
from logging_config import get_logger
from models import ProviderMatch
from network import (
    PROVIDER_RULES,
    get_interface_addresses,
    get_interface_list,
    match_interfaces,
)
from utils import command_exists

logger = get_logger(__name__)


def check_dependencies() -> bool:
    """Check all required system commands exist.

    Returns:
        True if all dependencies present, False otherwise.

    Logs:
        ERROR for each missing command with install hint.
    """
    missing = []

    for cmd in config.REQUIRED_COMMANDS:
        if not command_exists(cmd):
            missing.append(cmd)
            logger.error("Error: Missing required command: %s", cmd)

            hint = config.INSTALL_HINTS.get(cmd)
            if hint:
                logger.error("  Install: %s", hint)

    return len(missing) == 0


def collect_provider_matches(
    providers: Iterable[Provider] | None = None,
) -> list[ProviderMatch]:
    """Detect interfaces for all selected providers.

    Process:
        1. List interfaces once
        2. Classify against each provider's rules (table order)
        3. Fetch each interface's addresses at most once per run

    Args:
        providers: Providers to check (default: all)

    Returns:
        One ProviderMatch per selected provider, in table order.

    Raises:
        EnumerationError: Interface list could not be obtained.
    """
    selected = set(providers) if providers is not None else set(PROVIDER_RULES)

    interfaces = get_interface_list()
    logger.info("Found %d interfaces", len(interfaces))

    # Failures are not cached, so a failing interface is retried per provider
    lookup = lru_cache(maxsize=None)(get_interface_addresses)

    results = []
    for provider, rules in PROVIDER_RULES.items():
        if provider not in selected:
            continue

        matches = match_interfaces(rules, interfaces, lookup)
        result = ProviderMatch(rules=rules, matches=matches)
        if result.detected:
            logger.info(
                "%s: detected on %s",
                rules.display_name,
                ", ".join(result.interface_names),
            )
        results.append(result)

    return results
