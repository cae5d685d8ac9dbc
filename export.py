"""JSON export functionality.

Exports provider detection results to JSON format with metadata.
"""

import json
from datetime import datetime, timezone
from typing import Any

import config
from models import InterfaceMatch, ProviderMatch


def export_to_json(
    results: list[ProviderMatch],
    indent: int = 2,
) -> str:
    """Export to JSON format with metadata.

    Args:
        results: ProviderMatch objects
        indent: JSON indentation (default 2)

    Returns:
        JSON string with metadata and per-provider results.
    """
    metadata = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "tool": config.TOOL_NAME,
        "version": config.VERSION,
        "provider_count": len(results),
        "summary": {
            "detected_providers": [
                r.provider.value for r in results if r.detected
            ],
            "matched_interfaces": sum(len(r.matches) for r in results),
        },
    }

    output = {
        "metadata": metadata,
        "providers": [_provider_to_dict(r) for r in results],
    }

    return json.dumps(output, indent=indent)


def _provider_to_dict(result: ProviderMatch) -> dict[str, Any]:
    """Convert ProviderMatch to dictionary.

    Args:
        result: ProviderMatch object

    Returns:
        Dictionary representation suitable for JSON serialization.
    """
    return {
        "provider": result.provider.value,
        "name": result.rules.display_name,
        "address_family": result.rules.address_family.value,
        "detected": result.detected,
        "interfaces": [_match_to_dict(m) for m in result.matches],
    }


def _match_to_dict(match: InterfaceMatch) -> dict[str, Any]:
    return {
        "name": match.interface.name,
        "index": match.interface.index,
        "matched_by": match.reason.value,
    }
