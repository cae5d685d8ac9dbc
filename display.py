"""Table output formatting and display.

Formats provider detection results as a color-coded table.
"""

import sys
from typing import TextIO

import config
from colors import Color
from models import ProviderMatch
from utils import format_interface_matches, shorten_text


def format_output(results: list[ProviderMatch], file: TextIO | None = None) -> None:
    """Format and print table to specified file or stdout.

    Process:
        1. Print header
        2. Print column headers
        3. Print one row per provider (green if detected)
        4. Print footer with legend

    Args:
        results: ProviderMatch objects to display
        file: Optional file handle (default: sys.stdout)
    """
    if file is None:
        file = sys.stdout

    rule = "=" * config.TABLE_WIDTH

    print(rule, file=file)
    print("VPN / Overlay Network Detection", file=file)
    print(rule, file=file)

    headers = [name.ljust(width) for name, width in config.TABLE_COLUMNS]
    print(config.COLUMN_SEPARATOR.join(headers).rstrip(), file=file)
    print(rule, file=file)

    for result in results:
        row_data = [
            result.rules.display_name,
            result.rules.address_family.value,
            "DETECTED" if result.detected else "--",
            format_interface_matches(result.matches),
        ]

        row_parts = []
        for (_, width), data in zip(config.TABLE_COLUMNS, row_data):
            row_parts.append(shorten_text(str(data), width).ljust(width))
        row = config.COLUMN_SEPARATOR.join(row_parts).rstrip()

        color = Color.GREEN if result.detected else Color.DIM
        print(f"{color}{row}{Color.RESET}", file=file)

    print(rule, file=file)

    detected = sum(1 for result in results if result.detected)
    print(f"\n{detected} of {len(results)} providers detected", file=file)
    print("\nLegend:", file=file)
    print(f"{Color.GREEN}GREEN{Color.RESET} - Provider interface present", file=file)
    print(
        "(name)    - matched by interface name\n"
        "(address) - matched by tunnel address range\n",
        file=file,
    )
