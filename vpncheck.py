#!/usr/bin/env python3
"""vpncheck - VPN and overlay network interface detection.

Main entry point for the vpncheck command-line tool.
"""

import argparse
import sys
import traceback
from pathlib import Path

from config import ExitCode
from display import format_output
from enums import Provider
from exceptions import EnumerationError
from export import export_to_json
from logging_config import get_logger, setup_logging
from orchestrator import check_dependencies, collect_provider_matches
from utils import sanitize_for_log


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Parsed arguments namespace.

    Exits:
        Code 4 if invalid argument combinations.
    """
    parser = argparse.ArgumentParser(
        description="Detect VPN and overlay network interfaces on GNU/Linux",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  vpncheck                          # Check all providers
  vpncheck -p tailscale -p mullvad  # Check selected providers
  vpncheck --export json            # Export to JSON (stdout)
  vpncheck --export json --output report.json
  vpncheck -v --log-file debug.log  # Log to file

Exit codes:
  0 - Success (whether or not anything was detected)
  1 - General error
  2 - Missing dependencies
  3 - Interface enumeration failed
  4 - Invalid arguments
        """,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "-p",
        "--provider",
        dest="providers",
        action="append",
        type=Provider,
        choices=list(Provider),
        metavar="NAME",
        help="Provider to check (repeatable; default: all). "
        f"One of: {', '.join(p.value for p in Provider)}",
    )

    parser.add_argument(
        "--export",
        choices=["json"],
        metavar="FORMAT",
        help="Export format (json)",
    )

    parser.add_argument(
        "--output",
        type=Path,
        metavar="PATH",
        help="Export destination file (requires --export)",
    )

    args = parser.parse_args(argv)

    if args.output and not args.export:
        print("Error: --output requires --export", file=sys.stderr)
        sys.exit(ExitCode.INVALID_ARGUMENTS)

    return args


def main() -> None:
    """Main execution flow.

    Exit codes:
        0: Success
        1: General error
        2: Missing dependencies
        3: Interface enumeration failed
        4: Invalid arguments
    """
    args = parse_arguments()

    setup_logging(
        verbose=args.verbose,
        log_file=args.log_file,
        use_colors=True,
    )

    logger = get_logger(__name__)

    if not check_dependencies():
        logger.error("Missing required dependencies - cannot continue")
        sys.exit(ExitCode.MISSING_DEPENDENCIES)

    try:
        logger.info("Starting provider detection...")
        results = collect_provider_matches(args.providers)

        if args.export:
            json_data = export_to_json(results)
            if args.output:
                args.output.write_text(json_data)
                logger.info("Exported to %s", sanitize_for_log(str(args.output)))
            else:
                print(json_data)
        else:
            format_output(results)

        sys.exit(ExitCode.SUCCESS)

    except EnumerationError as e:
        logger.error("Cannot list network interfaces: %s", sanitize_for_log(str(e)))
        sys.exit(ExitCode.ENUMERATION_FAILED)
    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        sys.exit(ExitCode.GENERAL_ERROR)
    except (OSError, ValueError, RuntimeError) as e:
        logger.error("Error during execution: %s", sanitize_for_log(str(e)))
        if args.verbose:
            traceback.print_exc()
        sys.exit(ExitCode.GENERAL_ERROR)


if __name__ == "__main__":
    main()
