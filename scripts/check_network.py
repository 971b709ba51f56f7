#!/usr/bin/env python3
"""
Network Check Script

Sends one request through the network channel and prints the result.
Handy for checking what the reachability checker sees on a given host.

Usage:
    python scripts/check_network.py                   # checkNetworkConnectivity
    python scripts/check_network.py --json            # machine-readable output
    python scripts/check_network.py --provider legacy # force legacy provider
    python scripts/check_network.py --mode mock       # no host access
    python scripts/check_network.py --method foo      # -> not implemented

Exit code is 0 when the request succeeded (whatever the boolean answer),
1 otherwise.
"""

import argparse
import json
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bridge.method_channel import ResultStatus
from bridge.network_channel import create_network_channel
from core.logging_config import setup_logging
from reachability.config import ReachabilityConfig
from reachability.constants import (
    CHECK_NETWORK_CONNECTIVITY,
    PROVIDER_CHOICES,
    SERVICE_MODES,
)
from reachability.factory import ReachabilityFactory


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query network reachability through the network channel",
        epilog="""
Examples:
  %(prog)s
  %(prog)s --json
  %(prog)s --provider legacy --verbose
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--method",
        default=CHECK_NETWORK_CONNECTIVITY,
        help=f"Request name (default: {CHECK_NETWORK_CONNECTIVITY})",
    )
    parser.add_argument(
        "--mode",
        choices=SERVICE_MODES,
        help="Connectivity service mode (default: from config)",
    )
    parser.add_argument(
        "--provider",
        choices=PROVIDER_CHOICES,
        help="Provider variant (default: from config)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to reachability YAML config",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # Keep stdout clean for JSON consumers
    setup_logging(
        level="DEBUG" if args.verbose else "WARNING",
        stream=sys.stderr if args.json else sys.stdout,
    )

    config = ReachabilityConfig(config_path=args.config)
    checker = ReachabilityFactory.create_checker(
        service_mode=args.mode,
        provider_kind=args.provider,
        config=config,
    )
    channel = create_network_channel(checker, name=config.channel_name)

    result = channel.invoke(args.method)

    if args.json:
        print(json.dumps(result.to_dict()))
    elif result.status is ResultStatus.SUCCESS:
        _, status = checker.get_network_status()
        print(f"{'✓' if result.value else '✗'} {args.method}: {result.value} ({status})")
    elif result.status is ResultStatus.NOT_IMPLEMENTED:
        print(f"❌ Not implemented: {args.method}")
        print(f"Available methods: {', '.join(channel.methods)}")
    else:
        print(f"❌ {result.error_code}: {result.error_message}")

    return 0 if result.is_success else 1


if __name__ == "__main__":
    sys.exit(main())
