#!/usr/bin/env python3
"""
Server Network Configuration Viewer

Normalizes a blade or rack network configuration document and optionally
ties its partitions to the NICs reported by the server's iDRAC.
Features:
- Uniform card / port / partition view of blade and rack data
- NIC FQDD and MAC matching through iDRAC Redfish
- Reset of virtual MAC addresses to permanent ones
- Multiple output formats (list, table, JSON)

Usage:
    python show_network_config.py config.json                    # Normalized tree
    python show_network_config.py config.json --format json      # Output as JSON
    python show_network_config.py config.json --endpoint 10.0.0.5  # Match NICs
    python show_network_config.py config.json --static-ips PXE   # Static IPs of a network type
"""

import argparse
import json
import logging
import sys

import requests

from server_netconfig.config import (
    AppConfig,
    EndpointConfig,
    load_environment,
    setup_logging,
    validate_config
)
from server_netconfig.exceptions import InvalidConfigurationError, NetworkConfigurationError
from server_netconfig.formatters import CardTreeFormatter
from server_netconfig.services import NetworkConfiguration
from server_netconfig.strategies import RedfishStrategy

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Normalize server network configuration and match it to iDRAC NICs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the normalized card tree
  python show_network_config.py config.json

  # Match partitions to NICs (credentials from .env)
  python show_network_config.py config.json --endpoint 10.0.0.5

  # Generate partition data for a server that is not partitioned yet
  python show_network_config.py config.json --endpoint 10.0.0.5 --add-partitions

  # Reset virtual MACs to permanent MACs
  python show_network_config.py config.json --endpoint 10.0.0.5 --reset-macs
        """
    )

    parser.add_argument(
        "config_file",
        help="Path to JSON network configuration document"
    )

    parser.add_argument(
        "--format", "-f",
        choices=["list", "table", "json"],
        default=AppConfig.DEFAULT_OUTPUT_FORMAT,
        help="Output format: list (default), table, or json"
    )

    parser.add_argument(
        "--endpoint",
        help="iDRAC host to match NICs against (default: IDRAC_HOST env var)"
    )

    parser.add_argument(
        "--match-nics", "-m",
        action="store_true",
        help="Match partitions to NICs using the endpoint from the environment"
    )

    parser.add_argument(
        "--add-partitions",
        action="store_true",
        help="Generate NIC data for partitions the server does not report yet"
    )

    parser.add_argument(
        "--reset-macs",
        action="store_true",
        help="Reset virtual MAC addresses to permanent MAC addresses (requires NIC matching)"
    )

    parser.add_argument(
        "--static-ips",
        metavar="NETWORK_TYPE",
        action="append",
        help="Print static IP addresses of the network type instead of the tree (can be repeated)"
    )

    parser.add_argument(
        "--env-file", "-e",
        help="Path to .env file with credentials"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser


def load_config_file(path: str) -> dict:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    # Deployment parameters usually wrap the document
    if isinstance(data, dict):
        data = data.get("network_configuration", data)
    if not isinstance(data, dict):
        raise InvalidConfigurationError(
            f"Network configuration in {path} must be a JSON object, got {type(data).__name__}"
        )
    return data


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # LOG_FILE and LOG_LEVEL may come from the env file
    load_environment(args.env_file)

    setup_logging(verbose=args.verbose)
    if not args.verbose:
        logging.getLogger().setLevel(logging.WARNING)

    match_nics = bool(args.endpoint or args.match_nics or args.reset_macs)

    try:
        validate_config(require_endpoint=match_nics and not args.endpoint)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"\n❌ {e}")
        return 1

    try:
        network_config = NetworkConfiguration(load_config_file(args.config_file))
    except (OSError, json.JSONDecodeError) as e:
        print(f"\n❌ Could not read {args.config_file}: {e}")
        return 1
    except NetworkConfigurationError as e:
        logger.error(f"Failed to normalize network configuration: {e}")
        print(f"\n❌ {e}")
        return 1

    if match_nics:
        source = RedfishStrategy(EndpointConfig.get_credentials(args.endpoint))
        if not source.is_configured():
            logger.error(f"Incomplete iDRAC credentials for {source.host}")
            print(f"\n❌ iDRAC credentials for {source.host} are incomplete: set IDRAC_USERNAME and IDRAC_PASSWORD")
            return 1

        try:
            with source:
                network_config.add_nics(source, add_partitions=args.add_partitions)
                if args.reset_macs:
                    network_config.reset_virtual_mac_addresses(source)
        except NetworkConfigurationError as e:
            logger.error(f"NIC matching failed: {e}")
            print(f"\n❌ {e}")
            return 1
        except requests.RequestException as e:
            logger.error(f"iDRAC request failed: {e}", exc_info=True)
            print(f"\n❌ iDRAC request failed: {e}")
            return 1

    if args.static_ips:
        for ip_address in network_config.get_static_ips(*args.static_ips):
            print(ip_address)
        return 0

    print(CardTreeFormatter(output_format=args.format).format(network_config))

    if args.format != "json":
        partitions = network_config.get_all_fqdds()
        print(f"\n{'=' * 60}")
        print(f"Server type: {network_config.server_type}")
        print(f"Cards: {len(network_config.cards)}  Partitions: {len(partitions)}")
        print(f"{'=' * 60}\n")

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        sys.exit(130)
