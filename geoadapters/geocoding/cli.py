#!/usr/bin/env python3
"""
Command-line interface for the geocoding module.

Usage:
    python -m geoadapters.geocoding.cli --address "1600 Pennsylvania Ave, Washington, DC"
    python -m geoadapters.geocoding.cli --address 88.188.221.14 --provider ip_info
    python -m geoadapters.geocoding.cli --reverse 55.6880 12.5588 --provider oio_rest
    python -m geoadapters.geocoding.cli --compare 88.188.221.14 --provider ip_info --fallback telize ip2c
    python -m geoadapters.geocoding.cli --list-providers
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from geoadapters.geocoding.base import GeocodingError, GeocodingResult, results_as_dicts
from geoadapters.geocoding.facade import (
    available_providers,
    compare_providers,
    geocode_address,
    reverse_geocode,
)

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def print_results(results: List[GeocodingResult], as_json: bool = False) -> None:
    """Print results as a human readable summary, or as JSON."""
    if as_json:
        print(json.dumps(results_as_dicts(results), indent=2, ensure_ascii=False))
        return

    print(f"✓ {len(results)} result(s)")
    for index, result in enumerate(results, start=1):
        print(f"\n[{index}] {result.provider}")
        if result.latitude is not None:
            print(f"  Lat/Lng:  {result.latitude:.6f}, {result.longitude:.6f}")
        for name, value in result.as_dict.items():
            if name in ("latitude", "longitude", "provider") or value is None:
                continue
            print(f"  {name}: {value}")


def compare_query(query: str, providers: List[str], as_json: bool = False) -> None:
    """Compare geocoding results from multiple providers."""
    results = compare_providers(query, providers)

    if as_json:
        payload = {
            name: results_as_dicts(found) if found is not None else None
            for name, found in results.items()
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    print(f"\nComparing providers for: {query}")
    print("=" * 60)
    for provider, found in results.items():
        print(f"\n{provider.upper()}:")
        if found:
            first = found[0]
            if first.latitude is not None:
                print(f"  Lat/Lng: {first.latitude:.6f}, {first.longitude:.6f}")
            print(f"  Locality: {first.locality}")
            print(f"  Country:  {first.country_code}")
        else:
            print("  No match")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Geocode addresses and IPs through interchangeable providers"
    )

    parser.add_argument(
        "--address", "-a",
        type=str,
        help="Geocode an address or IP"
    )
    parser.add_argument(
        "--reverse", "-r",
        type=float,
        nargs=2,
        metavar=("LAT", "LON"),
        help="Reverse geocode a coordinate pair"
    )
    parser.add_argument(
        "--provider", "-p",
        type=str,
        default="geocoder_us",
        choices=available_providers(),
        help="Geocoding provider to use"
    )
    parser.add_argument(
        "--fallback",
        nargs="+",
        default=[],
        choices=available_providers(),
        metavar="NAME",
        help="Providers to try in order when the primary finds nothing"
    )
    parser.add_argument(
        "--compare", "-c",
        type=str,
        help="Compare --provider and --fallback providers for a query"
    )
    parser.add_argument(
        "--list-providers",
        action="store_true",
        help="List the available providers"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        if args.list_providers:
            for name in available_providers():
                print(name)
        elif args.compare:
            compare_query(args.compare, [args.provider] + args.fallback, args.json)
        elif args.address:
            results = geocode_address(args.address, provider=args.provider, fallback_providers=args.fallback)
            print_results(results, args.json)
        elif args.reverse:
            latitude, longitude = args.reverse
            results = reverse_geocode(latitude, longitude, provider=args.provider, fallback_providers=args.fallback)
            print_results(results, args.json)
        else:
            parser.print_help()
    except GeocodingError as e:
        logger.error(str(e))
        print(f"✗ {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
