"""
Shared utility functions for the geoadapters package.

Modules:
- ip: IP literal classification and IPv4 integer conversion
- geo: Geographic calculations (haversine) and coordinate formatting

Usage:
    from geoadapters.core.utils import is_ip_address, haversine_distance

    # Classify a query
    is_ip_address("88.188.221.14")  # True

    # Calculate distance
    distance = haversine_distance(42.26, -71.80, 42.27, -71.81, unit='meters')
"""

from geoadapters.core.utils.ip import (
    parse_ip,
    is_ip_address,
    is_ipv6,
    is_loopback,
    ip_to_long,
)
from geoadapters.core.utils.geo import (
    haversine_distance,
    format_coordinate,
    format_number,
)

__all__ = [
    # IP utilities
    "parse_ip",
    "is_ip_address",
    "is_ipv6",
    "is_loopback",
    "ip_to_long",
    # Geo utilities
    "haversine_distance",
    "format_coordinate",
    "format_number",
]
