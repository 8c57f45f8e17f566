"""
IP literal classification helpers.

Providers use these to decide whether a query is a street address or an IP
address, and whether an IP-only provider can handle it.

Usage:
    from geoadapters.core.utils.ip import is_ip_address, ip_to_long

    is_ip_address("74.200.247.59")      # True
    is_ipv6("::ffff:74.200.247.59")     # True
    ip_to_long("2.17.20.1")             # 34673665
"""

import ipaddress
from typing import Optional, Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def parse_ip(value: Optional[str]) -> Optional[IPAddress]:
    """
    Parse a string as an IPv4 or IPv6 literal.

    Returns:
        The parsed address, or None if the value is not an IP literal
    """
    if not value:
        return None
    try:
        return ipaddress.ip_address(value.strip())
    except ValueError:
        return None


def is_ip_address(value: Optional[str]) -> bool:
    """Check if the value is an IPv4 or IPv6 literal."""
    return parse_ip(value) is not None


def is_ipv6(value: Optional[str]) -> bool:
    """Check if the value is an IPv6 literal (including IPv4-mapped forms)."""
    return isinstance(parse_ip(value), ipaddress.IPv6Address)


def is_loopback(value: Optional[str]) -> bool:
    """Check if the value is a loopback address such as 127.0.0.1 or ::1."""
    address = parse_ip(value)
    return address is not None and address.is_loopback


def ip_to_long(value: str) -> int:
    """
    Convert a dotted IPv4 address to its unsigned integer form.

    Raises:
        ValueError: If the value is not an IPv4 literal
    """
    address = parse_ip(value)
    if not isinstance(address, ipaddress.IPv4Address):
        raise ValueError(f"Not an IPv4 address: {value!r}")
    return int(address)
