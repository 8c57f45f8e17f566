"""
Geographic utility functions for coordinate calculations and formatting.

- Haversine distance calculation (meters, feet, kilometers, miles)
- Fixed-precision coordinate formatting for provider URL templates

Usage:
    from geoadapters.core.utils.geo import haversine_distance, format_coordinate

    # Calculate distance in meters
    distance_m = haversine_distance(42.26, -71.80, 42.27, -71.81)

    # Format a coordinate for a query string
    format_coordinate(1)  # "1.000000"
"""

import math
from typing import Literal, Union

# Earth radius constants
EARTH_RADIUS_METERS = 6_371_000
EARTH_RADIUS_FEET = 20_902_231
EARTH_RADIUS_KM = 6_371
EARTH_RADIUS_MILES = 3_958.8

# Unit type for type hints
DistanceUnit = Literal['meters', 'feet', 'kilometers', 'miles']


def haversine_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    unit: DistanceUnit = 'meters'
) -> float:
    """
    Calculate the great-circle distance between two points on Earth.

    Uses the Haversine formula which gives accurate results for most distances.

    Args:
        lat1: Latitude of first point in decimal degrees
        lon1: Longitude of first point in decimal degrees
        lat2: Latitude of second point in decimal degrees
        lon2: Longitude of second point in decimal degrees
        unit: Unit for the result ('meters', 'feet', 'kilometers', 'miles')

    Returns:
        Distance between the two points in the specified unit
    """
    # Select earth radius based on unit
    earth_radius = {
        'meters': EARTH_RADIUS_METERS,
        'feet': EARTH_RADIUS_FEET,
        'kilometers': EARTH_RADIUS_KM,
        'miles': EARTH_RADIUS_MILES,
    }.get(unit, EARTH_RADIUS_METERS)

    # Convert to radians
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)

    # Haversine formula
    a = (
        math.sin(delta_phi / 2) ** 2 +
        math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return earth_radius * c


def format_coordinate(value: Union[float, int, str]) -> str:
    """
    Format a coordinate with six fixed decimals, as provider URL templates expect.

    Example:
        >>> format_coordinate(39.983424)
        '39.983424'
        >>> format_coordinate("-74.011255")
        '-74.011255'
    """
    return f"{float(value):.6f}"


def format_number(value: float) -> str:
    """
    Format a coordinate for messages, dropping the fraction of whole numbers.

    Example:
        >>> format_number(1.0)
        '1'
        >>> format_number(-74.011255)
        '-74.011255'
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
