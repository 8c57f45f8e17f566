"""
Base classes and interfaces for geocoding providers.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Optional, List, Dict, Any, Union

import requests

from geoadapters.core.utils.ip import parse_ip
from geoadapters.geocoding.transport import HttpAdapter, RequestsAdapter

logger = logging.getLogger(__name__)

Coordinate = Union[float, int, str]

# Result fields holding free text; normalized to stripped strings or None
_TEXT_FIELDS = (
    "street_number",
    "street_name",
    "locality",
    "city_district",
    "zipcode",
    "county",
    "county_code",
    "region",
    "region_code",
    "country",
    "country_code",
    "timezone",
)


def _to_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@dataclass
class Bounds:
    """Bounding box of a result. Always carries all four edges."""

    south: float
    west: float
    north: float
    east: float

    @classmethod
    def from_edges(cls, south: Any, west: Any, north: Any, east: Any) -> Optional["Bounds"]:
        """Build bounds from raw upstream values, or None if any edge is missing."""
        edges = [_to_float(edge) for edge in (south, west, north, east)]
        if any(edge is None for edge in edges):
            return None
        return cls(*edges)

    @property
    def as_dict(self) -> dict:
        return {
            "south": self.south,
            "west": self.west,
            "north": self.north,
            "east": self.east,
        }


@dataclass
class GeocodingResult:
    """Standard result from any geocoding provider."""

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    bounds: Optional[Bounds] = None
    street_number: Optional[str] = None
    street_name: Optional[str] = None
    locality: Optional[str] = None
    city_district: Optional[str] = None
    zipcode: Optional[str] = None
    county: Optional[str] = None
    county_code: Optional[str] = None
    region: Optional[str] = None
    region_code: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    timezone: Optional[str] = None
    provider: str = ""

    def __post_init__(self):
        # Coordinates come as a pair or not at all
        self.latitude = _to_float(self.latitude)
        self.longitude = _to_float(self.longitude)
        if self.latitude is None or self.longitude is None:
            self.latitude = None
            self.longitude = None

        for name in _TEXT_FIELDS:
            value = getattr(self, name)
            if value is not None:
                value = str(value).strip() or None
            setattr(self, name, value)

    @classmethod
    def localhost(cls, provider: str = "") -> "GeocodingResult":
        """Canned result for loopback addresses."""
        return cls(
            locality="localhost",
            region="localhost",
            county="localhost",
            country="localhost",
            provider=provider,
        )

    @property
    def as_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["bounds"] = self.bounds.as_dict if self.bounds else None
        return data


class GeocodingError(Exception):
    """Exception raised when geocoding fails."""

    def __init__(self, message: str, provider: str = "", query: str = ""):
        self.message = message
        self.provider = provider
        self.query = query
        super().__init__(f"[{provider}] {message}" if provider else message)


class UnsupportedOperation(GeocodingError):
    """The provider cannot handle this kind of query (IP vs. address, reverse)."""


class InvalidCredentials(GeocodingError):
    """The API key is missing or was rejected upstream."""


class QuotaExceeded(GeocodingError):
    """The upstream service reported a rate or credit limit."""


class NoResult(GeocodingError):
    """Nothing usable came back: empty, malformed, or a transport failure."""


class InvalidArgument(GeocodingError, ValueError):
    """A provider was constructed or called with invalid arguments."""


class BaseGeocoder(ABC):
    """
    Abstract base class for geocoding providers.

    Subclasses must implement:
    - provider_name: Name of the provider
    - _geocode_address() and/or _geocode_ip(), per the capability flags
    - _reverse() if supports_reverse is set

    Capability flags are checked by geocode()/reverse() before anything
    reaches the network, so an unsupported query never performs I/O.
    """

    #: Human readable name used in error messages
    display_name: str = ""

    supports_address: bool = True
    supports_ip: bool = False
    supports_ipv6: bool = True
    supports_reverse: bool = False
    short_circuits_localhost: bool = False

    #: Raised as InvalidCredentials when has_credentials() is false
    credentials_message: str = "No API Key provided"

    def __init__(self, adapter: Optional[HttpAdapter] = None):
        """
        Args:
            adapter: HTTP adapter used to reach the upstream service
                     (defaults to a RequestsAdapter built from settings)
        """
        self._adapter = adapter

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Name of the geocoding provider."""
        pass

    @property
    def adapter(self) -> HttpAdapter:
        if self._adapter is None:
            self._adapter = RequestsAdapter()
        return self._adapter

    def has_credentials(self) -> bool:
        """Whether the credentials the upstream service requires are configured."""
        return True

    def geocode(self, query: Optional[str]) -> List[GeocodingResult]:
        """
        Geocode a street address or an IP address.

        Args:
            query: Free-form address, or an IPv4/IPv6 literal

        Returns:
            Results in the order the upstream service returned them

        Raises:
            UnsupportedOperation: The provider does not handle this kind of query
            InvalidCredentials: Credentials are missing or rejected
            QuotaExceeded: The upstream service reported an exhausted quota
            NoResult: Nothing usable was returned
        """
        value = (query or "").strip()
        address = parse_ip(value)

        if not value:
            if self.supports_address:
                raise self._unsupported("does not support empty addresses.", value)
            raise self._unsupported("does not support street addresses.", value)

        if address is None:
            if not self.supports_address:
                raise self._unsupported("does not support street addresses.", value)
        else:
            if not self.supports_ip:
                raise self._unsupported("does not support IP addresses.", value)
            if address.version == 6 and not self.supports_ipv6:
                raise self._unsupported("does not support IPv6 addresses.", value)
            if self.short_circuits_localhost and address.is_loopback:
                logger.debug(f"{self.provider_name}: Loopback address {value}, skipping lookup")
                return [GeocodingResult.localhost(self.provider_name)]

        self._check_credentials(value)

        if address is None:
            return self._geocode_address(value)
        return self._geocode_ip(value)

    def reverse(self, latitude: Coordinate, longitude: Coordinate) -> List[GeocodingResult]:
        """
        Reverse geocode a pair of coordinates.

        Raises:
            UnsupportedOperation: The provider cannot reverse geocode
            InvalidArgument: The coordinates are not numeric
            InvalidCredentials, QuotaExceeded, NoResult: As for geocode()
        """
        query = f"{latitude}, {longitude}"
        if not self.supports_reverse:
            raise self._unsupported("is not able to do reverse geocoding.", query)

        lat = _to_float(latitude)
        lon = _to_float(longitude)
        if lat is None or lon is None:
            raise InvalidArgument(
                f"Invalid coordinates {query}",
                provider=self.provider_name,
                query=query,
            )

        self._check_credentials(query)
        return self._reverse(lat, lon)

    def _geocode_address(self, address: str) -> List[GeocodingResult]:
        raise NotImplementedError

    def _geocode_ip(self, ip: str) -> List[GeocodingResult]:
        raise NotImplementedError

    def _reverse(self, latitude: float, longitude: float) -> List[GeocodingResult]:
        raise NotImplementedError

    def _get_content(self, url: str) -> Optional[str]:
        """Fetch a URL through the adapter, mapping transport failures to NoResult."""
        logger.debug(f"{self.provider_name}: GET {url}")
        try:
            return self.adapter.get(url)
        except requests.RequestException as e:
            logger.warning(f"{self.provider_name}: Request failed for {url}: {e}")
            raise self._no_result(f"Could not execute query {url}", url) from e

    def _result(self, **values: Any) -> GeocodingResult:
        return GeocodingResult(provider=self.provider_name, **values)

    def _check_credentials(self, query: str) -> None:
        if not self.has_credentials():
            raise InvalidCredentials(
                self.credentials_message,
                provider=self.provider_name,
                query=query,
            )

    def _unsupported(self, reason: str, query: str) -> UnsupportedOperation:
        return UnsupportedOperation(
            f"The {self.display_name} provider {reason}",
            provider=self.provider_name,
            query=query,
        )

    def _no_result(self, message: str, query: str = "") -> NoResult:
        return NoResult(message, provider=self.provider_name, query=query)

    def _invalid_credentials(self, message: str, query: str = "") -> InvalidCredentials:
        return InvalidCredentials(message, provider=self.provider_name, query=query)

    def _quota_exceeded(self, message: str, query: str = "") -> QuotaExceeded:
        return QuotaExceeded(message, provider=self.provider_name, query=query)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.provider_name}>"


def results_as_dicts(results: List[GeocodingResult]) -> List[Dict[str, Any]]:
    """Serialize a result list for JSON output."""
    return [result.as_dict for result in results]
