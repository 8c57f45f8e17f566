"""
Geocoding module with one adapter per upstream service.

Every provider implements the same interface and returns the same
normalized GeocodingResult:
- Address providers: Baidu, GeocoderCa, GeocoderUs (US Census), Here,
  Naver, OGD Vienna, OIORest, what3words
- IP providers: Ip2c, IpInfo, Telize, IpGeoBase (web and local files)
- Both: Data Science Toolkit

Usage:
    from geoadapters.geocoding import IpInfoGeocoder, geocode_address

    # Using specific provider
    geocoder = IpInfoGeocoder()
    results = geocoder.geocode("88.188.221.14")

    # Using convenience function
    results = geocode_address("1600 Pennsylvania Ave, Washington, DC", provider="geocoder_us")
"""

from geoadapters.geocoding.base import (
    Bounds,
    GeocodingResult,
    GeocodingError,
    UnsupportedOperation,
    InvalidCredentials,
    QuotaExceeded,
    NoResult,
    InvalidArgument,
    BaseGeocoder,
)
from geoadapters.geocoding.file_search import FileBinaryLineSearch
from geoadapters.geocoding.transport import HttpAdapter, RequestsAdapter
from geoadapters.geocoding.providers import (
    BaiduGeocoder,
    DataScienceToolkitGeocoder,
    GeocoderCaGeocoder,
    GeocoderUsGeocoder,
    HereGeocoder,
    Ip2cGeocoder,
    IpGeoBaseGeocoder,
    IpGeoBaseFilesGeocoder,
    IpInfoGeocoder,
    NaverGeocoder,
    OGDViennaAustriaGeocoder,
    OIORestGeocoder,
    TelizeGeocoder,
    What3wordsGeocoder,
)
from geoadapters.geocoding.facade import (
    available_providers,
    compare_providers,
    geocode_address,
    get_geocoder,
    reverse_geocode,
)

__all__ = [
    # Base classes
    "Bounds",
    "GeocodingResult",
    "GeocodingError",
    "UnsupportedOperation",
    "InvalidCredentials",
    "QuotaExceeded",
    "NoResult",
    "InvalidArgument",
    "BaseGeocoder",
    # Infrastructure
    "FileBinaryLineSearch",
    "HttpAdapter",
    "RequestsAdapter",
    # Providers
    "BaiduGeocoder",
    "DataScienceToolkitGeocoder",
    "GeocoderCaGeocoder",
    "GeocoderUsGeocoder",
    "HereGeocoder",
    "Ip2cGeocoder",
    "IpGeoBaseGeocoder",
    "IpGeoBaseFilesGeocoder",
    "IpInfoGeocoder",
    "NaverGeocoder",
    "OGDViennaAustriaGeocoder",
    "OIORestGeocoder",
    "TelizeGeocoder",
    "What3wordsGeocoder",
    # Convenience functions
    "available_providers",
    "compare_providers",
    "geocode_address",
    "get_geocoder",
    "reverse_geocode",
]
