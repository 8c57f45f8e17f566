"""
Geocoding facade providing a simple interface to all providers.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from geoadapters.core import settings
from geoadapters.core.utils.geo import haversine_distance
from geoadapters.geocoding.base import BaseGeocoder, GeocodingError, GeocodingResult, NoResult
from geoadapters.geocoding.providers import (
    BaiduGeocoder,
    DataScienceToolkitGeocoder,
    GeocoderCaGeocoder,
    GeocoderUsGeocoder,
    HereGeocoder,
    Ip2cGeocoder,
    IpGeoBaseFilesGeocoder,
    IpGeoBaseGeocoder,
    IpInfoGeocoder,
    NaverGeocoder,
    OGDViennaAustriaGeocoder,
    OIORestGeocoder,
    TelizeGeocoder,
    What3wordsGeocoder,
)
from geoadapters.geocoding.transport import HttpAdapter

logger = logging.getLogger(__name__)

Coordinate = Union[float, int, str]

# name -> (geocoder class, constructor options read from settings)
_REGISTRY: Dict[str, tuple] = {
    "baidu": (BaiduGeocoder, lambda: {"api_key": settings.BAIDU_API_KEY}),
    "data_science_toolkit": (DataScienceToolkitGeocoder, dict),
    "geocoder_ca": (
        GeocoderCaGeocoder,
        lambda: {"use_ssl": settings.GEOCODER_CA_USE_SSL, "api_key": settings.GEOCODER_CA_API_KEY},
    ),
    "geocoder_us": (GeocoderUsGeocoder, dict),
    "here": (
        HereGeocoder,
        lambda: {
            "app_id": settings.HERE_APP_ID,
            "app_code": settings.HERE_APP_CODE,
            "api_key": settings.HERE_API_KEY,
            "locale": settings.GEOCODER_LOCALE,
            "max_results": settings.GEOCODER_MAX_RESULTS,
        },
    ),
    "ip2c": (Ip2cGeocoder, dict),
    "ip_geo_base": (IpGeoBaseGeocoder, dict),
    "ip_geo_base_files": (
        IpGeoBaseFilesGeocoder,
        lambda: {"cidr_file": settings.IPGEOBASE_CIDR_FILE, "city_file": settings.IPGEOBASE_CITY_FILE},
    ),
    "ip_info": (IpInfoGeocoder, dict),
    "naver": (NaverGeocoder, lambda: {"api_key": settings.NAVER_API_KEY}),
    "ogd_vienna_austria": (OGDViennaAustriaGeocoder, dict),
    "oio_rest": (OIORestGeocoder, dict),
    "telize": (TelizeGeocoder, dict),
    "what3words": (What3wordsGeocoder, lambda: {"api_key": settings.WHAT3WORDS_API_KEY}),
}

# Providers that read local files and take no HTTP adapter
_LOCAL_PROVIDERS = {"ip_geo_base_files"}


def available_providers() -> List[str]:
    """Names accepted by get_geocoder(), sorted."""
    return sorted(_REGISTRY)


def get_geocoder(provider: str, adapter: Optional[HttpAdapter] = None, **overrides: Any) -> BaseGeocoder:
    """
    Get a geocoder instance by provider name.

    Args:
        provider: Provider name, one of available_providers()
        adapter: HTTP adapter to inject (network providers only)
        **overrides: Constructor options replacing the configured ones,
                     e.g. api_key="..."

    Returns:
        Geocoder instance

    Raises:
        ValueError: Unknown provider name
        InvalidArgument: The provider rejected its configuration
    """
    if provider not in _REGISTRY:
        raise ValueError(f"Unknown provider: {provider}. Choose from: {available_providers()}")

    geocoder_class, configured = _REGISTRY[provider]
    options: Dict[str, Any] = {**configured(), **overrides}
    if adapter is not None and provider not in _LOCAL_PROVIDERS:
        options["adapter"] = adapter

    return geocoder_class(**options)


def _with_fallbacks(
    call: Callable[[BaseGeocoder], List[GeocodingResult]],
    provider: str,
    fallback_providers: Optional[List[str]],
    adapter: Optional[HttpAdapter],
) -> List[GeocodingResult]:
    """Run `call` on each provider in turn until one returns results."""
    chain = [provider] + [p for p in (fallback_providers or []) if p != provider]

    last_error: Optional[NoResult] = None
    for name in chain:
        geocoder = get_geocoder(name, adapter=adapter)
        try:
            results = call(geocoder)
        except NoResult as e:
            last_error = e
            logger.info(f"{name}: {e.message}; trying next provider")
            continue

        if results:
            return results
        last_error = NoResult("No results returned", provider=name)

    raise last_error


def geocode_address(
    query: str,
    provider: str = "geocoder_us",
    fallback_providers: Optional[List[str]] = None,
    adapter: Optional[HttpAdapter] = None,
) -> List[GeocodingResult]:
    """
    Geocode an address or IP with optional fallback providers.

    Only NoResult moves on to the next provider; every other
    GeocodingError propagates immediately.

    Args:
        query: Street address or IP literal
        provider: Primary provider to use
        fallback_providers: Providers to try if the primary finds nothing
        adapter: HTTP adapter shared by every provider in the chain

    Returns:
        Results of the first provider that found any

    Raises:
        NoResult: No provider in the chain found anything (the last error)

    Example:
        results = geocode_address(
            "1600 Pennsylvania Ave, Washington, DC",
            provider="geocoder_us",
            fallback_providers=["geocoder_ca"]
        )
    """
    return _with_fallbacks(lambda g: g.geocode(query), provider, fallback_providers, adapter)


def reverse_geocode(
    latitude: Coordinate,
    longitude: Coordinate,
    provider: str = "oio_rest",
    fallback_providers: Optional[List[str]] = None,
    adapter: Optional[HttpAdapter] = None,
) -> List[GeocodingResult]:
    """Reverse geocode coordinates, falling back like geocode_address()."""
    return _with_fallbacks(
        lambda g: g.reverse(latitude, longitude), provider, fallback_providers, adapter
    )


def compare_providers(
    query: str,
    providers: List[str],
    adapter: Optional[HttpAdapter] = None,
) -> Dict[str, Optional[List[GeocodingResult]]]:
    """
    Compare geocoding results from multiple providers.

    Useful for validating accuracy or finding discrepancies. A provider
    that fails is reported as None rather than aborting the comparison.

    Args:
        query: Address or IP to geocode
        providers: Provider names to compare
        adapter: HTTP adapter to inject

    Returns:
        Dict mapping provider name to its results, or None on failure
    """
    results: Dict[str, Optional[List[GeocodingResult]]] = {}
    for provider in providers:
        try:
            results[provider] = get_geocoder(provider, adapter=adapter).geocode(query)
        except GeocodingError as e:
            logger.warning(f"{provider}: {e}")
            results[provider] = None

    # Calculate distances between first results
    located = {
        name: found[0]
        for name, found in results.items()
        if found and found[0].latitude is not None
    }
    names = list(located)
    for i, p1 in enumerate(names):
        for p2 in names[i + 1:]:
            r1, r2 = located[p1], located[p2]
            dist = haversine_distance(r1.latitude, r1.longitude, r2.latitude, r2.longitude)
            logger.info(f"Distance {p1} vs {p2}: {dist:.1f}m")

    return results
