"""
US Census Bureau Geocoder provider, registered as `geocoder_us`.

Free, unlimited geocoding service optimized for US addresses. It replaces
the retired geocoder.us service under the same provider name.
https://geocoding.geo.census.gov/geocoder/
"""

import logging
from typing import List, Optional
from urllib.parse import quote_plus

from geoadapters.geocoding.base import BaseGeocoder, GeocodingResult
from geoadapters.geocoding.parsing import dig, load_json
from geoadapters.geocoding.transport import HttpAdapter

logger = logging.getLogger(__name__)

CENSUS_GEOCODER_URL = (
    "http://geocoding.geo.census.gov/geocoder/locations/onelineaddress"
    "?format=json&benchmark=Public_AR_Current&address={address}"
)


class GeocoderUsGeocoder(BaseGeocoder):
    """
    US Census Bureau Geocoder.

    Pros:
    - Free and unlimited
    - Good accuracy for US addresses
    - No API key required

    Cons:
    - US only
    - No reverse geocoding on the one-line endpoint

    Usage:
        geocoder = GeocoderUsGeocoder()
        results = geocoder.geocode("1600 Pennsylvania Ave, Washington, DC")
    """

    display_name = "GeocoderUs"

    def __init__(self, adapter: Optional[HttpAdapter] = None):
        super().__init__(adapter)

    @property
    def provider_name(self) -> str:
        return "geocoder_us"

    def _geocode_address(self, address: str) -> List[GeocodingResult]:
        url = CENSUS_GEOCODER_URL.format(address=quote_plus(address))

        data = load_json(self._get_content(url))
        if not isinstance(data, dict):
            raise self._no_result(f"Could not execute query {url}", url)

        # Check for matches
        matches = dig(data, "result", "addressMatches")
        if not matches:
            logger.debug(f"Census: No match for {address}")
            raise self._no_result(f"Could not find results for given query: {url}", url)

        return [self._parse_match(match) for match in matches]

    def _parse_match(self, match: dict) -> GeocodingResult:
        coords = match.get("coordinates") or {}
        components = match.get("addressComponents") or {}

        return self._result(
            latitude=coords.get("y"),
            longitude=coords.get("x"),
            street_name=components.get("streetName"),
            zipcode=components.get("zip"),
            locality=components.get("city"),
            region_code=components.get("state"),
            country_code="US",
        )
