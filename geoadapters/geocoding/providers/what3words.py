"""
what3words provider.

Converts 3 word addresses ("index.home.raft") to coordinates and back,
using the v2 API. API key required.
https://docs.what3words.com/api/v2/
"""

from typing import List, Optional
from urllib.parse import quote_plus

from geoadapters.core.utils.geo import format_coordinate
from geoadapters.geocoding.base import BaseGeocoder, Bounds, GeocodingResult
from geoadapters.geocoding.parsing import dig, load_json
from geoadapters.geocoding.transport import HttpAdapter

WHAT3WORDS_FORWARD_URL = "https://api.what3words.com/v2/forward?addr={address}&key={key}"
WHAT3WORDS_REVERSE_URL = "https://api.what3words.com/v2/reverse?coords={lat},{lon}&key={key}"

# Top-level `code` the API sends for a missing or invalid key
INVALID_KEY_CODE = 2


class What3wordsGeocoder(BaseGeocoder):
    """
    what3words provider. The 3 word address is returned as the locality.

    Usage:
        geocoder = What3wordsGeocoder(api_key="...")
        results = geocoder.geocode("index.home.raft")
    """

    display_name = "what3words"
    supports_reverse = True
    credentials_message = "No what3words API key provided."

    def __init__(self, api_key: Optional[str] = None, adapter: Optional[HttpAdapter] = None):
        super().__init__(adapter)
        self.api_key = api_key

    @property
    def provider_name(self) -> str:
        return "what3words"

    def has_credentials(self) -> bool:
        return bool(self.api_key)

    def _geocode_address(self, address: str) -> List[GeocodingResult]:
        url = WHAT3WORDS_FORWARD_URL.format(address=quote_plus(address), key=self.api_key)
        return self._execute_query(url)

    def _reverse(self, latitude: float, longitude: float) -> List[GeocodingResult]:
        url = WHAT3WORDS_REVERSE_URL.format(
            lat=format_coordinate(latitude),
            lon=format_coordinate(longitude),
            key=self.api_key,
        )
        return self._execute_query(url)

    def _execute_query(self, url: str) -> List[GeocodingResult]:
        data = load_json(self._get_content(url))
        if not data or not isinstance(data, dict):
            raise self._no_result(f"Could not execute query: {url}", url)

        if "status" not in data and data.get("code") == INVALID_KEY_CODE:
            raise self._invalid_credentials(f"Invalid credentials: {data.get('message')}", url)

        geometry = data.get("geometry")
        if not isinstance(geometry, dict):
            message = dig(data, "status", "message") or f"Could not find results for given query: {url}"
            raise self._no_result(message, url)

        return [self._result(
            latitude=geometry.get("lat"),
            longitude=geometry.get("lng"),
            bounds=Bounds.from_edges(
                south=dig(data, "bounds", "southwest", "lat"),
                west=dig(data, "bounds", "southwest", "lng"),
                north=dig(data, "bounds", "northeast", "lat"),
                east=dig(data, "bounds", "northeast", "lng"),
            ),
            locality=data.get("words"),
        )]
