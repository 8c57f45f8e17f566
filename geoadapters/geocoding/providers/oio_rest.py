"""
OIORest provider for Danish addresses.

Address and reverse geocoding against geo.oiorest.dk. No key.
"""

from typing import Any, Dict, List, Optional
from urllib.parse import quote

from geoadapters.core.utils.geo import format_coordinate
from geoadapters.geocoding.base import BaseGeocoder, GeocodingResult
from geoadapters.geocoding.parsing import dig, load_json
from geoadapters.geocoding.transport import HttpAdapter

OIOREST_GEOCODE_URL = "http://geo.oiorest.dk/adresser.json?q={address}"
OIOREST_REVERSE_URL = "http://geo.oiorest.dk/adresser/{lat},{lon}.json"


class OIORestGeocoder(BaseGeocoder):
    """
    OIORest provider.

    Geocoding answers with a list of addresses, reverse geocoding with a
    single address object.
    """

    display_name = "OIORest"
    supports_reverse = True

    def __init__(self, adapter: Optional[HttpAdapter] = None):
        super().__init__(adapter)

    @property
    def provider_name(self) -> str:
        return "oio_rest"

    def _geocode_address(self, address: str) -> List[GeocodingResult]:
        url = OIOREST_GEOCODE_URL.format(address=quote(address, safe=""))

        data = self._execute_query(url)
        if not isinstance(data, list):
            raise self._no_result(f"Could not execute query {url}", url)

        return [self._parse_address(item) for item in data if isinstance(item, dict)]

    def _reverse(self, latitude: float, longitude: float) -> List[GeocodingResult]:
        url = OIOREST_REVERSE_URL.format(
            lat=format_coordinate(latitude),
            lon=format_coordinate(longitude),
        )

        data = self._execute_query(url)
        if not isinstance(data, dict):
            raise self._no_result(f"Could not execute query {url}", url)

        return [self._parse_address(data)]

    def _execute_query(self, url: str) -> Any:
        data = load_json(self._get_content(url))
        if not data:
            raise self._no_result(f"Could not execute query {url}", url)
        return data

    def _parse_address(self, data: Dict[str, Any]) -> GeocodingResult:
        return self._result(
            latitude=dig(data, "wgs84koordinat", "bredde"),
            longitude=dig(data, "wgs84koordinat", "længde"),
            street_number=data.get("husnr"),
            street_name=dig(data, "vejnavn", "navn"),
            locality=dig(data, "postnummer", "navn"),
            zipcode=dig(data, "postnummer", "nr"),
            city_district=dig(data, "kommune", "navn"),
            region=dig(data, "region", "navn"),
            region_code=dig(data, "region", "nr"),
            country="Denmark",
            country_code="DK",
            timezone="Europe/Copenhagen",
        )
