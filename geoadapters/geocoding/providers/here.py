"""
HERE geocoder provider.

Supports both HERE API generations, selected by the credentials given:

- Geocoder API 6.2, authenticated with an app_id/app_code pair
- Geocoding & Search API v1, authenticated with an apiKey

https://developer.here.com/documentation/geocoding-search-api/
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote_plus

from geoadapters.core.utils.geo import format_coordinate
from geoadapters.geocoding.base import BaseGeocoder, Bounds, GeocodingResult
from geoadapters.geocoding.parsing import dig, load_json
from geoadapters.geocoding.transport import HttpAdapter

logger = logging.getLogger(__name__)

# Geocoder API 6.2
HERE_GEOCODE_URL = (
    "http://geocoder.api.here.com/6.2/geocode.json"
    "?app_id={app_id}&app_code={app_code}&maxresults={limit}&searchtext={address}&gen=6"
)
HERE_REVERSE_URL = (
    "http://reverse.geocoder.api.here.com/6.2/reversegeocode.json"
    "?app_id={app_id}&app_code={app_code}&maxresults={limit}&prox={lat},{lon},100"
    "&gen=6&mode=retrieveAddresses"
)

# Geocoding & Search API v1
HERE_V1_GEOCODE_URL = "https://geocode.search.hereapi.com/v1/geocode?q={address}&apiKey={api_key}&limit={limit}"
HERE_V1_REVERSE_URL = "https://revgeocode.search.hereapi.com/v1/revgeocode?at={lat},{lon}&apiKey={api_key}&limit={limit}"


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


class HereGeocoder(BaseGeocoder):
    """
    HERE geocoder.

    An api_key selects the v1 API; otherwise app_id and app_code select
    the 6.2 API. With neither, every call raises InvalidCredentials.

    Usage:
        geocoder = HereGeocoder(api_key="...", locale="da")
        results = geocoder.geocode("Tagensvej 47, 2200 København N")
    """

    display_name = "Here"
    supports_reverse = True
    credentials_message = "No App ID or code provided."

    def __init__(
        self,
        app_id: Optional[str] = None,
        app_code: Optional[str] = None,
        api_key: Optional[str] = None,
        locale: Optional[str] = None,
        max_results: int = 5,
        adapter: Optional[HttpAdapter] = None,
    ):
        super().__init__(adapter)
        self.app_id = app_id
        self.app_code = app_code
        self.api_key = api_key
        self.locale = locale
        self.max_results = max_results

    @property
    def provider_name(self) -> str:
        return "here"

    @property
    def uses_v1(self) -> bool:
        return bool(self.api_key)

    def has_credentials(self) -> bool:
        return self.uses_v1 or bool(self.app_id and self.app_code)

    def _geocode_address(self, address: str) -> List[GeocodingResult]:
        if self.uses_v1:
            url = HERE_V1_GEOCODE_URL.format(
                address=quote_plus(address),
                api_key=self.api_key,
                limit=self.max_results,
            )
            return self._execute_v1_query(url)

        url = HERE_GEOCODE_URL.format(
            app_id=self.app_id,
            app_code=self.app_code,
            limit=self.max_results,
            address=quote_plus(address),
        )
        return self._execute_query(url)

    def _reverse(self, latitude: float, longitude: float) -> List[GeocodingResult]:
        lat, lon = format_coordinate(latitude), format_coordinate(longitude)

        if self.uses_v1:
            url = HERE_V1_REVERSE_URL.format(lat=lat, lon=lon, api_key=self.api_key, limit=self.max_results)
            return self._execute_v1_query(url)

        url = HERE_REVERSE_URL.format(
            app_id=self.app_id,
            app_code=self.app_code,
            limit=self.max_results,
            lat=lat,
            lon=lon,
        )
        return self._execute_query(url)

    # --- 6.2 ---

    def _execute_query(self, url: str) -> List[GeocodingResult]:
        if self.locale:
            url = f"{url}&language={self.locale}"

        data = load_json(self._get_content(url))
        if not data or not isinstance(data, dict):
            raise self._no_result(f"Could not execute query: {url}", url)

        if "Response" not in data:
            if data.get("subtype") == "InvalidCredentials":
                raise self._invalid_credentials(f"Invalid credentials: {data.get('details')}", url)
            raise self._no_result(
                f"Error type `{data.get('subtype')}` returned from api `{data.get('Details')}`", url
            )

        views = dig(data, "Response", "View")
        if not views:
            raise self._no_result(f"Could not find results for given query: {url}", url)

        view = views[0] if isinstance(views, list) else None
        entries = view.get("Result") if isinstance(view, dict) else None
        if not isinstance(entries, list) or not all(isinstance(item, dict) for item in entries):
            raise self._no_result(f"Could not execute query: {url}", url)

        return [self._parse_location(_mapping(item.get("Location"))) for item in entries]

    def _parse_location(self, location: Dict[str, Any]) -> GeocodingResult:
        position = _mapping(dig(location, "NavigationPosition", 0) or location.get("DisplayPosition"))
        view = _mapping(location.get("MapView"))
        address = _mapping(location.get("Address"))
        entries = address.get("AdditionalData")
        additional = {
            entry.get("key"): entry.get("value")
            for entry in (entries if isinstance(entries, list) else [])
            if isinstance(entry, dict)
        }

        return self._result(
            latitude=position.get("Latitude"),
            longitude=position.get("Longitude"),
            bounds=Bounds.from_edges(
                south=dig(view, "BottomRight", "Latitude"),
                west=dig(view, "TopLeft", "Longitude"),
                north=dig(view, "TopLeft", "Latitude"),
                east=dig(view, "BottomRight", "Longitude"),
            ),
            street_number=address.get("HouseNumber"),
            street_name=address.get("Street"),
            locality=address.get("City"),
            city_district=address.get("District"),
            zipcode=address.get("PostalCode"),
            county=address.get("County"),
            region=additional.get("StateName"),
            region_code=address.get("State"),
            country=additional.get("CountryName"),
            country_code=address.get("Country"),
        )

    # --- v1 ---

    def _execute_v1_query(self, url: str) -> List[GeocodingResult]:
        if self.locale:
            url = f"{url}&lang={self.locale}"

        data = load_json(self._get_content(url))
        if not data or not isinstance(data, dict):
            raise self._no_result(f"Could not execute query: {url}", url)

        if "items" not in data:
            self._raise_v1_error(data, url)

        items = data.get("items")
        if not items:
            raise self._no_result(f"Could not find results for given query: {url}", url)
        if not isinstance(items, list):
            raise self._no_result(f"Could not execute query: {url}", url)

        results = [self._parse_item(item) for item in items if isinstance(item, dict)]
        if not results:
            raise self._no_result(f"Could not execute query: {url}", url)
        return results

    def _raise_v1_error(self, data: Dict[str, Any], url: str) -> None:
        status = data.get("status")
        details = data.get("error_description") or data.get("cause") or data.get("title")

        if status == 401 or data.get("error") == "Unauthorized":
            raise self._invalid_credentials(f"Invalid credentials: {details}", url)
        if status == 429 or data.get("error") == "Too Many Requests":
            raise self._quota_exceeded(f"Rate limit exceeded: {details}", url)

        error_type = data.get("title") or data.get("error")
        raise self._no_result(f"Error type `{error_type}` returned from api `{details}`", url)

    def _parse_item(self, item: Dict[str, Any]) -> GeocodingResult:
        position = _mapping(dig(item, "access", 0) or item.get("position"))
        view = _mapping(item.get("mapView"))
        address = _mapping(item.get("address"))

        return self._result(
            latitude=position.get("lat"),
            longitude=position.get("lng"),
            bounds=Bounds.from_edges(
                south=view.get("south"),
                west=view.get("west"),
                north=view.get("north"),
                east=view.get("east"),
            ),
            street_number=address.get("houseNumber"),
            street_name=address.get("street"),
            locality=address.get("city"),
            city_district=address.get("district"),
            zipcode=address.get("postalCode"),
            county=address.get("county"),
            region=address.get("state"),
            region_code=address.get("stateCode"),
            country=address.get("countryName"),
            country_code=address.get("countryCode"),
        )
