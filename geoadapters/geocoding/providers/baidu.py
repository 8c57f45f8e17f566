"""
Baidu Maps geocoder provider.

Address and reverse geocoding for China, API key required.
http://lbsyun.baidu.com/index.php?title=webapi/guide/webservice-geocoding
"""

import logging
from typing import List, Optional
from urllib.parse import quote

from geoadapters.core.utils.geo import format_coordinate
from geoadapters.geocoding.base import BaseGeocoder, GeocodingResult
from geoadapters.geocoding.parsing import dig, load_json
from geoadapters.geocoding.transport import HttpAdapter

logger = logging.getLogger(__name__)

BAIDU_GEOCODE_URL = "http://api.map.baidu.com/geocoder/v2/?output=json&pois=0&ak={key}&address={address}"
BAIDU_REVERSE_URL = "http://api.map.baidu.com/geocoder/v2/?output=json&pois=0&ak={key}&location={lat},{lon}"

# Numeric status codes of the v2 API
_INVALID_KEY_STATUSES = {101, 102}
_QUOTA_STATUSES = {302, 401, 402}


class BaiduGeocoder(BaseGeocoder):
    """
    Baidu Maps Geocoder (v2 API).

    Usage:
        geocoder = BaiduGeocoder(api_key="...")
        results = geocoder.geocode("北京市海淀区上地十街10号")
    """

    display_name = "Baidu"
    supports_reverse = True

    def __init__(self, api_key: Optional[str] = None, adapter: Optional[HttpAdapter] = None):
        super().__init__(adapter)
        self.api_key = api_key

    @property
    def provider_name(self) -> str:
        return "baidu"

    def has_credentials(self) -> bool:
        return bool(self.api_key)

    def _geocode_address(self, address: str) -> List[GeocodingResult]:
        url = BAIDU_GEOCODE_URL.format(key=self.api_key, address=quote(address, safe=""))
        return self._execute_query(url)

    def _reverse(self, latitude: float, longitude: float) -> List[GeocodingResult]:
        url = BAIDU_REVERSE_URL.format(
            key=self.api_key,
            lat=format_coordinate(latitude),
            lon=format_coordinate(longitude),
        )
        return self._execute_query(url)

    def _execute_query(self, url: str) -> List[GeocodingResult]:
        data = load_json(self._get_content(url))
        if not data or not isinstance(data, dict):
            raise self._no_result(f"Could not execute query {url}", url)

        self._check_status(data.get("status"), url)

        result = data.get("result")
        if not isinstance(result, dict):
            raise self._no_result(f"Could not execute query {url}", url)

        return [self._parse_result(result)]

    def _check_status(self, status, url: str) -> None:
        if status == "INVALID_KEY":
            raise self._invalid_credentials("API Key provided is not valid.", url)

        try:
            code = int(status)
        except (TypeError, ValueError):
            return

        if code == 0:
            return
        if code in _INVALID_KEY_STATUSES or 200 <= code < 300:
            raise self._invalid_credentials("API Key provided is not valid.", url)
        if code in _QUOTA_STATUSES:
            raise self._quota_exceeded(f"Daily quota exceeded (status {code}) {url}", url)

        logger.debug(f"Baidu: Status {code} for {url}")
        raise self._no_result(f"Could not execute query {url}", url)

    def _parse_result(self, result: dict) -> GeocodingResult:
        component = result.get("addressComponent") or {}
        return self._result(
            latitude=dig(result, "location", "lat"),
            longitude=dig(result, "location", "lng"),
            street_number=component.get("street_number"),
            street_name=component.get("street"),
            locality=component.get("city"),
            city_district=component.get("district"),
            county=component.get("province"),
            county_code=result.get("cityCode"),
        )
