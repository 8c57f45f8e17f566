"""
Telize provider.

IPv4 and IPv6 lookup with region and timezone data.
"""

import logging
from typing import List, Optional

from geoadapters.geocoding.base import BaseGeocoder, GeocodingResult
from geoadapters.geocoding.parsing import load_json
from geoadapters.geocoding.transport import HttpAdapter

logger = logging.getLogger(__name__)

TELIZE_URL = "http://www.telize.com/geoip/{ip}"


class TelizeGeocoder(BaseGeocoder):
    """
    Telize provider.

    Usage:
        geocoder = TelizeGeocoder()
        results = geocoder.geocode("74.200.247.59")
    """

    display_name = "Telize"
    supports_address = False
    supports_ip = True
    short_circuits_localhost = True

    def __init__(self, adapter: Optional[HttpAdapter] = None):
        super().__init__(adapter)

    @property
    def provider_name(self) -> str:
        return "telize"

    def _geocode_ip(self, ip: str) -> List[GeocodingResult]:
        url = TELIZE_URL.format(ip=ip)

        data = load_json(self._get_content(url))
        if not data or not isinstance(data, dict):
            raise self._no_result(f"Could not execute query {url}", url)

        # Errors come back as {"code": 401, "message": "..."}
        if "code" in data:
            logger.debug(f"Telize: {data.get('message')} for {url}")
            raise self._no_result(f"Could not execute query {url}", url)

        return [self._result(
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            locality=data.get("city"),
            zipcode=data.get("postal_code"),
            region=data.get("region"),
            region_code=data.get("region_code"),
            country=data.get("country"),
            country_code=data.get("country_code"),
            timezone=data.get("timezone"),
        )]
