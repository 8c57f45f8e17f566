"""
ipinfo.io provider.

City-level IPv4 and IPv6 lookup.
https://ipinfo.io/developers
"""

from typing import List, Optional

from geoadapters.geocoding.base import BaseGeocoder, GeocodingResult
from geoadapters.geocoding.parsing import load_json
from geoadapters.geocoding.transport import HttpAdapter

IPINFO_URL = "http://ipinfo.io/{ip}/json"


class IpInfoGeocoder(BaseGeocoder):
    """ipinfo.io provider; `loc` carries the coordinates as "lat,lon"."""

    display_name = "IpInfo"
    supports_address = False
    supports_ip = True
    short_circuits_localhost = True

    def __init__(self, adapter: Optional[HttpAdapter] = None):
        super().__init__(adapter)

    @property
    def provider_name(self) -> str:
        return "ip_info"

    def _geocode_ip(self, ip: str) -> List[GeocodingResult]:
        url = IPINFO_URL.format(ip=ip)

        data = load_json(self._get_content(url))
        if not isinstance(data, dict) or not data.get("loc"):
            raise self._no_result(f"Could not execute query {url}", url)

        latitude, _, longitude = str(data["loc"]).partition(",")

        return [self._result(
            latitude=latitude,
            longitude=longitude,
            locality=data.get("city"),
            zipcode=data.get("postal"),
            region=data.get("region"),
            country_code=data.get("country"),
        )]
