"""
ip2c.org provider.

Country-level IPv4 lookup, no key required.
https://about.ip2c.org/
"""

import logging
from typing import List, Optional

from geoadapters.geocoding.base import BaseGeocoder, GeocodingResult
from geoadapters.geocoding.transport import HttpAdapter

logger = logging.getLogger(__name__)

IP2C_URL = "http://ip2c.org/?ip={ip}"

# Leading status field of the response
STATUS_INVALID_INPUT = "0"
STATUS_FOUND = "1"
STATUS_UNKNOWN = "2"


class Ip2cGeocoder(BaseGeocoder):
    """
    ip2c.org provider.

    The response is one line: `status;alpha2;alpha3;country name`.

    Usage:
        geocoder = Ip2cGeocoder()
        results = geocoder.geocode("88.188.221.14")
    """

    display_name = "Ip2c"
    supports_address = False
    supports_ip = True
    supports_ipv6 = False
    short_circuits_localhost = True

    def __init__(self, adapter: Optional[HttpAdapter] = None):
        super().__init__(adapter)

    @property
    def provider_name(self) -> str:
        return "ip2c"

    def _geocode_ip(self, ip: str) -> List[GeocodingResult]:
        url = IP2C_URL.format(ip=ip)

        content = (self._get_content(url) or "").strip()
        if not content:
            raise self._no_result(f"Could not execute query {url}", url)

        parts = content.split(";")
        status = parts[0].strip()

        if status == STATUS_INVALID_INPUT:
            raise self._no_result("Input string is not a valid IP address.", url)
        if status == STATUS_UNKNOWN or status != STATUS_FOUND or len(parts) < 4:
            raise self._no_result("Invalid result returned by provider.", url)

        return [self._result(country=parts[3], country_code=parts[1])]
