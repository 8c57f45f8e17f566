"""
Data Science Toolkit provider.

Street addresses (US and UK) and IPv4 lookups against the public
datasciencetoolkit.org instance, or a self-hosted one.
http://www.datasciencetoolkit.org/developerdocs
"""

import logging
from typing import Any, List, Optional
from urllib.parse import quote_plus

from geoadapters.geocoding.base import BaseGeocoder, GeocodingResult
from geoadapters.geocoding.parsing import load_json
from geoadapters.geocoding.transport import HttpAdapter

logger = logging.getLogger(__name__)

DSTK_BASE_URL = "http://www.datasciencetoolkit.org"
DSTK_IP_PATH = "/ip2coordinates/{ip}"
DSTK_ADDRESS_PATH = "/street2coordinates/{address}"


class DataScienceToolkitGeocoder(BaseGeocoder):
    """
    Data Science Toolkit provider.

    Both endpoints answer with an object keyed by the query, whose value is
    null when nothing matched.

    Usage:
        geocoder = DataScienceToolkitGeocoder()
        results = geocoder.geocode("2543 Graystone Place, Simi Valley, CA 93065")
    """

    display_name = "DataScienceToolkit"
    supports_ip = True
    supports_ipv6 = False
    short_circuits_localhost = True

    def __init__(self, base_url: str = DSTK_BASE_URL, adapter: Optional[HttpAdapter] = None):
        super().__init__(adapter)
        self.base_url = base_url.rstrip("/")

    @property
    def provider_name(self) -> str:
        return "data_science_toolkit"

    def _geocode_ip(self, ip: str) -> List[GeocodingResult]:
        url = self.base_url + DSTK_IP_PATH.format(ip=ip)
        return self._execute_query(url, ip)

    def _geocode_address(self, address: str) -> List[GeocodingResult]:
        url = self.base_url + DSTK_ADDRESS_PATH.format(address=quote_plus(address))
        return self._execute_query(url, address)

    def _execute_query(self, url: str, query: str) -> List[GeocodingResult]:
        data = load_json(self._get_content(url))
        if not data or not isinstance(data, dict):
            raise self._no_result(f"Could not execute query {url}", url)

        entry = self._find_entry(data, query)
        if not isinstance(entry, dict):
            raise self._no_result(f"Could not execute query {url}", url)

        return [self._result(
            latitude=entry.get("latitude"),
            longitude=entry.get("longitude"),
            street_number=entry.get("street_number"),
            street_name=entry.get("street_name"),
            locality=entry.get("locality"),
            zipcode=entry.get("postal_code"),
            region=entry.get("region"),
            country=entry.get("country_name"),
            country_code=entry.get("country_code"),
        )]

    @staticmethod
    def _find_entry(data: dict, query: str) -> Any:
        if query in data:
            return data[query]
        # The service may echo a normalized key for a single query
        if len(data) == 1:
            return next(iter(data.values()))
        return None
