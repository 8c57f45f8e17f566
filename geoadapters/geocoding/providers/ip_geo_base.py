"""
IpGeoBase web service provider.

City-level IPv4 lookup for Russia and Ukraine.
http://ipgeobase.ru/
"""

from typing import List, Optional

from geoadapters.geocoding.base import BaseGeocoder, GeocodingResult
from geoadapters.geocoding.parsing import find_text, load_xml
from geoadapters.geocoding.transport import HttpAdapter

IPGEOBASE_URL = "http://ipgeobase.ru:7020/geo?ip={ip}"


class IpGeoBaseGeocoder(BaseGeocoder):
    """
    IpGeoBase web service.

    Answers with `<ip-answer><ip>` holding country, city, region, lat and
    lng, or a `<message>` when the address is unknown.
    """

    display_name = "IpGeoBase"
    supports_address = False
    supports_ip = True
    supports_ipv6 = False
    short_circuits_localhost = True

    def __init__(self, adapter: Optional[HttpAdapter] = None):
        super().__init__(adapter)

    @property
    def provider_name(self) -> str:
        return "ip_geo_base"

    def _geocode_ip(self, ip: str) -> List[GeocodingResult]:
        url = IPGEOBASE_URL.format(ip=ip)

        doc = load_xml(self._get_content(url))
        if doc is None or find_text(doc, "message") == "Not found":
            raise self._no_result(f"Could not execute query {url}", url)

        node = doc.find("ip")
        if node is None:
            raise self._no_result(f"Could not execute query {url}", url)

        return [self._result(
            latitude=find_text(node, "lat"),
            longitude=find_text(node, "lng"),
            locality=find_text(node, "city"),
            region=find_text(node, "region"),
            country_code=find_text(node, "country"),
        )]
