"""
Naver Maps geocoder provider.

Address geocoding for South Korea, API key required.
"""

from typing import List, Optional
from urllib.parse import quote

from geoadapters.geocoding.base import BaseGeocoder, GeocodingResult
from geoadapters.geocoding.parsing import find_text, load_xml, own_text
from geoadapters.geocoding.transport import HttpAdapter

NAVER_URL = "http://openapi.map.naver.com/api/geocode.php?key={key}&encoding=utf-8&coord=latlng&query={address}"


class NaverGeocoder(BaseGeocoder):
    """
    Naver Maps geocoder.

    The service nests address levels (sido > sigugun > dongmyun > rest),
    each element holding its own name as text before the next level.
    Latitude is read from point/x and longitude from point/y, the way the
    service populates them for coord=latlng.
    """

    display_name = "Naver"

    def __init__(self, api_key: Optional[str] = None, adapter: Optional[HttpAdapter] = None):
        super().__init__(adapter)
        self.api_key = api_key

    @property
    def provider_name(self) -> str:
        return "naver"

    def has_credentials(self) -> bool:
        return bool(self.api_key)

    def _geocode_address(self, address: str) -> List[GeocodingResult]:
        url = NAVER_URL.format(key=self.api_key, address=quote(address, safe=""))

        doc = load_xml(self._get_content(url))
        if doc is None:
            raise self._no_result(f"Could not execute query {url}", url)

        try:
            total = int(find_text(doc, "total") or 0)
        except ValueError:
            total = 0
        item = doc.find("item")
        if total == 0 or item is None:
            raise self._no_result(f"Could not execute query {url}", url)

        sido = item.find("addrdetail/sido")
        sigugun = sido.find("sigugun") if sido is not None else None
        dongmyun = sigugun.find("dongmyun") if sigugun is not None else None
        rest = dongmyun.find("rest") if dongmyun is not None else None

        return [self._result(
            latitude=find_text(item, "point/x"),
            longitude=find_text(item, "point/y"),
            region=own_text(sido),
            locality=own_text(sigugun),
            street_name=own_text(dongmyun),
            street_number=own_text(rest),
        )]
