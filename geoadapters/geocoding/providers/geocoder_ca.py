"""
Geocoder.ca provider.

Address and reverse geocoding for Canada and the US. The auth token is
optional; anonymous requests are throttled.
https://geocoder.ca/?api=1
"""

import logging
from typing import List, Optional
from urllib.parse import quote_plus
from xml.etree.ElementTree import Element

from geoadapters.core.utils.geo import format_coordinate, format_number
from geoadapters.geocoding.base import BaseGeocoder, GeocodingResult
from geoadapters.geocoding.parsing import find_text, load_xml
from geoadapters.geocoding.transport import HttpAdapter

logger = logging.getLogger(__name__)

GEOCODER_CA_GEOCODE_URL = "{scheme}://geocoder.ca/?geoit=xml&locate={address}&auth={key}"
GEOCODER_CA_REVERSE_URL = "{scheme}://geocoder.ca/?geoit=xml&reverse=1&latt={lat}&longt={lon}&auth={key}"

_INVALID_TOKEN_CODES = {"001", "003"}
_NO_CREDITS_CODE = "002"


class GeocoderCaGeocoder(BaseGeocoder):
    """
    Geocoder.ca provider.

    Usage:
        geocoder = GeocoderCaGeocoder(use_ssl=True, api_key="...")
        results = geocoder.geocode("4208 Gallaghers, Kelowna, BC")
    """

    display_name = "GeocoderCa"
    supports_reverse = True

    def __init__(
        self,
        use_ssl: bool = False,
        api_key: Optional[str] = None,
        adapter: Optional[HttpAdapter] = None,
    ):
        super().__init__(adapter)
        self.scheme = "https" if use_ssl else "http"
        self.api_key = api_key

    @property
    def provider_name(self) -> str:
        return "geocoder_ca"

    def _geocode_address(self, address: str) -> List[GeocodingResult]:
        url = GEOCODER_CA_GEOCODE_URL.format(
            scheme=self.scheme,
            address=quote_plus(address),
            key=self.api_key or "",
        )
        doc = self._handle_query(url, f"Could not execute query {url}")

        return [self._result(
            latitude=find_text(doc, "latt"),
            longitude=find_text(doc, "longt"),
        )]

    def _reverse(self, latitude: float, longitude: float) -> List[GeocodingResult]:
        url = GEOCODER_CA_REVERSE_URL.format(
            scheme=self.scheme,
            lat=format_coordinate(latitude),
            lon=format_coordinate(longitude),
            key=self.api_key or "",
        )
        failure = f"Could not resolve coordinates {format_number(latitude)}, {format_number(longitude)}"
        doc = self._handle_query(url, failure)

        return [self._result(
            latitude=find_text(doc, "latt"),
            longitude=find_text(doc, "longt"),
            street_number=find_text(doc, "stnumber"),
            street_name=find_text(doc, "staddress"),
            locality=find_text(doc, "city"),
            zipcode=find_text(doc, "postal"),
            city_district=find_text(doc, "prov"),
        )]

    def _handle_query(self, url: str, failure: str) -> Element:
        """
        Fetch and parse a response.

        Raises the credential and quota errors the service reports in its
        <error> element; any other failure is a NoResult with `failure`.
        """
        doc = load_xml(self._get_content(url))

        if doc is not None and doc.tag != "error" and doc.find(".//error") is None:
            return doc

        code = find_text(doc, "code")
        if code in _INVALID_TOKEN_CODES:
            raise self._invalid_credentials(f"Invalid authentification token {url}", url)
        if code == _NO_CREDITS_CODE:
            raise self._quota_exceeded(f"Account ran out of credits {url}", url)

        logger.debug(f"GeocoderCa: Error code {code} for {url}")
        raise self._no_result(failure, url)
