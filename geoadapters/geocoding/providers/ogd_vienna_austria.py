"""
Open Government Data Vienna address service provider.

Address and reverse geocoding restricted to Vienna, Austria. No key.
https://www.data.gv.at/katalog/dataset/stadt-wien_adressservicewien
"""

import logging
from typing import List, Optional
from urllib.parse import quote_plus

from geoadapters.core.utils.geo import format_coordinate
from geoadapters.geocoding.base import BaseGeocoder, Bounds, GeocodingResult
from geoadapters.geocoding.parsing import dig, load_json
from geoadapters.geocoding.transport import HttpAdapter

logger = logging.getLogger(__name__)

OGD_VIENNA_GEOCODE_URL = (
    "http://data.wien.gv.at/daten/OGDAddressService.svc/GetAddressInfo?CRS=EPSG:4326&Address={address}"
)
OGD_VIENNA_REVERSE_URL = (
    "http://data.wien.gv.at/daten/OGDAddressService.svc/ReverseGeocode?crs=EPSG:4326&location={lon},{lat}"
)

# Reverse matches further away than this are rejected
MAX_DISTANCE_METERS = 1000


class OGDViennaAustriaGeocoder(BaseGeocoder):
    """
    OGD Vienna address service.

    Responses are GeoJSON feature collections; only the first feature is
    used. Coordinates are [lon, lat].
    """

    display_name = "OGDViennaAustria"
    supports_reverse = True

    def __init__(self, adapter: Optional[HttpAdapter] = None):
        super().__init__(adapter)

    @property
    def provider_name(self) -> str:
        return "ogd_vienna_austria"

    def _geocode_address(self, address: str) -> List[GeocodingResult]:
        url = OGD_VIENNA_GEOCODE_URL.format(address=quote_plus(address))
        return self._execute_query(url)

    def _reverse(self, latitude: float, longitude: float) -> List[GeocodingResult]:
        # The service takes the location as lon,lat
        url = OGD_VIENNA_REVERSE_URL.format(
            lon=format_coordinate(longitude),
            lat=format_coordinate(latitude),
        )
        return self._execute_query(url)

    def _execute_query(self, url: str) -> List[GeocodingResult]:
        data = load_json(self._get_content(url))
        feature = dig(data, "features", 0) if isinstance(data, dict) else None
        if not isinstance(feature, dict):
            raise self._no_result(f"Could not execute query {url}", url)

        properties = feature.get("properties") or {}
        if properties.get("DistanceUnit") == "meter":
            try:
                distance = float(properties.get("Distance") or 0)
            except (TypeError, ValueError):
                distance = 0
            if distance > MAX_DISTANCE_METERS:
                logger.debug(f"OGDVienna: Nearest match {distance}m away for {url}")
                raise self._no_result("Result distance too far away", url)

        coordinates = dig(feature, "geometry", "coordinates") or []
        bbox = feature.get("bbox") or []
        has_coordinates = len(coordinates) >= 2

        return [self._result(
            latitude=coordinates[1] if has_coordinates else None,
            longitude=coordinates[0] if has_coordinates else None,
            bounds=self._bounds(bbox),
            street_number=properties.get("StreetNumber"),
            street_name=properties.get("StreetName"),
            city_district=properties.get("CountrySubdivision"),
            locality=properties.get("Municipality"),
            zipcode=properties.get("PostalCode"),
            county=properties.get("MunicipalitySubdivision"),
            region="Vienna" if has_coordinates else None,
            region_code="Vienna" if has_coordinates else None,
            country="Austria" if has_coordinates else None,
            country_code=properties.get("CountryCode"),
            timezone="Europe/Vienna" if has_coordinates else None,
        )]

    @staticmethod
    def _bounds(bbox: list) -> Optional[Bounds]:
        if len(bbox) < 4:
            return None
        # bbox order as served: south, west, east, north
        return Bounds.from_edges(south=bbox[0], west=bbox[1], north=bbox[3], east=bbox[2])
