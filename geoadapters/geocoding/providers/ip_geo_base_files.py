"""
IpGeoBase flat-file provider.

Offline IPv4 lookup against the two files of the IpGeoBase database
(http://ipgeobase.ru/cgi-bin/Archive.cgi):

- cidr_optim.txt: `start\\tend\\trange\\tcountry code\\tcity id` with "-" for
  ranges without a city, sorted by start
- cities.txt: `id\\tcity\\tregion\\tdistrict\\tlat\\tlon`, CP1251 encoded,
  sorted by id

Both files are searched in place with FileBinaryLineSearch; nothing is
loaded into memory and no network I/O happens.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from geoadapters.core.utils.ip import ip_to_long
from geoadapters.geocoding.base import BaseGeocoder, GeocodingResult, InvalidArgument
from geoadapters.geocoding.file_search import FileBinaryLineSearch

logger = logging.getLogger(__name__)

CITIES_ENCODING = "cp1251"


def compare_cidr(line: bytes, value: int) -> int:
    """Three-way compare of a CIDR range row against an IP as integer."""
    record = line.strip().split(b"\t")
    if value < int(record[0]):
        return 1
    if int(record[1]) < value:
        return -1
    return 0


def compare_cities(line: bytes, value: int) -> int:
    """Compare a cities row against a city id."""
    record = line.strip().split(b"\t")
    return int(record[0]) - value


def _check_file(path: Path, label: str) -> None:
    if not path.is_file():
        raise InvalidArgument(f'Given IpGeoBase {label} file "{path}" does not exist.')
    if not os.access(path, os.R_OK):
        raise InvalidArgument(f'Given IpGeoBase {label} file "{path}" is not readable.')


class IpGeoBaseFilesGeocoder(BaseGeocoder):
    """
    IpGeoBase lookup over local database files.

    Usage:
        geocoder = IpGeoBaseFilesGeocoder("data/cidr_optim.txt", "data/cities.txt")
        results = geocoder.geocode("213.197.73.96")
    """

    display_name = "IpGeoBaseFiles"
    supports_address = False
    supports_ip = True
    supports_ipv6 = False
    short_circuits_localhost = True

    def __init__(self, cidr_file: Union[str, Path], city_file: Union[str, Path]):
        """
        Raises:
            InvalidArgument: Either file is missing or unreadable
        """
        super().__init__()

        self.cidr_file = Path(cidr_file)
        _check_file(self.cidr_file, "CIDR")

        self.city_file = Path(city_file)
        _check_file(self.city_file, "City")

    @property
    def provider_name(self) -> str:
        return "ip_geo_base_files"

    def _geocode_ip(self, ip: str) -> List[GeocodingResult]:
        value = ip_to_long(ip)

        with FileBinaryLineSearch(self.cidr_file, compare_cidr) as searcher:
            cidr_line = searcher.search(value)

        if cidr_line is None:
            raise self._no_result(f"Could not find IP {ip}", ip)

        cidr_record = cidr_line.strip().split(b"\t")
        values = {"country_code": cidr_record[3].decode("ascii", "replace")}

        city_id = self._city_id(cidr_record[4] if len(cidr_record) > 4 else b"-")
        if city_id > 0:
            values.update(self._lookup_city(city_id))

        return [self._result(**values)]

    @staticmethod
    def _city_id(raw: bytes) -> int:
        try:
            return int(raw)
        except ValueError:
            return 0

    def _lookup_city(self, city_id: int) -> dict:
        with FileBinaryLineSearch(self.city_file, compare_cities) as searcher:
            city_line = searcher.search(city_id)

        if city_line is None:
            logger.debug(f"IpGeoBaseFiles: City {city_id} missing from {self.city_file.name}")
            return {}

        record = city_line.strip().split(b"\t")
        return {
            "locality": record[1].decode(CITIES_ENCODING),
            "region": record[2].decode(CITIES_ENCODING),
            "latitude": float(record[4]),
            "longitude": float(record[5]),
        }
