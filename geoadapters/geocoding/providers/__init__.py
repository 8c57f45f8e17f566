"""
Geocoding provider implementations.
"""

from geoadapters.geocoding.providers.baidu import BaiduGeocoder
from geoadapters.geocoding.providers.data_science_toolkit import DataScienceToolkitGeocoder
from geoadapters.geocoding.providers.geocoder_ca import GeocoderCaGeocoder
from geoadapters.geocoding.providers.geocoder_us import GeocoderUsGeocoder
from geoadapters.geocoding.providers.here import HereGeocoder
from geoadapters.geocoding.providers.ip2c import Ip2cGeocoder
from geoadapters.geocoding.providers.ip_geo_base import IpGeoBaseGeocoder
from geoadapters.geocoding.providers.ip_geo_base_files import IpGeoBaseFilesGeocoder
from geoadapters.geocoding.providers.ip_info import IpInfoGeocoder
from geoadapters.geocoding.providers.naver import NaverGeocoder
from geoadapters.geocoding.providers.ogd_vienna_austria import OGDViennaAustriaGeocoder
from geoadapters.geocoding.providers.oio_rest import OIORestGeocoder
from geoadapters.geocoding.providers.telize import TelizeGeocoder
from geoadapters.geocoding.providers.what3words import What3wordsGeocoder

__all__ = [
    "BaiduGeocoder",
    "DataScienceToolkitGeocoder",
    "GeocoderCaGeocoder",
    "GeocoderUsGeocoder",
    "HereGeocoder",
    "Ip2cGeocoder",
    "IpGeoBaseGeocoder",
    "IpGeoBaseFilesGeocoder",
    "IpInfoGeocoder",
    "NaverGeocoder",
    "OGDViennaAustriaGeocoder",
    "OIORestGeocoder",
    "TelizeGeocoder",
    "What3wordsGeocoder",
]
