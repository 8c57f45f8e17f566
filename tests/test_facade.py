import json
import logging
from unittest.mock import MagicMock

import pytest

from geoadapters.core import settings
from geoadapters.geocoding.base import InvalidCredentials, NoResult
from geoadapters.geocoding.facade import (
    available_providers,
    compare_providers,
    geocode_address,
    get_geocoder,
    reverse_geocode,
)
from geoadapters.geocoding.providers import (
    BaiduGeocoder,
    HereGeocoder,
    IpGeoBaseFilesGeocoder,
)

PLANO = {"city": "Plano", "region": "Texas", "country": "US", "loc": "33.0347,-96.8134", "postal": "75093"}


def routing_adapter(routes):
    """Mock adapter answering with the body of the first route whose key is in the URL."""
    adapter = MagicMock()

    def get(url):
        for fragment, body in routes.items():
            if fragment in url:
                return body
        return None

    adapter.get.side_effect = get
    return adapter


class TestGetGeocoder:
    def test_available_providers(self):
        names = available_providers()
        assert names == sorted(names)
        assert len(names) == 14
        assert {"geocoder_us", "ip_geo_base_files", "what3words"} <= set(names)

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unknown provider: google"):
            get_geocoder("google")

    def test_every_provider_is_constructible(self, monkeypatch, fixtures_dir):
        monkeypatch.setattr(settings, "IPGEOBASE_CIDR_FILE", fixtures_dir / "cidr_optim.txt")
        monkeypatch.setattr(settings, "IPGEOBASE_CITY_FILE", fixtures_dir / "cities.txt")

        for name in available_providers():
            assert get_geocoder(name, adapter=MagicMock()).provider_name == name

    def test_credentials_come_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "HERE_API_KEY", "here-key")
        monkeypatch.setattr(settings, "GEOCODER_LOCALE", "da")

        geocoder = get_geocoder("here")

        assert isinstance(geocoder, HereGeocoder)
        assert geocoder.api_key == "here-key"
        assert geocoder.locale == "da"
        assert geocoder.uses_v1

    def test_overrides_and_adapter(self, monkeypatch):
        monkeypatch.setattr(settings, "BAIDU_API_KEY", "from-settings")
        adapter = MagicMock()

        geocoder = get_geocoder("baidu", adapter=adapter, api_key="override")

        assert isinstance(geocoder, BaiduGeocoder)
        assert geocoder.api_key == "override"
        assert geocoder.adapter is adapter

    def test_local_provider_ignores_adapter(self, fixtures_dir):
        geocoder = get_geocoder(
            "ip_geo_base_files",
            adapter=MagicMock(),
            cidr_file=fixtures_dir / "cidr_optim.txt",
            city_file=fixtures_dir / "cities.txt",
        )
        assert isinstance(geocoder, IpGeoBaseFilesGeocoder)
        assert geocoder.geocode("2.17.20.1")[0].country_code == "DE"


class TestGeocodeAddress:
    def test_primary_result_is_returned(self):
        adapter = routing_adapter({"ip2c.org": "1;FR;FRA;France"})

        results = geocode_address("88.188.221.14", provider="ip2c", fallback_providers=["ip_info"], adapter=adapter)

        assert results[0].provider == "ip2c"
        assert adapter.get.call_count == 1

    def test_falls_back_on_no_result(self):
        adapter = routing_adapter({
            "ip2c.org": "2;ZZ;ZZZ;Reserved",
            "ipinfo.io": json.dumps(PLANO),
        })

        results = geocode_address(
            "74.200.247.59", provider="ip2c", fallback_providers=["ip_info"], adapter=adapter
        )

        assert results[0].provider == "ip_info"
        assert results[0].locality == "Plano"
        assert adapter.get.call_count == 2

    def test_raises_last_no_result(self):
        adapter = routing_adapter({})

        with pytest.raises(NoResult) as exc_info:
            geocode_address("74.200.247.59", provider="ip2c", fallback_providers=["telize"], adapter=adapter)

        assert exc_info.value.provider == "telize"
        assert adapter.get.call_count == 2

    def test_other_errors_propagate(self, monkeypatch):
        monkeypatch.setattr(settings, "BAIDU_API_KEY", None)
        adapter = routing_adapter({})

        with pytest.raises(InvalidCredentials):
            geocode_address("百度大厦", provider="baidu", fallback_providers=["geocoder_us"], adapter=adapter)

        adapter.get.assert_not_called()

    def test_primary_is_not_repeated_as_fallback(self):
        adapter = routing_adapter({})

        with pytest.raises(NoResult):
            geocode_address("74.200.247.59", provider="ip2c", fallback_providers=["ip2c"], adapter=adapter)

        assert adapter.get.call_count == 1


class TestReverseGeocode:
    def test_default_provider(self):
        body = json.dumps({
            "husnr": "111",
            "vejnavn": {"navn": "Gothersgade"},
            "wgs84koordinat": {"bredde": "55.6833", "længde": "12.5778"},
        })
        adapter = routing_adapter({"geo.oiorest.dk": body})

        results = reverse_geocode(55.6833, 12.5778, adapter=adapter)

        assert results[0].provider == "oio_rest"
        assert results[0].street_name == "Gothersgade"

    def test_falls_back(self):
        adapter = routing_adapter({
            "data.wien.gv.at": json.dumps({
                "features": [{
                    "geometry": {"coordinates": [12.5778, 55.6833]},
                    "properties": {"StreetName": "Gothersgade"},
                }],
            }),
        })

        results = reverse_geocode(
            55.6833, 12.5778, provider="oio_rest", fallback_providers=["ogd_vienna_austria"], adapter=adapter
        )

        assert results[0].provider == "ogd_vienna_austria"


class TestCompareProviders:
    def test_failures_are_recorded_as_none(self, caplog):
        caplog.set_level(logging.INFO, logger="geoadapters.geocoding.facade")
        telize = {"latitude": 33.0347, "longitude": -96.8134, "city": "Plano", "country_code": "US"}
        adapter = routing_adapter({
            "ipinfo.io": json.dumps(PLANO),
            "telize.com": json.dumps(telize),
        })

        results = compare_providers("74.200.247.59", ["ip_info", "telize", "ip2c", "geocoder_us"], adapter=adapter)

        assert list(results) == ["ip_info", "telize", "ip2c", "geocoder_us"]
        assert results["ip_info"][0].locality == "Plano"
        assert results["telize"][0].locality == "Plano"
        assert results["ip2c"] is None
        assert results["geocoder_us"] is None
        assert "Distance ip_info vs telize: 0.0m" in caplog.text
