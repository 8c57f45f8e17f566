import json

import pytest

from geoadapters.geocoding.base import NoResult, UnsupportedOperation
from geoadapters.geocoding.providers.geocoder_us import GeocoderUsGeocoder

QUERY_URL = (
    "http://geocoding.geo.census.gov/geocoder/locations/onelineaddress"
    "?format=json&benchmark=Public_AR_Current&address=1600+Pennsylvania+Ave%2C+Washington%2C+DC"
)

MATCH_RESPONSE = json.dumps({
    "result": {
        "input": {
            "benchmark": {"id": "4", "benchmarkName": "Public_AR_Current"},
            "address": {"address": "1600 Pennsylvania Ave, Washington, DC"},
        },
        "addressMatches": [
            {
                "matchedAddress": "1600 PENNSYLVANIA AVE NW, WASHINGTON, DC, 20500",
                "coordinates": {"x": -77.03535, "y": 38.898754},
                "tigerLine": {"tigerLineId": "76225813", "side": "L"},
                "addressComponents": {
                    "fromAddress": "1600",
                    "toAddress": "1698",
                    "preQualifier": "",
                    "preDirection": "",
                    "preType": "",
                    "streetName": "PENNSYLVANIA",
                    "suffixType": "AVE",
                    "suffixDirection": "NW",
                    "suffixQualifier": "",
                    "city": "WASHINGTON",
                    "state": "DC",
                    "zip": "20500",
                },
            }
        ],
    }
})

NO_MATCH_RESPONSE = json.dumps({"result": {"input": {}, "addressMatches": []}})


class TestGeocoderUs:
    def test_name(self, adapter):
        assert GeocoderUsGeocoder(adapter).provider_name == "geocoder_us"

    @pytest.mark.parametrize("query", ["127.0.0.1", "74.200.247.59", "::1", "::ffff:74.200.247.59"])
    def test_ip_addresses_unsupported(self, adapter, query):
        with pytest.raises(UnsupportedOperation) as exc_info:
            GeocoderUsGeocoder(adapter).geocode(query)
        assert exc_info.value.message == "The GeocoderUs provider does not support IP addresses."
        adapter.get.assert_not_called()

    def test_reverse_unsupported(self, adapter):
        with pytest.raises(UnsupportedOperation) as exc_info:
            GeocoderUsGeocoder(adapter).reverse(1, 2)
        assert exc_info.value.message == "The GeocoderUs provider is not able to do reverse geocoding."
        adapter.get.assert_not_called()

    def test_no_matches(self, adapter_returning):
        adapter = adapter_returning(NO_MATCH_RESPONSE)
        with pytest.raises(NoResult) as exc_info:
            GeocoderUsGeocoder(adapter).geocode("1600 Pennsylvania Ave, Washington, DC")
        assert exc_info.value.message == f"Could not find results for given query: {QUERY_URL}"
        adapter.get.assert_called_once_with(QUERY_URL)

    def test_invalid_body(self, adapter_returning):
        with pytest.raises(NoResult) as exc_info:
            GeocoderUsGeocoder(adapter_returning("Service Unavailable")).geocode(
                "1600 Pennsylvania Ave, Washington, DC"
            )
        assert exc_info.value.message == f"Could not execute query {QUERY_URL}"

    def test_parses_match(self, adapter_returning):
        results = GeocoderUsGeocoder(adapter_returning(MATCH_RESPONSE)).geocode(
            "1600 Pennsylvania Ave, Washington, DC"
        )

        assert len(results) == 1
        result = results[0]
        assert result.latitude == pytest.approx(38.898754)
        assert result.longitude == pytest.approx(-77.03535)
        assert result.street_name == "PENNSYLVANIA"
        assert result.zipcode == "20500"
        assert result.locality == "WASHINGTON"
        assert result.region_code == "DC"
        assert result.country_code == "US"
        assert result.street_number is None
        assert result.bounds is None
