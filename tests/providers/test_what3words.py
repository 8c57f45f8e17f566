import json

import pytest

from geoadapters.geocoding.base import InvalidCredentials, NoResult, UnsupportedOperation
from geoadapters.geocoding.providers.what3words import What3wordsGeocoder

FORWARD_RESPONSE = json.dumps({
    "crs": {"type": "link", "properties": {"href": "http://spatialreference.org/ref/epsg/4326/ogcwkt/"}},
    "words": "index.home.raft",
    "bounds": {
        "southwest": {"lng": -0.203607, "lat": 51.521238},
        "northeast": {"lng": -0.203564, "lat": 51.521265},
    },
    "geometry": {"lng": -0.203586, "lat": 51.521251},
    "language": "en",
    "map": "http://w3w.co/index.home.raft",
    "status": {"reason": "OK", "status": 200},
    "thanks": "Thanks from all of us at index.home.raft for using a what3words API",
})


class TestWhat3words:
    def test_name(self, adapter):
        assert What3wordsGeocoder("api_key", adapter).provider_name == "what3words"

    def test_missing_api_key(self, adapter):
        with pytest.raises(InvalidCredentials) as exc_info:
            What3wordsGeocoder(None, adapter).geocode("index.home.raft")
        assert exc_info.value.message == "No what3words API key provided."
        adapter.get.assert_not_called()

    def test_missing_api_key_on_reverse(self, adapter):
        with pytest.raises(InvalidCredentials):
            What3wordsGeocoder("", adapter).reverse(51.521251, -0.203586)
        adapter.get.assert_not_called()

    def test_ip_addresses_unsupported(self, adapter):
        with pytest.raises(UnsupportedOperation, match="does not support IP addresses"):
            What3wordsGeocoder("api_key", adapter).geocode("74.200.247.59")

    @pytest.mark.parametrize("body", [None, "", "{}", "[]"])
    def test_unusable_body(self, adapter_returning, body):
        with pytest.raises(NoResult) as exc_info:
            What3wordsGeocoder("api_key", adapter_returning(body)).geocode("index.home.raft")
        assert exc_info.value.message == (
            "Could not execute query: https://api.what3words.com/v2/forward?addr=index.home.raft&key=api_key"
        )

    def test_invalid_key(self, adapter_returning):
        body = '{"code": 2, "message": "Authentication failed; invalid API key"}'
        with pytest.raises(InvalidCredentials) as exc_info:
            What3wordsGeocoder("bad_key", adapter_returning(body)).geocode("index.home.raft")
        assert exc_info.value.message == "Invalid credentials: Authentication failed; invalid API key"

    def test_status_without_geometry(self, adapter_returning):
        body = json.dumps({
            "crs": {"type": "link"},
            "status": {"code": 300, "message": "Invalid or non-existent 3 word address"},
        })
        with pytest.raises(NoResult) as exc_info:
            What3wordsGeocoder("api_key", adapter_returning(body)).geocode("foo.bar.baz")
        assert exc_info.value.message == "Invalid or non-existent 3 word address"

    def test_geocode(self, adapter_returning):
        results = What3wordsGeocoder("api_key", adapter_returning(FORWARD_RESPONSE)).geocode("index.home.raft")

        assert len(results) == 1
        result = results[0]
        assert result.latitude == pytest.approx(51.521251)
        assert result.longitude == pytest.approx(-0.203586)
        assert result.bounds.south == pytest.approx(51.521238)
        assert result.bounds.west == pytest.approx(-0.203607)
        assert result.bounds.north == pytest.approx(51.521265)
        assert result.bounds.east == pytest.approx(-0.203564)
        assert result.locality == "index.home.raft"
        assert result.street_name is None

    def test_reverse(self, adapter_returning):
        adapter = adapter_returning(FORWARD_RESPONSE)
        result = What3wordsGeocoder("api_key", adapter).reverse(51.521251, -0.203586)[0]

        adapter.get.assert_called_once_with(
            "https://api.what3words.com/v2/reverse?coords=51.521251,-0.203586&key=api_key"
        )
        assert result.locality == "index.home.raft"
