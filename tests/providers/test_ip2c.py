import pytest

from geoadapters.geocoding.base import GeocodingResult, NoResult, UnsupportedOperation
from geoadapters.geocoding.providers.ip2c import Ip2cGeocoder


class TestIp2c:
    def test_name(self, adapter):
        assert Ip2cGeocoder(adapter).provider_name == "ip2c"

    def test_street_addresses_unsupported(self, adapter):
        with pytest.raises(UnsupportedOperation) as exc_info:
            Ip2cGeocoder(adapter).geocode("10 avenue Gambetta, Paris, France")
        assert exc_info.value.message == "The Ip2c provider does not support street addresses."
        adapter.get.assert_not_called()

    @pytest.mark.parametrize("query", ["::1", "::ffff:88.188.221.14"])
    def test_ipv6_unsupported(self, adapter, query):
        with pytest.raises(UnsupportedOperation) as exc_info:
            Ip2cGeocoder(adapter).geocode(query)
        assert exc_info.value.message == "The Ip2c provider does not support IPv6 addresses."
        adapter.get.assert_not_called()

    def test_localhost(self, adapter):
        assert Ip2cGeocoder(adapter).geocode("127.0.0.1") == [GeocodingResult.localhost("ip2c")]
        adapter.get.assert_not_called()

    def test_reverse_unsupported(self, adapter):
        with pytest.raises(UnsupportedOperation):
            Ip2cGeocoder(adapter).reverse(1, 2)

    def test_empty_body(self, adapter):
        with pytest.raises(NoResult) as exc_info:
            Ip2cGeocoder(adapter).geocode("88.188.221.14")
        assert exc_info.value.message == "Could not execute query http://ip2c.org/?ip=88.188.221.14"
        adapter.get.assert_called_once_with("http://ip2c.org/?ip=88.188.221.14")

    def test_invalid_input_status(self, adapter_returning):
        with pytest.raises(NoResult) as exc_info:
            Ip2cGeocoder(adapter_returning("0;;;WRONG INPUT")).geocode("88.188.221.14")
        assert exc_info.value.message == "Input string is not a valid IP address."

    @pytest.mark.parametrize("body", ["2;ZZ;ZZZ;Reserved", "9;FR;FRA;France", "1;FR"])
    def test_unusable_result(self, adapter_returning, body):
        with pytest.raises(NoResult) as exc_info:
            Ip2cGeocoder(adapter_returning(body)).geocode("88.188.221.14")
        assert exc_info.value.message == "Invalid result returned by provider."

    def test_geocode(self, adapter_returning):
        results = Ip2cGeocoder(adapter_returning("1;FR;FRA;France\n")).geocode("88.188.221.14")

        assert len(results) == 1
        result = results[0]
        assert result.country == "France"
        assert result.country_code == "FR"
        assert result.latitude is None
        assert result.locality is None
        assert result.provider == "ip2c"
