import pytest

from geoadapters.geocoding.base import InvalidCredentials, NoResult, UnsupportedOperation
from geoadapters.geocoding.providers.naver import NaverGeocoder

ONE_RESULT = """<geocode>
    <userquery>경북 영천시 임고면 매호리 143-9번지</userquery>
    <total>1</total>
    <item>
        <point>
            <x>128.9675615</x>
            <y>36.0062826</y>
        </point>
        <address>경상북도 영천시 임고면 매호리 143-9</address>
        <addrdetail>
            <sido>
                경상북도
                <sigugun>
                    영천시 임고면
                    <dongmyun>
                        매호리
                        <rest>143-9</rest>
                    </dongmyun>
                </sigugun>
            </sido>
        </addrdetail>
    </item>
</geocode>"""


class TestNaver:
    def test_name(self, adapter):
        assert NaverGeocoder("api_key", adapter).provider_name == "naver"

    def test_missing_api_key(self, adapter):
        with pytest.raises(InvalidCredentials) as exc_info:
            NaverGeocoder(None, adapter).geocode("foo")
        assert exc_info.value.message == "No API Key provided"
        adapter.get.assert_not_called()

    @pytest.mark.parametrize("query", ["74.200.247.59", "::ffff:74.200.247.59"])
    def test_ip_addresses_unsupported(self, adapter, query):
        with pytest.raises(UnsupportedOperation) as exc_info:
            NaverGeocoder("api_key", adapter).geocode(query)
        assert exc_info.value.message == "The Naver provider does not support IP addresses."

    def test_reverse_unsupported(self, adapter):
        with pytest.raises(UnsupportedOperation) as exc_info:
            NaverGeocoder("api_key", adapter).reverse(1, 2)
        assert exc_info.value.message == "The Naver provider is not able to do reverse geocoding."

    def test_empty_body(self, adapter):
        with pytest.raises(NoResult) as exc_info:
            NaverGeocoder("api_key", adapter).geocode("서울")
        assert exc_info.value.message == (
            "Could not execute query http://openapi.map.naver.com/api/geocode.php"
            "?key=api_key&encoding=utf-8&coord=latlng&query=%EC%84%9C%EC%9A%B8"
        )

    def test_zero_results(self, adapter_returning):
        body = "<geocode><userquery>foobar</userquery><total>0</total></geocode>"
        with pytest.raises(NoResult) as exc_info:
            NaverGeocoder("api_key", adapter_returning(body)).geocode("foobar")
        assert exc_info.value.message == (
            "Could not execute query http://openapi.map.naver.com/api/geocode.php"
            "?key=api_key&encoding=utf-8&coord=latlng&query=foobar"
        )

    def test_geocode(self, adapter_returning):
        results = NaverGeocoder("api_key", adapter_returning(ONE_RESULT)).geocode(
            "경북 영천시 임고면 매호리 143-9번지"
        )

        assert len(results) == 1
        result = results[0]
        # The service reports latitude in point/x
        assert result.latitude == pytest.approx(128.9675615)
        assert result.longitude == pytest.approx(36.0062826)
        assert result.bounds is None
        assert result.street_number == "143-9"
        assert result.street_name == "매호리"
        assert result.locality == "영천시 임고면"
        assert result.region == "경상북도"
        assert result.zipcode is None
        assert result.city_district is None
        assert result.county is None
        assert result.region_code is None
        assert result.country is None
        assert result.country_code is None
        assert result.timezone is None

    def test_text_after_nested_level_is_kept(self, adapter_returning):
        body = (
            "<geocode><total>1</total><item><point><x>37.5</x><y>127.0</y></point>"
            "<addrdetail><sido><sigugun>종로구</sigugun>서울특별시</sido></addrdetail></item></geocode>"
        )
        result = NaverGeocoder("api_key", adapter_returning(body)).geocode("서울 종로구")[0]

        assert result.region == "서울특별시"
        assert result.locality == "종로구"
        assert result.street_name is None
