from unittest.mock import MagicMock

import pytest
import requests

from geoadapters.geocoding.transport import RequestsAdapter


def make_session(text="", status_code=200, content_type="application/json; charset=utf-8"):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    response.headers = {"Content-Type": content_type}
    response.apparent_encoding = "utf-8"
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    session.get.return_value = response
    return session, response


class TestRequestsAdapter:
    def test_returns_body(self):
        session, _ = make_session(text='{"loc": "33.0347,-96.8134"}')
        adapter = RequestsAdapter(timeout=3, user_agent="tests/1.0", session=session)

        assert adapter.get("http://ipinfo.io/74.200.247.59/json") == '{"loc": "33.0347,-96.8134"}'
        session.get.assert_called_once_with("http://ipinfo.io/74.200.247.59/json", timeout=3)
        assert session.headers["User-Agent"] == "tests/1.0"

    def test_returns_body_of_error_status(self):
        session, _ = make_session(text="<geodata><error><code>002</code></error></geodata>", status_code=403)
        adapter = RequestsAdapter(session=session)

        assert "<code>002</code>" in adapter.get("https://geocoder.ca/?geoit=xml&locate=foobar")

    def test_guesses_encoding_without_charset(self):
        session, response = make_session(content_type="text/xml")
        RequestsAdapter(session=session).get("http://openapi.map.naver.com/api/geocode.php")
        assert response.encoding == "utf-8"

    def test_propagates_transport_errors(self):
        session, _ = make_session()
        session.get.side_effect = requests.Timeout("timeout")

        with pytest.raises(requests.Timeout):
            RequestsAdapter(session=session).get("http://ip2c.org/?ip=88.188.221.14")

    def test_close(self):
        session, _ = make_session()
        RequestsAdapter(session=session).close()
        session.close.assert_called_once()
