"""
HTTP transport used by the network-backed geocoding providers.

Providers depend on the small `HttpAdapter` protocol (one `get(url)` call
returning the raw body), so tests can inject a mock and callers can swap in
their own client. `RequestsAdapter` is the default implementation.
"""

import logging
from typing import Optional, Protocol

import requests

from geoadapters.core import settings

logger = logging.getLogger(__name__)


class HttpAdapter(Protocol):
    """Fetches a URL and returns the raw response body."""

    def get(self, url: str) -> Optional[str]: ...


class RequestsAdapter:
    """
    HttpAdapter backed by a `requests.Session`.

    The body is returned whatever the HTTP status: several upstream services
    describe errors (bad key, exhausted credits) in the body of a 4xx
    response, and the providers know how to read those.

    Usage:
        adapter = RequestsAdapter(timeout=5)
        body = adapter.get("http://ipinfo.io/8.8.8.8/json")
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = user_agent or settings.USER_AGENT

    def get(self, url: str) -> Optional[str]:
        """
        Issue a GET request.

        Raises:
            requests.RequestException: On connection errors and timeouts
        """
        response = self.session.get(url, timeout=self.timeout)

        if response.status_code != 200:
            logger.warning(f"HTTP {response.status_code} for {url}")

        # Without a declared charset requests assumes ISO-8859-1 for text/*
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = response.apparent_encoding

        return response.text

    def close(self) -> None:
        self.session.close()
