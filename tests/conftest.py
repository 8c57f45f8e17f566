from pathlib import Path
from unittest.mock import MagicMock

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    return FIXTURES


@pytest.fixture
def adapter():
    """Mock HTTP adapter; set `adapter.get.return_value` to the response body."""
    mock = MagicMock()
    mock.get.return_value = None
    return mock


@pytest.fixture
def adapter_returning():
    """Factory for a mock HTTP adapter that answers every GET with `body`."""

    def factory(body):
        mock = MagicMock()
        mock.get.return_value = body
        return mock

    return factory
