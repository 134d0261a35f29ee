"""
Pytest fixtures for TrustRace tests. Ethos HTTP calls go through a mocked requests.Session.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

ETHOS_ENV_VARS = (
    "ETHOS_API_URL",
    "ETHOS_CLIENT_NAME",
    "ETHOS_CACHE_TTL_SECONDS",
    "ETHOS_REQUEST_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_ethos_env(monkeypatch):
    """Unset Ethos env vars and skip .env loading so each test sees the defaults unless it sets them."""
    for name in ETHOS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("trustrace.config.env.load_dotenv", lambda *args, **kwargs: False)


def _make_response(payload=None, status_code=200):
    """Build a MagicMock requests.Response returning payload from .json()."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def mock_session():
    """MagicMock session; set .get.return_value or .get.side_effect per test."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def ethos_client(mock_session):
    from trustrace.ethos.client import EthosClient

    return EthosClient(
        base_url="https://ethos.test/api/v2",
        client_name="trustrace-tests",
        timeout=5,
        session=mock_session,
    )


@pytest.fixture
def make_response():
    """Factory fixture: make_response(payload, status_code=200)."""
    return _make_response
