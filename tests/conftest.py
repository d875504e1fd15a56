"""
Shared fixtures for the HubSpot CRM client tests.
"""
from typing import Any, Dict, List

import pytest

from hubspot_crm.hubspot_client import HubSpotClient


class MockResponse:
    def __init__(self, status_code: int, content: bytes):
        self.status_code = status_code
        self.content = content
        self.closed = False

    def iter_content(self, chunk_size: int = 1):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i:i + chunk_size]

    def close(self) -> None:
        self.closed = True


class MockHTTPClient:
    """Returns a canned response and records every request it receives."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        self.requests: List[Dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> MockResponse:
        self.requests.append({"method": method, "url": url, **kwargs})
        return MockResponse(self.status_code, self.body.encode("utf-8"))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("HUBSPOT_API_KEY", "HUBSPOT_API_BASE_URL", "HUBSPOT_API_VERSION"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def properties() -> Dict[str, str]:
    return {
        "firstname": "Peter",
        "lastname": "Parker",
        "email": "pp@gmail.com",
        "work_email": "pp@marvel.com",
        "company": "Marvel",
    }


@pytest.fixture
def make_client():
    """Build a client whose HTTP traffic goes to a MockHTTPClient."""
    def _make(status_code: int, body: str = "", api_key: str = "this-Is-A-Secret-!"):
        mock = MockHTTPClient(status_code, body)
        return HubSpotClient(api_key, http_client=mock), mock
    return _make
