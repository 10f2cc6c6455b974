import json
from http import HTTPStatus
from typing import Any

import httpx

from ipquery.transports.base import AsyncBaseTransport, BaseTransport, TransportResponse


def json_response(payload: Any, status_code: int = HTTPStatus.OK) -> TransportResponse:
    return TransportResponse(status_code=status_code, content=json.dumps(payload).encode())


def text_response(text: str, status_code: int = HTTPStatus.OK) -> TransportResponse:
    return TransportResponse(status_code=status_code, content=text.encode())


class FakeTransport(BaseTransport):
    """Transport returning a fixed response and recording requested URLs."""

    def __init__(self, response: TransportResponse) -> None:
        self._response = response
        self.urls: list[str] = []

    def get(self, url: str) -> TransportResponse:
        self.urls.append(url)
        return self._response


class FakeAsyncTransport(AsyncBaseTransport):
    """Async transport returning a fixed response and recording requested URLs."""

    def __init__(self, response: TransportResponse) -> None:
        self._response = response
        self.urls: list[str] = []

    async def get(self, url: str) -> TransportResponse:
        self.urls.append(url)
        return self._response


class RaisingTransport(BaseTransport):
    """Transport that always raises the configured exception."""

    def __init__(self, exc: Exception) -> None:
        self._exc = exc

    def get(self, url: str) -> TransportResponse:
        raise self._exc


class MockResponse:
    def __init__(self, status_code: int, content: bytes = b"") -> None:
        self.status_code = status_code
        self.content = content


class MockAsyncClient:
    """Minimal async context-manager mock for httpx.AsyncClient."""

    def __init__(self, response: MockResponse) -> None:
        self._response = response
        self.urls: list[str] = []

    async def __aenter__(self) -> "MockAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def get(self, url: str) -> MockResponse:
        self.urls.append(url)
        return self._response


class FailingAsyncClient:
    """Async client that raises a RequestError on enter to simulate network failure."""

    def __init__(self, url: str, *args: Any, **kwargs: Any) -> None:
        self._url = url

    async def __aenter__(self) -> "FailingAsyncClient":
        request = httpx.Request("GET", self._url)
        raise httpx.ConnectError("Network failure", request=request)

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def get(self, url: str) -> MockResponse:
        return MockResponse(status_code=HTTPStatus.OK)


FULL_PAYLOAD: dict[str, Any] = {
    "ip": "1.1.1.1",
    "isp": {"asn": "AS13335", "org": "Cloudflare, Inc.", "isp": "Cloudflare, Inc."},
    "location": {
        "country": "Australia",
        "country_code": "AU",
        "city": "Sydney",
        "state": "New South Wales",
        "zipcode": "1001",
        "latitude": -33.854548400186665,
        "longitude": 151.20016200912815,
        "timezone": "Australia/Sydney",
        "localtime": "2024-09-24T18:59:43",
    },
    "risk": {
        "is_mobile": False,
        "is_vpn": False,
        "is_tor": False,
        "is_proxy": False,
        "is_datacenter": True,
        "risk_score": 0,
    },
}
