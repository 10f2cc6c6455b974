import httpx

from ipquery.errors import TransportError
from ipquery.transports.base import AsyncBaseTransport, BaseTransport, TransportResponse


class HttpxTransport(BaseTransport):
    """Simple backend: a short-lived `httpx.Client` per request.

    Nothing is shared between calls. `timeout_seconds=None` means the request
    may block indefinitely; a timeout is the caller's decision.
    """

    def __init__(self, timeout_seconds: float | None = None) -> None:
        self._timeout_seconds = timeout_seconds

    def get(self, url: str) -> TransportResponse:
        try:
            with httpx.Client(timeout=self._timeout_seconds) as client:
                response = client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise TransportError(f"Request to ipquery service failed: {repr(exc)}") from exc

        return TransportResponse(status_code=response.status_code, content=response.content)


class AsyncHttpxTransport(AsyncBaseTransport):
    """Async simple backend: a short-lived `httpx.AsyncClient` per request."""

    def __init__(self, timeout_seconds: float | None = None) -> None:
        self._timeout_seconds = timeout_seconds

    async def get(self, url: str) -> TransportResponse:
        try:
            async with httpx.AsyncClient(timeout=self._timeout_seconds) as client:
                response = await client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise TransportError(f"Request to ipquery service failed: {repr(exc)}") from exc

        return TransportResponse(status_code=response.status_code, content=response.content)
