from dataclasses import dataclass

import httpx

from ipquery.errors import TransportError
from ipquery.transports.base import BaseTransport, TransportResponse


@dataclass(frozen=True, slots=True)
class PoolOptions:
    """Options for the long-lived httpx.Client behind PooledHttpxTransport."""

    timeout: float | None = None
    max_connections: int = 100
    max_keepalive: int = 20
    keepalive_expiry: float = 15.0
    http2: bool = False

    @property
    def httpx_timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.timeout)

    @property
    def httpx_limits(self) -> httpx.Limits:
        return httpx.Limits(
            max_connections=self.max_connections,
            max_keepalive_connections=self.max_keepalive,
            keepalive_expiry=self.keepalive_expiry,
        )


class PooledHttpxTransport(BaseTransport):
    """High-throughput backend reusing one `httpx.Client` and its connection pool.

    The client is thread-safe, so one transport can serve many concurrent
    callers. Close it with `close()` or by using it as a context manager.
    """

    def __init__(
        self,
        options: PoolOptions | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        options = options or PoolOptions()
        self._client = httpx.Client(
            timeout=options.httpx_timeout,
            limits=options.httpx_limits,
            http2=options.http2,
            transport=transport,
        )

    def get(self, url: str) -> TransportResponse:
        try:
            response = self._client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise TransportError(f"Request to ipquery service failed: {repr(exc)}") from exc

        return TransportResponse(status_code=response.status_code, content=response.content)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "PooledHttpxTransport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
