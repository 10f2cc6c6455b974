from http import HTTPStatus

from pydantic import ValidationError

from ipquery.errors import DecodeError, IpQueryError, UnexpectedStatusError
from ipquery.logger import logger
from ipquery.models.common import LookupResult
from ipquery.transports.base import AsyncBaseTransport, BaseTransport, TransportResponse
from ipquery.transports.simple import AsyncHttpxTransport, HttpxTransport

DEFAULT_BASE_URL = "https://api.ipquery.io"


class _IpQueryClientBase:
    """URL building, status checking and decoding shared by both clients.

    Holds nothing but the base endpoint, so one instance can be used from
    any number of threads or tasks at once.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL) -> None:
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    def _ip_url(self, ip: str) -> str:
        return f"{self._base_url}/{ip}"

    def _own_ip_url(self) -> str:
        return f"{self._base_url}/"

    @staticmethod
    def _check_status(url: str, response: TransportResponse) -> None:
        if response.status_code != HTTPStatus.OK:
            body = response.text
            logger.warning(f"Unexpected status from ipquery service url={url} status_code={response.status_code}")
            raise UnexpectedStatusError(response.status_code, body)

    @staticmethod
    def _decode_lookup(url: str, response: TransportResponse) -> LookupResult:
        """Parse a 200 body into a LookupResult.

        pydantic-core parses the JSON and validates the shape in one pass;
        either kind of failure becomes a DecodeError.
        """
        try:
            return LookupResult.model_validate_json(response.content)
        except ValidationError as exc:
            logger.warning(f"Failed to decode ipquery response url={url} errors={exc.error_count()}")
            raise DecodeError(f"Failed to decode ipquery response: {exc}") from exc


class IpQueryClient(_IpQueryClientBase):
    """Blocking client for the https://api.ipquery.io IP lookup service.

    Every call is a single GET through the injected transport. Nothing is
    retried; every failure surfaces as an `IpQueryError` subclass.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, transport: BaseTransport | None = None) -> None:
        super().__init__(base_url)
        self._transport = transport or HttpxTransport()

    def query_ip(self, ip: str) -> LookupResult:
        """Look up ISP, location and risk information for an explicit IP address."""
        url = self._ip_url(ip)
        response = self._get(url)
        self._check_status(url, response)
        return self._decode_lookup(url, response)

    def query_own_ip(self) -> str:
        """Return the caller's public IP exactly as the service sent it."""
        url = self._own_ip_url()
        response = self._get(url)
        self._check_status(url, response)
        return response.text

    def _get(self, url: str) -> TransportResponse:
        logger.debug(f"GET {url}")
        try:
            return self._transport.get(url)
        except IpQueryError as exc:
            logger.warning(f"Request to ipquery service failed url={url} error={exc}")
            raise


class AsyncIpQueryClient(_IpQueryClientBase):
    """Awaitable variant of `IpQueryClient` with identical semantics."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, transport: AsyncBaseTransport | None = None) -> None:
        super().__init__(base_url)
        self._transport = transport or AsyncHttpxTransport()

    async def query_ip(self, ip: str) -> LookupResult:
        """Look up ISP, location and risk information for an explicit IP address."""
        url = self._ip_url(ip)
        response = await self._get(url)
        self._check_status(url, response)
        return self._decode_lookup(url, response)

    async def query_own_ip(self) -> str:
        """Return the caller's public IP exactly as the service sent it."""
        url = self._own_ip_url()
        response = await self._get(url)
        self._check_status(url, response)
        return response.text

    async def _get(self, url: str) -> TransportResponse:
        logger.debug(f"GET {url}")
        try:
            return await self._transport.get(url)
        except IpQueryError as exc:
            logger.warning(f"Request to ipquery service failed url={url} error={exc}")
            raise
