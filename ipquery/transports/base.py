from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """Status code and raw body of a completed GET request."""

    status_code: int
    content: bytes

    @property
    def text(self) -> str:
        """Body as text; undecodable bytes become U+FFFD rather than failing."""
        return self.content.decode("utf-8", errors="replace")


class BaseTransport(ABC):
    """Blocking capability that performs a single HTTP GET.

    Implementations must raise `TransportError` when the request cannot be
    sent or no response is received, and must be safe for concurrent use.
    """

    @abstractmethod
    def get(self, url: str) -> TransportResponse:
        """Perform a GET request and return its status and body."""
        raise NotImplementedError


class AsyncBaseTransport(ABC):
    """Awaitable counterpart of `BaseTransport`."""

    @abstractmethod
    async def get(self, url: str) -> TransportResponse:
        """Perform a GET request and return its status and body."""
        raise NotImplementedError
