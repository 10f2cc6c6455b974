class AppError(Exception):
    """Base application error for the ipquery client."""


class IpQueryError(AppError):
    """Base error for failed lookups against the ipquery service."""


class TransportError(IpQueryError):
    """Raised when the request could not be sent or no response was received."""


class UnexpectedStatusError(IpQueryError):
    """Raised when the service answered with a status other than 200 OK."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"ipquery service returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class DecodeError(IpQueryError):
    """Raised when a 200 response body is not valid JSON or has an unexpected shape."""
