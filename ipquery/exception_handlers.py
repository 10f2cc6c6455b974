from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ipquery.errors import DecodeError, IpQueryError, TransportError, UnexpectedStatusError
from ipquery.logger import logger

# Client error kind -> machine-readable code in the 502 payload.
UPSTREAM_ERROR_CODES: dict[type[IpQueryError], str] = {
    TransportError: "upstream_unreachable",
    UnexpectedStatusError: "upstream_status",
    DecodeError: "upstream_decode_error",
}


def _upstream_error_code(exc: IpQueryError) -> str:
    for error_cls, code in UPSTREAM_ERROR_CODES.items():
        if isinstance(exc, error_cls):
            return code
    return "upstream_error"


def _build_validation_error_payload(exc: ValidationError) -> dict[str, Any]:
    """Collapse validation errors into `invalid_ip` or `invalid_request`.

    Raw pydantic details are only logged, never returned.
    """
    if any(error.get("loc", ())[-1:] == ("ip",) for error in exc.errors()):
        return {"code": "invalid_ip", "message": "The supplied IP address is not a valid IPv4 or IPv6 address."}
    return {"code": "invalid_request", "message": "Invalid request parameters"}


async def pydantic_validation_exception_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Handle Pydantic validation errors raised while building the lookup request."""
    logger.info(
        "Rejected lookup request "
        f"path={request.url.path} method={request.method} errors={exc.error_count()}"
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_build_validation_error_payload(exc))


async def ipquery_error_exception_handler(request: Request, exc: IpQueryError) -> JSONResponse:
    """Turn a failed upstream lookup into a 502 carrying the error kind."""
    code = _upstream_error_code(exc)
    content: dict[str, Any] = {"code": code, "message": str(exc)}
    if isinstance(exc, UnexpectedStatusError):
        content["upstream_status"] = exc.status_code

    logger.error(f"ipquery lookup failed path={request.url.path} method={request.method} code={code} error={exc}")
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content=content)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors to return a structured 500 response."""
    logger.exception(
        f"Unhandled exception while processing request: {repr(exc)} path={request.url.path} method={request.method}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"code": "internal_error", "message": "An unexpected error occurred while processing the request."},
    )
