from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request, status
from pydantic import ValidationError

from ipquery.client import IpQueryClient
from ipquery.config import Settings
from ipquery.errors import IpQueryError
from ipquery.exception_handlers import (
    ipquery_error_exception_handler,
    pydantic_validation_exception_handler,
    unhandled_exception_handler,
)
from ipquery.logger import logger
from ipquery.models.common import LookupResult
from ipquery.models.request_models import IPLookupRequest
from ipquery.models.response_models import HealthResponse, OwnIpResponse
from ipquery.transports.base import BaseTransport
from ipquery.transports.pooled import PooledHttpxTransport, PoolOptions
from ipquery.transports.simple import HttpxTransport


def build_transport(settings: Settings) -> BaseTransport:
    """Pick the simple or pooled backend according to settings."""
    if settings.pooled:
        return PooledHttpxTransport(PoolOptions(timeout=settings.timeout_seconds))
    return HttpxTransport(timeout_seconds=settings.timeout_seconds)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = Settings.from_env()
    transport = build_transport(settings)
    app.state.ipquery_client = IpQueryClient(base_url=settings.base_url, transport=transport)
    logger.info(f"Started ipquery lookup service base_url={settings.base_url} pooled={settings.pooled}")
    try:
        yield
    finally:
        if isinstance(transport, PooledHttpxTransport):
            transport.close()


app = FastAPI(
    title="ipquery lookup service",
    version="0.1.0",
    description="Thin HTTP front for the ipquery IP lookup client.",
    lifespan=lifespan,
)

app.add_exception_handler(ValidationError, pydantic_validation_exception_handler)
app.add_exception_handler(IpQueryError, ipquery_error_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


def get_ipquery_client(request: Request) -> IpQueryClient:
    """Dependency returning the client created at startup."""
    return request.app.state.ipquery_client


@app.get(
    "/health",
    tags=["health"],
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def health() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(status="ok")


# Plain `def` endpoints: FastAPI runs them in its threadpool, so the blocking
# client never stalls the event loop.
@app.get(
    "/v1/ip/lookup",
    response_model=LookupResult,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    tags=["ip"],
    summary="Look up ISP, location and risk information for an IP address.",
)
def ip_lookup(
    request: Request,
    query: Annotated[IPLookupRequest, Depends()],
    client: Annotated[IpQueryClient, Depends(get_ipquery_client)],
) -> LookupResult:
    logger.info(f"Performing IP lookup path={request.url.path} method={request.method} ip={query.ip}")
    return client.query_ip(query.ip)


@app.get(
    "/v1/ip/own",
    response_model=OwnIpResponse,
    status_code=status.HTTP_200_OK,
    tags=["ip"],
    summary="Return the public IP of this service as seen by ipquery.",
)
def own_ip(
    request: Request,
    client: Annotated[IpQueryClient, Depends(get_ipquery_client)],
) -> OwnIpResponse:
    logger.info(f"Performing own IP lookup path={request.url.path} method={request.method}")
    return OwnIpResponse(ip=client.query_own_ip())
