from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response model for the health check endpoint."""

    status: str


class OwnIpResponse(BaseModel):
    """Response model for the own-IP endpoint.

    `ip` is the upstream body, verbatim.
    """

    ip: str
