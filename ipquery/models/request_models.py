from ipaddress import ip_address

from pydantic import BaseModel, Field, field_validator


class IPLookupRequest(BaseModel):
    """Request model for the demo service's IP lookup query parameters.

    The client itself performs no validation; this model only guards the
    HTTP surface so obviously broken input never reaches the upstream service.
    """

    ip: str = Field(
        description="IPv4 or IPv6 address to look up.",
        examples=["8.8.8.8", "2001:4860:4860::8888"],
    )

    @field_validator("ip", mode="before")
    @classmethod
    def _validate_ip(cls, value: str) -> str:
        """Strip surrounding whitespace and require a valid IPv4/IPv6 literal."""
        value_str = str(value).strip()

        try:
            ip_address(value_str)
        except ValueError as exc:
            raise ValueError("ip must be a valid IPv4 or IPv6 address") from exc

        return value_str
