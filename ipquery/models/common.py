from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator


class _WireModel(BaseModel):
    """Immutable value object decoded from an ipquery JSON payload.

    Unknown keys are ignored. Fields may be populated either by their Python
    name or by their wire alias. Scalar fields are strict: a value of the wrong
    JSON type fails validation instead of being coerced.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class IspInfo(_WireModel):
    """Network operator details for an IP address."""

    asn: StrictStr | None = None
    org: StrictStr | None = None
    isp: StrictStr | None = None


class LocationInfo(_WireModel):
    """Geographical details for an IP address."""

    country: StrictStr | None = None
    country_code: StrictStr | None = None
    city: StrictStr | None = None
    state: StrictStr | None = None
    zip_code: StrictStr | None = Field(default=None, alias="zipcode")
    latitude: float | None = Field(default=None, strict=True)
    longitude: float | None = Field(default=None, strict=True)
    timezone: StrictStr | None = None
    localtime: StrictStr | None = None

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _coerce_lat_lon(cls, value: Any) -> Any:
        """Allow latitude/longitude to be provided as numeric strings.

        Booleans and non-numeric strings fail validation.
        """
        if isinstance(value, bool):
            raise ValueError("latitude/longitude must be a number")
        if isinstance(value, str):
            return float(value)
        return value


class RiskInfo(_WireModel):
    """Abuse-risk indicators computed by the service."""

    is_mobile: StrictBool | None = None
    is_vpn: StrictBool | None = None
    is_tor: StrictBool | None = None
    is_proxy: StrictBool | None = None
    is_datacenter: StrictBool | None = None
    risk_score: StrictInt | None = None


class LookupResult(_WireModel):
    """Everything the service knows about one IP address.

    Nested sections are None when the payload did not include them.
    """

    ip: StrictStr = Field(min_length=1)
    isp: IspInfo | None = None
    location: LocationInfo | None = None
    risk: RiskInfo | None = None

    def to_json(self) -> str:
        """Encode back to the wire shape, omitting absent fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
