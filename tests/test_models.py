import json

import pytest
from pydantic import ValidationError

from ipquery.models.common import IspInfo, LocationInfo, LookupResult, RiskInfo
from tests.common import FULL_PAYLOAD


def test_full_payload_maps_wire_keys_to_fields() -> None:
    result = LookupResult.model_validate(FULL_PAYLOAD)

    assert result.ip == "1.1.1.1"
    assert result.isp == IspInfo(asn="AS13335", org="Cloudflare, Inc.", isp="Cloudflare, Inc.")
    assert result.location is not None
    assert result.location.country_code == "AU"
    assert result.location.zip_code == "1001"
    assert result.location.latitude == pytest.approx(-33.854548400186665)
    assert result.risk is not None
    assert result.risk.is_datacenter is True
    assert result.risk.risk_score == 0


def test_full_result_round_trips_through_json() -> None:
    original = LookupResult(
        ip="2001:4860:4860::8888",
        isp=IspInfo(asn="AS15169", org="Google LLC", isp="Google LLC"),
        location=LocationInfo(
            country="United States",
            country_code="US",
            city="Mountain View",
            state="California",
            zip_code="94043",
            latitude=37.386,
            longitude=-122.0838,
            timezone="America/Los_Angeles",
            localtime="2024-09-24T01:59:43",
        ),
        risk=RiskInfo(
            is_mobile=True,
            is_vpn=True,
            is_tor=True,
            is_proxy=True,
            is_datacenter=True,
            risk_score=100,
        ),
    )

    decoded = LookupResult.model_validate_json(original.to_json())

    assert decoded == original


def test_to_json_uses_wire_keys_and_omits_absent_fields() -> None:
    result = LookupResult(ip="8.8.8.8", location=LocationInfo(zip_code="94043"))

    assert result.to_json() == '{"ip":"8.8.8.8","location":{"zipcode":"94043"}}'


def test_unknown_keys_are_ignored() -> None:
    result = LookupResult.model_validate({"ip": "8.8.8.8", "extra": 1, "risk": {"is_vpn": True, "score_v2": 3}})

    assert result.risk == RiskInfo(is_vpn=True)


def test_lat_lon_numeric_strings_are_coerced() -> None:
    location = LocationInfo.model_validate({"latitude": "37.386", "longitude": "-122.0838"})

    assert location.latitude == pytest.approx(37.386)
    assert location.longitude == pytest.approx(-122.0838)


def test_lat_lon_non_numeric_string_is_rejected() -> None:
    with pytest.raises(ValidationError):
        LocationInfo.model_validate({"latitude": "north"})


@pytest.mark.parametrize("payload", [{}, {"ip": ""}, {"ip": None}])
def test_ip_is_required_and_non_empty(payload: dict) -> None:
    with pytest.raises(ValidationError):
        LookupResult.model_validate(payload)


def test_results_are_immutable() -> None:
    result = LookupResult(ip="8.8.8.8")

    with pytest.raises(ValidationError):
        result.ip = "8.8.4.4"


@pytest.mark.parametrize(
    "payload",
    [
        {"ip": "8.8.8.8", "risk": {"is_vpn": "yes"}},
        {"ip": "8.8.8.8", "risk": {"risk_score": "7"}},
        {"ip": "8.8.8.8", "risk": {"risk_score": 3.0}},
        {"ip": "8.8.8.8", "location": {"longitude": False}},
    ],
)
def test_wrong_scalar_types_are_not_coerced(payload: dict) -> None:
    with pytest.raises(ValidationError):
        LookupResult.model_validate_json(json.dumps(payload))


def test_integer_lat_lon_is_accepted_as_float() -> None:
    location = LocationInfo.model_validate_json('{"latitude": 52, "longitude": 13}')

    assert location.latitude == 52.0
    assert location.longitude == 13.0
