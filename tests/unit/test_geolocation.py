"""Unit tests for the IP geolocation provider."""
from __future__ import annotations

import httpx
import pytest

from citysense.errors import GeolocationError
from citysense.interfaces.geolocation import IpGeolocationProvider


def _provider(handler) -> IpGeolocationProvider:
    return IpGeolocationProvider(url="https://geo.test/json/", timeout=1, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_position_from_payload() -> None:
    provider = _provider(lambda request: httpx.Response(200, json={"latitude": 25.7617, "longitude": -80.1918}))

    assert await provider.get_current_position() == (25.7617, -80.1918)


@pytest.mark.asyncio
async def test_forbidden_is_permission_denied() -> None:
    provider = _provider(lambda request: httpx.Response(403))

    with pytest.raises(GeolocationError) as exc_info:
        await provider.get_current_position()
    assert exc_info.value.reason == GeolocationError.PERMISSION_DENIED


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500),
        httpx.Response(200, json={"error": True, "reason": "RateLimited"}),
        httpx.Response(200, text="not json"),
    ],
)
async def test_unusable_responses_are_unavailable(response) -> None:
    provider = _provider(lambda request: response)

    with pytest.raises(GeolocationError) as exc_info:
        await provider.get_current_position()
    assert exc_info.value.reason == GeolocationError.UNAVAILABLE


@pytest.mark.asyncio
async def test_transport_error_is_unavailable() -> None:
    def handler(request):
        raise httpx.ConnectError("offline", request=request)

    with pytest.raises(GeolocationError):
        await _provider(handler).get_current_position()
