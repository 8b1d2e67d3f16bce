# interfaces/geolocation.py
"""
Geolocation provider
Resolves the viewer's approximate position from their public IP address.
Fails with GeolocationError (reason: permission_denied | unavailable).
"""

from typing import Optional, Protocol, Tuple

import httpx
from loguru import logger

from ..config import settings
from ..errors import GeolocationError


class GeolocationProvider(Protocol):

    async def get_current_position(self) -> Tuple[float, float]: ...


class IpGeolocationProvider:
    """IP lookup over HTTP (ipapi.co compatible JSON: latitude/longitude)"""

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url or settings.GEOLOCATION_URL
        self.timeout = timeout or settings.GEOLOCATION_TIMEOUT_SECONDS
        self.transport = transport

    async def get_current_position(self) -> Tuple[float, float]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.url)
        except httpx.HTTPError as e:
            logger.error(f"Geolocation request failed: {e}")
            raise GeolocationError(f"Geolocation request failed: {e}") from e

        if response.status_code in (401, 403):
            raise GeolocationError("Geolocation denied", reason=GeolocationError.PERMISSION_DENIED)
        if response.status_code != 200:
            raise GeolocationError(f"Geolocation service returned {response.status_code}")

        try:
            data = response.json()
            lat, lng = float(data["latitude"]), float(data["longitude"])
        except (ValueError, KeyError, TypeError) as e:
            raise GeolocationError(f"Unexpected geolocation payload: {e}") from e

        logger.info(f"Geolocation resolved: lat={lat:.4f}, lng={lng:.4f}")
        return lat, lng
