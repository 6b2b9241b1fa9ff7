"""IP 기반 위치 HTTP 클라이언트.

클라이언트가 위치를 보고하지 않을 때 요청 IP로 대략적인 위치를 찾습니다.
- 조회: GET {base_url}/{ip}
- 응답: {"status": "success"|"fail", "lat": float, "lon": float, "message"?: str}
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from discovery.application.ports import GeolocationProviderPort
from discovery.domain.exceptions import (
    LocationDeniedError,
    LocationTimeoutError,
    LocationUnavailableError,
)
from discovery.domain.value_objects import Coordinate

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://ip-api.com/json"


class IpGeolocationHttpClient(GeolocationProviderPort):
    """IP 위치 조회 클라이언트. 인스턴스 하나가 IP 하나를 담당합니다."""

    def __init__(
        self,
        ip_address: str,
        base_url: str = DEFAULT_BASE_URL,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._ip_address = ip_address
        self._base_url = base_url.rstrip("/")
        self._client = client

    async def locate(self, high_accuracy: bool, timeout: float) -> Coordinate:
        params = {"fields": "status,message,lat,lon"}
        url = f"{self._base_url}/{self._ip_address}"
        try:
            if self._client is not None:
                response = await self._client.get(url, params=params, timeout=timeout)
            else:
                async with httpx.AsyncClient(timeout=timeout) as client:
                    response = await client.get(url, params=params)
            if response.status_code == 403:
                raise LocationDeniedError("IP geolocation refused")
            response.raise_for_status()
            data: Any = response.json()
        except httpx.TimeoutException as e:
            raise LocationTimeoutError() from e
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("IP geolocation failed", extra={"error": str(e)})
            raise LocationUnavailableError() from e

        if not isinstance(data, dict):
            logger.warning("IP geolocation returned unexpected payload")
            raise LocationUnavailableError()
        if data.get("status") != "success":
            raise LocationUnavailableError(data.get("message") or None)

        coordinate = Coordinate.from_raw(data.get("lat"), data.get("lon"))
        if coordinate is None:
            raise LocationUnavailableError()
        return coordinate
