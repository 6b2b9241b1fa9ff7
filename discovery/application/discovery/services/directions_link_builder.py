"""Directions Link Builder Service.

외부 지도 서비스의 길찾기 딥링크를 만듭니다.
"""

from __future__ import annotations

from urllib.parse import quote, urlencode

from discovery.application.common.exceptions import DirectionsUnavailableError
from discovery.domain.entities import BusinessRecord
from discovery.domain.value_objects import Coordinate

DEFAULT_DIRECTIONS_URL = "https://www.google.com/maps/dir/"


class DirectionsLinkBuilder:
    """길찾기 링크 빌더."""

    def __init__(self, base_url: str = DEFAULT_DIRECTIONS_URL) -> None:
        self._base_url = base_url

    def build(self, destination: BusinessRecord, origin: Coordinate | None = None) -> str:
        """출발지(선택)와 목적지로 링크를 만듭니다.

        목적지는 주소가 있으면 주소, 없으면 좌표를 사용합니다.

        Raises:
            DirectionsUnavailableError: 주소와 유효한 좌표가 모두 없음
        """
        params: dict[str, str] = {"api": "1"}
        if origin is not None and origin.is_valid:
            params["origin"] = origin.serialize()
        params["destination"] = self.destination_param(destination)
        return f"{self._base_url}?{urlencode(params, quote_via=quote, safe=',')}"

    @staticmethod
    def destination_param(destination: BusinessRecord) -> str:
        address = (destination.address or "").strip()
        if address:
            return address
        coordinate = destination.coordinates()
        if coordinate is None:
            raise DirectionsUnavailableError(destination.id)
        return coordinate.serialize()
