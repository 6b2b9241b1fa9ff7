"""Location Resolution DTO."""

from __future__ import annotations

from dataclasses import dataclass

from discovery.domain.enums import LocationFailureReason
from discovery.domain.value_objects import Coordinate


@dataclass(frozen=True)
class LocationResolution:
    """위치 조회 결과.

    성공이면 ``coordinate``와 권장 줌이 채워지고, 실패면 ``failure``와
    ``message``가 채워집니다. ``request_id``로 오래된 응답을 걸러냅니다.
    """

    request_id: int
    coordinate: Coordinate | None = None
    zoom: int | None = None
    failure: LocationFailureReason | None = None
    message: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.coordinate is not None

    @classmethod
    def success(cls, request_id: int, coordinate: Coordinate, zoom: int) -> LocationResolution:
        return cls(request_id=request_id, coordinate=coordinate, zoom=zoom)

    @classmethod
    def failed(
        cls, request_id: int, reason: LocationFailureReason, message: str
    ) -> LocationResolution:
        return cls(request_id=request_id, failure=reason, message=message)
