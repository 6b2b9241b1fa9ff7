"""Geolocation Provider Port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from discovery.domain.enums import LocationFailureReason
from discovery.domain.value_objects import Coordinate


class GeolocationProviderPort(ABC):
    """기기 위치 조회 포트."""

    @abstractmethod
    async def locate(self, high_accuracy: bool, timeout: float) -> Coordinate:
        """현재 위치를 한 번 조회합니다.

        Args:
            high_accuracy: 정확도 우선 힌트
            timeout: 제공자에게 전달하는 제한 시간 (초)

        Raises:
            LocationError: 권한 거부, 시간 초과, 위치 없음, 미지원
        """
        ...


class PositionReportPort(ABC):
    """클라이언트(브라우저)가 측정한 위치/오류를 전달받는 포트."""

    @abstractmethod
    def report(
        self,
        coordinate: Coordinate | None = None,
        error: LocationFailureReason | None = None,
    ) -> None:
        """다음 ``locate`` 호출에 사용할 측정 결과를 기록합니다."""
        ...
