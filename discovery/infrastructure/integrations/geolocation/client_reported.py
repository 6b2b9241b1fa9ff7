"""Client Reported Geolocation Provider.

브라우저가 측정해 보낸 위치(또는 오류 코드)를 다음 ``locate`` 호출에서
한 번만 사용합니다. 보고가 없으면 대체 제공자에 위임합니다.
"""

from __future__ import annotations

import logging

from discovery.application.ports import GeolocationProviderPort, PositionReportPort
from discovery.domain.enums import LocationFailureReason
from discovery.domain.exceptions import LocationUnsupportedError
from discovery.domain.exceptions.location import ERRORS_BY_REASON
from discovery.domain.value_objects import Coordinate

logger = logging.getLogger(__name__)


class ClientReportedGeolocationProvider(GeolocationProviderPort, PositionReportPort):
    """클라이언트 보고 기반 위치 제공자."""

    def __init__(self, fallback: GeolocationProviderPort | None = None) -> None:
        self._fallback = fallback
        self._coordinate: Coordinate | None = None
        self._error: LocationFailureReason | None = None

    @property
    def has_report(self) -> bool:
        return self._coordinate is not None or self._error is not None

    def report(
        self,
        coordinate: Coordinate | None = None,
        error: LocationFailureReason | None = None,
    ) -> None:
        self._coordinate = coordinate
        self._error = error

    async def locate(self, high_accuracy: bool, timeout: float) -> Coordinate:
        coordinate, error = self._coordinate, self._error
        self._coordinate = None
        self._error = None

        if error is not None:
            raise ERRORS_BY_REASON[error]()
        if coordinate is not None:
            return coordinate
        if self._fallback is not None:
            logger.debug("No client position reported, using fallback provider")
            return await self._fallback.locate(high_accuracy=high_accuracy, timeout=timeout)
        raise LocationUnsupportedError()
