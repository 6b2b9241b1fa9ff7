"""Resolve Location Query.

기기 위치를 한 번 조회합니다. 실패는 예외가 아니라 LocationResolution
실패 값으로 돌려주며, 자동 재시도는 하지 않습니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from discovery.application.discovery.dto import LocationResolution
from discovery.domain.enums import LocationFailureReason
from discovery.domain.exceptions import LocationError
from discovery.domain.exceptions.location import DEFAULT_MESSAGES

if TYPE_CHECKING:
    from discovery.application.ports import GeolocationProviderPort

logger = logging.getLogger(__name__)

NEAR_ZOOM = 13
DEFAULT_TIMEOUT_SECONDS = 8.0


class ResolveLocationQuery:
    """위치 조회 Query.

    동시에 하나의 요청만 진행합니다. 진행 중인 요청이 있으면 새 호출은
    같은 요청의 결과를 기다립니다.
    """

    def __init__(
        self,
        provider: "GeolocationProviderPort | None",
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._provider = provider
        self._timeout = timeout
        self._inflight: asyncio.Future[LocationResolution] | None = None
        self._last_request_id = 0

    @property
    def last_request_id(self) -> int:
        return self._last_request_id

    @property
    def in_flight(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    async def execute(
        self, high_accuracy: bool = False, timeout: float | None = None
    ) -> LocationResolution:
        """현재 위치를 조회합니다.

        Args:
            high_accuracy: 정확도 우선 힌트
            timeout: 이번 요청의 제한 시간 (생략 시 기본값)

        Returns:
            LocationResolution (성공 또는 실패)
        """
        if self._inflight is not None and not self._inflight.done():
            logger.debug("Joining in-flight location request")
            return await asyncio.shield(self._inflight)

        self._last_request_id += 1
        request_id = self._last_request_id
        effective_timeout = self._timeout if timeout is None else timeout
        self._inflight = asyncio.ensure_future(
            self._resolve(request_id, high_accuracy, effective_timeout)
        )
        return await asyncio.shield(self._inflight)

    async def _resolve(
        self, request_id: int, high_accuracy: bool, timeout: float
    ) -> LocationResolution:
        if self._provider is None:
            return self._failure(request_id, LocationFailureReason.UNSUPPORTED)

        try:
            coordinate = await asyncio.wait_for(
                self._provider.locate(high_accuracy=high_accuracy, timeout=timeout),
                timeout=timeout,
            )
        except asyncio.TimeoutError:
            return self._failure(request_id, LocationFailureReason.TIMEOUT)
        except LocationError as e:
            return self._failure(request_id, e.reason, e.message)

        if not coordinate.is_valid:
            return self._failure(request_id, LocationFailureReason.UNAVAILABLE)

        logger.info(
            "Location resolved",
            extra={"request_id": request_id, "high_accuracy": high_accuracy},
        )
        return LocationResolution.success(request_id, coordinate, NEAR_ZOOM)

    @staticmethod
    def _failure(
        request_id: int, reason: LocationFailureReason, message: str | None = None
    ) -> LocationResolution:
        message = message or DEFAULT_MESSAGES[reason]
        logger.warning(
            "Location request failed",
            extra={"request_id": request_id, "reason": reason.value, "error": message},
        )
        return LocationResolution.failed(request_id, reason, message)
