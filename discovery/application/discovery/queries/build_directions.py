"""Build Directions Query.

사업장 상세 말풍선의 길찾기 동작. 가능하면 현재 위치를 출발지로 쓰고,
위치 조회가 실패하면 목적지만 있는 링크로 대체합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from discovery.application.discovery.dto import DirectionsLinkDTO, LocationResolution
from discovery.application.discovery.services import DirectionsLinkBuilder
from discovery.domain.entities import BusinessRecord

if TYPE_CHECKING:
    from discovery.application.discovery.queries.resolve_location import ResolveLocationQuery

logger = logging.getLogger(__name__)


class BuildDirectionsQuery:
    """길찾기 링크 생성 Query."""

    def __init__(
        self,
        resolver: "ResolveLocationQuery | None",
        link_builder: DirectionsLinkBuilder | None = None,
    ) -> None:
        self._resolver = resolver
        self._links = link_builder or DirectionsLinkBuilder()

    async def execute(
        self, destination: BusinessRecord, prefer_live_origin: bool = True
    ) -> DirectionsLinkDTO:
        """길찾기 링크를 만듭니다.

        Args:
            destination: 목적지 사업장
            prefer_live_origin: 현재 위치를 출발지로 시도할지 여부

        Raises:
            DirectionsUnavailableError: 목적지 주소/좌표가 모두 없음
        """
        resolution: LocationResolution | None = None
        if prefer_live_origin and self._resolver is not None:
            resolution = await self._resolver.execute(high_accuracy=True)

        if resolution is not None and resolution.succeeded:
            url = self._links.build(destination, origin=resolution.coordinate)
            logger.info(
                "Directions link built",
                extra={"business_id": destination.id, "has_origin": True},
            )
            return DirectionsLinkDTO(url=url, has_origin=True)

        if prefer_live_origin:
            logger.info(
                "Falling back to destination-only directions",
                extra={
                    "business_id": destination.id,
                    "reason": resolution.failure.value if resolution and resolution.failure else None,
                },
            )
        url = self._links.build(destination)
        return DirectionsLinkDTO(url=url, has_origin=False)
