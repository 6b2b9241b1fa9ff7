"""Map Discovery Session.

위치 조회, 검색 조건, 뷰포트, 결과 표시, 길찾기를 하나의 공유 상태 위에서
연결합니다. 모든 조작은 뷰포트를 다시 계산한 뒤 스냅샷을 반환합니다.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from discovery.application.discovery.dto import DirectionsLinkDTO, LocationResolution
from discovery.application.discovery.queries import (
    BuildDirectionsQuery,
    ResolveLocationQuery,
    SearchBusinessesQuery,
)
from discovery.application.discovery.services import DirectionsLinkBuilder, GazetteerService
from discovery.application.discovery.services.directions_link_builder import (
    DEFAULT_DIRECTIONS_URL,
)
from discovery.application.discovery.services.viewport_policy import (
    DEFAULT_CENTER,
    DEFAULT_ZOOM,
)
from discovery.application.discovery.session.result_presenter import ResultPresenter
from discovery.application.discovery.session.search_criteria_manager import (
    SearchCriteriaManager,
)
from discovery.application.discovery.session.snapshot import MapSnapshot
from discovery.application.discovery.session.state import DiscoveryState
from discovery.application.discovery.session.viewport_controller import ViewportController
from discovery.domain.entities import BusinessRecord
from discovery.domain.exceptions import BusinessNotFoundError
from discovery.domain.value_objects import Coordinate, ViewportState

if TYPE_CHECKING:
    from discovery.application.ports import BusinessDirectoryPort, GeolocationProviderPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionOptions:
    """세션 동작 설정."""

    result_limit: int = 50
    near_me_timeout: float = 8.0
    initial_location_timeout: float = 5.0
    default_center: Coordinate = DEFAULT_CENTER
    default_zoom: int = DEFAULT_ZOOM
    directions_base_url: str = DEFAULT_DIRECTIONS_URL


class MapDiscoverySession:
    """지도 탐색 세션."""

    def __init__(
        self,
        directory: "BusinessDirectoryPort",
        geolocation: "GeolocationProviderPort | None",
        options: SessionOptions | None = None,
        gazetteer: GazetteerService | None = None,
    ) -> None:
        self._options = options or SessionOptions()
        self._directory = directory
        self.state = DiscoveryState(
            viewport=ViewportState(
                center=self._options.default_center, zoom=self._options.default_zoom
            )
        )
        self.resolver = ResolveLocationQuery(geolocation, timeout=self._options.near_me_timeout)
        self.viewport = ViewportController(
            self.state,
            default_center=self._options.default_center,
            default_zoom=self._options.default_zoom,
        )
        self.presenter = ResultPresenter(self.state, self.viewport)
        self.criteria = SearchCriteriaManager(
            self.state,
            SearchBusinessesQuery(directory, limit=self._options.result_limit),
            self.resolver,
            gazetteer=gazetteer,
            near_me_timeout=self._options.near_me_timeout,
        )
        self.directions = BuildDirectionsQuery(
            self.resolver, DirectionsLinkBuilder(self._options.directions_base_url)
        )

    async def start(self) -> MapSnapshot:
        """첫 화면: 자동 위치 조회와 전체 검색을 함께 수행합니다."""
        await asyncio.gather(self._locate_on_start(), self.criteria.dispatch())
        return self.snapshot()

    async def _locate_on_start(self) -> LocationResolution:
        resolution = await self.resolver.execute(
            high_accuracy=True, timeout=self._options.initial_location_timeout
        )
        if resolution.request_id != self.resolver.last_request_id:
            return resolution
        if resolution.succeeded:
            self.state.user_location = resolution.coordinate
            self.state.location_error = None
        else:
            self.state.location_error = resolution.message
        return resolution

    async def set_text(self, text: str) -> MapSnapshot:
        await self.criteria.set_text(text)
        return self.snapshot()

    async def set_category(self, name: str | None) -> MapSnapshot:
        await self.criteria.set_category(name)
        return self.snapshot()

    async def set_near_me(
        self, high_accuracy: bool = True
    ) -> tuple[LocationResolution, MapSnapshot]:
        resolution = await self.criteria.set_near_me(high_accuracy=high_accuracy)
        return resolution, self.snapshot()

    async def set_custom_location(self, text: str) -> MapSnapshot:
        await self.criteria.set_custom_location(text)
        return self.snapshot()

    async def clear_location(self) -> MapSnapshot:
        await self.criteria.clear_location()
        return self.snapshot()

    async def select_suggestion(self, name: str) -> MapSnapshot:
        await self.criteria.select_suggestion(name)
        return self.snapshot()

    def select_business(self, business_id: int) -> MapSnapshot:
        """
        Raises:
            BusinessNotFoundError: 현재 결과에 없는 ID
        """
        if self.presenter.select(business_id) is None:
            raise BusinessNotFoundError(business_id)
        return self.snapshot()

    def clear_selection(self) -> MapSnapshot:
        self.presenter.clear_selection()
        return self.snapshot()

    def map_click(self) -> MapSnapshot:
        """지도 빈 곳 클릭: 검색 패널을 열고 선택을 해제합니다."""
        self.state.ui.search_panel_open = True
        self.presenter.clear_selection()
        return self.snapshot()

    def close_search_panel(self) -> MapSnapshot:
        self.state.ui.search_panel_open = False
        return self.snapshot()

    def dismiss_errors(self) -> MapSnapshot:
        self.state.search_error = None
        self.state.location_error = None
        return self.snapshot()

    async def build_directions(
        self, business_id: int, prefer_live_origin: bool = True
    ) -> DirectionsLinkDTO:
        """
        Raises:
            BusinessNotFoundError: 결과와 디렉터리 어디에도 없는 ID
            DirectionsUnavailableError: 목적지 주소/좌표 없음
        """
        business = await self._find_business(business_id)
        return await self.directions.execute(business, prefer_live_origin=prefer_live_origin)

    async def _find_business(self, business_id: int) -> BusinessRecord:
        business = self.state.find_result(business_id)
        if business is not None:
            return business
        business = await self._directory.get_business(business_id)
        if business is None:
            raise BusinessNotFoundError(business_id)
        return business

    def snapshot(self) -> MapSnapshot:
        self.viewport.recompute()
        return MapSnapshot.capture(self.state, self.presenter.render())
