"""Search Criteria Manager.

검색어/카테고리/위치 필터를 소유하고, 바뀔 때마다 전체 조건으로 검색을
다시 요청합니다. 요청은 취소하지 않고, 가장 나중에 보낸 요청의 응답만
상태에 반영합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from discovery.application.common.exceptions import SearchDispatchFailedError
from discovery.application.discovery.dto import LocationResolution
from discovery.application.discovery.services import GazetteerService
from discovery.application.discovery.session.state import DiscoveryState
from discovery.domain.enums import LocationMode
from discovery.domain.exceptions import InvalidCoordinateError
from discovery.domain.value_objects import Coordinate

if TYPE_CHECKING:
    from discovery.application.discovery.queries import (
        ResolveLocationQuery,
        SearchBusinessesQuery,
    )

logger = logging.getLogger(__name__)


class SearchCriteriaManager:
    """검색 조건 관리자."""

    def __init__(
        self,
        state: DiscoveryState,
        search_query: "SearchBusinessesQuery",
        resolver: "ResolveLocationQuery",
        gazetteer: GazetteerService | None = None,
        near_me_timeout: float | None = None,
    ) -> None:
        self._state = state
        self._search = search_query
        self._resolver = resolver
        self._gazetteer = gazetteer or GazetteerService()
        self._near_me_timeout = near_me_timeout
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    async def set_text(self, text: str) -> bool:
        self._state.criteria.text = text
        return await self.dispatch()

    async def set_category(self, name: str | None) -> bool:
        self._state.criteria.category = name or None
        return await self.dispatch()

    async def set_near_me(self, high_accuracy: bool = True) -> LocationResolution:
        """현재 위치를 위치 필터로 사용합니다.

        실패하면 위치 필터와 기존 사용자 위치를 그대로 두고 실패만 기록합니다.
        """
        resolution = await self._resolver.execute(
            high_accuracy=high_accuracy, timeout=self._near_me_timeout
        )
        if resolution.request_id != self._resolver.last_request_id:
            logger.debug(
                "Discarding stale location response",
                extra={"request_id": resolution.request_id},
            )
            return resolution

        if not resolution.succeeded:
            self._state.location_error = resolution.message
            return resolution

        assert resolution.coordinate is not None
        self._state.user_location = resolution.coordinate
        self._state.location_error = None
        self._state.criteria.location_query = resolution.coordinate.serialize()
        self._state.ui.location_mode = LocationMode.NEAR_ME
        self._hide_suggestions()
        await self.dispatch()
        return resolution

    async def set_custom_location(self, text: str) -> bool:
        """위치를 직접 입력합니다.

        ``"lat,lng"`` 좌표를 입력하면 정규화한 좌표로 바로 검색합니다.
        지명 목록과 정확히 일치하거나 제안이 하나도 없어도 바로 검색합니다.
        그 외에는 제안 목록만 갱신하고 검색하지 않습니다.
        """
        ui = self._state.ui
        ui.location_mode = LocationMode.CUSTOM

        try:
            coordinate = Coordinate.parse(text)
        except InvalidCoordinateError:
            coordinate = None
        if coordinate is not None:
            self._state.criteria.location_query = coordinate.serialize()
            self._hide_suggestions()
            return await self.dispatch()

        self._state.criteria.location_query = text

        suggestions = self._gazetteer.suggest(text)
        exact = self._gazetteer.exact_match(text)
        ui.suggestions = suggestions
        ui.show_suggestions = bool(suggestions) and exact is None

        if exact is not None or not suggestions:
            return await self.dispatch()
        return False

    async def clear_location(self) -> bool:
        self._state.criteria.location_query = ""
        self._state.ui.location_mode = LocationMode.NONE
        self._hide_suggestions()
        return await self.dispatch()

    async def select_suggestion(self, name: str) -> bool:
        self._state.criteria.location_query = name
        self._state.ui.location_mode = LocationMode.CUSTOM
        self._hide_suggestions()
        return await self.dispatch()

    async def dispatch(self) -> bool:
        """현재 조건 전체로 검색을 요청합니다.

        Returns:
            응답이 상태에 반영되었으면 True, 더 새로운 요청에 밀렸거나
            실패했으면 False
        """
        self._generation += 1
        token = self._generation
        try:
            results = await self._search.execute(self._state.criteria)
        except SearchDispatchFailedError as e:
            if token != self._generation:
                logger.debug("Discarding stale search failure", extra={"token": token})
                return False
            self._state.search_error = e.message
            return False

        if token != self._generation:
            logger.debug(
                "Discarding stale search response",
                extra={"token": token, "latest": self._generation},
            )
            return False

        self._state.results = results
        self._state.search_error = None
        selected = self._state.ui.selected_business_id
        if selected is not None and self._state.find_result(selected) is None:
            self._state.ui.selected_business_id = None
        return True

    def _hide_suggestions(self) -> None:
        self._state.ui.suggestions = []
        self._state.ui.show_suggestions = False
