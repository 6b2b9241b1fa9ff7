"""Result Presenter.

결과 목록을 지도 마커로 그리고, 마커/목록 선택을 뷰포트에 연결합니다.
"""

from __future__ import annotations

from discovery.application.discovery.dto import MapLayerDTO
from discovery.application.discovery.services import MarkerBuilder
from discovery.application.discovery.session.state import DiscoveryState
from discovery.application.discovery.session.viewport_controller import ViewportController
from discovery.domain.entities import BusinessRecord


class ResultPresenter:
    """결과 프레젠터."""

    def __init__(self, state: DiscoveryState, viewport: ViewportController) -> None:
        self._state = state
        self._viewport = viewport

    def render(self) -> MapLayerDTO:
        return MarkerBuilder.build(
            self._state.results,
            self._state.user_location,
            selected_business_id=self._state.ui.selected_business_id,
        )

    def select(self, business_id: int) -> BusinessRecord | None:
        """사업장을 선택하고 그 위치로 지도를 옮깁니다.

        현재 결과에 없는 ID면 선택을 바꾸지 않고 None을 반환합니다.
        """
        business = self._state.find_result(business_id)
        if business is None:
            return None
        self._state.ui.selected_business_id = business.id
        self._state.ui.search_panel_open = False
        self._viewport.recompute()
        return business

    def clear_selection(self) -> None:
        self._state.ui.selected_business_id = None
        self._viewport.recompute()
