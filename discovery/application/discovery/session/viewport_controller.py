"""Viewport Controller.

공유 상태를 읽어 뷰포트를 다시 계산하고 ``state.viewport``에 기록합니다.
뷰포트는 이 컨트롤러만 갱신합니다.
"""

from __future__ import annotations

import logging

from discovery.application.discovery.services.viewport_policy import (
    DEFAULT_CENTER,
    DEFAULT_ZOOM,
    ViewportInputs,
    ViewportPolicyService,
)
from discovery.application.discovery.session.state import DiscoveryState
from discovery.domain.value_objects import Coordinate, ViewportState

logger = logging.getLogger(__name__)


class ViewportController:
    """뷰포트 컨트롤러."""

    def __init__(
        self,
        state: DiscoveryState,
        default_center: Coordinate = DEFAULT_CENTER,
        default_zoom: int = DEFAULT_ZOOM,
    ) -> None:
        self._state = state
        self._default_center = default_center
        self._default_zoom = default_zoom

    def recompute(self) -> ViewportState:
        state = self._state
        inputs = ViewportInputs(
            selected=state.selected_business,
            filtered=state.results,
            user_location=state.user_location,
            search_active=state.criteria.is_active,
            results=state.results,
            default_center=self._default_center,
            default_zoom=self._default_zoom,
        )
        rule, viewport = ViewportPolicyService.evaluate(inputs)
        state.viewport = viewport
        logger.debug(
            "Viewport recomputed",
            extra={
                "rule": rule,
                "lat": viewport.center.latitude,
                "lon": viewport.center.longitude,
                "zoom": viewport.zoom,
            },
        )
        return viewport
