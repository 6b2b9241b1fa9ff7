"""Map Snapshot."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from discovery.application.discovery.dto import MapLayerDTO
from discovery.application.discovery.session.state import (
    DiscoveryState,
    SearchCriteria,
    UIState,
)
from discovery.domain.value_objects import ViewportState


@dataclass(frozen=True)
class MapSnapshot:
    """렌더러에 넘기는 현재 지도 상태의 복사본."""

    viewport: ViewportState
    layer: MapLayerDTO
    criteria: SearchCriteria
    ui: UIState
    search_error: str | None
    location_error: str | None

    @classmethod
    def capture(cls, state: DiscoveryState, layer: MapLayerDTO) -> MapSnapshot:
        return cls(
            viewport=state.viewport,
            layer=layer,
            criteria=copy.deepcopy(state.criteria),
            ui=copy.deepcopy(state.ui),
            search_error=state.search_error,
            location_error=state.location_error,
        )
