"""Discovery Session State.

지도 세션 하나가 공유하는 상태입니다. 모든 컴포넌트가 같은 인스턴스를
참조로 받아 갱신하며, 전역 싱글톤은 두지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from discovery.domain.entities import BusinessRecord
from discovery.domain.enums import LocationMode
from discovery.domain.value_objects import Coordinate, ViewportState


@dataclass
class SearchCriteria:
    """검색어, 카테고리, 위치 필터 조합."""

    text: str = ""
    category: str | None = None
    location_query: str = ""

    @property
    def is_active(self) -> bool:
        """검색어나 카테고리 필터가 걸려 있는지 여부."""
        return bool(self.text.strip()) or bool(self.category)


@dataclass
class UIState:
    """화면 전용 임시 플래그. 저장하지 않습니다."""

    search_panel_open: bool = False
    location_mode: LocationMode = LocationMode.NONE
    suggestions: list[str] = field(default_factory=list)
    show_suggestions: bool = False
    selected_business_id: int | None = None

    @property
    def custom_location(self) -> bool:
        return self.location_mode is LocationMode.CUSTOM


@dataclass
class DiscoveryState:
    """지도 세션 공유 상태."""

    viewport: ViewportState
    criteria: SearchCriteria = field(default_factory=SearchCriteria)
    ui: UIState = field(default_factory=UIState)
    user_location: Coordinate | None = None
    results: list[BusinessRecord] = field(default_factory=list)
    search_error: str | None = None
    location_error: str | None = None

    def find_result(self, business_id: int) -> BusinessRecord | None:
        for business in self.results:
            if business.id == business_id:
                return business
        return None

    @property
    def selected_business(self) -> BusinessRecord | None:
        if self.ui.selected_business_id is None:
            return None
        return self.find_result(self.ui.selected_business_id)
