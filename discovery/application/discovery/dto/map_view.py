"""Map View DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BusinessMarkerDTO:
    """사업장 마커와 상세 말풍선 정보."""

    business_id: int
    name: str
    latitude: float
    longitude: float
    category_name: str | None = None
    address: str | None = None
    phone: str | None = None
    description: str | None = None
    opening_hours: str | None = None
    image_url: str | None = None
    selected: bool = False


@dataclass(frozen=True)
class UserMarkerDTO:
    """사용자 위치 마커."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class ListingEntryDTO:
    """목록 화면 항목. 좌표가 없어도 목록에는 남습니다."""

    business_id: int
    name: str
    category_name: str | None
    address: str | None
    phone: str | None
    has_location: bool


@dataclass
class MapLayerDTO:
    """지도/목록 렌더링 결과."""

    markers: list[BusinessMarkerDTO] = field(default_factory=list)
    user_marker: UserMarkerDTO | None = None
    listings: list[ListingEntryDTO] = field(default_factory=list)

    @property
    def marker_count(self) -> int:
        return len(self.markers)

    @property
    def result_count(self) -> int:
        return len(self.listings)
