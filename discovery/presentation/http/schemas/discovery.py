"""Discovery HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from discovery.application.discovery.dto import LocationResolution
from discovery.application.discovery.session import MapSnapshot
from discovery.domain.entities import BusinessRecord
from discovery.domain.enums import LocationFailureReason
from discovery.domain.value_objects import Coordinate


class CoordinateEntry(BaseModel):
    """좌표 스키마."""

    latitude: float
    longitude: float

    model_config = {"from_attributes": True}


class PositionReport(BaseModel):
    """브라우저가 측정한 위치 또는 오류 코드."""

    latitude: float | None = None
    longitude: float | None = None
    error: LocationFailureReason | None = Field(
        None, description="permission_denied | timeout | position_unavailable"
    )

    def to_coordinate(self) -> Coordinate | None:
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class CreateSessionRequest(BaseModel):
    """세션 생성 요청."""

    position: PositionReport | None = None


class TextCriteriaRequest(BaseModel):
    text: str = Field("", max_length=200)


class CategoryCriteriaRequest(BaseModel):
    category: str | None = Field(None, max_length=100)


class NearMeRequest(BaseModel):
    """내 주변 검색 요청."""

    position: PositionReport | None = None
    high_accuracy: bool = True


class CustomLocationRequest(BaseModel):
    text: str = Field("", max_length=200)


class SuggestionSelectRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)


class SelectionRequest(BaseModel):
    business_id: int


class DirectionsRequest(BaseModel):
    """길찾기 링크 요청."""

    business_id: int
    prefer_live_origin: bool = True
    position: PositionReport | None = None


class BusinessPoint(BaseModel):
    """뷰포트 계산용 사업장 위치."""

    id: int
    name: str = ""
    latitude: float | None = None
    longitude: float | None = None

    def to_record(self) -> BusinessRecord:
        return BusinessRecord(
            id=self.id, name=self.name, latitude=self.latitude, longitude=self.longitude
        )


class ViewportRequest(BaseModel):
    """상태 없는 뷰포트 계산 요청."""

    selected: BusinessPoint | None = None
    filtered: list[BusinessPoint] = Field(default_factory=list)
    user_location: CoordinateEntry | None = None
    search_active: bool = False
    results: list[BusinessPoint] | None = None


class ViewportEntry(BaseModel):
    """뷰포트 응답 스키마."""

    latitude: float
    longitude: float
    zoom: int


class MarkerEntry(BaseModel):
    """사업장 마커 스키마."""

    business_id: int
    name: str
    latitude: float
    longitude: float
    category_name: str | None
    address: str | None
    phone: str | None
    description: str | None
    opening_hours: str | None
    image_url: str | None
    selected: bool

    model_config = {"from_attributes": True}


class ListingEntry(BaseModel):
    """목록 항목 스키마."""

    business_id: int
    name: str
    category_name: str | None
    address: str | None
    phone: str | None
    has_location: bool

    model_config = {"from_attributes": True}


class CriteriaEntry(BaseModel):
    text: str
    category: str | None
    location_query: str

    model_config = {"from_attributes": True}


class UIEntry(BaseModel):
    search_panel_open: bool
    location_mode: str
    custom_location: bool
    suggestions: list[str]
    show_suggestions: bool
    selected_business_id: int | None


class SnapshotResponse(BaseModel):
    """지도 스냅샷 응답 스키마."""

    viewport: ViewportEntry
    markers: list[MarkerEntry]
    user_marker: CoordinateEntry | None
    listings: list[ListingEntry]
    criteria: CriteriaEntry
    ui: UIEntry
    search_error: str | None
    location_error: str | None
    marker_count: int
    result_count: int

    @classmethod
    def from_snapshot(cls, snapshot: MapSnapshot) -> SnapshotResponse:
        layer = snapshot.layer
        ui = snapshot.ui
        return cls(
            viewport=ViewportEntry(
                latitude=snapshot.viewport.center.latitude,
                longitude=snapshot.viewport.center.longitude,
                zoom=snapshot.viewport.zoom,
            ),
            markers=[MarkerEntry.model_validate(m) for m in layer.markers],
            user_marker=(
                CoordinateEntry.model_validate(layer.user_marker) if layer.user_marker else None
            ),
            listings=[ListingEntry.model_validate(e) for e in layer.listings],
            criteria=CriteriaEntry.model_validate(snapshot.criteria),
            ui=UIEntry(
                search_panel_open=ui.search_panel_open,
                location_mode=ui.location_mode.value,
                custom_location=ui.custom_location,
                suggestions=list(ui.suggestions),
                show_suggestions=ui.show_suggestions,
                selected_business_id=ui.selected_business_id,
            ),
            search_error=snapshot.search_error,
            location_error=snapshot.location_error,
            marker_count=layer.marker_count,
            result_count=layer.result_count,
        )


class SessionResponse(BaseModel):
    session_id: str
    snapshot: SnapshotResponse


class LocationResolutionEntry(BaseModel):
    """위치 조회 결과 스키마."""

    succeeded: bool
    latitude: float | None = None
    longitude: float | None = None
    zoom: int | None = None
    failure: str | None = None
    message: str | None = None

    @classmethod
    def from_resolution(cls, resolution: LocationResolution) -> LocationResolutionEntry:
        coordinate = resolution.coordinate
        return cls(
            succeeded=resolution.succeeded,
            latitude=coordinate.latitude if coordinate else None,
            longitude=coordinate.longitude if coordinate else None,
            zoom=resolution.zoom,
            failure=resolution.failure.value if resolution.failure else None,
            message=resolution.message,
        )


class NearMeResponse(BaseModel):
    resolution: LocationResolutionEntry
    snapshot: SnapshotResponse


class DirectionsResponse(BaseModel):
    """길찾기 링크 응답 스키마."""

    url: str
    has_origin: bool


class SuggestResponse(BaseModel):
    """자동완성 제안 스키마."""

    query: str
    suggestions: list[str]
