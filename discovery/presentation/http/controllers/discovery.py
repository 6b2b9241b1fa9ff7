"""Discovery Controller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Query, Request

from discovery.application.discovery.queries import ListCategoriesQuery, SuggestPlacesQuery
from discovery.application.discovery.services import ViewportPolicyService
from discovery.application.discovery.session import DiscoverySessionRegistry, SessionEntry
from discovery.application.ports import BusinessDirectoryPort
from discovery.domain.value_objects import Coordinate
from discovery.presentation.http.schemas import (
    CategoryCriteriaRequest,
    CreateSessionRequest,
    CustomLocationRequest,
    DirectionsRequest,
    DirectionsResponse,
    LocationResolutionEntry,
    NearMeRequest,
    NearMeResponse,
    PositionReport,
    SelectionRequest,
    SessionResponse,
    SnapshotResponse,
    SuggestionSelectRequest,
    SuggestResponse,
    TextCriteriaRequest,
    ViewportEntry,
    ViewportRequest,
)
from discovery.setup.config import Settings, get_settings
from discovery.setup.dependencies import (
    build_session_entry,
    get_business_directory,
    get_list_categories_query,
    get_session_registry,
    get_suggest_places_query,
    session_options,
)

router = APIRouter(prefix="/discovery", tags=["discovery"])

Registry = Annotated[DiscoverySessionRegistry, Depends(get_session_registry)]


@router.get("/suggest", response_model=SuggestResponse, summary="Suggest place names")
async def suggest(
    query: Annotated[SuggestPlacesQuery, Depends(get_suggest_places_query)],
    q: str = Query("", max_length=100, description="위치 입력값"),
) -> SuggestResponse:
    """위치 직접 입력 자동완성 제안을 반환합니다."""
    return SuggestResponse(query=q, suggestions=query.execute(q))


@router.get("/categories", response_model=list[str], summary="List business categories")
async def categories(
    query: Annotated[ListCategoriesQuery, Depends(get_list_categories_query)],
) -> list[str]:
    """선택 가능한 카테고리 목록을 반환합니다."""
    return await query.execute()


@router.post("/viewport", response_model=ViewportEntry, summary="Recompute map viewport")
async def viewport(
    body: ViewportRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ViewportEntry:
    """주어진 상태로 지도 중심과 줌을 계산합니다."""
    options = session_options(settings)
    user_location = None
    if body.user_location is not None:
        user_location = Coordinate(
            latitude=body.user_location.latitude, longitude=body.user_location.longitude
        )
    result = ViewportPolicyService.recompute(
        selected=body.selected.to_record() if body.selected else None,
        filtered=[b.to_record() for b in body.filtered],
        user_location=user_location,
        search_active=body.search_active,
        results=[b.to_record() for b in body.results] if body.results is not None else None,
        default_center=options.default_center,
        default_zoom=options.default_zoom,
    )
    return ViewportEntry(
        latitude=result.center.latitude, longitude=result.center.longitude, zoom=result.zoom
    )


@router.post(
    "/sessions", response_model=SessionResponse, status_code=201, summary="Open map session"
)
async def create_session(
    request: Request,
    registry: Registry,
    directory: Annotated[BusinessDirectoryPort, Depends(get_business_directory)],
    settings: Annotated[Settings, Depends(get_settings)],
    body: Annotated[CreateSessionRequest | None, Body()] = None,
) -> SessionResponse:
    """지도 세션을 열고 첫 화면(위치 조회 + 전체 검색)을 반환합니다."""
    client_ip = request.client.host if request.client else None
    entry = build_session_entry(directory, settings, client_ip=client_ip)
    _report_position(entry, body.position if body else None)

    snapshot = await entry.session.start()
    session_id = registry.add(entry)
    return SessionResponse(
        session_id=session_id, snapshot=SnapshotResponse.from_snapshot(snapshot)
    )


@router.get("/sessions/{session_id}", response_model=SnapshotResponse, summary="Get map state")
async def get_session(session_id: str, registry: Registry) -> SnapshotResponse:
    """현재 지도 상태를 반환합니다."""
    entry = registry.get(session_id)
    return SnapshotResponse.from_snapshot(entry.session.snapshot())


@router.delete("/sessions/{session_id}", status_code=204, summary="Close map session")
async def delete_session(session_id: str, registry: Registry) -> None:
    """지도 세션을 닫습니다."""
    registry.remove(session_id)


@router.put(
    "/sessions/{session_id}/criteria/text",
    response_model=SnapshotResponse,
    summary="Set search text",
)
async def set_text(
    session_id: str, body: TextCriteriaRequest, registry: Registry
) -> SnapshotResponse:
    """검색어를 바꾸고 다시 검색합니다."""
    snapshot = await registry.get(session_id).session.set_text(body.text)
    return SnapshotResponse.from_snapshot(snapshot)


@router.put(
    "/sessions/{session_id}/criteria/category",
    response_model=SnapshotResponse,
    summary="Set category filter",
)
async def set_category(
    session_id: str, body: CategoryCriteriaRequest, registry: Registry
) -> SnapshotResponse:
    """카테고리 필터를 바꾸고 다시 검색합니다. 비우면 전체 카테고리."""
    snapshot = await registry.get(session_id).session.set_category(body.category)
    return SnapshotResponse.from_snapshot(snapshot)


@router.post(
    "/sessions/{session_id}/location/near-me",
    response_model=NearMeResponse,
    summary="Search near current position",
)
async def near_me(
    session_id: str,
    registry: Registry,
    body: Annotated[NearMeRequest | None, Body()] = None,
) -> NearMeResponse:
    """현재 위치를 조회해 위치 필터로 사용합니다."""
    body = body or NearMeRequest()
    entry = registry.get(session_id)
    _report_position(entry, body.position)

    resolution, snapshot = await entry.session.set_near_me(high_accuracy=body.high_accuracy)
    return NearMeResponse(
        resolution=LocationResolutionEntry.from_resolution(resolution),
        snapshot=SnapshotResponse.from_snapshot(snapshot),
    )


@router.put(
    "/sessions/{session_id}/location/custom",
    response_model=SnapshotResponse,
    summary="Type a custom location",
)
async def set_custom_location(
    session_id: str, body: CustomLocationRequest, registry: Registry
) -> SnapshotResponse:
    """위치를 직접 입력합니다."""
    snapshot = await registry.get(session_id).session.set_custom_location(body.text)
    return SnapshotResponse.from_snapshot(snapshot)


@router.delete(
    "/sessions/{session_id}/location",
    response_model=SnapshotResponse,
    summary="Clear location filter",
)
async def clear_location(session_id: str, registry: Registry) -> SnapshotResponse:
    """위치 필터를 지우고 다시 검색합니다."""
    snapshot = await registry.get(session_id).session.clear_location()
    return SnapshotResponse.from_snapshot(snapshot)


@router.post(
    "/sessions/{session_id}/location/suggestions/select",
    response_model=SnapshotResponse,
    summary="Pick a location suggestion",
)
async def select_suggestion(
    session_id: str, body: SuggestionSelectRequest, registry: Registry
) -> SnapshotResponse:
    """제안된 지명을 위치 필터로 사용합니다."""
    snapshot = await registry.get(session_id).session.select_suggestion(body.name)
    return SnapshotResponse.from_snapshot(snapshot)


@router.post(
    "/sessions/{session_id}/selection",
    response_model=SnapshotResponse,
    summary="Select a business",
)
async def select_business(
    session_id: str, body: SelectionRequest, registry: Registry
) -> SnapshotResponse:
    """사업장을 선택합니다."""
    snapshot = registry.get(session_id).session.select_business(body.business_id)
    return SnapshotResponse.from_snapshot(snapshot)


@router.delete(
    "/sessions/{session_id}/selection",
    response_model=SnapshotResponse,
    summary="Clear selection",
)
async def clear_selection(session_id: str, registry: Registry) -> SnapshotResponse:
    snapshot = registry.get(session_id).session.clear_selection()
    return SnapshotResponse.from_snapshot(snapshot)


@router.post(
    "/sessions/{session_id}/map-click",
    response_model=SnapshotResponse,
    summary="Click on empty map",
)
async def map_click(session_id: str, registry: Registry) -> SnapshotResponse:
    """검색 패널을 열고 선택을 해제합니다."""
    snapshot = registry.get(session_id).session.map_click()
    return SnapshotResponse.from_snapshot(snapshot)


@router.post(
    "/sessions/{session_id}/panel/close",
    response_model=SnapshotResponse,
    summary="Close search panel",
)
async def close_search_panel(session_id: str, registry: Registry) -> SnapshotResponse:
    snapshot = registry.get(session_id).session.close_search_panel()
    return SnapshotResponse.from_snapshot(snapshot)


@router.delete(
    "/sessions/{session_id}/errors",
    response_model=SnapshotResponse,
    summary="Dismiss errors",
)
async def dismiss_errors(session_id: str, registry: Registry) -> SnapshotResponse:
    snapshot = registry.get(session_id).session.dismiss_errors()
    return SnapshotResponse.from_snapshot(snapshot)


@router.post(
    "/sessions/{session_id}/directions",
    response_model=DirectionsResponse,
    summary="Build directions link",
)
async def directions(
    session_id: str, body: DirectionsRequest, registry: Registry
) -> DirectionsResponse:
    """외부 지도 길찾기 링크를 만듭니다."""
    entry = registry.get(session_id)
    if body.prefer_live_origin:
        _report_position(entry, body.position)

    link = await entry.session.build_directions(
        body.business_id, prefer_live_origin=body.prefer_live_origin
    )
    return DirectionsResponse(url=link.url, has_origin=link.has_origin)


def _report_position(entry: SessionEntry, position: PositionReport | None) -> None:
    """클라이언트가 보낸 위치를 다음 위치 조회에 쓰도록 전달합니다."""
    if position is None or entry.position_feed is None:
        return
    coordinate = position.to_coordinate()
    if coordinate is None and position.error is None:
        return
    entry.position_feed.report(coordinate=coordinate, error=position.error)
