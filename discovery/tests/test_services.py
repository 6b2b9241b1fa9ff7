"""Application Services 단위 테스트."""

from __future__ import annotations

import pytest

from discovery.application.common.exceptions import DirectionsUnavailableError
from discovery.application.discovery.queries import SuggestPlacesQuery
from discovery.application.discovery.services import (
    DirectionsLinkBuilder,
    GazetteerService,
    MarkerBuilder,
    ViewportPolicyService,
    centroid,
)
from discovery.application.discovery.services.viewport_policy import (
    DEFAULT_CENTER,
    ViewportInputs,
)
from discovery.domain.entities import BusinessRecord
from discovery.domain.value_objects import Coordinate


def _business(business_id: int, lat: float | None, lng: float | None) -> BusinessRecord:
    return BusinessRecord(
        id=business_id, name=f"Business {business_id}", latitude=lat, longitude=lng
    )


class TestCentroid:
    """centroid 테스트."""

    def test_mean_of_coordinates(self) -> None:
        """위도/경도 각각의 평균."""
        result = centroid([Coordinate(1.0, 1.0), Coordinate(3.0, 3.0)])
        assert result == Coordinate(2.0, 2.0)

    def test_empty_returns_none(self) -> None:
        """빈 목록은 None."""
        assert centroid([]) is None


class TestViewportPolicyService:
    """ViewportPolicyService 테스트."""

    def test_selected_business_takes_precedence(self, sample_business: BusinessRecord) -> None:
        """선택된 사업장이 검색/사용자 위치보다 우선."""
        viewport = ViewportPolicyService.recompute(
            selected=sample_business,
            filtered=[_business(2, 4.0, -74.0)],
            user_location=Coordinate(10.0, 10.0),
            search_active=True,
        )
        assert viewport.center == sample_business.coordinates()
        assert viewport.zoom == 15

    def test_selected_without_location_falls_through(self) -> None:
        """좌표 없는 선택은 다음 규칙으로."""
        viewport = ViewportPolicyService.recompute(
            selected=_business(1, None, None),
            filtered=[],
            user_location=Coordinate(10.0, 10.0),
            search_active=False,
        )
        assert viewport.center == Coordinate(10.0, 10.0)
        assert viewport.zoom == 13

    def test_search_results_centroid(self, sample_results: list[BusinessRecord]) -> None:
        """검색 중이면 유효 좌표의 중심, 2개는 줌 13."""
        viewport = ViewportPolicyService.recompute(
            selected=None,
            filtered=sample_results,
            user_location=None,
            search_active=True,
        )
        assert viewport.center == Coordinate(5.0, -74.5)
        assert viewport.zoom == 13

    @pytest.mark.parametrize(("count", "zoom"), [(1, 15), (4, 13), (5, 12), (9, 12)])
    def test_search_zoom_by_count(self, count: int, zoom: int) -> None:
        """결과 수에 따른 줌: 1개 15, 5개 미만 13, 그 외 12."""
        filtered = [_business(i, 1.0 + i, 2.0 + i) for i in range(count)]
        viewport = ViewportPolicyService.recompute(
            selected=None, filtered=filtered, user_location=None, search_active=True
        )
        assert viewport.zoom == zoom

    def test_zero_coordinates_excluded(self) -> None:
        """(0, 0) 결과는 중심 계산에서 제외."""
        viewport = ViewportPolicyService.recompute(
            selected=None,
            filtered=[_business(1, 0.0, 0.0), _business(2, 2.0, 2.0)],
            user_location=None,
            search_active=True,
        )
        assert viewport.center == Coordinate(2.0, 2.0)
        assert viewport.zoom == 15

    def test_search_without_coordinates_uses_user_location(self) -> None:
        """검색 결과에 좌표가 없으면 사용자 위치."""
        viewport = ViewportPolicyService.recompute(
            selected=None,
            filtered=[_business(1, None, None)],
            user_location=Coordinate(10.0, 10.0),
            search_active=True,
        )
        assert viewport.center == Coordinate(10.0, 10.0)
        assert viewport.zoom == 13

    def test_user_location_when_not_searching(self, sample_results: list[BusinessRecord]) -> None:
        """검색 중이 아니면 사용자 위치가 결과보다 우선."""
        viewport = ViewportPolicyService.recompute(
            selected=None,
            filtered=sample_results,
            user_location=Coordinate(10.0, 10.0),
            search_active=False,
        )
        assert viewport.center == Coordinate(10.0, 10.0)
        assert viewport.zoom == 13

    def test_all_results_without_user(self, sample_results: list[BusinessRecord]) -> None:
        """사용자 위치가 없으면 전체 결과 중심, 줌 12."""
        viewport = ViewportPolicyService.recompute(
            selected=None,
            filtered=sample_results,
            user_location=None,
            search_active=False,
        )
        assert viewport.center == Coordinate(5.0, -74.5)
        assert viewport.zoom == 12

    def test_default_center(self) -> None:
        """아무것도 없으면 기본 중심(멕시코시티), 줌 12."""
        viewport = ViewportPolicyService.recompute(
            selected=None, filtered=[], user_location=None, search_active=False
        )
        assert viewport.center == DEFAULT_CENTER
        assert viewport.center == Coordinate(19.4326, -99.1332)
        assert viewport.zoom == 12

    def test_evaluate_reports_rule(self) -> None:
        """적용된 규칙 이름 반환."""
        inputs = ViewportInputs(
            selected=None,
            filtered=[],
            user_location=Coordinate(10.0, 10.0),
            search_active=False,
            results=[],
        )
        rule, viewport = ViewportPolicyService.evaluate(inputs)
        assert rule == "user_location"
        assert viewport.zoom == 13


class TestGazetteerService:
    """GazetteerService 테스트."""

    def test_suggest_substring_case_insensitive(self) -> None:
        """대소문자 무시 부분 문자열."""
        assert GazetteerService().suggest("bog") == ["Bogotá"]
        assert GazetteerService().suggest("BOG") == ["Bogotá"]

    def test_suggest_keeps_list_order(self) -> None:
        """목록 순서 유지."""
        assert GazetteerService().suggest("san") == ["Santa Marta", "Santiago", "San José"]

    def test_suggest_empty_input(self) -> None:
        """빈 입력은 제안 없음."""
        assert GazetteerService().suggest("   ") == []

    def test_exact_match(self) -> None:
        """정확히 일치하는 지명."""
        gazetteer = GazetteerService()
        assert gazetteer.exact_match("bogotá") == "Bogotá"
        assert gazetteer.exact_match("bogota") is None
        assert gazetteer.exact_match("") is None

    def test_custom_places(self) -> None:
        """지명 목록 교체."""
        gazetteer = GazetteerService(places=("Lima", "Limón"))
        assert gazetteer.suggest("lim") == ["Lima", "Limón"]


class TestMarkerBuilder:
    """MarkerBuilder 테스트."""

    def test_markers_skip_missing_coordinates(self, sample_results: list[BusinessRecord]) -> None:
        """좌표 없는 결과는 마커에서 빠지고 목록에는 남음."""
        layer = MarkerBuilder.build(sample_results, user_location=None)

        assert [m.business_id for m in layer.markers] == [10, 11]
        assert [e.business_id for e in layer.listings] == [10, 11, 12]
        assert layer.listings[2].has_location is False
        assert layer.marker_count == 2
        assert layer.result_count == 3

    def test_selected_flag(self, sample_results: list[BusinessRecord]) -> None:
        """선택된 마커 표시."""
        layer = MarkerBuilder.build(sample_results, None, selected_business_id=11)
        assert [m.selected for m in layer.markers] == [False, True]

    def test_user_marker(self) -> None:
        """유효한 사용자 위치만 마커로."""
        assert MarkerBuilder.build([], Coordinate(10.0, 10.0)).user_marker is not None
        assert MarkerBuilder.build([], Coordinate(0.0, 0.0)).user_marker is None
        assert MarkerBuilder.build([], None).user_marker is None

    def test_marker_carries_callout_fields(self, sample_business: BusinessRecord) -> None:
        """마커에 상세 말풍선 정보 포함."""
        marker = MarkerBuilder.build([sample_business], None).markers[0]
        assert marker.name == "Café de Tacuba"
        assert marker.category_name == "Restaurantes"
        assert marker.opening_hours == "08:00 - 23:30"
        assert marker.image_url == "https://cdn.example.com/tacuba.jpg"


class TestDirectionsLinkBuilder:
    """DirectionsLinkBuilder 테스트."""

    def test_address_destination_is_encoded(self) -> None:
        """주소는 퍼센트 인코딩."""
        business = BusinessRecord(id=1, name="A", address="Calle 10 #5-20, Bogotá")
        url = DirectionsLinkBuilder().build(business)
        assert url == (
            "https://www.google.com/maps/dir/?api=1"
            "&destination=Calle%2010%20%235-20,%20Bogot%C3%A1"
        )

    def test_origin_included(self) -> None:
        """출발지는 lat,lng로 목적지 앞에."""
        business = BusinessRecord(id=1, name="A", address="Lima")
        url = DirectionsLinkBuilder().build(business, origin=Coordinate(4.6, -74.08))
        assert url == (
            "https://www.google.com/maps/dir/?api=1&origin=4.6,-74.08&destination=Lima"
        )

    def test_invalid_origin_ignored(self) -> None:
        """유효하지 않은 출발지는 생략."""
        business = BusinessRecord(id=1, name="A", address="Lima")
        url = DirectionsLinkBuilder().build(business, origin=Coordinate(0.0, 0.0))
        assert "origin=" not in url

    def test_coordinate_destination_without_address(self) -> None:
        """주소가 없으면 좌표 목적지."""
        business = BusinessRecord(id=1, name="A", address="  ", latitude=4.5, longitude=-74.0)
        assert DirectionsLinkBuilder.destination_param(business) == "4.5,-74"

    def test_unavailable_destination(self) -> None:
        """주소/좌표 모두 없으면 DirectionsUnavailableError."""
        with pytest.raises(DirectionsUnavailableError):
            DirectionsLinkBuilder().build(BusinessRecord(id=7, name="A"))


class TestSuggestPlacesQuery:
    """SuggestPlacesQuery 테스트."""

    def test_execute(self) -> None:
        """지명 제안."""
        assert SuggestPlacesQuery().execute("medel") == ["Medellín"]
