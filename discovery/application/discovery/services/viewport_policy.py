"""Viewport Policy Service.

선택/검색/사용자 위치 상태에 따라 지도 중심과 줌을 결정합니다.
Port 의존성이 없는 순수 로직입니다.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence

from discovery.domain.entities import BusinessRecord
from discovery.domain.value_objects import Coordinate, ViewportState

DEFAULT_CENTER = Coordinate(latitude=19.4326, longitude=-99.1332)
DEFAULT_ZOOM = 12

SELECTED_ZOOM = 15
SINGLE_RESULT_ZOOM = 15
FEW_RESULTS_ZOOM = 13
MANY_RESULTS_ZOOM = 12
FEW_RESULTS_THRESHOLD = 5
USER_LOCATION_ZOOM = 13
ALL_RESULTS_ZOOM = 12


@dataclass(frozen=True)
class ViewportInputs:
    """뷰포트 재계산 입력."""

    selected: BusinessRecord | None
    filtered: Sequence[BusinessRecord]
    user_location: Coordinate | None
    search_active: bool
    results: Sequence[BusinessRecord]
    default_center: Coordinate = DEFAULT_CENTER
    default_zoom: int = DEFAULT_ZOOM


@dataclass(frozen=True)
class ViewportRule:
    """(적용 조건, 결정 함수) 쌍.

    ``resolve``가 None을 반환하면 다음 규칙으로 넘어갑니다.
    """

    name: str
    applies: Callable[[ViewportInputs], bool]
    resolve: Callable[[ViewportInputs], ViewportState | None]


def centroid(coordinates: Sequence[Coordinate]) -> Coordinate | None:
    """위도/경도 각각의 산술 평균. 계산할 수 없으면 None."""
    if not coordinates:
        return None
    count = len(coordinates)
    latitude = math.fsum(c.latitude for c in coordinates) / count
    longitude = math.fsum(c.longitude for c in coordinates) / count
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        return None
    return Coordinate(latitude=latitude, longitude=longitude)


def valid_coordinates(businesses: Sequence[BusinessRecord]) -> list[Coordinate]:
    coordinates = []
    for business in businesses:
        coordinate = business.coordinates()
        if coordinate is not None:
            coordinates.append(coordinate)
    return coordinates


def _zoom_for_result_count(count: int) -> int:
    if count == 1:
        return SINGLE_RESULT_ZOOM
    if count < FEW_RESULTS_THRESHOLD:
        return FEW_RESULTS_ZOOM
    return MANY_RESULTS_ZOOM


def _focus_selected(inputs: ViewportInputs) -> ViewportState | None:
    coordinate = inputs.selected.coordinates() if inputs.selected else None
    if coordinate is None:
        return None
    return ViewportState(center=coordinate, zoom=SELECTED_ZOOM)


def _fit_search_results(inputs: ViewportInputs) -> ViewportState | None:
    coordinates = valid_coordinates(inputs.filtered)
    center = centroid(coordinates)
    if center is None:
        return None
    return ViewportState(center=center, zoom=_zoom_for_result_count(len(coordinates)))


def _center_on_user(inputs: ViewportInputs) -> ViewportState | None:
    location = inputs.user_location
    if location is None or not location.is_valid:
        return None
    return ViewportState(center=location, zoom=USER_LOCATION_ZOOM)


def _fit_all_results(inputs: ViewportInputs) -> ViewportState | None:
    center = centroid(valid_coordinates(inputs.results))
    if center is None:
        return None
    return ViewportState(center=center, zoom=ALL_RESULTS_ZOOM)


def _fallback(inputs: ViewportInputs) -> ViewportState:
    return ViewportState(center=inputs.default_center, zoom=inputs.default_zoom)


VIEWPORT_RULES: tuple[ViewportRule, ...] = (
    ViewportRule("selected_business", lambda i: i.selected is not None, _focus_selected),
    ViewportRule("search_results", lambda i: i.search_active, _fit_search_results),
    ViewportRule("user_location", lambda i: i.user_location is not None, _center_on_user),
    ViewportRule("all_results", lambda i: bool(i.results), _fit_all_results),
    ViewportRule("default", lambda i: True, _fallback),
)


class ViewportPolicyService:
    """뷰포트 정책 서비스.

    ``VIEWPORT_RULES``를 우선순위대로 평가해 처음 적용되는 결과를 사용합니다.
    """

    @staticmethod
    def recompute(
        selected: BusinessRecord | None,
        filtered: Sequence[BusinessRecord],
        user_location: Coordinate | None,
        search_active: bool,
        results: Sequence[BusinessRecord] | None = None,
        default_center: Coordinate = DEFAULT_CENTER,
        default_zoom: int = DEFAULT_ZOOM,
    ) -> ViewportState:
        """지도 중심과 줌을 다시 계산합니다.

        Args:
            selected: 선택된 사업장
            filtered: 현재 검색 결과
            user_location: 사용자 위치
            search_active: 검색어/카테고리 필터 적용 여부
            results: 필터 전 전체 결과 (생략 시 ``filtered``)

        Returns:
            ViewportState (중심은 항상 유한한 값)
        """
        inputs = ViewportInputs(
            selected=selected,
            filtered=filtered,
            user_location=user_location,
            search_active=search_active,
            results=filtered if results is None else results,
            default_center=default_center,
            default_zoom=default_zoom,
        )
        return ViewportPolicyService.evaluate(inputs)[1]

    @staticmethod
    def evaluate(inputs: ViewportInputs) -> tuple[str, ViewportState]:
        """적용된 규칙 이름과 결과를 함께 반환합니다."""
        for rule in VIEWPORT_RULES:
            if not rule.applies(inputs):
                continue
            viewport = rule.resolve(inputs)
            if viewport is not None:
                return rule.name, viewport
        return "default", _fallback(inputs)
