"""Marker Builder Service.

검색 결과를 지도 마커와 목록 항목으로 변환합니다.
좌표가 없거나 유효하지 않은 레코드는 마커에서만 빠지고 목록에는 남습니다.
"""

from __future__ import annotations

from typing import Sequence

from discovery.application.discovery.dto import (
    BusinessMarkerDTO,
    ListingEntryDTO,
    MapLayerDTO,
    UserMarkerDTO,
)
from discovery.domain.entities import BusinessRecord
from discovery.domain.value_objects import Coordinate


class MarkerBuilder:
    """마커 빌더 서비스."""

    @staticmethod
    def plottable(results: Sequence[BusinessRecord]) -> list[BusinessRecord]:
        """유효한 좌표를 가진 결과만 반환합니다."""
        return [business for business in results if business.has_location]

    @classmethod
    def build(
        cls,
        results: Sequence[BusinessRecord],
        user_location: Coordinate | None,
        selected_business_id: int | None = None,
    ) -> MapLayerDTO:
        markers = [
            cls._to_marker(business, selected=business.id == selected_business_id)
            for business in cls.plottable(results)
        ]
        user_marker = None
        if user_location is not None and user_location.is_valid:
            user_marker = UserMarkerDTO(
                latitude=user_location.latitude,
                longitude=user_location.longitude,
            )
        listings = [
            ListingEntryDTO(
                business_id=business.id,
                name=business.name,
                category_name=business.category_name,
                address=business.address,
                phone=business.phone,
                has_location=business.has_location,
            )
            for business in results
        ]
        return MapLayerDTO(markers=markers, user_marker=user_marker, listings=listings)

    @staticmethod
    def _to_marker(business: BusinessRecord, selected: bool) -> BusinessMarkerDTO:
        coordinate = business.coordinates()
        assert coordinate is not None
        return BusinessMarkerDTO(
            business_id=business.id,
            name=business.name,
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
            category_name=business.category_name,
            address=business.address,
            phone=business.phone,
            description=business.description,
            opening_hours=business.opening_hours,
            image_url=business.image_url,
            selected=selected,
        )
