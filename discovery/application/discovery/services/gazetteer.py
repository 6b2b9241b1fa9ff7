"""Gazetteer Service.

위치 직접 입력 시 자동완성에 쓰는 정적 지명 목록과 부분 문자열 검색.
"""

from __future__ import annotations

GAZETTEER: tuple[str, ...] = (
    "Ciudad de México",
    "Guadalajara",
    "Monterrey",
    "Puebla",
    "Querétaro",
    "Cancún",
    "Mérida",
    "Oaxaca",
    "Tijuana",
    "León",
    "Boca del Río",
    "Veracruz",
    "Bogotá",
    "Medellín",
    "Cali",
    "Barranquilla",
    "Cartagena",
    "Bucaramanga",
    "Santa Marta",
    "Lima",
    "Quito",
    "Santiago",
    "Buenos Aires",
    "Montevideo",
    "Caracas",
    "Panamá",
    "San José",
    "Madrid",
    "Barcelona",
)


class GazetteerService:
    """지명 자동완성 서비스."""

    def __init__(self, places: tuple[str, ...] = GAZETTEER) -> None:
        self._places = places

    @property
    def places(self) -> tuple[str, ...]:
        return self._places

    def suggest(self, text: str) -> list[str]:
        """대소문자 구분 없이 ``text``를 포함하는 지명을 목록 순서대로 반환합니다."""
        needle = text.strip().casefold()
        if not needle:
            return []
        return [place for place in self._places if needle in place.casefold()]

    def exact_match(self, text: str) -> str | None:
        needle = text.strip().casefold()
        if not needle:
            return None
        for place in self._places:
            if place.casefold() == needle:
                return place
        return None
