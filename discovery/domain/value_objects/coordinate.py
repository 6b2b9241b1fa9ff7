"""Coordinate Value Object."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from discovery.domain.exceptions.coordinate import InvalidCoordinateError


@dataclass(frozen=True)
class Coordinate:
    """위도/경도 쌍.

    외부 데이터(검색 결과, 기기 위치)를 그대로 담을 수 있도록 생성 시점에는
    검증하지 않습니다. 지도에 그려도 되는지는 ``is_valid``로 판단합니다.
    """

    latitude: float
    longitude: float

    @property
    def is_valid(self) -> bool:
        """두 값이 모두 유한하고, 동시에 0이 아니면 유효합니다."""
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            return False
        return not (self.latitude == 0 and self.longitude == 0)

    def serialize(self) -> str:
        """``"lat,lng"`` 문자열로 직렬화합니다."""
        return f"{_format_number(self.latitude)},{_format_number(self.longitude)}"

    @classmethod
    def parse(cls, raw: str) -> Coordinate:
        """``"lat,lng"`` 문자열을 파싱합니다.

        Raises:
            InvalidCoordinateError: 형식이 잘못되었거나 유효하지 않은 좌표
        """
        parts = [part.strip() for part in raw.split(",")]
        if len(parts) != 2:
            raise InvalidCoordinateError(raw)
        try:
            coordinate = cls(latitude=float(parts[0]), longitude=float(parts[1]))
        except ValueError:
            raise InvalidCoordinateError(raw)
        if not coordinate.is_valid:
            raise InvalidCoordinateError(raw)
        return coordinate

    @classmethod
    def from_raw(cls, latitude: Any, longitude: Any) -> Coordinate | None:
        """원시 값에서 유효한 좌표만 만들어 반환합니다."""
        lat = _to_float(latitude)
        lng = _to_float(longitude)
        if lat is None or lng is None:
            return None
        coordinate = cls(latitude=lat, longitude=lng)
        return coordinate if coordinate.is_valid else None


def _to_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _format_number(value: float) -> str:
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text
