"""BusinessRecord Entity."""

from __future__ import annotations

from dataclasses import dataclass

from discovery.domain.value_objects import Coordinate


@dataclass(frozen=True)
class BusinessRecord:
    """디렉터리 서비스에서 받은 사업장 레코드.

    읽기 전용이며 이름과 ID 외의 필드는 모두 없을 수 있습니다.
    """

    id: int
    name: str
    description: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    category_name: str | None = None
    opening_hours: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    image_url: str | None = None

    def coordinates(self) -> Coordinate | None:
        """유효한 좌표가 있을 때만 Coordinate를 반환합니다."""
        return Coordinate.from_raw(self.latitude, self.longitude)

    @property
    def has_location(self) -> bool:
        return self.coordinates() is not None
