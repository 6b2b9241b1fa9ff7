"""Location 도메인 예외."""

from discovery.domain.enums import LocationFailureReason
from discovery.domain.exceptions.base import DomainError


class LocationError(DomainError):
    """기기 위치 조회 실패."""

    reason: LocationFailureReason = LocationFailureReason.UNAVAILABLE

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or DEFAULT_MESSAGES[self.reason])


class LocationDeniedError(LocationError):
    """위치 권한 거부."""

    reason = LocationFailureReason.DENIED


class LocationTimeoutError(LocationError):
    """위치 조회 시간 초과."""

    reason = LocationFailureReason.TIMEOUT


class LocationUnavailableError(LocationError):
    """위치를 확인할 수 없음."""

    reason = LocationFailureReason.UNAVAILABLE


class LocationUnsupportedError(LocationError):
    """위치 조회 기능이 없음."""

    reason = LocationFailureReason.UNSUPPORTED


DEFAULT_MESSAGES: dict[LocationFailureReason, str] = {
    LocationFailureReason.DENIED: "Location permission denied",
    LocationFailureReason.TIMEOUT: "Location request timed out",
    LocationFailureReason.UNAVAILABLE: "Location unavailable",
    LocationFailureReason.UNSUPPORTED: "Geolocation is not supported",
}

ERRORS_BY_REASON: dict[LocationFailureReason, type[LocationError]] = {
    LocationFailureReason.DENIED: LocationDeniedError,
    LocationFailureReason.TIMEOUT: LocationTimeoutError,
    LocationFailureReason.UNAVAILABLE: LocationUnavailableError,
    LocationFailureReason.UNSUPPORTED: LocationUnsupportedError,
}
