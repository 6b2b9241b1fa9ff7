"""Coordinate 도메인 예외."""

from discovery.domain.exceptions.base import DomainError


class InvalidCoordinateError(DomainError):
    """좌표 문자열이 잘못되었거나 유효하지 않은 좌표."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Invalid coordinate '{raw}'")
