"""Location Failure Reason Enum."""

from enum import Enum


class LocationFailureReason(str, Enum):
    """위치 조회 실패 사유."""

    DENIED = "permission_denied"
    TIMEOUT = "timeout"
    UNAVAILABLE = "position_unavailable"
    UNSUPPORTED = "unsupported"
