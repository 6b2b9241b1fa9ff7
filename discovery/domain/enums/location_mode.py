"""Location Mode Enum."""

from enum import Enum


class LocationMode(str, Enum):
    """위치 필터 입력 모드."""

    NONE = "none"
    NEAR_ME = "near_me"
    CUSTOM = "custom"
