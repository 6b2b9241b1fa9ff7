"""Discovery Domain Layer."""

from discovery.domain.entities import BusinessRecord
from discovery.domain.enums import LocationFailureReason, LocationMode
from discovery.domain.value_objects import Coordinate, ViewportState

__all__ = [
    "BusinessRecord",
    "Coordinate",
    "ViewportState",
    "LocationFailureReason",
    "LocationMode",
]
