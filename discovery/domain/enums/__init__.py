"""Domain Enums."""

from discovery.domain.enums.location_failure_reason import LocationFailureReason
from discovery.domain.enums.location_mode import LocationMode

__all__ = ["LocationFailureReason", "LocationMode"]
