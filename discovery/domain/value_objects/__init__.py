"""Domain Value Objects."""

from discovery.domain.value_objects.coordinate import Coordinate
from discovery.domain.value_objects.viewport import ViewportState

__all__ = ["Coordinate", "ViewportState"]
