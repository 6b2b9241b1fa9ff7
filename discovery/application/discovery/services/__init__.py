"""Application Services."""

from discovery.application.discovery.services.directions_link_builder import (
    DirectionsLinkBuilder,
)
from discovery.application.discovery.services.gazetteer import GazetteerService
from discovery.application.discovery.services.marker_builder import MarkerBuilder
from discovery.application.discovery.services.viewport_policy import (
    ViewportPolicyService,
    centroid,
)

__all__ = [
    "DirectionsLinkBuilder",
    "GazetteerService",
    "MarkerBuilder",
    "ViewportPolicyService",
    "centroid",
]
