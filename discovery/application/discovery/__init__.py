"""Map Discovery Application Layer."""

from discovery.application.discovery.dto import (
    DirectionsLinkDTO,
    LocationResolution,
    MapLayerDTO,
)
from discovery.application.discovery.queries import (
    BuildDirectionsQuery,
    ListCategoriesQuery,
    ResolveLocationQuery,
    SearchBusinessesQuery,
    SuggestPlacesQuery,
)
from discovery.application.discovery.services import (
    DirectionsLinkBuilder,
    GazetteerService,
    MarkerBuilder,
    ViewportPolicyService,
)
from discovery.application.discovery.session import (
    DiscoverySessionRegistry,
    MapDiscoverySession,
    MapSnapshot,
    SessionEntry,
    SessionOptions,
)

__all__ = [
    "BuildDirectionsQuery",
    "DirectionsLinkBuilder",
    "DirectionsLinkDTO",
    "DiscoverySessionRegistry",
    "GazetteerService",
    "ListCategoriesQuery",
    "LocationResolution",
    "MapDiscoverySession",
    "MapLayerDTO",
    "MapSnapshot",
    "MarkerBuilder",
    "ResolveLocationQuery",
    "SearchBusinessesQuery",
    "SessionEntry",
    "SessionOptions",
    "SuggestPlacesQuery",
    "ViewportPolicyService",
]
