"""Application DTOs."""

from discovery.application.discovery.dto.directions_link import DirectionsLinkDTO
from discovery.application.discovery.dto.location_resolution import LocationResolution
from discovery.application.discovery.dto.map_view import (
    BusinessMarkerDTO,
    ListingEntryDTO,
    MapLayerDTO,
    UserMarkerDTO,
)

__all__ = [
    "BusinessMarkerDTO",
    "DirectionsLinkDTO",
    "ListingEntryDTO",
    "LocationResolution",
    "MapLayerDTO",
    "UserMarkerDTO",
]
