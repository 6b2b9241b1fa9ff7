"""Application Ports."""

from discovery.application.ports.business_directory import BusinessDirectoryPort
from discovery.application.ports.geolocation_provider import (
    GeolocationProviderPort,
    PositionReportPort,
)

__all__ = ["BusinessDirectoryPort", "GeolocationProviderPort", "PositionReportPort"]
