"""Geolocation Integrations."""

from discovery.infrastructure.integrations.geolocation.client_reported import (
    ClientReportedGeolocationProvider,
)
from discovery.infrastructure.integrations.geolocation.ip_geolocation_client import (
    IpGeolocationHttpClient,
)

__all__ = ["ClientReportedGeolocationProvider", "IpGeolocationHttpClient"]
