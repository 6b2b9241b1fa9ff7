"""HTTP Controllers."""

from discovery.presentation.http.controllers.discovery import router as discovery_router
from discovery.presentation.http.controllers.health import router as health_router

__all__ = ["discovery_router", "health_router"]
