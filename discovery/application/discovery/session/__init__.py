"""Discovery Session Layer."""

from discovery.application.discovery.session.map_discovery_session import (
    MapDiscoverySession,
    SessionOptions,
)
from discovery.application.discovery.session.registry import (
    DiscoverySessionRegistry,
    SessionEntry,
)
from discovery.application.discovery.session.result_presenter import ResultPresenter
from discovery.application.discovery.session.search_criteria_manager import (
    SearchCriteriaManager,
)
from discovery.application.discovery.session.snapshot import MapSnapshot
from discovery.application.discovery.session.state import (
    DiscoveryState,
    SearchCriteria,
    UIState,
)
from discovery.application.discovery.session.viewport_controller import ViewportController

__all__ = [
    "DiscoveryState",
    "DiscoverySessionRegistry",
    "MapDiscoverySession",
    "MapSnapshot",
    "ResultPresenter",
    "SearchCriteria",
    "SearchCriteriaManager",
    "SessionEntry",
    "SessionOptions",
    "UIState",
    "ViewportController",
]
