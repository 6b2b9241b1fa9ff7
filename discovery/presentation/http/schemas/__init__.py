"""HTTP Schemas."""

from discovery.presentation.http.schemas.discovery import (
    CategoryCriteriaRequest,
    CoordinateEntry,
    CreateSessionRequest,
    CustomLocationRequest,
    DirectionsRequest,
    DirectionsResponse,
    LocationResolutionEntry,
    NearMeRequest,
    NearMeResponse,
    PositionReport,
    SelectionRequest,
    SessionResponse,
    SnapshotResponse,
    SuggestionSelectRequest,
    SuggestResponse,
    TextCriteriaRequest,
    ViewportEntry,
    ViewportRequest,
)

__all__ = [
    "CategoryCriteriaRequest",
    "CoordinateEntry",
    "CreateSessionRequest",
    "CustomLocationRequest",
    "DirectionsRequest",
    "DirectionsResponse",
    "LocationResolutionEntry",
    "NearMeRequest",
    "NearMeResponse",
    "PositionReport",
    "SelectionRequest",
    "SessionResponse",
    "SnapshotResponse",
    "SuggestionSelectRequest",
    "SuggestResponse",
    "TextCriteriaRequest",
    "ViewportEntry",
    "ViewportRequest",
]
