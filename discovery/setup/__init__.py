"""Setup Module."""

from discovery.setup.config import Settings, get_settings
from discovery.setup.dependencies import (
    build_session_entry,
    get_business_directory,
    get_list_categories_query,
    get_session_registry,
    get_suggest_places_query,
)

__all__ = [
    "Settings",
    "get_settings",
    "build_session_entry",
    "get_business_directory",
    "get_list_categories_query",
    "get_session_registry",
    "get_suggest_places_query",
]
