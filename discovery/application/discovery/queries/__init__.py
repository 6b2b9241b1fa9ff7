"""Application Queries."""

from discovery.application.discovery.queries.build_directions import BuildDirectionsQuery
from discovery.application.discovery.queries.list_categories import ListCategoriesQuery
from discovery.application.discovery.queries.resolve_location import ResolveLocationQuery
from discovery.application.discovery.queries.search_businesses import SearchBusinessesQuery
from discovery.application.discovery.queries.suggest_places import SuggestPlacesQuery

__all__ = [
    "BuildDirectionsQuery",
    "ListCategoriesQuery",
    "ResolveLocationQuery",
    "SearchBusinessesQuery",
    "SuggestPlacesQuery",
]
