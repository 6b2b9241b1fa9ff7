"""Dependency Injection for FastAPI."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends

from discovery.application.discovery.queries import ListCategoriesQuery, SuggestPlacesQuery
from discovery.application.discovery.session import (
    DiscoverySessionRegistry,
    MapDiscoverySession,
    SessionEntry,
    SessionOptions,
)
from discovery.application.ports import BusinessDirectoryPort, GeolocationProviderPort
from discovery.domain.value_objects import Coordinate
from discovery.infrastructure.integrations.business_api import BusinessApiHttpClient
from discovery.infrastructure.integrations.geolocation import (
    ClientReportedGeolocationProvider,
    IpGeolocationHttpClient,
)
from discovery.setup.config import Settings, get_settings

logger = logging.getLogger(__name__)

_business_client: BusinessDirectoryPort | None = None
_session_registry: DiscoverySessionRegistry | None = None


def get_business_directory() -> BusinessDirectoryPort:
    """사업장 디렉터리 클라이언트 싱글톤을 반환합니다."""
    global _business_client  # noqa: PLW0603
    if _business_client is None:
        settings = get_settings()
        _business_client = BusinessApiHttpClient(
            base_url=settings.business_api_url,
            timeout=settings.business_api_timeout,
        )
        logger.info("Business API HTTP client created", extra={"url": settings.business_api_url})
    return _business_client


async def close_business_directory() -> None:
    global _business_client  # noqa: PLW0603
    if _business_client is not None:
        await _business_client.close()
        _business_client = None


def get_session_registry() -> DiscoverySessionRegistry:
    """세션 저장소 싱글톤을 반환합니다."""
    global _session_registry  # noqa: PLW0603
    if _session_registry is None:
        _session_registry = DiscoverySessionRegistry(get_settings().session_max_count)
    return _session_registry


def session_options(settings: Settings) -> SessionOptions:
    return SessionOptions(
        result_limit=settings.search_result_limit,
        near_me_timeout=settings.near_me_timeout_seconds,
        initial_location_timeout=settings.initial_location_timeout_seconds,
        default_center=Coordinate(
            latitude=settings.default_center_latitude,
            longitude=settings.default_center_longitude,
        ),
        default_zoom=settings.default_zoom,
        directions_base_url=settings.directions_base_url,
    )


def build_session_entry(
    directory: BusinessDirectoryPort,
    settings: Settings,
    client_ip: str | None = None,
) -> SessionEntry:
    """세션과 클라이언트 위치 입력 채널을 만듭니다."""
    fallback: GeolocationProviderPort | None = None
    if settings.ip_geolocation_enabled and client_ip:
        fallback = IpGeolocationHttpClient(client_ip, base_url=settings.ip_geolocation_url)
    feed = ClientReportedGeolocationProvider(fallback=fallback)
    session = MapDiscoverySession(directory, feed, options=session_options(settings))
    return SessionEntry(session=session, position_feed=feed)


def get_suggest_places_query() -> SuggestPlacesQuery:
    """SuggestPlacesQuery를 주입합니다."""
    return SuggestPlacesQuery()


def get_list_categories_query(
    directory: Annotated[BusinessDirectoryPort, Depends(get_business_directory)],
) -> ListCategoriesQuery:
    """ListCategoriesQuery를 주입합니다."""
    return ListCategoriesQuery(directory)
