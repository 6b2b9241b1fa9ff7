"""Test fixtures for discovery tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from discovery.domain.entities import BusinessRecord
from discovery.domain.value_objects import Coordinate


@pytest.fixture
def mock_directory() -> AsyncMock:
    """BusinessDirectoryPort mock."""
    directory = AsyncMock()
    directory.search = AsyncMock(return_value=[])
    directory.get_business = AsyncMock(return_value=None)
    directory.list_categories = AsyncMock(return_value=[])
    return directory


@pytest.fixture
def mock_geolocation() -> AsyncMock:
    """GeolocationProviderPort mock. 기본은 (10, 10)."""
    provider = AsyncMock()
    provider.locate = AsyncMock(return_value=Coordinate(latitude=10.0, longitude=10.0))
    return provider


@pytest.fixture
def sample_business() -> BusinessRecord:
    """테스트용 사업장."""
    return BusinessRecord(
        id=1,
        name="Café de Tacuba",
        description="Cocina mexicana tradicional",
        address="Tacuba 28, Centro, Ciudad de México",
        phone="+52 55 5521 2048",
        category_name="Restaurantes",
        opening_hours="08:00 - 23:30",
        latitude=19.4361,
        longitude=-99.1386,
        image_url="https://cdn.example.com/tacuba.jpg",
    )


@pytest.fixture
def sample_results() -> list[BusinessRecord]:
    """좌표 있는 결과 2개와 좌표 없는 결과 1개."""
    return [
        BusinessRecord(id=10, name="Panadería Norte", latitude=4.0, longitude=-74.0),
        BusinessRecord(id=11, name="Ferretería Sur", latitude=6.0, longitude=-75.0),
        BusinessRecord(id=12, name="Taller sin mapa", address="Calle 10 #5-20"),
    ]
