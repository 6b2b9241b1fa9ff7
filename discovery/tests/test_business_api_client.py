"""BusinessApiHttpClient 단위 테스트."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from discovery.application.common.exceptions import BusinessDirectoryUnavailableError
from discovery.application.discovery.services import DirectionsLinkBuilder
from discovery.infrastructure.integrations.business_api import BusinessApiHttpClient


def _response(payload: Any) -> MagicMock:
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status = MagicMock()
    return response


def _status_error(status_code: int) -> MagicMock:
    request = httpx.Request("GET", "http://directory.test/api/businesses/1")
    error_response = httpx.Response(status_code, request=request)
    response = MagicMock()
    response.raise_for_status = MagicMock(
        side_effect=httpx.HTTPStatusError("error", request=request, response=error_response)
    )
    return response


@pytest.fixture
def client() -> BusinessApiHttpClient:
    """테스트용 클라이언트."""
    return BusinessApiHttpClient(base_url="http://directory.test/api/")


@pytest.fixture
def mock_http_client() -> AsyncMock:
    """httpx.AsyncClient mock."""
    return AsyncMock()


class TestInit:
    """초기화 테스트."""

    def test_trailing_slash_stripped(self, client: BusinessApiHttpClient) -> None:
        """base_url 끝 슬래시 제거."""
        assert client._base_url == "http://directory.test/api"
        assert client._timeout == 10.0
        assert client._client is None


class TestSearch:
    """search() 테스트."""

    async def test_parses_records(
        self, client: BusinessApiHttpClient, mock_http_client: AsyncMock
    ) -> None:
        """레코드 파싱: 문자열 숫자 변환, 대표 이미지 선택."""
        mock_http_client.get = AsyncMock(
            return_value=_response(
                {
                    "success": True,
                    "data": [
                        {
                            "id": "7",
                            "name": "Librería Gandhi",
                            "address": "Av. Miguel Ángel de Quevedo 121",
                            "category_name": "Librerías",
                            "latitude": "19.3464",
                            "longitude": "-99.1791",
                            "images": [
                                {"image_url": "https://cdn.example.com/a.jpg"},
                                {"image_url": "https://cdn.example.com/b.jpg", "is_primary": True},
                            ],
                        },
                        {"id": 8, "name": "Sin mapa", "latitude": "n/a"},
                        {"name": "No id"},
                    ],
                }
            )
        )

        with patch.object(client, "_get_client", return_value=mock_http_client):
            records = await client.search(text="libros", limit=50)

        assert [r.id for r in records] == [7, 8]
        assert records[0].latitude == 19.3464
        assert records[0].image_url == "https://cdn.example.com/b.jpg"
        assert records[1].latitude is None
        assert records[1].has_location is False

    async def test_omits_empty_filters(
        self, client: BusinessApiHttpClient, mock_http_client: AsyncMock
    ) -> None:
        """빈 필터는 쿼리에서 생략."""
        mock_http_client.get = AsyncMock(return_value=_response({"success": True, "data": []}))

        with patch.object(client, "_get_client", return_value=mock_http_client):
            await client.search(text=None, category="Cafés", location="", limit=50)

        mock_http_client.get.assert_awaited_once_with(
            "/businesses", params={"category": "Cafés", "limit": 50}
        )

    async def test_unsuccessful_envelope(
        self, client: BusinessApiHttpClient, mock_http_client: AsyncMock
    ) -> None:
        """success=false면 BusinessDirectoryUnavailableError."""
        mock_http_client.get = AsyncMock(
            return_value=_response({"success": False, "message": "Database offline"})
        )

        with patch.object(client, "_get_client", return_value=mock_http_client):
            with pytest.raises(BusinessDirectoryUnavailableError) as exc_info:
                await client.search()
        assert exc_info.value.reason == "Database offline"

    async def test_timeout(
        self, client: BusinessApiHttpClient, mock_http_client: AsyncMock
    ) -> None:
        """타임아웃은 BusinessDirectoryUnavailableError."""
        mock_http_client.get = AsyncMock(side_effect=httpx.ReadTimeout("timed out"))

        with patch.object(client, "_get_client", return_value=mock_http_client):
            with pytest.raises(BusinessDirectoryUnavailableError) as exc_info:
                await client.search()
        assert exc_info.value.reason == "timeout"

    async def test_http_error(
        self, client: BusinessApiHttpClient, mock_http_client: AsyncMock
    ) -> None:
        """5xx 응답은 상태 코드와 함께 실패."""
        mock_http_client.get = AsyncMock(return_value=_status_error(500))

        with patch.object(client, "_get_client", return_value=mock_http_client):
            with pytest.raises(BusinessDirectoryUnavailableError) as exc_info:
                await client.search()
        assert exc_info.value.status_code == 500


class TestGetBusiness:
    """get_business() 테스트."""

    async def test_found(self, client: BusinessApiHttpClient, mock_http_client: AsyncMock) -> None:
        """단건 조회."""
        mock_http_client.get = AsyncMock(
            return_value=_response({"success": True, "data": {"id": 3, "name": "Mercado"}})
        )

        with patch.object(client, "_get_client", return_value=mock_http_client):
            record = await client.get_business(3)

        assert record is not None
        assert record.name == "Mercado"
        mock_http_client.get.assert_awaited_once_with("/businesses/3", params=None)

    async def test_not_found_returns_none(
        self, client: BusinessApiHttpClient, mock_http_client: AsyncMock
    ) -> None:
        """404는 None."""
        mock_http_client.get = AsyncMock(return_value=_status_error(404))

        with patch.object(client, "_get_client", return_value=mock_http_client):
            assert await client.get_business(1) is None

    async def test_non_string_fields_coerced(
        self, client: BusinessApiHttpClient, mock_http_client: AsyncMock
    ) -> None:
        """문자열이 아닌 텍스트 필드는 문자열로 변환, 객체 값은 무시."""
        mock_http_client.get = AsyncMock(
            return_value=_response(
                {
                    "success": True,
                    "data": {
                        "id": 4,
                        "name": "Ferretería",
                        "address": 12345,
                        "phone": 3001234567,
                        "website": {"url": "http://x.test"},
                    },
                }
            )
        )

        with patch.object(client, "_get_client", return_value=mock_http_client):
            record = await client.get_business(4)

        assert record is not None
        assert record.address == "12345"
        assert record.phone == "3001234567"
        assert record.website is None
        assert DirectionsLinkBuilder.destination_param(record) == "12345"


class TestListCategories:
    """list_categories() 테스트."""

    async def test_names(self, client: BusinessApiHttpClient, mock_http_client: AsyncMock) -> None:
        """카테고리 이름만 추출."""
        mock_http_client.get = AsyncMock(
            return_value=_response(
                {"success": True, "data": [{"id": 1, "name": "Cafés"}, {"id": 2}, "x"]}
            )
        )

        with patch.object(client, "_get_client", return_value=mock_http_client):
            assert await client.list_categories() == ["Cafés"]


class TestClose:
    """close() 테스트."""

    async def test_close_releases_client(
        self, client: BusinessApiHttpClient, mock_http_client: AsyncMock
    ) -> None:
        """클라이언트 종료."""
        client._client = mock_http_client

        await client.close()

        mock_http_client.aclose.assert_awaited_once()
        assert client._client is None
