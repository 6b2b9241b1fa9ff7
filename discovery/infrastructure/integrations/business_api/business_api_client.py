"""사업장 디렉터리 HTTP 클라이언트.

디렉터리 REST API의 HTTP 구현체.
- 사업장 검색: GET /businesses?search=&category=&location=&limit=
- 사업장 조회: GET /businesses/{id}
- 카테고리 목록: GET /categories
- 응답 형식: {"success": bool, "data": ..., "message"?: str}
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Sequence

import httpx

from discovery.application.common.exceptions import BusinessDirectoryUnavailableError
from discovery.application.ports import BusinessDirectoryPort
from discovery.domain.entities import BusinessRecord

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class BusinessApiHttpClient(BusinessDirectoryPort):
    """사업장 디렉터리 HTTP 클라이언트."""

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self._base_url,
                        headers={"Content-Type": "application/json"},
                        timeout=self._timeout,
                    )
        return self._client

    async def search(
        self,
        text: str | None = None,
        category: str | None = None,
        location: str | None = None,
        limit: int = 50,
    ) -> Sequence[BusinessRecord]:
        """검색 조건으로 사업장 검색."""
        params: dict[str, Any] = {}
        if text:
            params["search"] = text
        if category:
            params["category"] = category
        if location:
            params["location"] = location
        if limit:
            params["limit"] = limit

        data = await self._get("/businesses", params=params)
        if not isinstance(data, list):
            raise BusinessDirectoryUnavailableError("unexpected search payload")
        return [record for record in map(self._parse_business, data) if record is not None]

    async def get_business(self, business_id: int) -> BusinessRecord | None:
        try:
            data = await self._get(f"/businesses/{business_id}")
        except BusinessDirectoryUnavailableError as e:
            if e.status_code == 404:
                return None
            raise
        if not isinstance(data, dict):
            return None
        return self._parse_business(data)

    async def list_categories(self) -> list[str]:
        data = await self._get("/categories")
        if not isinstance(data, list):
            raise BusinessDirectoryUnavailableError("unexpected categories payload")
        return [str(item["name"]) for item in data if isinstance(item, dict) and item.get("name")]

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        client = await self._get_client()
        try:
            response = await client.get(path, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Business API HTTP error",
                extra={"status_code": e.response.status_code, "path": path},
            )
            raise BusinessDirectoryUnavailableError(
                f"HTTP {e.response.status_code}", status_code=e.response.status_code
            ) from e
        except httpx.TimeoutException as e:
            logger.error("Business API timeout", extra={"path": path})
            raise BusinessDirectoryUnavailableError("timeout") from e
        except httpx.HTTPError as e:
            logger.error("Business API request failed", extra={"path": path, "error": str(e)})
            raise BusinessDirectoryUnavailableError(str(e) or type(e).__name__) from e
        except ValueError as e:
            logger.error("Business API returned invalid JSON", extra={"path": path})
            raise BusinessDirectoryUnavailableError("invalid JSON") from e

        if not isinstance(payload, dict):
            raise BusinessDirectoryUnavailableError("unexpected response envelope")
        if payload.get("success") is False:
            raise BusinessDirectoryUnavailableError(payload.get("message") or "request rejected")
        return payload.get("data")

    def _parse_business(self, doc: Any) -> BusinessRecord | None:
        if not isinstance(doc, dict):
            return None
        business_id = _to_int(doc.get("id"))
        if business_id is None:
            return None
        return BusinessRecord(
            id=business_id,
            name=_to_text(doc.get("name")) or "",
            description=_to_text(doc.get("description")),
            address=_to_text(doc.get("address")),
            phone=_to_text(doc.get("phone")),
            email=_to_text(doc.get("email")),
            website=_to_text(doc.get("website")),
            category_name=_to_text(doc.get("category_name")),
            opening_hours=_to_text(doc.get("opening_hours")),
            latitude=_to_float(doc.get("latitude")),
            longitude=_to_float(doc.get("longitude")),
            image_url=self._primary_image(doc.get("images")),
        )

    @staticmethod
    def _primary_image(images: Any) -> str | None:
        if not isinstance(images, list):
            return None
        candidates = [img for img in images if isinstance(img, dict) and img.get("image_url")]
        if not candidates:
            return None
        for image in candidates:
            if image.get("is_primary"):
                return image["image_url"]
        return candidates[0]["image_url"]

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None


def _to_text(value: Any) -> str | None:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def _to_float(value: Any) -> float | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _to_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
