"""Search Businesses Query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from discovery.application.common.exceptions import (
    BusinessDirectoryUnavailableError,
    SearchDispatchFailedError,
)
from discovery.domain.entities import BusinessRecord

if TYPE_CHECKING:
    from discovery.application.discovery.session.state import SearchCriteria
    from discovery.application.ports import BusinessDirectoryPort

logger = logging.getLogger(__name__)

DEFAULT_RESULT_LIMIT = 50


class SearchBusinessesQuery:
    """현재 검색 조건으로 사업장을 조회하는 Query."""

    def __init__(
        self, directory: "BusinessDirectoryPort", limit: int = DEFAULT_RESULT_LIMIT
    ) -> None:
        self._directory = directory
        self._limit = limit

    async def execute(self, criteria: "SearchCriteria") -> list[BusinessRecord]:
        """검색 조건 전체를 외부 검색 서비스로 보냅니다.

        Raises:
            SearchDispatchFailedError: 네트워크/서비스 오류
        """
        logger.info(
            "Business search started",
            extra={
                "text": criteria.text,
                "category": criteria.category,
                "location": criteria.location_query,
            },
        )
        try:
            records = await self._directory.search(
                text=criteria.text.strip() or None,
                category=criteria.category or None,
                location=criteria.location_query.strip() or None,
                limit=self._limit,
            )
        except BusinessDirectoryUnavailableError as e:
            logger.error("Business search failed", extra={"error": e.reason})
            raise SearchDispatchFailedError(e.reason) from e

        results = list(records)
        logger.info("Business search completed", extra={"results_count": len(results)})
        return results
