"""Suggest Places Query.

자동완성을 위한 지명 제안 Query.
"""

from __future__ import annotations

import logging

from discovery.application.discovery.services import GazetteerService

logger = logging.getLogger(__name__)


class SuggestPlacesQuery:
    """정적 지명 목록 기반 자동완성 Query."""

    def __init__(self, gazetteer: GazetteerService | None = None) -> None:
        self._gazetteer = gazetteer or GazetteerService()

    def execute(self, query: str) -> list[str]:
        results = self._gazetteer.suggest(query)
        logger.debug(
            "Suggest query completed",
            extra={"query": query, "results_count": len(results)},
        )
        return results
