"""Business Directory Port.

사업장/카테고리 데이터 서비스와의 통신을 위한 포트 인터페이스.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from discovery.domain.entities import BusinessRecord


class BusinessDirectoryPort(ABC):
    """사업장 디렉터리 포트.

    Infrastructure Layer에서 구현합니다.
    """

    @abstractmethod
    async def search(
        self,
        text: str | None = None,
        category: str | None = None,
        location: str | None = None,
        limit: int = 50,
    ) -> Sequence[BusinessRecord]:
        """검색 조건으로 사업장을 조회합니다.

        Args:
            text: 자유 검색어
            category: 카테고리 이름
            location: 장소 이름 또는 ``"lat,lng"``
            limit: 최대 결과 수

        Returns:
            BusinessRecord 목록
        """
        ...

    @abstractmethod
    async def get_business(self, business_id: int) -> BusinessRecord | None:
        """ID로 사업장을 조회합니다."""
        ...

    @abstractmethod
    async def list_categories(self) -> list[str]:
        """선택 가능한 카테고리 이름 목록."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """리소스 정리."""
        ...
