"""List Categories Query."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from discovery.application.ports import BusinessDirectoryPort


class ListCategoriesQuery:
    """선택 가능한 카테고리 목록 조회."""

    def __init__(self, directory: "BusinessDirectoryPort") -> None:
        self._directory = directory

    async def execute(self) -> list[str]:
        names = await self._directory.list_categories()
        return sorted({name.strip() for name in names if name and name.strip()})
