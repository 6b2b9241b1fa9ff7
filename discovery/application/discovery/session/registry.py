"""Discovery Session Registry.

메모리에 지도 세션을 보관합니다. 프로세스 재시작 시 사라집니다.
가득 차면 가장 오래 사용하지 않은 세션을 내보냅니다.
"""

from __future__ import annotations

import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from typing import TYPE_CHECKING

from discovery.application.common.exceptions import SessionNotFoundError

if TYPE_CHECKING:
    from discovery.application.discovery.session.map_discovery_session import (
        MapDiscoverySession,
    )
    from discovery.application.ports import PositionReportPort

logger = logging.getLogger(__name__)

DEFAULT_MAX_SESSIONS = 1000


@dataclass
class SessionEntry:
    """세션과 그 세션의 클라이언트 위치 입력 채널."""

    session: "MapDiscoverySession"
    position_feed: "PositionReportPort | None" = None


class DiscoverySessionRegistry:
    """세션 저장소 (LRU)."""

    def __init__(self, max_sessions: int = DEFAULT_MAX_SESSIONS) -> None:
        self._max_sessions = max_sessions
        self._entries: OrderedDict[str, SessionEntry] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._entries

    def add(self, entry: SessionEntry) -> str:
        while len(self._entries) >= self._max_sessions:
            evicted_id, _ = self._entries.popitem(last=False)
            logger.info(
                "Discovery session evicted",
                extra={"session_id": evicted_id, "max_sessions": self._max_sessions},
            )
        session_id = uuid.uuid4().hex
        self._entries[session_id] = entry
        logger.info(
            "Discovery session created",
            extra={"session_id": session_id, "open_sessions": len(self._entries)},
        )
        return session_id

    def get(self, session_id: str) -> SessionEntry:
        entry = self._entries.get(session_id)
        if entry is None:
            raise SessionNotFoundError(session_id)
        self._entries.move_to_end(session_id)
        return entry

    def remove(self, session_id: str) -> None:
        if self._entries.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.info("Discovery session closed", extra={"session_id": session_id})
