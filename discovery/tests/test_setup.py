"""Setup (설정/로깅) 단위 테스트."""

from __future__ import annotations

import logging
from typing import Iterator
from unittest.mock import AsyncMock

import ecs_logging
import pytest

from discovery.domain.value_objects import Coordinate
from discovery.infrastructure.integrations.geolocation import ClientReportedGeolocationProvider
from discovery.setup.config import Settings
from discovery.setup.dependencies import build_session_entry, session_options
from discovery.setup.logging import setup_logging


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """루트 로거와 레코드 팩토리 복원."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    factory = logging.getLogRecordFactory()
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.setLogRecordFactory(factory)


class TestSettings:
    """Settings 테스트."""

    def test_defaults(self) -> None:
        """기본값."""
        settings = Settings()
        assert settings.service_name == "discovery-api"
        assert settings.default_zoom == 12
        assert settings.near_me_timeout_seconds < 10
        assert settings.search_result_limit == 50

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """DISCOVERY_ 접두사 환경 변수."""
        monkeypatch.setenv("DISCOVERY_BUSINESS_API_URL", "http://directory.internal/api")
        monkeypatch.setenv("DISCOVERY_SESSION_MAX_COUNT", "5")

        settings = Settings()

        assert settings.business_api_url == "http://directory.internal/api"
        assert settings.session_max_count == 5

    def test_session_options(self) -> None:
        """설정에서 세션 옵션 생성."""
        options = session_options(Settings(default_zoom=11, search_result_limit=20))
        assert options.default_center == Coordinate(19.4326, -99.1332)
        assert options.default_zoom == 11
        assert options.result_limit == 20


class TestBuildSessionEntry:
    """build_session_entry 테스트."""

    def test_client_reported_feed(self, mock_directory: AsyncMock) -> None:
        """세션마다 클라이언트 위치 입력 채널 생성."""
        entry = build_session_entry(mock_directory, Settings(), client_ip="190.24.1.1")

        assert isinstance(entry.position_feed, ClientReportedGeolocationProvider)
        assert entry.position_feed._fallback is None

    def test_ip_fallback_enabled(self, mock_directory: AsyncMock) -> None:
        """IP 위치 조회 활성화 시 대체 제공자 사용."""
        settings = Settings(ip_geolocation_enabled=True)

        entry = build_session_entry(mock_directory, settings, client_ip="190.24.1.1")

        assert entry.position_feed._fallback is not None


class TestSetupLogging:
    """setup_logging 테스트."""

    def test_ecs_formatter_installed(self, restore_logging: None) -> None:
        """ECS 포맷터와 서비스 메타데이터."""
        setup_logging()

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ecs_logging.StdlibFormatter)

        record = logging.getLogRecordFactory()(
            "discovery.test", logging.INFO, __file__, 1, "hello", None, None
        )
        assert record.service["name"] == "discovery-api"
        assert logging.getLogger("httpx").level == logging.WARNING
