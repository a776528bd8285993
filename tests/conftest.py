"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 가짜 Playwright 드라이버 주입
- 앱/클라이언트 픽스처

금지:
- 실제 Westlaw 호출
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from westlaw_proxy.app import create_app  # noqa: E402
from westlaw_proxy.core.config import Settings  # noqa: E402
from westlaw_proxy.crawlers.playwright import BrowserSessionManager  # noqa: E402
from westlaw_proxy.services import ScrapeService  # noqa: E402

from tests.fixtures import ALLOWED_ORIGIN, TEST_API_KEY  # noqa: E402
from tests.fixtures.fake_browser import FakePlaywrightFactory  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@pytest.fixture
def test_settings() -> Settings:
    """정착 대기 0ms. 나머지는 기본값(10/minute, 결과 5건)"""
    return Settings(
        westlaw_api_key=TEST_API_KEY,
        allowed_origins=f"{ALLOWED_ORIGIN},http://localhost:8080,null",
        settle_delay_ms=0,
    )


@pytest.fixture
def driver() -> FakePlaywrightFactory:
    return FakePlaywrightFactory()


@pytest.fixture
def session_manager(test_settings: Settings, driver: FakePlaywrightFactory) -> BrowserSessionManager:
    return BrowserSessionManager(test_settings, playwright_factory=driver)


@pytest.fixture
def app(test_settings: Settings, session_manager: BrowserSessionManager):
    service = ScrapeService(session_manager, test_settings)
    return create_app(test_settings, scrape_service=service)


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-API-Key": TEST_API_KEY}
