"""요청 단위 브라우저 세션 테스트 (가짜 드라이버)"""

from __future__ import annotations

import asyncio

import pytest
from playwright.async_api import Error as PlaywrightError

from westlaw_proxy.core.exceptions import BrowserLaunchException
from westlaw_proxy.crawlers.playwright import BrowserSessionManager, build_launch_args

from tests.fixtures.fake_browser import FakePage, FakePlaywrightFactory


def test_launch_args_disable_sandbox():
    args = build_launch_args()
    assert "--no-sandbox" in args
    assert "--disable-setuid-sandbox" in args
    assert len(args) == len(set(args))


@pytest.mark.asyncio
async def test_session_opens_and_closes(session_manager, driver):
    async with session_manager.session() as page:
        assert isinstance(page, FakePage)
        assert driver.open_browsers == 1
        assert session_manager.metrics.active == 1

    assert driver.open_browsers == 0
    assert driver.stopped == 1
    assert session_manager.metrics.opened == 1
    assert session_manager.metrics.closed == 1


@pytest.mark.asyncio
async def test_page_configured(session_manager, test_settings):
    async with session_manager.session() as page:
        assert page.default_timeout == test_settings.submit_navigation_timeout_ms
        assert page.calls_named("set_extra_http_headers")


@pytest.mark.asyncio
async def test_launch_options(session_manager, driver):
    async with session_manager.session():
        pass

    kwargs = driver.launch_kwargs[0]
    assert kwargs["headless"] is True
    assert "--no-sandbox" in kwargs["args"]
    assert "executable_path" not in kwargs


@pytest.mark.asyncio
async def test_executable_path_passed_when_configured(test_settings, driver):
    test_settings.browser_executable_path = "/usr/bin/chromium-browser"
    manager = BrowserSessionManager(test_settings, playwright_factory=driver)

    async with manager.session():
        pass

    assert driver.launch_kwargs[0]["executable_path"] == "/usr/bin/chromium-browser"


@pytest.mark.asyncio
async def test_session_closed_when_block_raises(session_manager, driver):
    with pytest.raises(RuntimeError):
        async with session_manager.session():
            raise RuntimeError("step failed")

    assert driver.open_browsers == 0
    assert session_manager.metrics.active == 0


@pytest.mark.asyncio
async def test_session_closed_on_cancellation(session_manager, driver):
    started = asyncio.Event()

    async def hang():
        async with session_manager.session():
            started.set()
            await asyncio.sleep(60)

    task = asyncio.create_task(hang())
    await started.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert driver.open_browsers == 0
    assert session_manager.metrics.active == 0


@pytest.mark.asyncio
async def test_launch_failure(test_settings):
    driver = FakePlaywrightFactory(launch_error=PlaywrightError("Executable doesn't exist at /ms-playwright/chromium"))
    manager = BrowserSessionManager(test_settings, playwright_factory=driver)

    with pytest.raises(BrowserLaunchException) as exc_info:
        async with manager.session():
            pytest.fail("block must not run")

    assert "Executable doesn't exist" in exc_info.value.message
    assert exc_info.value.error_code == "BROWSER_LAUNCH_FAILED"
    assert driver.stopped == 1
    assert manager.metrics.launch_failures == 1
    assert manager.metrics.opened == 0
    assert manager.metrics.active == 0


@pytest.mark.asyncio
async def test_new_session_per_request(session_manager, driver):
    for _ in range(3):
        async with session_manager.session():
            pass

    assert driver.started == 3
    assert len(driver.browsers) == 3


@pytest.mark.asyncio
async def test_sessions_overlap_without_limit(session_manager):
    peak = 0

    async def use():
        nonlocal peak
        async with session_manager.session():
            peak = max(peak, session_manager.metrics.active)
            await asyncio.sleep(0.01)

    await asyncio.gather(*(use() for _ in range(4)))

    assert peak == 4


@pytest.mark.asyncio
async def test_concurrency_ceiling_queues_sessions(test_settings, driver):
    test_settings.browser_concurrency = 1
    manager = BrowserSessionManager(test_settings, playwright_factory=driver)
    peak = 0

    async def use():
        nonlocal peak
        async with manager.session():
            peak = max(peak, manager.metrics.active)
            await asyncio.sleep(0.01)

    await asyncio.gather(*(use() for _ in range(3)))

    assert peak == 1
    assert manager.metrics.opened == 3
