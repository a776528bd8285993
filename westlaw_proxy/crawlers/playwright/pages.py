"""Page 설정 및 파이프라인 공용 단계.

Page 생성 후 기본 타임아웃/헤더 설정과, 여러 엔드포인트가 공유하는
제출(submit + navigation 대기)·정착 대기 단계를 모아 둡니다.
"""

from __future__ import annotations

import asyncio

from playwright.async_api import Page

from westlaw_proxy.core.config import Settings


async def configure_page(page: Page, app_settings: Settings) -> Page:
    page.set_default_timeout(app_settings.submit_navigation_timeout_ms)

    await page.set_extra_http_headers(
        {
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": f"{app_settings.browser_locale},en;q=0.9",
        }
    )

    return page


async def submit_and_wait(page: Page, submit_selector: str, timeout_ms: int) -> None:
    """네비게이션 대기를 먼저 걸어 두고 제출 버튼을 클릭한다.

    클릭이 네비게이션을 일으키므로 대기가 클릭보다 늦게 시작되면 이벤트를 놓친다.
    """
    async with page.expect_navigation(wait_until="domcontentloaded", timeout=timeout_ms):
        await page.click(submit_selector)


async def settle(delay_ms: int) -> None:
    """제출 후 비동기 렌더링(AJAX) 대기"""
    if delay_ms > 0:
        await asyncio.sleep(delay_ms / 1000)
