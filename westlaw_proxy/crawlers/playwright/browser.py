"""요청 단위 Playwright 브라우저 세션 관리.

요청마다 Chromium 프로세스 1개와 Page 1개를 띄우고, 어떤 경로로 끝나든
(성공/예외/타임아웃) 브라우저를 닫는다. 세션 재사용이나 풀링은 하지 않는다.
"""

from __future__ import annotations

import asyncio
import contextlib
import platform
from dataclasses import dataclass
from typing import AsyncIterator, Callable, Optional

from playwright.async_api import Browser, Page, Playwright, async_playwright

from westlaw_proxy.core.config import Settings, settings as default_settings
from westlaw_proxy.core.exceptions import BrowserLaunchException
from westlaw_proxy.core.logging import logger

from .pages import configure_page


def build_launch_args() -> list[str]:
    # 컨테이너가 이미 격리되어 있으므로 샌드박스는 끈다
    args: list[str] = [
        "--no-sandbox",
        "--disable-setuid-sandbox",
        "--disable-dev-shm-usage",
        "--disable-background-networking",
        "--disable-default-apps",
        "--disable-extensions",
        "--no-first-run",
        "--no-default-browser-check",
    ]

    if platform.system().lower() == "linux":
        args.append("--disable-gpu")

    deduped: list[str] = []
    seen: set[str] = set()
    for a in args:
        if a not in seen:
            seen.add(a)
            deduped.append(a)
    return deduped


@dataclass
class SessionMetrics:
    """세션 생성/종료 카운터 (누수 감지용)."""

    opened: int = 0
    closed: int = 0
    launch_failures: int = 0

    @property
    def active(self) -> int:
        return self.opened - self.closed

    def __repr__(self) -> str:
        return (
            f"SessionMetrics(opened={self.opened}, closed={self.closed}, "
            f"active={self.active}, launch_failures={self.launch_failures})"
        )


class BrowserSessionManager:
    """요청 스코프 브라우저 세션 팩토리

    Usage:
        async with manager.session() as page:
            await page.goto(...)
    """

    def __init__(
        self,
        app_settings: Optional[Settings] = None,
        playwright_factory: Callable = async_playwright,
    ) -> None:
        """
        Args:
            app_settings: 설정 (없으면 전역 settings)
            playwright_factory: async_playwright 호환 팩토리. 테스트에서 가짜 드라이버를 주입한다.
        """
        self.settings = app_settings or default_settings
        self._playwright_factory = playwright_factory
        self._semaphore: Optional[asyncio.Semaphore] = (
            asyncio.Semaphore(self.settings.browser_concurrency)
            if self.settings.browser_concurrency > 0
            else None
        )
        self.metrics = SessionMetrics()

    async def _launch(self) -> tuple[Playwright, Browser]:
        pw: Optional[Playwright] = None
        try:
            pw = await self._playwright_factory().start()
            launch_kwargs = {
                "headless": self.settings.browser_headless,
                "args": build_launch_args(),
            }
            if self.settings.browser_executable_path:
                launch_kwargs["executable_path"] = self.settings.browser_executable_path
            browser = await pw.chromium.launch(**launch_kwargs)
            return pw, browser
        except Exception as e:
            self.metrics.launch_failures += 1
            logger.error(f"[Browser] Failed to launch browser: {type(e).__name__}: {e}")
            if pw is not None:
                try:
                    await pw.stop()
                except Exception as stop_err:
                    logger.warning(f"[Browser] Failed to stop driver after launch failure: {stop_err}")
            raise BrowserLaunchException(str(e) or type(e).__name__) from e

    async def _teardown(self, pw: Playwright, browser: Browser) -> None:
        try:
            await browser.close()
        except Exception as e:
            logger.warning(f"[Browser] Failed to close browser: {type(e).__name__}: {e}")
        finally:
            self.metrics.closed += 1

        try:
            await pw.stop()
        except Exception as e:
            logger.warning(f"[Browser] Failed to stop playwright: {type(e).__name__}: {e}")

    @contextlib.asynccontextmanager
    async def session(self) -> AsyncIterator[Page]:
        """브라우저 1개 + Page 1개를 열고, 블록을 벗어나면 반드시 닫는다.

        Raises:
            BrowserLaunchException: 브라우저 실행 실패
        """
        slot = self._semaphore if self._semaphore is not None else contextlib.nullcontext()
        async with slot:
            pw, browser = await self._launch()
            self.metrics.opened += 1
            logger.debug(f"[Browser] Session opened ({self.metrics!r})")
            try:
                page = await browser.new_page()
                await configure_page(page, self.settings)
                yield page
            finally:
                await self._teardown(pw, browser)
                logger.debug(f"[Browser] Session closed ({self.metrics!r})")
