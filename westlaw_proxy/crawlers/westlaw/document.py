"""문서 열람 파이프라인 (Playwright)."""

from __future__ import annotations

from typing import Optional

from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError

from westlaw_proxy.core.config import Settings, settings as default_settings
from westlaw_proxy.core.logging import logger
from westlaw_proxy.crawlers.request import DocumentReadRequest
from westlaw_proxy.crawlers.result import DocumentContent

from . import selectors
from .extractor import extract_document


class DocumentReadExecutor:
    """임의의 문서 URL 을 열어 본문을 추출

    본문 요소 대기는 최선 노력(best-effort)이다. 타임아웃이 나도 그때까지
    로드된 DOM 으로 추출을 진행한다.
    """

    def __init__(self, app_settings: Optional[Settings] = None):
        self.settings = app_settings or default_settings

    async def execute(self, page: Page, request: DocumentReadRequest) -> DocumentContent:
        s = self.settings

        await page.goto(request.url, wait_until="domcontentloaded", timeout=s.read_goto_timeout_ms)

        try:
            await page.wait_for_selector(selectors.DOCUMENT_CONTENT_BODY, timeout=s.read_content_timeout_ms)
        except PlaywrightTimeoutError:
            logger.info("[Proxy] Content selector timeout, extracting from loaded page")

        return await extract_document(page)
