"""사건명 검색 파이프라인 (Playwright)."""

from __future__ import annotations

from typing import Optional

from playwright.async_api import Page

from westlaw_proxy.core.config import Settings, settings as default_settings
from westlaw_proxy.core.logging import logger
from westlaw_proxy.crawlers.playwright.pages import settle, submit_and_wait
from westlaw_proxy.crawlers.request import CaseSearchRequest
from westlaw_proxy.crawlers.result import ResultItem

from . import selectors
from .extractor import extract_result_list


class CaseSearchExecutor:
    """사건명 검색

    단계:
        1. 검색 템플릿 이동 (networkidle)
        2. 검색어 입력란 대기
        3. 검색어 입력
        4. 네비게이션 대기 + 제출 클릭
        5. 정착 대기
        6. 결과 목록 추출
    """

    def __init__(self, app_settings: Optional[Settings] = None):
        self.settings = app_settings or default_settings

    async def execute(self, page: Page, request: CaseSearchRequest) -> list[ResultItem]:
        s = self.settings

        logger.debug("[Proxy] Navigating to case search template...")
        await page.goto(
            selectors.case_search_url(s.westlaw_base_url),
            wait_until="networkidle",
            timeout=s.search_goto_timeout_ms,
        )

        logger.debug("[Proxy] Inputting query...")
        await page.wait_for_selector(selectors.CASE_NAME_INPUT, timeout=s.search_input_timeout_ms)
        await page.type(selectors.CASE_NAME_INPUT, request.query)

        logger.debug("[Proxy] Submitting search...")
        await submit_and_wait(page, selectors.SUBMIT_BUTTON, s.submit_navigation_timeout_ms)
        await settle(s.settle_delay_ms)

        logger.debug("[Proxy] Extracting results...")
        results = await extract_result_list(page, limit=s.result_limit)
        logger.info(f"[Proxy] Found {len(results)} results.")
        return results
