"""인용 검색 파이프라인 (Playwright).

권(vol)/리포터/페이지로 검색한다. 인용이 문서 하나에 정확히 적중하면 사이트가
목록 없이 문서 뷰로 바로 이동하므로, 그 경우 페이지 제목으로 결과 1건을 만든다.
"""

from __future__ import annotations

from typing import Optional

from playwright.async_api import Page

from westlaw_proxy.core.config import Settings, settings as default_settings
from westlaw_proxy.core.logging import logger
from westlaw_proxy.crawlers.playwright.pages import settle, submit_and_wait
from westlaw_proxy.crawlers.request import CitationSearchRequest
from westlaw_proxy.crawlers.result import DIRECT_CITATION_SUMMARY, ResultItem

from . import selectors
from .extractor import extract_result_list


class CitationSearchExecutor:
    def __init__(self, app_settings: Optional[Settings] = None):
        self.settings = app_settings or default_settings

    async def execute(self, page: Page, request: CitationSearchRequest) -> list[ResultItem]:
        s = self.settings

        await page.goto(
            selectors.citation_search_url(s.westlaw_base_url),
            wait_until="domcontentloaded",
            timeout=s.citation_goto_timeout_ms,
        )

        await page.wait_for_selector(selectors.CITATION_VOLUME_INPUT, timeout=s.citation_input_timeout_ms)
        await page.type(selectors.CITATION_VOLUME_INPUT, request.volume)
        # 리포터는 option value 와 정확히 일치해야 함 (예: "N.Y.2d")
        await page.select_option(selectors.CITATION_REPORTER_SELECT, value=request.reporter)
        await page.type(selectors.CITATION_PAGE_INPUT, request.page_number)

        await submit_and_wait(page, selectors.SUBMIT_BUTTON, s.submit_navigation_timeout_ms)
        await settle(s.settle_delay_ms)

        url = page.url
        if selectors.is_document_view(url):
            logger.info("[Proxy] Direct hit on document!")
            title = await page.title()
            return [
                ResultItem(
                    title=title or request.citation,
                    url=url,
                    citation=request.citation,
                    summary=DIRECT_CITATION_SUMMARY,
                )
            ]

        results = await extract_result_list(page, limit=s.result_limit)
        logger.info(f"[Proxy] Found {len(results)} citation results.")
        return results
