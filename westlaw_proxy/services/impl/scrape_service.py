"""Scrape 서비스 - 파이프라인 경계

세션 열기 → 엔드포인트별 실행자 위임 → 세션 정리, 그리고 모든 단계 실패를
ScrapeException 하나로 정리하는 역할만 담당한다.
"""
from typing import Optional

from westlaw_proxy.core.config import Settings, settings as default_settings
from westlaw_proxy.core.exceptions import BrowserException, ScrapeException
from westlaw_proxy.core.logging import logger
from westlaw_proxy.crawlers import (
    CaseSearchExecutor,
    CaseSearchRequest,
    CitationSearchExecutor,
    CitationSearchRequest,
    DocumentContent,
    DocumentReadExecutor,
    DocumentReadRequest,
    ResultItem,
    ScrapeExecutor,
    ScrapeRequest,
    ScrapeResult,
)
from westlaw_proxy.crawlers.playwright import BrowserSessionManager


class ScrapeService:
    """
    Scrape 서비스 - SRP: 세션 수명과 오류 변환만 담당

    - 브라우저 세션은 BrowserSessionManager
    - 단계 실행은 엔드포인트별 Executor
    """

    def __init__(
        self,
        session_manager: Optional[BrowserSessionManager] = None,
        app_settings: Optional[Settings] = None,
    ):
        self.settings = app_settings or default_settings
        self.session_manager = session_manager or BrowserSessionManager(self.settings)
        self._executors: dict[type, ScrapeExecutor] = {
            CaseSearchRequest: CaseSearchExecutor(self.settings),
            CitationSearchRequest: CitationSearchExecutor(self.settings),
            DocumentReadRequest: DocumentReadExecutor(self.settings),
        }

    async def run(self, request: ScrapeRequest) -> ScrapeResult:
        """세션 하나에서 요청 파이프라인 실행

        Raises:
            BrowserException: 브라우저 실행 실패
            ScrapeException: 단계 실패 (원인 메시지 보존)
        """
        executor = self._executors.get(type(request))
        if executor is None:
            raise TypeError(f"Unsupported scrape request: {type(request).__name__}")

        try:
            async with self.session_manager.session() as page:
                return await executor.execute(page, request)
        except BrowserException as e:
            logger.error(f"[Proxy] Browser session failed ({request.describe()}): {e.message}")
            raise
        except Exception as e:
            message = str(e) or type(e).__name__
            logger.error(f"[Proxy] Error ({request.describe()}): {type(e).__name__}: {message}", exc_info=True)
            raise ScrapeException(message, details={"request": request.describe()}) from e

    async def search(self, query: str) -> list[ResultItem]:
        logger.info(f'[Proxy] Authenticated search for: "{query}"')
        return await self.run(CaseSearchRequest(query=query))  # type: ignore[return-value]

    async def search_citation(self, volume: str, reporter: str, page_number: str) -> list[ResultItem]:
        request = CitationSearchRequest(volume=volume, reporter=reporter, page_number=page_number)
        logger.info(f"[Proxy] Authenticated citation search: {request.citation}")
        return await self.run(request)  # type: ignore[return-value]

    async def read(self, url: str) -> DocumentContent:
        logger.info(f"[Proxy] Authenticated read: {url}")
        return await self.run(DocumentReadRequest(url=url))  # type: ignore[return-value]
