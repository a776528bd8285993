"""Executor Protocol - Interface for endpoint pipelines

Defines the common interface that every Westlaw pipeline implements.
"""

from typing import Protocol

from playwright.async_api import Page

from westlaw_proxy.core.config import Settings

from .request import ScrapeRequest
from .result import ScrapeResult


class ScrapeExecutor(Protocol):
    """파이프라인 실행자 프로토콜

    세션 관리자가 열어 준 Page 위에서 엔드포인트별 단계를 실행합니다.
    세션 생성/정리는 호출자 책임입니다.

    구현 예시:
        class CaseSearchExecutor:
            async def execute(self, page: Page, request: CaseSearchRequest) -> list[ResultItem]:
                ...
    """

    settings: Settings

    async def execute(self, page: Page, request: ScrapeRequest) -> ScrapeResult:
        """파이프라인 실행

        Args:
            page: 세션 전용 Page
            request: 엔드포인트 입력

        Returns:
            ScrapeResult: 결과 목록 또는 문서 본문

        Raises:
            playwright TimeoutError: 네비게이션/셀렉터 타임아웃
            playwright Error: 기타 드라이버 오류
        """
        ...
