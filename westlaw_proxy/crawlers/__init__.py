"""Westlaw crawler modules (Playwright).

공개 API는 이 파일에서만 export합니다.
"""

from .executor import ScrapeExecutor
from .request import CaseSearchRequest, CitationSearchRequest, DocumentReadRequest, ScrapeRequest
from .result import DocumentContent, ResultItem, ScrapeResult
from .westlaw import CaseSearchExecutor, CitationSearchExecutor, DocumentReadExecutor

__all__ = [
        "ScrapeExecutor",
        "ScrapeRequest",
        "CaseSearchRequest",
        "CitationSearchRequest",
        "DocumentReadRequest",
        "ScrapeResult",
        "ResultItem",
        "DocumentContent",
        "CaseSearchExecutor",
        "CitationSearchExecutor",
        "DocumentReadExecutor",
]
