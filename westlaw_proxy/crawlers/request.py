"""Scrape Request 변형 타입

엔드포인트별 입력을 불변 객체로 고정한다. 생성 시점에 필수 필드를 검증하므로
세션을 열기 전에 400 이 결정된다.
"""

from dataclasses import dataclass
from typing import Union

from westlaw_proxy.core.exceptions import MissingParameterException


def _require(values: dict[str, str], message: str) -> None:
    missing = [name for name, value in values.items() if not isinstance(value, str) or not value.strip()]
    if missing:
        raise MissingParameterException(list(values.keys()), message)


@dataclass(frozen=True)
class CaseSearchRequest:
    """사건명 검색"""

    query: str

    def __post_init__(self) -> None:
        _require({"q": self.query}, 'Missing query parameter "q"')

    def describe(self) -> str:
        return f'search "{self.query}"'


@dataclass(frozen=True)
class CitationSearchRequest:
    """인용(권/리포터/페이지) 검색"""

    volume: str
    reporter: str
    page_number: str

    def __post_init__(self) -> None:
        _require(
            {"vol": self.volume, "reporter": self.reporter, "page": self.page_number},
            "Missing parameters: vol, reporter, page",
        )

    @property
    def citation(self) -> str:
        return f"{self.volume} {self.reporter} {self.page_number}"

    def describe(self) -> str:
        return f"citation {self.citation}"


@dataclass(frozen=True)
class DocumentReadRequest:
    """문서 URL 열람"""

    url: str

    def __post_init__(self) -> None:
        _require({"url": self.url}, "Missing url parameter")

    def describe(self) -> str:
        return f"read {self.url}"


ScrapeRequest = Union[CaseSearchRequest, CitationSearchRequest, DocumentReadRequest]
