"""Scrape Result Standard Format

파이프라인 결과의 표준 형식을 정의합니다.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Union


UNKNOWN_TITLE = "Unknown Title"
DIRECT_CITATION_SUMMARY = "Direct Citation Match"


@dataclass
class ResultItem:
    """검색 결과 한 건

    Attributes:
        title: 결과 제목 (링크가 없으면 "Unknown Title")
        url: 문서 링크 (없으면 None)
        citation: 설명 텍스트 (원본 마크업상 summary 와 같은 요소)
        summary: 설명 텍스트
    """

    title: str
    url: Optional[str] = None
    citation: str = ""
    summary: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResultItem":
        """페이지에서 돌려받은 dict 를 ResultItem 으로 변환 (누락 필드는 기본값)"""
        title = data.get("title")
        if not isinstance(title, str) or not title.strip():
            title = UNKNOWN_TITLE

        url = data.get("url")
        if not isinstance(url, str) or not url:
            url = None

        citation = data.get("citation")
        summary = data.get("summary")
        return cls(
            title=title.strip(),
            url=url,
            citation=citation.strip() if isinstance(citation, str) else "",
            summary=summary.strip() if isinstance(summary, str) else "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class DocumentContent:
    """문서 본문"""

    title: str
    text: str
    html: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DocumentContent":
        return cls(
            title=data.get("title") or "",
            text=data.get("text") or "",
            html=data.get("html") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


ScrapeResult = Union[List[ResultItem], DocumentContent]
