"""Result Extractor - 렌더링된 DOM → JSON 투영 규칙.

추출 로직은 페이지 컨텍스트에서 실행되는 스크립트로 보내고(page.evaluate),
돌려받은 원시 dict 는 파이썬 쪽에서 한 번 더 정규화한다.
"""

from __future__ import annotations

from typing import Any, Optional

from playwright.async_api import Page

from westlaw_proxy.core.logging import logger
from westlaw_proxy.crawlers.result import DocumentContent, ResultItem

from . import selectors


# args: {rows, titleLink, description, noResults, limit}
RESULT_LIST_SCRIPT = """
(args) => {
    const rows = Array.from(document.querySelectorAll(args.rows)).slice(0, args.limit);
    if (rows.length === 0) {
        return { items: [], noResultsMarker: document.querySelector(args.noResults) !== null };
    }
    const items = rows.map((row) => {
        const titleEl = row.querySelector(args.titleLink);
        const descriptionEl = row.querySelector(args.description);
        const description = descriptionEl ? descriptionEl.innerText.trim() : '';
        return {
            title: titleEl ? titleEl.innerText.trim() : null,
            url: titleEl ? titleEl.href : null,
            citation: description,
            summary: description,
        };
    });
    return { items, noResultsMarker: false };
}
"""

# args: 후보 컨테이너 셀렉터 배열 (우선순위 순)
DOCUMENT_SCRIPT = """
(containers) => {
    let body = null;
    for (const selector of containers) {
        body = document.querySelector(selector);
        if (body) break;
    }
    body = body || document.body;
    return {
        title: document.title,
        text: body ? body.innerText : '',
        html: body ? body.innerHTML : '',
    };
}
"""


def normalize_result_rows(rows: Optional[list[Any]], limit: int = 5) -> list[ResultItem]:
    """페이지가 돌려준 행 목록을 ResultItem 으로 정규화

    - 최대 limit 건
    - dict 가 아닌 행은 버림
    - 제목 없으면 "Unknown Title", URL 없으면 None
    """
    if not rows:
        return []

    items: list[ResultItem] = []
    for row in rows:
        if len(items) >= limit:
            break
        if not isinstance(row, dict):
            continue
        items.append(ResultItem.from_dict(row))
    return items


async def extract_result_list(page: Page, limit: int = 5) -> list[ResultItem]:
    """결과 목록 페이지에서 상위 limit 건 추출

    행이 0건이면 "결과 없음" 안내 요소 유무를 확인하지만, 있든 없든 빈 목록을
    돌려준다. 셀렉터 불일치(마크업 변경)와 실제 0건은 호출자에게 구분되지 않는다.
    """
    raw = await page.evaluate(
        RESULT_LIST_SCRIPT,
        {
            "rows": selectors.RESULT_ROWS,
            "titleLink": selectors.RESULT_TITLE_LINK,
            "description": selectors.RESULT_DESCRIPTION,
            "noResults": selectors.NO_RESULTS_MESSAGE,
            "limit": limit,
        },
    )
    raw = raw or {}

    items = normalize_result_rows(raw.get("items"), limit=limit)
    if not items:
        if raw.get("noResultsMarker"):
            logger.debug("[Extractor] No-results marker present")
        else:
            logger.debug("[Extractor] Zero result rows and no no-results marker (possible markup change)")
    return items


async def extract_document(page: Page) -> DocumentContent:
    """문서 본문 추출 (본문 컨테이너 → 문서 프레임 → body 순)"""
    raw = await page.evaluate(DOCUMENT_SCRIPT, list(selectors.DOCUMENT_CONTAINERS))
    return DocumentContent.from_dict(raw or {})
