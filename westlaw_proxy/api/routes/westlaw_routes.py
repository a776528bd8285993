"""Westlaw Routes

HTTP Layer 는 파라미터 검증 후 ScrapeService 로 위임하는 Translator 역할만 수행합니다.
모든 경로는 RequestGate(인증 + 레이트 리밋)를 통과한 뒤에 도달합니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request

from westlaw_proxy.core.security import SecurityValidator
from westlaw_proxy.schemas import (
    DocumentResponse,
    ErrorResponse,
    ResultItemSchema,
    SearchResponse,
)
from westlaw_proxy.services import ScrapeService

router = APIRouter(tags=["westlaw"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "필수 파라미터 누락"},
    401: {"model": ErrorResponse, "description": "API 키 없음"},
    403: {"model": ErrorResponse, "description": "API 키 불일치"},
    429: {"model": ErrorResponse, "description": "레이트 리밋 초과"},
    500: {"model": ErrorResponse, "description": "브라우저/스크랩 실패"},
}


def get_scrape_service(request: Request) -> ScrapeService:
    """앱 단위 ScrapeService (create_app 에서 생성)"""
    return request.app.state.scrape_service


def _to_search_response(results) -> SearchResponse:
    return SearchResponse(results=[ResultItemSchema(**item.to_dict()) for item in results])


@router.get("/search", response_model=SearchResponse, responses=_ERROR_RESPONSES)
async def search_cases(
    q: Optional[str] = None,
    service: ScrapeService = Depends(get_scrape_service),
):
    """사건명 검색

    Flow:
        1. q 검증 (없으면 세션 생성 전에 400)
        2. 브라우저 세션에서 검색 템플릿 제출
        3. 상위 5건 반환
    """
    params = SecurityValidator.require_params({"q": q}, 'Missing query parameter "q"')
    results = await service.search(params["q"])
    return _to_search_response(results)


@router.get("/search-citation", response_model=SearchResponse, responses=_ERROR_RESPONSES)
async def search_citation(
    vol: Optional[str] = None,
    reporter: Optional[str] = None,
    page: Optional[str] = None,
    service: ScrapeService = Depends(get_scrape_service),
):
    """인용 검색 (vol / reporter / page)

    인용이 문서 하나에 바로 연결되면 "Direct Citation Match" 1건을 반환합니다.
    """
    params = SecurityValidator.require_params(
        {"vol": vol, "reporter": reporter, "page": page},
        "Missing parameters: vol, reporter, page",
    )
    results = await service.search_citation(params["vol"], params["reporter"], params["page"])
    return _to_search_response(results)


@router.get("/read", response_model=DocumentResponse, responses=_ERROR_RESPONSES)
async def read_document(
    url: Optional[str] = None,
    service: ScrapeService = Depends(get_scrape_service),
):
    """문서 열람 - 제목, 본문 텍스트, 원본 HTML"""
    params = SecurityValidator.require_params({"url": url}, "Missing url parameter")
    target = SecurityValidator.validate_url(params["url"])
    content = await service.read(target)
    return DocumentResponse(**content.to_dict())
