"""Westlaw(NY Official Reports) 페이지 구조 상수.

사이트 마크업이 바뀌면 이 파일만 고친다.
"""

CASE_SEARCH_PATH = "/Search/Template/CaseCourts"
CITATION_SEARCH_PATH = "/Search/Template/Citation"

# 문서 뷰로 바로 이동했는지 판별 (인용 검색이 단일 문서에 적중한 경우)
DOCUMENT_VIEW_MARKER = "/Document/"

# 검색 폼
CASE_NAME_INPUT = "#caseName"
CITATION_VOLUME_INPUT = "#T1"
CITATION_REPORTER_SELECT = "#S1"
CITATION_PAGE_INPUT = "#T2"
SUBMIT_BUTTON = "input.co_formBtnGreen"

# 결과 목록
RESULT_ROWS = "ol#results li"
RESULT_TITLE_LINK = "a.resultLink"
RESULT_DESCRIPTION = ".co_resultsListDescription"
NO_RESULTS_MESSAGE = "#co_searchNoResultsMessage"

# 문서 본문 (앞에서부터 먼저 존재하는 것을 사용)
DOCUMENT_CONTENT_BODY = "#co_docContentBody"
DOCUMENT_FRAME = ".co_documentFrame"
DOCUMENT_CONTAINERS = (DOCUMENT_CONTENT_BODY, DOCUMENT_FRAME, "body")


def case_search_url(base_url: str) -> str:
    return base_url.rstrip("/") + CASE_SEARCH_PATH


def citation_search_url(base_url: str) -> str:
    return base_url.rstrip("/") + CITATION_SEARCH_PATH


def is_document_view(url: str) -> bool:
    return DOCUMENT_VIEW_MARKER in (url or "")
