"""Westlaw endpoint pipelines.

공개 API는 이 파일에서만 export합니다.
"""

from .citation import CitationSearchExecutor
from .document import DocumentReadExecutor
from .extractor import extract_document, extract_result_list, normalize_result_rows
from .search import CaseSearchExecutor

__all__ = [
    "CaseSearchExecutor",
    "CitationSearchExecutor",
    "DocumentReadExecutor",
    "extract_document",
    "extract_result_list",
    "normalize_result_rows",
]
