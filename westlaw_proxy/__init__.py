"""Westlaw Proxy - 헤드리스 브라우저 기반 NY Official Reports 검색 프록시"""

__version__ = "1.0.0"
