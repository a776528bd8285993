"""API 스키마 - export only."""

from .westlaw_schema import DocumentResponse, ErrorResponse, HealthResponse, ResultItemSchema, SearchResponse

__all__ = ["DocumentResponse", "ErrorResponse", "HealthResponse", "ResultItemSchema", "SearchResponse"]
