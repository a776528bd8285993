"""Pydantic 응답 스키마 정의"""
from typing import List, Optional

from pydantic import BaseModel, Field


class ResultItemSchema(BaseModel):
    """검색 결과 한 건"""
    title: str = Field(..., description='결과 제목 (링크가 없으면 "Unknown Title")')
    url: Optional[str] = Field(None, description="문서 링크")
    citation: str = Field("", description="인용/설명 텍스트")
    summary: str = Field("", description="요약 텍스트")


class SearchResponse(BaseModel):
    """검색 응답 (최대 5건)"""
    results: List[ResultItemSchema]


class DocumentResponse(BaseModel):
    """문서 열람 응답"""
    title: str
    text: str
    html: str


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    service: str
    authenticated: bool = False


class ErrorResponse(BaseModel):
    """에러 응답"""
    error: str
    message: Optional[str] = None
