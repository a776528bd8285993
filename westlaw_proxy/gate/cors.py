"""Origin 허용 목록 기반 CORS 헤더 계산."""

from __future__ import annotations

from typing import Iterable, Optional


NULL_ORIGIN = "null"

ALLOW_HEADERS = ", ".join(
    [
        "Origin",
        "X-Requested-With",
        "Content-Type",
        "Accept",
        "X-API-Key",
        "CF-Access-Client-Id",
        "CF-Access-Client-Secret",
    ]
)
ALLOW_METHODS = "GET, OPTIONS"


class CorsPolicy:
    """Origin 별 응답 헤더 결정

    - Origin: null (file:// 페이지) → null 그대로 허용
    - 허용 목록에 있는 Origin → 그대로 반영
    - 그 외 → Allow-Origin 생략 (브라우저가 응답을 차단)
    """

    def __init__(self, allowed_origins: Iterable[str]) -> None:
        self.allowed_origins = [o for o in allowed_origins if o]

    def allow_origin(self, origin: Optional[str]) -> Optional[str]:
        if origin is None:
            return None
        if origin == NULL_ORIGIN:
            return NULL_ORIGIN
        if origin in self.allowed_origins:
            return origin
        return None

    def headers_for(self, origin: Optional[str]) -> dict[str, str]:
        headers = {
            "Access-Control-Allow-Headers": ALLOW_HEADERS,
            "Access-Control-Allow-Methods": ALLOW_METHODS,
            "Access-Control-Allow-Credentials": "true",
        }
        allowed = self.allow_origin(origin)
        if allowed is not None:
            headers["Access-Control-Allow-Origin"] = allowed
            headers["Vary"] = "Origin"
        return headers
