"""Request Gate - 인증 + 레이트 리밋 + CORS

파이프라인(브라우저 세션) 앞에서 모든 요청을 거른다.

순서:
    1. CORS 헤더 계산 (거절 응답에도 항상 붙음)
    2. 인증 (공개 경로 제외)
    3. 레이트 리밋 (공개 경로 포함)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from westlaw_proxy.core.exceptions import GateException
from westlaw_proxy.core.security import extract_api_key, verify_api_key
from westlaw_proxy.gate.cors import CorsPolicy
from westlaw_proxy.gate.rate_limiter import ClientRateLimiter


PUBLIC_PATHS = frozenset({"/health"})


@dataclass
class GateDecision:
    """authorize() 결과"""

    rejection: Optional[GateException] = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def allowed(self) -> bool:
        return self.rejection is None


class RequestGate:
    """API 키 인증, 클라이언트별 레이트 리밋, CORS 를 묶은 게이트"""

    def __init__(
        self,
        api_key: str,
        rate_limiter: ClientRateLimiter,
        cors: CorsPolicy,
        public_paths: Iterable[str] = PUBLIC_PATHS,
    ) -> None:
        self._api_key = api_key
        self.rate_limiter = rate_limiter
        self.cors = cors
        self.public_paths = frozenset(public_paths)

    def is_public(self, path: str) -> bool:
        # "/health/" 도 "/health" 와 같은 경로로 취급
        return (path.rstrip("/") or "/") in self.public_paths

    def cors_headers(self, origin: Optional[str]) -> dict[str, str]:
        return self.cors.headers_for(origin)

    def authorize(
        self,
        path: str,
        headers: Mapping[str, str],
        query_params: Mapping[str, str],
        client: str,
    ) -> GateDecision:
        """요청 허용 여부 판단

        Args:
            path: 요청 경로
            headers: 요청 헤더 (소문자 키 조회 가능해야 함)
            query_params: 쿼리 파라미터
            client: 클라이언트 주소 (레이트 리밋 키)

        Returns:
            GateDecision: rejection 이 None 이면 통과
        """
        decision = GateDecision(headers=self.cors_headers(headers.get("origin")))

        try:
            if not self.is_public(path):
                verify_api_key(extract_api_key(headers, query_params), self._api_key)
            self.rate_limiter.hit(client)
        except GateException as e:
            decision.rejection = e
            if e.status_code == 429:
                decision.headers["Retry-After"] = str(e.details.get("retry_after_s", 1))

        return decision
