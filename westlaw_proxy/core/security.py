"""
API 키 인증 및 입력 검증
"""

import secrets
from typing import Mapping, Optional
from urllib.parse import urlparse

from westlaw_proxy.core.exceptions import (
    AuthenticationRequiredException,
    InvalidApiKeyException,
    InvalidURLException,
    MissingParameterException,
)
from westlaw_proxy.core.logging import logger, sanitize_for_log


API_KEY_HEADER = "x-api-key"
API_KEY_QUERY_PARAM = "api_key"


def extract_api_key(headers: Mapping[str, str], query_params: Mapping[str, str]) -> Optional[str]:
    """헤더(X-API-Key) 우선, 없으면 쿼리 파라미터(api_key)에서 키를 꺼낸다."""
    return headers.get(API_KEY_HEADER) or query_params.get(API_KEY_QUERY_PARAM) or None


def verify_api_key(provided: Optional[str], expected: str) -> None:
    """API 키 검증

    Raises:
        AuthenticationRequiredException: 키 없음
        InvalidApiKeyException: 키 불일치
    """
    if not provided:
        raise AuthenticationRequiredException()

    if not secrets.compare_digest(provided.encode(), expected.encode()):
        raise InvalidApiKeyException()


class SecurityValidator:
    """입력 보안 검증"""

    MAX_URL_LENGTH = 2048
    ALLOWED_URL_SCHEMES = ("http", "https")

    @staticmethod
    def require_params(params: Mapping[str, Optional[str]], message: str) -> dict[str, str]:
        """필수 파라미터 검증

        하나라도 없거나 공백뿐이면 전체 목록과 함께 400을 낸다.

        Returns:
            입력 그대로의 값 (공백 판정에만 strip 사용)
        """
        missing = [name for name, value in params.items() if value is None or not value.strip()]
        if missing:
            logger.warning(f"[Security] Missing parameters: {missing}")
            raise MissingParameterException(list(params.keys()), message)
        return dict(params)  # type: ignore[arg-type]

    @staticmethod
    def validate_url(url: str) -> str:
        """열람 대상 URL 검증

        브라우저가 file://, chrome:// 등 로컬 리소스를 열지 않도록
        http/https 만 허용한다.
        """
        if len(url) > SecurityValidator.MAX_URL_LENGTH:
            raise InvalidURLException(url, f"URL must be at most {SecurityValidator.MAX_URL_LENGTH} characters")

        parsed = urlparse(url.strip())
        if parsed.scheme.lower() not in SecurityValidator.ALLOWED_URL_SCHEMES or not parsed.netloc:
            logger.warning(f"[Security] Rejected read URL: {sanitize_for_log(url)}")
            raise InvalidURLException(url, "URL must start with http:// or https://")

        return url

