"""커스텀 예외 정의 (Structured Exception Hierarchy)

모든 예외는 HTTP 상태 코드와 JSON 바디(`to_payload`)를 스스로 알고 있어서
app 레벨 핸들러 하나로 응답을 만든다.
"""
from typing import Any, Optional


class ProxyException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""

    status_code: int = 500

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message}


# 유효성 검증 관련 예외
class ValidationException(ProxyException):
    """유효성 검증 예외 (400)"""

    status_code = 400

    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__(reason, "VALIDATION_ERROR", details or {"field": field, "reason": reason})
        self.field = field


class MissingParameterException(ValidationException):
    """필수 쿼리 파라미터 누락/빈 값"""

    def __init__(self, params: list[str], message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(",".join(params), message, details or {"params": params})
        self.params = params


class InvalidURLException(ValidationException):
    """열람 대상으로 허용되지 않는 URL"""

    def __init__(self, url: str, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("url", reason, details or {"url": url})


# 게이트(인증/레이트리밋) 거절
class GateException(ProxyException):
    """게이트 거절 - {error, message} 형태로 응답"""

    def __init__(self, error: str, message: str, error_code: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code, details)
        self.error = error

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.error, "message": self.message}


class AuthenticationRequiredException(GateException):
    """API 키 없음 (401)"""

    status_code = 401

    def __init__(self, details: Optional[dict[str, Any]] = None):
        super().__init__(
            "Authentication required",
            "Provide API key via X-API-Key header or api_key query parameter",
            "AUTH_REQUIRED",
            details,
        )


class InvalidApiKeyException(GateException):
    """API 키 불일치 (403)"""

    status_code = 403

    def __init__(self, details: Optional[dict[str, Any]] = None):
        super().__init__(
            "Invalid API key",
            "The provided API key is incorrect",
            "INVALID_API_KEY",
            details,
        )


class RateLimitExceededException(GateException):
    """레이트 리밋 초과 (429)"""

    status_code = 429

    def __init__(self, limit: int, window_s: float, retry_after_s: int, details: Optional[dict[str, Any]] = None):
        if window_s == 60:
            period = "minute"
        else:
            period = f"{window_s:g} seconds"
        super().__init__(
            "Rate limit exceeded",
            f"Maximum {limit} requests per {period}. Try again later.",
            "RATE_LIMITED",
            details or {"limit": limit, "window_s": window_s, "retry_after_s": retry_after_s},
        )
        self.retry_after_s = retry_after_s


# 크롤러 관련 예외
class CrawlerException(ProxyException):
    """크롤러 관련 예외의 기본 클래스 (500)"""

    def __init__(self, message: str, error_code: str = "CRAWLER_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CRAWLER_ERROR", details)


class BrowserException(CrawlerException):
    """브라우저 세션 오류"""

    def __init__(self, message: str, error_code: str = "BROWSER_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class BrowserLaunchException(BrowserException):
    """브라우저 실행 실패"""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, "BROWSER_LAUNCH_FAILED", details)


class ScrapeException(CrawlerException):
    """파이프라인 단계 실패 (네비게이션/셀렉터 타임아웃 등)

    message 는 원인 예외의 메시지를 그대로 담는다.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, "SCRAPE_FAILED", details)
