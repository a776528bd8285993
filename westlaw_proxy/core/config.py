"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from limits import parse


DEFAULT_ALLOWED_ORIGINS = ",".join(
    [
        "https://platforms.cc",
        "https://westlaw.platforms.cc",
        "http://localhost:8000",
        "http://localhost:8080",
        "http://127.0.0.1:8000",
        "http://127.0.0.1:8080",
        # file:// 로 열린 로컬 페이지는 Origin: null 로 들어온다
        "null",
    ]
)


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 보안
    westlaw_api_key: str = "CHANGE_THIS_TO_SECURE_KEY"
    allowed_origins: str = DEFAULT_ALLOWED_ORIGINS

    # Rate limit (IP당 고정 윈도우, limits 표기법)
    rate_limit: str = "10/minute"

    # 대상 사이트
    westlaw_base_url: str = "https://govt.westlaw.com/nyofficial"

    # 브라우저
    browser_headless: bool = True
    browser_executable_path: str = ""
    # 동시 세션 상한. 0이면 제한 없음 (요청당 브라우저 1개)
    browser_concurrency: int = 0
    browser_locale: str = "en-US"

    # 파이프라인 타임아웃 (ms)
    search_goto_timeout_ms: int = 30000
    search_input_timeout_ms: int = 5000
    citation_goto_timeout_ms: int = 30000
    citation_input_timeout_ms: int = 10000
    submit_navigation_timeout_ms: int = 30000
    read_goto_timeout_ms: int = 45000
    read_content_timeout_ms: int = 15000

    # 제출 후 비동기 렌더링 대기
    settle_delay_ms: int = 3000

    result_limit: int = 5

    # 서버
    host: str = "0.0.0.0"
    port: int = 3000

    # API
    service_name: str = "westlaw-proxy"
    api_title: str = "Westlaw Proxy"
    api_version: str = "1.0.0"
    api_description: str = "NY Official Reports(Westlaw) 검색/열람을 헤드리스 브라우저로 대행합니다."

    # 로깅
    log_level: str = "INFO"

    @field_validator(
        "search_goto_timeout_ms",
        "search_input_timeout_ms",
        "citation_goto_timeout_ms",
        "citation_input_timeout_ms",
        "submit_navigation_timeout_ms",
        "read_goto_timeout_ms",
        "read_content_timeout_ms",
    )
    @classmethod
    def validate_timeouts(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("timeouts must be positive")
        return v

    @field_validator("result_limit")
    @classmethod
    def validate_result_limit(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("result_limit must be positive")
        return v

    @field_validator("rate_limit")
    @classmethod
    def validate_rate_limit(cls, v: str) -> str:
        # parse 는 형식이 틀리면 ValueError
        if parse(v).amount <= 0:
            raise ValueError("rate_limit amount must be positive")
        return v

    @field_validator("settle_delay_ms", "browser_concurrency")
    @classmethod
    def validate_non_negative(cls, v):
        if v < 0:
            raise ValueError("value must be >= 0")
        return v

    @property
    def allowed_origin_list(self) -> list[str]:
        """ALLOWED_ORIGINS(콤마 구분)를 리스트로 변환"""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def uses_default_api_key(self) -> bool:
        return self.westlaw_api_key == "CHANGE_THIS_TO_SECURE_KEY"

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
