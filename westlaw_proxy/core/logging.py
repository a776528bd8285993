"""로깅 설정

요청 로그는 `[timestamp] METHOD path from ip` 한 줄. 쿼리 파라미터 중
API 키는 이름으로 마스킹하고, 나머지 값은 제어 문자 제거 후 자른다.
"""
import logging
import os
import re
import sys
from typing import Mapping

from westlaw_proxy.core.config import settings


# Production 환경에서는 DEBUG 로그 비활성화
IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"

# 값과 무관하게 항상 가리는 쿼리 파라미터
MASKED_QUERY_PARAMS = frozenset({"api_key"})
MASK = "***"

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]+")


def setup_logging() -> logging.Logger:
    logger = logging.getLogger("westlaw_proxy")

    log_level = settings.log_level.upper()
    if IS_PRODUCTION and log_level == "DEBUG":
        log_level = "INFO"
    logger.setLevel(getattr(logging, log_level))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = "[%(asctime)s] %(levelname)s %(message)s"
        if not IS_PRODUCTION:
            fmt = "[%(asctime)s] %(levelname)s %(module)s:%(lineno)d %(message)s"
        handler.setFormatter(logging.Formatter(fmt=fmt, datefmt="%Y-%m-%dT%H:%M:%S"))
        logger.addHandler(handler)

    return logger


logger = setup_logging()


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """사용자 입력을 로그 한 줄에 안전하게 싣는다

    개행 등 제어 문자는 공백 하나로 바꿔 로그 줄 위조를 막고, max_length 에서 자른다.
    """
    if not value:
        return "[empty]"

    result = _CONTROL_CHARS.sub(" ", value)
    if len(result) > max_length:
        result = result[:max_length] + "..."
    return result


def mask_query_params(query_params: Mapping[str, str], max_length: int = 50) -> dict[str, str]:
    return {
        key: MASK if key.lower() in MASKED_QUERY_PARAMS else sanitize_for_log(str(value), max_length=max_length)
        for key, value in query_params.items()
    }


def request_log_line(method: str, path: str, client: str, query_params: Mapping[str, str]) -> str:
    """요청 로그 한 줄 (asctime 은 포매터가 붙인다)"""
    line = f"{method} {sanitize_for_log(path)} from {client}"
    if query_params:
        line += f" {mask_query_params(query_params)}"
    return line
