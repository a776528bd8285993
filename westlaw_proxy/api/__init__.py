"""API 엔드포인트 패키지 - export only."""

from .routes import health_router, westlaw_router, get_scrape_service
from .middleware import request_gate_middleware

__all__ = ["health_router", "westlaw_router", "get_scrape_service", "request_gate_middleware"]
