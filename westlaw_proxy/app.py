"""FastAPI 앱 팩토리"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from westlaw_proxy.core.config import Settings, settings as default_settings
from westlaw_proxy.core.exceptions import ProxyException
from westlaw_proxy.core.logging import logger
from westlaw_proxy.api import health_router, westlaw_router, request_gate_middleware
from westlaw_proxy.crawlers.playwright import BrowserSessionManager
from westlaw_proxy.gate import CorsPolicy, ClientRateLimiter, RequestGate
from westlaw_proxy.services import ScrapeService


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    app_settings: Settings = app.state.settings

    logger.info(f"Westlaw Proxy listening at http://{app_settings.host}:{app_settings.port}")
    logger.info("[Security] API Key authentication enabled")
    if app_settings.uses_default_api_key:
        logger.warning("[Security] WESTLAW_API_KEY is not set; using the built-in default key")
    logger.info(f"[Security] Rate limiting: {app.state.gate.rate_limiter.item} per IP")
    logger.info(f"[Security] CORS restricted to: {', '.join(app_settings.allowed_origin_list)}")

    yield

    logger.info("Shutting down application...")


async def proxy_exception_handler(request: Request, exc: ProxyException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


def create_app(
    app_settings: Optional[Settings] = None,
    scrape_service: Optional[ScrapeService] = None,
) -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Args:
        app_settings: 설정 (없으면 환경 변수 기반 전역 settings)
        scrape_service: ScrapeService (없으면 실제 Playwright 세션 관리자로 생성)

    Returns:
        FastAPI 앱 인스턴스
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title=app_settings.api_title,
        description=app_settings.api_description,
        version=app_settings.api_version,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.gate = RequestGate(
        api_key=app_settings.westlaw_api_key,
        rate_limiter=ClientRateLimiter(app_settings.rate_limit),
        cors=CorsPolicy(app_settings.allowed_origin_list),
    )
    app.state.scrape_service = scrape_service or ScrapeService(
        BrowserSessionManager(app_settings), app_settings
    )

    app.add_exception_handler(ProxyException, proxy_exception_handler)
    app.middleware("http")(request_gate_middleware)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(westlaw_router)

    return app

# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
