"""헬스 체크 엔드포인트"""
from fastapi import APIRouter, Request

from westlaw_proxy.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """
    헬스 체크 엔드포인트

    인증 없이 호출 가능 (레이트 리밋은 적용). 브라우저를 띄우지 않는다.
    """
    return HealthResponse(
        status="ok",
        service=request.app.state.settings.service_name,
        authenticated=False,
    )
