"""RequestGate 를 HTTP 요청에 적용하는 미들웨어"""
from fastapi import Request
from fastapi.responses import JSONResponse, Response

from westlaw_proxy.core.logging import logger, request_log_line
from westlaw_proxy.gate import RequestGate


def client_address(request: Request) -> str:
    return request.client.host if request.client else "unknown"


async def request_gate_middleware(request: Request, call_next):
    """CORS → (preflight 종료) → 인증 → 레이트 리밋 → 라우트

    CORS 헤더는 거절/에러 응답에도 붙인다.
    """
    gate: RequestGate = request.app.state.gate

    if request.method == "OPTIONS":
        return Response(status_code=200, headers=gate.cors_headers(request.headers.get("origin")))

    client = client_address(request)
    logger.info(request_log_line(request.method, request.url.path, client, request.query_params))

    decision = gate.authorize(request.url.path, request.headers, request.query_params, client)
    if not decision.allowed:
        rejection = decision.rejection
        logger.warning(f"[Gate] Rejected {request.url.path} from {client}: {rejection.error_code}")
        return JSONResponse(
            status_code=rejection.status_code,
            content=rejection.to_payload(),
            headers=decision.headers,
        )

    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"[Proxy] Unhandled error on {request.url.path}: {type(e).__name__}: {e}", exc_info=True)
        response = JSONResponse(status_code=500, content={"error": "Internal server error"})

    for name, value in decision.headers.items():
        response.headers[name] = value
    return response
