"""`python -m westlaw_proxy` 실행 진입점"""
import uvicorn

from westlaw_proxy.core.config import settings


def main() -> None:
    uvicorn.run(
        "westlaw_proxy.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
