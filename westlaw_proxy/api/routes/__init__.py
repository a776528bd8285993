"""API routes package."""

from .health_routes import router as health_router
from .westlaw_routes import router as westlaw_router, get_scrape_service

__all__ = ["health_router", "westlaw_router", "get_scrape_service"]
