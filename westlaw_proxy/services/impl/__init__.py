"""서비스 구현 - export only."""

from .scrape_service import ScrapeService

__all__ = ["ScrapeService"]
