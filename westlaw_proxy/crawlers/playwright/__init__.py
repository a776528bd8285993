"""Playwright module for the Westlaw pipelines."""

from .browser import BrowserSessionManager, SessionMetrics, build_launch_args
from .pages import configure_page, settle, submit_and_wait

__all__ = [
    "BrowserSessionManager",
    "SessionMetrics",
    "build_launch_args",
    "configure_page",
    "settle",
    "submit_and_wait",
]
