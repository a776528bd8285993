"""Request gate - export only."""

from .cors import CorsPolicy
from .rate_limiter import ClientRateLimiter
from .request_gate import GateDecision, RequestGate

__all__ = [
    "CorsPolicy",
    "ClientRateLimiter",
    "GateDecision",
    "RequestGate",
]
