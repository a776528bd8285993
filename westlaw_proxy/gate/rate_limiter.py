"""클라이언트 주소별 고정 윈도우 Rate Limiter (limits 기반).

윈도우는 키를 처음 본 시각부터 시작하고, 만료된 키는 MemoryStorage 가
스스로 정리한다.
"""

from __future__ import annotations

import math
import time
from typing import Optional, Union

from limits import RateLimitItem, parse
from limits.storage import MemoryStorage, Storage
from limits.strategies import FixedWindowRateLimiter

from westlaw_proxy.core.exceptions import RateLimitExceededException
from westlaw_proxy.core.logging import logger


class ClientRateLimiter:
    """클라이언트별 요청 수 제한

    - 거절된 요청은 카운트하지 않음 (test 통과 후에만 hit)
    - Retry-After 는 윈도우 리셋까지 남은 초 (올림, 최소 1)
    """

    def __init__(self, limit: Union[str, RateLimitItem] = "10/minute", storage: Optional[Storage] = None) -> None:
        """
        Args:
            limit: "10/minute" 형식 문자열 또는 RateLimitItem
            storage: limits 스토리지 (없으면 프로세스 메모리)
        """
        self.item = parse(limit) if isinstance(limit, str) else limit
        if self.item.amount <= 0:
            raise ValueError("rate limit amount must be positive")

        self.storage = storage or MemoryStorage()
        self._strategy = FixedWindowRateLimiter(self.storage)

    @property
    def max_requests(self) -> int:
        return self.item.amount

    @property
    def window_s(self) -> int:
        return self.item.get_expiry()

    def hit(self, key: str) -> None:
        """요청 1건 기록.

        Raises:
            RateLimitExceededException: 윈도우 내 허용량 초과
        """
        if self._strategy.test(self.item, key):
            self._strategy.hit(self.item, key)
            return

        reset_at = self._strategy.get_window_stats(self.item, key).reset_time
        retry_after = max(1, math.ceil(reset_at - time.time()))
        logger.warning(f"[Gate] Rate limit exceeded for {key} (retry in {retry_after}s)")
        raise RateLimitExceededException(self.max_requests, self.window_s, retry_after)

    def remaining(self, key: str) -> int:
        return self._strategy.get_window_stats(self.item, key).remaining

    def reset(self) -> None:
        self.storage.reset()

    def __repr__(self) -> str:
        return f"ClientRateLimiter({self.item})"
