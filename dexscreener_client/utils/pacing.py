"""Пейсинг последовательных запросов.

Батч-хелперы не спят сами: они ждут переданный Pacer. По умолчанию это
FixedDelayPacer с фиксированной паузой, TokenBucketPacer ограничивает частоту
через ведро токенов, NoopPacer не ждёт вовсе (тесты, внешний rate limit).
"""

from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable, Protocol

Sleep = Callable[[float], Awaitable[None]]


class Pacer(Protocol):
    async def wait(self) -> None: ...


class NoopPacer:
    """Не делает пауз."""

    async def wait(self) -> None:
        return None


class FixedDelayPacer:
    """Каждый wait() спит ровно `delay` секунд."""

    def __init__(self, delay: float, sleep: Sleep = asyncio.sleep) -> None:
        if delay < 0:
            raise ValueError("delay не может быть отрицательным")
        self.delay = delay
        self._sleep = sleep

    async def wait(self) -> None:
        if self.delay:
            await self._sleep(self.delay)


class TokenBucketPacer:
    """Ведро токенов: `rate` токенов в секунду, не больше `capacity` подряд."""

    def __init__(
        self,
        rate: float,
        capacity: int = 1,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        if rate <= 0:
            raise ValueError("rate должен быть положительным")
        if capacity < 1:
            raise ValueError("capacity должен быть >= 1")
        self.rate = rate
        self.capacity = capacity
        self._clock = clock
        self._sleep = sleep
        self._tokens = float(capacity)
        self._updated = clock()
        self._lock = asyncio.Lock()

    def _refill(self) -> None:
        now = self._clock()
        elapsed = max(now - self._updated, 0.0)
        self._tokens = min(self.capacity, self._tokens + elapsed * self.rate)
        self._updated = now

    async def wait(self) -> None:
        async with self._lock:
            self._refill()
            if self._tokens < 1:
                await self._sleep((1 - self._tokens) / self.rate)
                self._refill()
            # после сна ведро может не добрать долю токена из-за точности часов
            self._tokens = max(self._tokens - 1, 0.0)


__all__ = ["FixedDelayPacer", "NoopPacer", "Pacer", "Sleep", "TokenBucketPacer"]
