"""Lazy, run-once awaitable shared by the request builders."""

from __future__ import annotations

import asyncio
from enum import StrEnum
from typing import Any, Callable, Coroutine, Generator, Generic, TypeVar

T = TypeVar("T")


class RequestState(StrEnum):
    DRAFT = "draft"
    IN_FLIGHT = "in_flight"
    RESOLVED = "resolved"
    FAILED = "failed"


class DeferredResult(Generic[T]):
    """Runs *factory* on the first await and replays its outcome afterwards.

    The request runs as an ``asyncio`` task so concurrent awaiters share one
    network call. Each awaiter waits through ``asyncio.shield``: cancelling one
    awaiter leaves the others waiting, and the request itself is cancelled only
    when its last awaiter is. A cancelled task is discarded and the next await
    starts over.
    """

    def __init__(self, factory: Callable[[], Coroutine[Any, Any, T]]) -> None:
        self._factory = factory
        self._task: asyncio.Future[T] | None = None
        self._waiters = 0

    @property
    def state(self) -> RequestState:
        task = self._task
        if task is None or task.cancelled():
            return RequestState.DRAFT
        if not task.done():
            return RequestState.IN_FLIGHT
        if task.exception() is not None:
            return RequestState.FAILED
        return RequestState.RESOLVED

    def __await__(self) -> Generator[Any, None, T]:
        return self._wait().__await__()

    async def _wait(self) -> T:
        if self._task is None or self._task.cancelled():
            self._task = asyncio.ensure_future(self._factory())
            self._waiters = 0
        task = self._task
        self._waiters += 1
        try:
            return await asyncio.shield(task)
        except asyncio.CancelledError:
            if self._waiters == 1 and not task.done():
                task.cancel()
            raise
        finally:
            if task is self._task:
                self._waiters -= 1
