"""One-shot memoization of an asynchronous computation."""

import asyncio
from typing import Awaitable, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class SingleFlight(Generic[T]):
    """Run an async factory at most once and share its outcome.

    The first call to get() starts the computation; concurrent and later callers
    await the same task. Failures are memoized too, so nothing is retried.
    """

    def __init__(self, factory: Callable[[], Awaitable[T]]):
        self._factory = factory
        self._task: Optional[asyncio.Future[T]] = None

    async def get(self) -> T:
        if self._task is None:
            self._task = asyncio.ensure_future(self._factory())
        # A cancelled waiter must not cancel the shared computation.
        return await asyncio.shield(self._task)
