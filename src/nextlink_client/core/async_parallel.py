"""Throttled parallel execution of async predicates."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")


def iter_waves(items: Sequence[T], size: int) -> Iterator[list[T]]:
    """Split ``items`` into consecutive waves; ``size`` 0 means a single wave."""

    if size < 0:
        raise ValueError(f"{size=} must be >= 0")
    if size == 0:
        if items:
            yield list(items)
        return
    for start in range(0, len(items), size):
        yield list(items[start : start + size])


async def run_all(
    items: Sequence[T],
    op: Callable[[T], Awaitable[bool]],
    concurrency_limit: int = 0,
    *,
    logger: logging.Logger | None = None,
) -> bool:
    """Run ``op`` for every item, at most ``concurrency_limit`` at a time.

    Each wave is awaited in full before the next one starts. A falsy result
    marks the run as failed but does not stop later waves. If ``op`` raises,
    the rest of that wave still completes, then the first error is re-raised
    and later waves do not start.
    """

    log = logger or logging.getLogger("nextlink_client")
    all_succeeded = True
    for index, wave in enumerate(iter_waves(items, concurrency_limit)):
        log.debug("wave start index=%s size=%s", index, len(wave))
        results = await asyncio.gather(
            *(op(item) for item in wave),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                log.debug("wave raised index=%s error=%s", index, result.__class__.__name__)
                raise result
        if not all(bool(result) for result in results):
            all_succeeded = False
            log.debug("wave had failures index=%s", index)
    return all_succeeded


__all__ = [
    "iter_waves",
    "run_all",
]
