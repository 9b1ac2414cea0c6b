"""Timing helper for engine operations."""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator

from statistical_engine.utils.logging import get_logger

log = get_logger(__name__, component="profiling")


@contextmanager
def track_time(operation: str, *, warn_ms: float | None = None) -> Iterator[float]:
    """Log the wall-clock duration of the wrapped block.

    Emits a warning instead of a debug record when ``warn_ms`` is exceeded.
    """
    start = time.perf_counter()
    try:
        yield start
    finally:
        duration_ms = round((time.perf_counter() - start) * 1000.0, 3)
        extra = {"operation": operation, "duration_ms": duration_ms}
        if warn_ms is not None and duration_ms >= warn_ms:
            log.warning("Operation exceeded time budget", extra=extra)
        else:
            log.debug("Operation timing", extra=extra)


__all__ = ["track_time"]
