"""Values that are convenient to drop into a diagnostics bag."""

from __future__ import annotations

import time
import traceback
from datetime import timedelta
from typing import Any


class Stopwatch:
    """Monotonic timer that serializes as its elapsed duration.

    Put a running stopwatch into ``diagnostics`` and the elapsed time is
    captured at serialization time, not at insertion time.
    """

    def __init__(self) -> None:
        self._started = time.perf_counter()
        self._stopped: float | None = None

    @classmethod
    def start_new(cls) -> Stopwatch:
        return cls()

    def stop(self) -> None:
        if self._stopped is None:
            self._stopped = time.perf_counter()

    @property
    def is_running(self) -> bool:
        return self._stopped is None

    @property
    def elapsed(self) -> timedelta:
        end = self._stopped if self._stopped is not None else time.perf_counter()
        return timedelta(seconds=end - self._started)


def describe_exception(exc: BaseException) -> dict[str, Any]:
    """Render an exception as plain data for the wire."""
    cls = type(exc)
    return {
        "type": f"{cls.__module__}.{cls.__qualname__}",
        "message": str(exc),
        "traceback": traceback.format_exception(cls, exc, exc.__traceback__),
    }


def render_value(value: Any) -> Any:
    """Convert diagnostic values pydantic cannot serialize on its own."""
    if isinstance(value, BaseException):
        return describe_exception(value)
    if isinstance(value, Stopwatch):
        return value.elapsed
    if isinstance(value, dict):
        return {key: render_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [render_value(item) for item in value]
    return value
