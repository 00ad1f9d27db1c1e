"""Network-activity tracking for the loading indicator."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator

BusyListener = Callable[[bool], None]


class ActivityTracker:
    """Counts in-flight requests; busy until the last one finishes."""

    def __init__(self, listener: BusyListener | None = None) -> None:
        self._listener = listener
        self._in_flight = 0

    @property
    def in_flight(self) -> int:
        return self._in_flight

    @property
    def busy(self) -> bool:
        return self._in_flight > 0

    @contextmanager
    def track(self) -> Iterator["ActivityTracker"]:
        self._enter()
        try:
            yield self
        finally:
            self._leave()

    def _enter(self) -> None:
        self._in_flight += 1
        if self._in_flight == 1:
            self._notify(True)

    def _leave(self) -> None:
        self._in_flight = max(0, self._in_flight - 1)
        if self._in_flight == 0:
            self._notify(False)

    def _notify(self, busy: bool) -> None:
        if self._listener is not None:
            self._listener(busy)


__all__ = ["ActivityTracker", "BusyListener"]
