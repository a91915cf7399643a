"""Frame timing shared by the whole engine."""

from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass
class _Clock:
    start: float
    last: float
    current: float


_started = time.monotonic()
_clock = _Clock(_started, _started, _started)


def delta() -> float:
    """Seconds between the last two frames."""
    return _clock.current - _clock.last


def elapsed() -> float:
    """Seconds from start-up to the current frame."""
    return _clock.current - _clock.start


def update() -> None:
    """Mark the beginning of a new frame."""
    _clock.last = _clock.current
    _clock.current = time.monotonic()