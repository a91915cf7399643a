"""Application base class and the loop that runs it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from zenithengine import timing
from zenithengine.stats import default_stats

if TYPE_CHECKING:
    from zenithengine.window import Window


class ZenithApp:
    """Base class of applications run by ``run_application``."""

    def __init__(self) -> None:
        self.window: Window | None = None
        self.started = False

    def start(self) -> None:
        """Called once before the first update; marks the app as started."""
        self.started = True

    def update(self) -> None:
        """Called once per frame; advances the frame clock."""
        timing.update()


@dataclass
class _AppState:
    app: ZenithApp | None = None
    running: bool = False
    return_value: int = -1


_state = _AppState()


def run_application(app: ZenithApp) -> None:
    """Start ``app`` and update it every frame until it quits."""
    if _state.running:
        raise RuntimeError("an application is already running")
    _state.app = app
    _state.running = True
    try:
        app.start()
        while _state.running:
            app.update()
            default_stats.reset()
    finally:
        quit_application()


def quit_application(return_value: int = 0) -> None:
    """Stop the running application after its current frame."""
    _state.app = None
    _state.running = False
    _state.return_value = return_value


def running_application() -> ZenithApp | None:
    return _state.app


def return_value() -> int:
    """The value the last application quit with."""
    if _state.running:
        raise RuntimeError("the application is still running")
    return _state.return_value