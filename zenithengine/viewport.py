"""The rectangle of the window that rendering is mapped to."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Viewport:
    """Position and size of a drawing area in pixels."""

    x: int = 0
    y: int = 0
    w: int = 640
    h: int = 480

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.w / self.h

    def set_dimensions(self, x: int, y: int, w: int, h: int) -> None:
        """Move and resize the viewport in one step."""
        self.x = x
        self.y = y
        self.w = w
        self.h = h