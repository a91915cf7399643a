"""Mouse state and buffered mouse events."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum

# Wheel movement that counts as one notch.
WHEEL_DELTA = 120


class MouseEventType(Enum):
    PRESS = "press"
    RELEASE = "release"
    WHEEL_UP = "wheel_up"
    WHEEL_DOWN = "wheel_down"
    MOVE = "move"
    ENTER = "enter"
    LEAVE = "leave"
    INVALID = "invalid"


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event with the cursor position at the time it happened."""

    type: MouseEventType = MouseEventType.INVALID
    code: int = 0
    x: int = 0
    y: int = 0

    @property
    def is_valid(self) -> bool:
        return self.type is not MouseEventType.INVALID

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


class Mouse:
    """Tracks cursor position and button states and buffers mouse events."""

    BUTTON_COUNT = 4
    BUFFER_SIZE = 16

    def __init__(self) -> None:
        self.x = 0
        self.y = 0
        self.wheel_delta = 0
        self.in_window = False
        self._pressed: set[int] = set()
        self._last_pressed: frozenset[int] = frozenset()
        self._events: deque[MouseEvent] = deque(maxlen=self.BUFFER_SIZE)

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    @classmethod
    def _code(cls, button) -> int:
        code = int(button)
        if not 0 <= code < cls.BUTTON_COUNT:
            raise ValueError(f"mouse button out of range: {code}")
        return code

    def _push(self, kind: MouseEventType, code: int = 0) -> None:
        self._events.append(MouseEvent(kind, code, self.x, self.y))

    def is_button_pressed(self, button) -> bool:
        return self._code(button) in self._pressed

    def is_button_just_pressed(self, button) -> bool:
        code = self._code(button)
        return code in self._pressed and code not in self._last_pressed

    def is_button_just_released(self, button) -> bool:
        code = self._code(button)
        return code not in self._pressed and code in self._last_pressed

    def read(self) -> MouseEvent:
        """Pop the oldest event, or an invalid event if none is buffered."""
        return self._events.popleft() if self._events else MouseEvent()

    def is_empty(self) -> bool:
        return not self._events

    def flush(self) -> None:
        """Remember the current button states and drop buffered events."""
        self._last_pressed = frozenset(self._pressed)
        self._events.clear()

    def on_mouse_move(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self._push(MouseEventType.MOVE)

    def on_mouse_enter(self) -> None:
        self.in_window = True
        self._push(MouseEventType.ENTER)

    def on_mouse_leave(self) -> None:
        self.in_window = False
        self._push(MouseEventType.LEAVE)

    def on_button_pressed(self, x: int, y: int, button) -> None:
        code = self._code(button)
        self._pressed.add(code)
        self._push(MouseEventType.PRESS, code)

    def on_button_released(self, x: int, y: int, button) -> None:
        code = self._code(button)
        self._pressed.discard(code)
        self._push(MouseEventType.RELEASE, code)

    def on_wheel_up(self, x: int, y: int) -> None:
        self._push(MouseEventType.WHEEL_UP)

    def on_wheel_down(self, x: int, y: int) -> None:
        self._push(MouseEventType.WHEEL_DOWN)

    def on_wheel_delta(self, x: int, y: int, delta: int) -> None:
        """Accumulate wheel movement and emit one event per full notch."""
        self.wheel_delta += delta
        while self.wheel_delta >= WHEEL_DELTA:
            self.wheel_delta -= WHEEL_DELTA
            self.on_wheel_up(x, y)
        while self.wheel_delta <= -WHEEL_DELTA:
            self.wheel_delta += WHEEL_DELTA
            self.on_wheel_down(x, y)