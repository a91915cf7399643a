"""Keyboard state and buffered keyboard events."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum


class KeyEventType(Enum):
    PRESS = "press"
    RELEASE = "release"
    INVALID = "invalid"


@dataclass(frozen=True)
class KeyEvent:
    """A key press or release; the default event is invalid."""

    type: KeyEventType = KeyEventType.INVALID
    code: int = 0

    @property
    def is_press(self) -> bool:
        return self.type is KeyEventType.PRESS

    @property
    def is_release(self) -> bool:
        return self.type is KeyEventType.RELEASE

    @property
    def is_valid(self) -> bool:
        return self.type is not KeyEventType.INVALID


class Keyboard:
    """Tracks which keys are down and buffers the latest key and char events."""

    KEY_COUNT = 256
    BUFFER_SIZE = 16

    def __init__(self) -> None:
        self._autorepeat = False
        self._pressed: set[int] = set()
        self._last_pressed: frozenset[int] = frozenset()
        self._keys: deque[KeyEvent] = deque(maxlen=self.BUFFER_SIZE)
        self._chars: deque[str] = deque(maxlen=self.BUFFER_SIZE)

    @classmethod
    def _code(cls, keycode) -> int:
        code = int(keycode)
        if not 0 <= code < cls.KEY_COUNT:
            raise ValueError(f"key code out of range: {code}")
        return code

    @property
    def autorepeat_enabled(self) -> bool:
        return self._autorepeat

    def is_key_pressed(self, keycode) -> bool:
        """True while the key is held down."""
        return self._code(keycode) in self._pressed

    def is_key_just_pressed(self, keycode) -> bool:
        """True if the key went down since the last flush."""
        code = self._code(keycode)
        return code in self._pressed and code not in self._last_pressed

    def read_key(self) -> KeyEvent:
        """Pop the oldest key event, or an invalid event if none is buffered."""
        return self._keys.popleft() if self._keys else KeyEvent()

    def read_char(self) -> str:
        """Pop the oldest typed character, or an empty string if none."""
        return self._chars.popleft() if self._chars else ""

    def is_empty(self) -> bool:
        return not self._keys

    def is_char_empty(self) -> bool:
        return not self._chars

    def flush_key(self) -> None:
        """Remember the current key states and drop buffered key events."""
        self._last_pressed = frozenset(self._pressed)
        self._keys.clear()

    def flush_char(self) -> None:
        self._chars.clear()

    def flush(self) -> None:
        self.flush_key()
        self.flush_char()

    def enable_autorepeat(self) -> None:
        self._autorepeat = True

    def disable_autorepeat(self) -> None:
        self._autorepeat = False

    def on_key_press(self, keycode) -> None:
        code = self._code(keycode)
        self._pressed.add(code)
        self._keys.append(KeyEvent(KeyEventType.PRESS, code))

    def on_key_release(self, keycode) -> None:
        code = self._code(keycode)
        self._pressed.discard(code)
        self._keys.append(KeyEvent(KeyEventType.RELEASE, code))

    def on_char(self, character: str) -> None:
        if len(character) != 1:
            raise ValueError("expected a single character")
        self._chars.append(character)

    def clear_state(self) -> None:
        """Forget every key state, current and previous."""
        self._pressed.clear()
        self._last_pressed = frozenset()