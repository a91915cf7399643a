"""An application window that turns posted events into input state and callbacks."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum, auto

from zenithengine.app import quit_application
from zenithengine.events import EventListener
from zenithengine.keyboard import Keyboard
from zenithengine.keys import Key, MouseButton
from zenithengine.mouse import Mouse


class EventKind(Enum):
    CLOSE = auto()
    QUIT = auto()
    FOCUS_GAINED = auto()
    FOCUS_LOST = auto()
    SIZE = auto()
    MOVE = auto()
    KEY_DOWN = auto()
    KEY_UP = auto()
    CHAR = auto()
    MOUSE_MOVE = auto()
    BUTTON_DOWN = auto()
    BUTTON_UP = auto()
    MOUSE_WHEEL = auto()


class SizeState(Enum):
    RESTORED = auto()
    MINIMIZED = auto()
    MAXIMIZED = auto()
    MAX_SHOW = auto()
    MAX_HIDE = auto()


@dataclass(frozen=True)
class WindowEvent:
    """A message delivered to a window; only the fields of its kind matter."""

    kind: EventKind
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    key: int = 0
    char: str = ""
    button: MouseButton = MouseButton.LEFT
    delta: int = 0
    repeat: bool = False
    buttons_held: bool = False
    size_state: SizeState = SizeState.RESTORED
    return_value: int = 0


def _as_key(code: int) -> Key | int:
    try:
        return Key(code)
    except ValueError:
        return code


class Window:
    """Window state, its keyboard and mouse, and a queue of pending events."""

    def __init__(self, width: int, height: int, title: str, fullscreen: bool = False) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.fullscreen = fullscreen
        self.x = 0
        self.y = 0
        self.shown = False
        self.has_focus = False
        self.keyboard = Keyboard()
        self.mouse = Mouse()
        self._listener: EventListener = EventListener()
        self._pending: deque[WindowEvent] = deque()
        self._handlers = {
            EventKind.CLOSE: self._on_close,
            EventKind.QUIT: self._on_quit,
            EventKind.FOCUS_GAINED: self._on_focus_gained,
            EventKind.FOCUS_LOST: self._on_focus_lost,
            EventKind.SIZE: self._on_size,
            EventKind.MOVE: self._on_move,
            EventKind.KEY_DOWN: self._on_key_down,
            EventKind.KEY_UP: self._on_key_up,
            EventKind.CHAR: self._on_char,
            EventKind.MOUSE_MOVE: self._on_mouse_move,
            EventKind.BUTTON_DOWN: self._on_button_down,
            EventKind.BUTTON_UP: self._on_button_up,
            EventKind.MOUSE_WHEEL: self._on_wheel,
        }

    @property
    def listener(self) -> EventListener:
        return self._listener

    def bind_event_listener(self, listener: EventListener | None) -> None:
        """Send future notifications to ``listener``; ``None`` silences them."""
        self._listener = listener if listener is not None else EventListener()

    def set_title(self, title: str) -> None:
        self.title = title

    def show(self) -> None:
        self.shown = True

    def hide(self) -> None:
        self.shown = False

    def post(self, event: WindowEvent) -> None:
        """Queue an event to be handled by the next ``process_events``."""
        self._pending.append(event)

    def process_events(self) -> None:
        """Start a new input frame and handle every queued event in order."""
        self.keyboard.flush()
        while self._pending:
            self.handle_event(self._pending.popleft())

    def handle_event(self, event: WindowEvent) -> None:
        """Update window and input state for one event and notify the listener."""
        self._handlers[event.kind](event)

    def _on_close(self, event: WindowEvent) -> None:
        self.shown = False
        self._listener.on_window_close(self)
        quit_application(0)

    def _on_quit(self, event: WindowEvent) -> None:
        quit_application(event.return_value)

    def _on_focus_gained(self, event: WindowEvent) -> None:
        self.has_focus = True
        self._listener.on_window_focus_gained(self)

    def _on_focus_lost(self, event: WindowEvent) -> None:
        self.has_focus = False
        self._listener.on_window_focus_lost(self)

    def _on_size(self, event: WindowEvent) -> None:
        if event.size_state is SizeState.MINIMIZED:
            self.shown = False
            self._listener.on_window_minimize(self)
            return
        if event.size_state is SizeState.RESTORED:
            self.shown = True
            self._listener.on_window_restore(self)
        elif event.size_state is SizeState.MAXIMIZED:
            self.shown = True
            self._listener.on_window_maximize(self)
        self.width = event.width
        self.height = event.height
        self._listener.on_window_resize(self, self.width, self.height)

    def _on_move(self, event: WindowEvent) -> None:
        self.x = event.x
        self.y = event.y
        self._listener.on_window_move(self, self.x, self.y)

    def _on_key_down(self, event: WindowEvent) -> None:
        if not event.repeat or self.keyboard.autorepeat_enabled:
            self.keyboard.on_key_press(event.key)
            self._listener.on_key_press(self, _as_key(event.key))

    def _on_key_up(self, event: WindowEvent) -> None:
        self.keyboard.on_key_release(event.key)
        self._listener.on_key_release(self, _as_key(event.key))

    def _on_char(self, event: WindowEvent) -> None:
        self.keyboard.on_char(event.char)
        self._listener.on_char_input(self, event.char)

    def _on_mouse_move(self, event: WindowEvent) -> None:
        x, y = event.x, event.y
        if 0 <= x < self.width and 0 <= y < self.height:
            self.mouse.on_mouse_move(x, y)
            self._listener.on_mouse_move(self, x, y)
            if not self.mouse.in_window:
                self.mouse.on_mouse_enter()
                self._listener.on_mouse_enter(self)
        elif event.buttons_held:
            self.mouse.on_mouse_move(x, y)
            self._listener.on_mouse_move(self, x, y)
        else:
            self.mouse.on_mouse_leave()
            self._listener.on_mouse_leave(self)

    def _on_button_down(self, event: WindowEvent) -> None:
        self.mouse.on_button_pressed(event.x, event.y, event.button)
        self._listener.on_mouse_button_press(self, event.button, event.x, event.y)

    def _on_button_up(self, event: WindowEvent) -> None:
        self.mouse.on_button_released(event.x, event.y, event.button)
        self._listener.on_mouse_button_release(self, event.button, event.x, event.y)

    def _on_wheel(self, event: WindowEvent) -> None:
        self.mouse.on_wheel_delta(event.x, event.y, event.delta)
        self._listener.on_mouse_scroll(self, 0, event.delta)