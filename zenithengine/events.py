"""Receiver of window, keyboard and mouse notifications."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zenithengine.keys import Key, MouseButton
    from zenithengine.window import Window


class EventListener:
    """Base class for objects bound to a window to receive its events.

    The default hooks take no action beyond counting the event in
    ``ignored_events``; subclasses override the hooks they need.
    """

    @property
    def ignored_events(self) -> Counter:
        """How many times each hook fell through to its default."""
        counts = self.__dict__.get("_ignored_events")
        if counts is None:
            counts = Counter()
            self.__dict__["_ignored_events"] = counts
        return counts

    def _ignore(self, name: str) -> None:
        self.ignored_events[name] += 1

    def on_window_resize(self, window: Window, width: int, height: int) -> None:
        """The client area of the window changed size."""
        self._ignore("window_resize")

    def on_window_focus_gained(self, window: Window) -> None:
        """The window received keyboard focus."""
        self._ignore("window_focus_gained")

    def on_window_focus_lost(self, window: Window) -> None:
        """The window lost keyboard focus."""
        self._ignore("window_focus_lost")

    def on_key_press(self, window: Window, key: Key | int) -> None:
        """A key went down."""
        self._ignore("key_press")

    def on_key_release(self, window: Window, key: Key | int) -> None:
        """A key went up."""
        self._ignore("key_release")

    def on_char_input(self, window: Window, character: str) -> None:
        """A character was typed."""
        self._ignore("char_input")

    def on_mouse_move(self, window: Window, x: int, y: int) -> None:
        """The cursor moved."""
        self._ignore("mouse_move")

    def on_mouse_button_press(self, window: Window, button: MouseButton, x: int, y: int) -> None:
        """A mouse button went down."""
        self._ignore("mouse_button_press")

    def on_mouse_button_release(self, window: Window, button: MouseButton, x: int, y: int) -> None:
        """A mouse button went up."""
        self._ignore("mouse_button_release")

    def on_mouse_scroll(self, window: Window, delta_x: int, delta_y: int) -> None:
        """The mouse wheel turned."""
        self._ignore("mouse_scroll")

    def on_mouse_enter(self, window: Window) -> None:
        """The cursor entered the client area."""
        self._ignore("mouse_enter")

    def on_mouse_leave(self, window: Window) -> None:
        """The cursor left the client area."""
        self._ignore("mouse_leave")

    def on_window_close(self, window: Window) -> None:
        """The window was asked to close."""
        self._ignore("window_close")

    def on_window_minimize(self, window: Window) -> None:
        """The window was minimised."""
        self._ignore("window_minimize")

    def on_window_restore(self, window: Window) -> None:
        """The window was restored."""
        self._ignore("window_restore")

    def on_window_maximize(self, window: Window) -> None:
        """The window was maximised."""
        self._ignore("window_maximize")

    def on_window_move(self, window: Window, x: int, y: int) -> None:
        """The window moved on screen."""
        self._ignore("window_move")