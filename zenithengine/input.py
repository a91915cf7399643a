"""Polling access to the keyboard and mouse of the event window."""

from __future__ import annotations

from dataclasses import dataclass

from zenithengine.keyboard import Keyboard
from zenithengine.keys import MouseButton
from zenithengine.mouse import Mouse
from zenithengine.window import Window


@dataclass
class _InputState:
    window: Window | None = None


_state = _InputState()


def setup_event_window(window: Window | None) -> None:
    """Choose the window whose input the other functions report."""
    _state.window = window


def _window() -> Window:
    if _state.window is None:
        raise RuntimeError("no event window has been set up")
    return _state.window


def _keyboard() -> Keyboard:
    return _window().keyboard


def _mouse() -> Mouse:
    return _window().mouse


def is_key_pressed(key) -> bool:
    return _keyboard().is_key_pressed(key)


def is_key_just_pressed(key) -> bool:
    return _keyboard().is_key_just_pressed(key)


def pressing_keys() -> list[int]:
    """Codes of every key held down, in ascending order."""
    keyboard = _keyboard()
    return [code for code in range(Keyboard.KEY_COUNT) if keyboard.is_key_pressed(code)]


def mouse_position() -> tuple[int, int]:
    return _mouse().position


def mouse_x() -> int:
    return _mouse().x


def mouse_y() -> int:
    return _mouse().y


def is_mouse_in_window() -> bool:
    return _mouse().in_window


def is_mouse_button_pressed(button: MouseButton) -> bool:
    return _mouse().is_button_pressed(button)


def is_mouse_button_just_pressed(button: MouseButton) -> bool:
    return _mouse().is_button_just_pressed(button)


def is_mouse_button_just_released(button: MouseButton) -> bool:
    return _mouse().is_button_just_released(button)