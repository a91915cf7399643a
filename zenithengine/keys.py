"""Keyboard key and mouse button codes."""

from __future__ import annotations

from enum import IntEnum


class Key(IntEnum):
    """Virtual key codes."""

    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49  # noqa: E741
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F  # noqa: E741
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x55
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A
    ZERO = 0x30
    ONE = 0x31
    TWO = 0x32
    THREE = 0x33
    FOUR = 0x34
    FIVE = 0x35
    SIX = 0x36
    SEVEN = 0x37
    EIGHT = 0x38
    NINE = 0x39
    NUM0 = 0x60
    NUM1 = 0x61
    NUM2 = 0x62
    NUM3 = 0x63
    NUM4 = 0x64
    NUM5 = 0x65
    NUM6 = 0x66
    NUM7 = 0x67
    NUM8 = 0x68
    NUM9 = 0x69
    ESCAPE = 0x1B
    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B
    DELETE = 0x2E
    ASTERIX = 0xDF
    MINUS = 0xBD
    BACKSPACE = 0x08
    ENTER = 0x0D
    SHIFT = 0x10
    CTRL = 0x11
    ALT = 0x12
    SPACE = 0x20
    LEFT = 0x25
    RIGHT = 0x27
    UP = 0x26
    DOWN = 0x28
    HOME = 0x24
    END = 0x23
    PAGE_UP = 0x21
    PAGE_DOWN = 0x22
    NUM_LOCK = 0x90
    NUM_SLASH = 0x6F
    NUM_ASTERIX = 0x6A
    NUM_MINUS = 0x6D
    NUM_PLUS = 0x6B
    DOT = 0xBE
    COMMA = 0xBC
    NUM_COMMA = 0x6E
    TAB = 0x09
    CAPS_LOCK = 0x14
    QUOTES = 0xC0
    LESS_THAN = 0xE2


class MouseButton(IntEnum):
    """Mouse button codes."""

    LEFT = 0x01
    MIDDLE = 0x02
    RIGHT = 0x03