import pytest

from zenithengine import app
from zenithengine.events import EventListener
from zenithengine.keys import Key, MouseButton
from zenithengine.mouse import MouseEventType
from zenithengine.window import EventKind, SizeState, Window, WindowEvent


class Recorder(EventListener):
    def __init__(self):
        self.calls = []

    def on_window_resize(self, window, width, height):
        self.calls.append(("resize", width, height))

    def on_window_focus_gained(self, window):
        self.calls.append(("focus_gained",))

    def on_window_focus_lost(self, window):
        self.calls.append(("focus_lost",))

    def on_key_press(self, window, key):
        self.calls.append(("key_press", key))

    def on_key_release(self, window, key):
        self.calls.append(("key_release", key))

    def on_char_input(self, window, character):
        self.calls.append(("char", character))

    def on_mouse_move(self, window, x, y):
        self.calls.append(("mouse_move", x, y))

    def on_mouse_button_press(self, window, button, x, y):
        self.calls.append(("button_press", button, x, y))

    def on_mouse_button_release(self, window, button, x, y):
        self.calls.append(("button_release", button, x, y))

    def on_mouse_scroll(self, window, delta_x, delta_y):
        self.calls.append(("scroll", delta_x, delta_y))

    def on_mouse_enter(self, window):
        self.calls.append(("enter",))

    def on_mouse_leave(self, window):
        self.calls.append(("leave",))

    def on_window_close(self, window):
        self.calls.append(("close",))

    def on_window_minimize(self, window):
        self.calls.append(("minimize",))

    def on_window_restore(self, window):
        self.calls.append(("restore",))

    def on_window_maximize(self, window):
        self.calls.append(("maximize",))

    def on_window_move(self, window, x, y):
        self.calls.append(("move", x, y))


@pytest.fixture
def window():
    return Window(640, 480, "Test")


@pytest.fixture
def recorder(window):
    rec = Recorder()
    window.bind_event_listener(rec)
    return rec


def test_initial_state(window):
    assert (window.width, window.height, window.title) == (640, 480, "Test")
    assert window.shown is False
    assert window.has_focus is False
    assert window.fullscreen is False


def test_show_hide_and_title(window):
    window.show()
    assert window.shown is True
    window.hide()
    assert window.shown is False
    window.set_title("Other")
    assert window.title == "Other"


def test_close_notifies_and_quits(window, recorder):
    app.quit_application(7)
    window.show()
    window.handle_event(WindowEvent(EventKind.CLOSE))
    assert window.shown is False
    assert recorder.calls == [("close",)]
    assert app.return_value() == 0


def test_quit_sets_return_value(window):
    window.post(WindowEvent(EventKind.QUIT, return_value=3))
    window.process_events()
    assert app.return_value() == 3


def test_focus(window, recorder):
    window.handle_event(WindowEvent(EventKind.FOCUS_GAINED))
    assert window.has_focus is True
    window.handle_event(WindowEvent(EventKind.FOCUS_LOST))
    assert window.has_focus is False
    assert recorder.calls == [("focus_gained",), ("focus_lost",)]


def test_minimize_does_not_resize(window, recorder):
    window.show()
    window.handle_event(
        WindowEvent(EventKind.SIZE, width=1, height=1, size_state=SizeState.MINIMIZED)
    )
    assert window.shown is False
    assert (window.width, window.height) == (640, 480)
    assert recorder.calls == [("minimize",)]


def test_maximize_resizes(window, recorder):
    window.handle_event(
        WindowEvent(EventKind.SIZE, width=1920, height=1080, size_state=SizeState.MAXIMIZED)
    )
    assert window.shown is True
    assert (window.width, window.height) == (1920, 1080)
    assert recorder.calls == [("maximize",), ("resize", 1920, 1080)]


def test_restore_resizes(window, recorder):
    window.handle_event(
        WindowEvent(EventKind.SIZE, width=800, height=600, size_state=SizeState.RESTORED)
    )
    assert recorder.calls == [("restore",), ("resize", 800, 600)]


def test_move(window, recorder):
    window.handle_event(WindowEvent(EventKind.MOVE, x=-10, y=25))
    assert (window.x, window.y) == (-10, 25)
    assert recorder.calls == [("move", -10, 25)]


def test_key_down_and_up(window, recorder):
    window.handle_event(WindowEvent(EventKind.KEY_DOWN, key=Key.A))
    assert window.keyboard.is_key_pressed(Key.A)
    window.handle_event(WindowEvent(EventKind.KEY_UP, key=Key.A))
    assert not window.keyboard.is_key_pressed(Key.A)
    assert recorder.calls == [("key_press", Key.A), ("key_release", Key.A)]


def test_unknown_key_code_passed_as_int(window, recorder):
    window.handle_event(WindowEvent(EventKind.KEY_DOWN, key=0x07))
    assert recorder.calls == [("key_press", 0x07)]
    assert window.keyboard.is_key_pressed(0x07)


def test_repeat_ignored_without_autorepeat(window, recorder):
    window.handle_event(WindowEvent(EventKind.KEY_DOWN, key=Key.B, repeat=True))
    assert recorder.calls == []
    assert not window.keyboard.is_key_pressed(Key.B)


def test_repeat_accepted_with_autorepeat(window, recorder):
    window.keyboard.enable_autorepeat()
    window.handle_event(WindowEvent(EventKind.KEY_DOWN, key=Key.B, repeat=True))
    assert recorder.calls == [("key_press", Key.B)]


def test_char(window, recorder):
    window.handle_event(WindowEvent(EventKind.CHAR, char="x"))
    assert window.keyboard.read_char() == "x"
    assert recorder.calls == [("char", "x")]


def test_mouse_enter_once(window, recorder):
    window.handle_event(WindowEvent(EventKind.MOUSE_MOVE, x=10, y=20))
    window.handle_event(WindowEvent(EventKind.MOUSE_MOVE, x=11, y=21))
    assert window.mouse.in_window is True
    assert window.mouse.position == (11, 21)
    assert recorder.calls == [
        ("mouse_move", 10, 20),
        ("enter",),
        ("mouse_move", 11, 21),
    ]


def test_mouse_leave_without_buttons(window, recorder):
    window.handle_event(WindowEvent(EventKind.MOUSE_MOVE, x=10, y=20))
    window.handle_event(WindowEvent(EventKind.MOUSE_MOVE, x=640, y=20))
    assert window.mouse.in_window is False
    assert window.mouse.position == (10, 20)
    assert recorder.calls[-1] == ("leave",)


def test_mouse_drag_outside_keeps_capture(window, recorder):
    window.handle_event(WindowEvent(EventKind.MOUSE_MOVE, x=10, y=20))
    window.handle_event(WindowEvent(EventKind.MOUSE_MOVE, x=-5, y=900, buttons_held=True))
    assert window.mouse.in_window is True
    assert window.mouse.position == (-5, 900)
    assert recorder.calls[-1] == ("mouse_move", -5, 900)


def test_buttons(window, recorder):
    window.handle_event(WindowEvent(EventKind.BUTTON_DOWN, x=3, y=4, button=MouseButton.RIGHT))
    assert window.mouse.is_button_pressed(MouseButton.RIGHT)
    window.handle_event(WindowEvent(EventKind.BUTTON_UP, x=5, y=6, button=MouseButton.RIGHT))
    assert not window.mouse.is_button_pressed(MouseButton.RIGHT)
    assert recorder.calls == [
        ("button_press", MouseButton.RIGHT, 3, 4),
        ("button_release", MouseButton.RIGHT, 5, 6),
    ]


def test_wheel(window, recorder):
    window.handle_event(WindowEvent(EventKind.MOUSE_WHEEL, x=1, y=1, delta=120))
    assert window.mouse.read().type is MouseEventType.WHEEL_UP
    assert recorder.calls == [("scroll", 0, 120)]


def test_process_events_in_order_and_flushes_keyboard(window, recorder):
    window.post(WindowEvent(EventKind.KEY_DOWN, key=Key.SPACE))
    window.post(WindowEvent(EventKind.CHAR, char=" "))
    window.process_events()
    assert recorder.calls == [("key_press", Key.SPACE), ("char", " ")]
    assert window.keyboard.is_key_just_pressed(Key.SPACE)
    window.process_events()
    assert not window.keyboard.is_key_just_pressed(Key.SPACE)
    assert window.keyboard.is_key_pressed(Key.SPACE)
    assert window.keyboard.is_char_empty()


def test_unbound_listener_still_updates_state(window):
    window.bind_event_listener(None)
    window.handle_event(WindowEvent(EventKind.MOVE, x=2, y=3))
    assert (window.x, window.y) == (2, 3)
    assert type(window.listener) is EventListener