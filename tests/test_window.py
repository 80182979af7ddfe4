import threading

import pytest

from brickbreaker.colors import RED, WHITE
from brickbreaker.window import (
    Button,
    ButtonState,
    ClickType,
    KeyPress,
    KeyType,
    MouseClick,
    Window,
)


@pytest.fixture
def window():
    return Window(40, 30)


def test_default_window_size_and_title():
    w = Window()
    assert w.size == (640, 480)
    assert w.title == "Graphics Window"


def test_size_matches_arguments(window):
    assert window.size == (40, 30)
    assert (window.screen.width, window.screen.height) == (40, 30)


def test_change_title(window):
    window.change_title("Bricks")
    assert window.title == "Bricks"


def test_change_title_rejects_non_string(window):
    with pytest.raises(TypeError):
        window.change_title(5)


def test_set_wait_close_returns_previous(window):
    assert window.set_wait_close(False) is True
    assert window.set_wait_close(True) is False
    assert window.wait_close is True


def test_set_buffering_returns_previous(window):
    assert window.set_buffering(True) is False
    assert window.set_buffering(True) is True
    assert window.set_buffering(False) is True
    assert window.buffering is False


def test_active_surface_switches_with_buffering(window):
    assert window.active_surface is window.screen
    window.set_buffering(True)
    assert window.active_surface is not window.screen
    window.set_buffering(False)
    assert window.active_surface is window.screen


def test_new_buffer_is_white(window):
    window.set_buffering(True)
    assert window.active_surface.get_color(10, 10) == WHITE


def test_buffered_drawing_shows_only_after_update(window):
    window.set_buffering(True)
    surface = window.active_surface
    surface.set_pen(RED)
    surface.set_brush(RED)
    surface.draw_rectangle(0, 0, 20, 20)
    assert window.screen.get_color(5, 5) == WHITE
    window.update_buffer()
    assert window.screen.get_color(5, 5) == RED


def test_unbuffered_drawing_goes_to_screen(window):
    surface = window.active_surface
    surface.set_pen(RED)
    surface.set_brush(RED)
    surface.draw_rectangle(0, 0, 20, 20)
    window.update_buffer()
    assert window.screen.get_color(5, 5) == RED


def test_mouse_coord_starts_unknown(window):
    assert window.mouse_coord == (-1, -1)


def test_mouse_move_updates_coord(window):
    window.post_mouse_move(7, 9)
    assert window.mouse_coord == (7, 9)


def test_button_state_follows_press_and_release(window):
    assert window.get_button_state(Button.LEFT_BUTTON) is ButtonState.BUTTON_UP
    window.post_mouse_button(Button.LEFT_BUTTON, True, 3, 4)
    assert window.get_button_state(Button.LEFT_BUTTON) is ButtonState.BUTTON_DOWN
    assert window.get_button_state(Button.RIGHT_BUTTON) is ButtonState.BUTTON_UP
    window.post_mouse_button(Button.LEFT_BUTTON, False, 3, 4)
    assert window.get_button_state(Button.LEFT_BUTTON) is ButtonState.BUTTON_UP


def test_press_alone_queues_no_click(window):
    window.post_mouse_button(Button.LEFT_BUTTON, True, 1, 2)
    assert window.get_mouse_click() is None


def test_clicks_come_out_in_order(window):
    window.post_mouse_button(Button.LEFT_BUTTON, False, 1, 2)
    window.post_mouse_button(Button.RIGHT_BUTTON, False, 3, 4)
    assert window.get_mouse_click() == MouseClick(ClickType.LEFT_CLICK, 1, 2)
    assert window.get_mouse_click() == MouseClick(ClickType.RIGHT_CLICK, 3, 4)
    assert window.get_mouse_click() is None


def test_flush_mouse_queue(window):
    window.post_mouse_button(Button.LEFT_BUTTON, False, 1, 2)
    window.flush_mouse_queue()
    assert window.get_mouse_click() is None


def test_key_presses_come_out_in_order(window):
    window.post_key(KeyType.ASCII, "a")
    window.post_key(KeyType.FUNCTION, 1)
    assert window.get_key_press() == KeyPress(KeyType.ASCII, "a")
    assert window.get_key_press() == KeyPress(KeyType.FUNCTION, 1)
    assert window.get_key_press() is None


def test_flush_key_queue(window):
    window.post_key(KeyType.ESCAPE, 1)
    window.flush_key_queue()
    assert window.get_key_press() is None


def test_post_key_rejects_no_keypress(window):
    with pytest.raises(ValueError):
        window.post_key(KeyType.NO_KEYPRESS, 0)


def test_post_ascii_key_needs_one_character(window):
    with pytest.raises(ValueError):
        window.post_key(KeyType.ASCII, "ab")


def test_wait_mouse_click_times_out(window):
    with pytest.raises(TimeoutError):
        window.wait_mouse_click(timeout=0.01)


def test_wait_key_press_times_out(window):
    with pytest.raises(TimeoutError):
        window.wait_key_press(timeout=0.01)


def test_wait_mouse_click_returns_queued_click(window):
    window.post_mouse_button(Button.RIGHT_BUTTON, False, 5, 6)
    assert window.wait_mouse_click(timeout=1) == MouseClick(ClickType.RIGHT_CLICK, 5, 6)


def test_wait_key_press_receives_from_other_thread(window):
    timer = threading.Timer(0.05, window.post_key, args=(KeyType.ARROW, 8))
    timer.start()
    try:
        assert window.wait_key_press(timeout=5) == KeyPress(KeyType.ARROW, 8)
    finally:
        timer.join()


def test_wait_mouse_click_receives_from_other_thread(window):
    timer = threading.Timer(
        0.05, window.post_mouse_button, args=(Button.LEFT_BUTTON, False, 2, 3)
    )
    timer.start()
    try:
        assert window.wait_mouse_click(timeout=5) == MouseClick(ClickType.LEFT_CLICK, 2, 3)
    finally:
        timer.join()


def test_post_mouse_button_rejects_non_button(window):
    with pytest.raises(TypeError):
        window.post_mouse_button("left", True, 0, 0)