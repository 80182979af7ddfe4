"""A graphics window: a drawing surface with optional double buffering and input queues."""

from __future__ import annotations

import collections
import enum
import threading
from dataclasses import dataclass
from typing import Deque, Optional, TypeVar, Union

from brickbreaker.colors import WHITE
from brickbreaker.surface import Surface

DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480
DEFAULT_Y_POSITION = 0
DEFAULT_TITLE = "Graphics Window"

_T = TypeVar("_T")


class Button(enum.Enum):
    """Mouse buttons."""

    LEFT_BUTTON = 0
    RIGHT_BUTTON = 1


class ButtonState(enum.Enum):
    """Whether a mouse button is held down."""

    BUTTON_UP = 0
    BUTTON_DOWN = 1


class ClickType(enum.Enum):
    """Kinds of mouse click."""

    NO_CLICK = 0
    LEFT_CLICK = 1
    RIGHT_CLICK = 2


class KeyType(enum.Enum):
    """Kinds of key press."""

    NO_KEYPRESS = 0
    ASCII = 1
    ARROW = 2
    FUNCTION = 3
    ESCAPE = 4


@dataclass(frozen=True)
class MouseClick:
    """A queued mouse click and where it happened."""

    click_type: ClickType
    x: int
    y: int


@dataclass(frozen=True)
class KeyPress:
    """A queued key press.

    ``value`` is the character for ASCII keys, the keypad direction for
    arrows (8 up, 2 down, 4 left, 6 right, ...), the number of a function
    key, and 1 for escape.
    """

    key_type: KeyType
    value: Union[str, int]


_CLICK_FOR_BUTTON = {
    Button.LEFT_BUTTON: ClickType.LEFT_CLICK,
    Button.RIGHT_BUTTON: ClickType.RIGHT_CLICK,
}


class Window:
    """A window whose contents live on in-memory surfaces.

    Input arrives through the ``post_*`` methods, which may be called from
    another thread; the ``get_*`` and ``wait_*`` methods consume it in order.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        x: Optional[int] = None,
        y: int = DEFAULT_Y_POSITION,
    ) -> None:
        self._width = width
        self._height = height
        self.position = (x, y)
        self.title = DEFAULT_TITLE
        self._screen = Surface(width, height, WHITE)
        self._buffer: Optional[Surface] = None
        self._wait_close = True
        self._mouse_x = -1
        self._mouse_y = -1
        self._buttons = {button: ButtonState.BUTTON_UP for button in Button}
        self._clicks: Deque[MouseClick] = collections.deque()
        self._keys: Deque[KeyPress] = collections.deque()
        self._lock = threading.Condition()

    # Display

    def set_wait_close(self, setting: bool) -> bool:
        """Choose whether closing should wait for a click; return the old setting."""
        previous = self._wait_close
        self._wait_close = bool(setting)
        return previous

    @property
    def wait_close(self) -> bool:
        return self._wait_close

    def set_buffering(self, setting: bool) -> bool:
        """Turn double buffering on or off; return the old setting.

        A new back buffer starts out white. Turning buffering off discards
        the back buffer without copying it to the screen.
        """
        previous = self._buffer is not None
        if previous == bool(setting):
            return previous
        if setting:
            buffer = Surface(self._width, self._height, WHITE)
            buffer.set_pen(WHITE)
            buffer.set_brush(WHITE)
            self._buffer = buffer
        else:
            self._buffer = None
        return previous

    @property
    def buffering(self) -> bool:
        return self._buffer is not None

    def update_buffer(self) -> None:
        """Copy the back buffer to the screen when double buffering is on."""
        if self._buffer is not None:
            self._screen.copy_from(self._buffer)

    def change_title(self, title: str) -> None:
        """Set the window title."""
        if not isinstance(title, str):
            raise TypeError(f"title must be a string, got {title!r}")
        self.title = title

    @property
    def size(self) -> tuple[int, int]:
        """The window's width and height."""
        return (self._width, self._height)

    @property
    def active_surface(self) -> Surface:
        """The surface drawing goes to: the back buffer if there is one."""
        return self._buffer if self._buffer is not None else self._screen

    @property
    def screen(self) -> Surface:
        """The surface that is shown."""
        return self._screen

    # Input posting

    def post_mouse_button(self, button: Button, pressed: bool, x: int, y: int) -> None:
        """Record a button going down or up; a release queues a click."""
        if not isinstance(button, Button):
            raise TypeError(f"expected a Button, got {button!r}")
        with self._lock:
            self._buttons[button] = (
                ButtonState.BUTTON_DOWN if pressed else ButtonState.BUTTON_UP
            )
            self._mouse_x, self._mouse_y = x, y
            if not pressed:
                self._clicks.append(MouseClick(_CLICK_FOR_BUTTON[button], x, y))
                self._lock.notify_all()

    def post_mouse_move(self, x: int, y: int) -> None:
        """Record the mouse pointer moving to (x, y)."""
        with self._lock:
            self._mouse_x, self._mouse_y = x, y

    def post_key(self, key_type: KeyType, value: Union[str, int]) -> None:
        """Queue a key press."""
        if not isinstance(key_type, KeyType) or key_type is KeyType.NO_KEYPRESS:
            raise ValueError(f"cannot post a key of type {key_type!r}")
        if key_type is KeyType.ASCII and not (isinstance(value, str) and len(value) == 1):
            raise ValueError(f"an ASCII key needs a single character, got {value!r}")
        with self._lock:
            self._keys.append(KeyPress(key_type, value))
            self._lock.notify_all()

    # Input reading

    def get_button_state(self, button: Button) -> ButtonState:
        """Return whether ``button`` is currently held down."""
        with self._lock:
            return self._buttons[button]

    @property
    def mouse_coord(self) -> tuple[int, int]:
        """The last known pointer position, (-1, -1) before any input."""
        with self._lock:
            return (self._mouse_x, self._mouse_y)

    def get_mouse_click(self) -> Optional[MouseClick]:
        """Remove and return the oldest click, or None if there is none."""
        with self._lock:
            return self._clicks.popleft() if self._clicks else None

    def get_key_press(self) -> Optional[KeyPress]:
        """Remove and return the oldest key press, or None if there is none."""
        with self._lock:
            return self._keys.popleft() if self._keys else None

    def _wait(self, queue: Deque[_T], timeout: Optional[float], what: str) -> _T:
        with self._lock:
            if not self._lock.wait_for(lambda: bool(queue), timeout):
                raise TimeoutError(f"no {what} within {timeout} seconds")
            return queue.popleft()

    def wait_mouse_click(self, timeout: Optional[float] = None) -> MouseClick:
        """Wait for a click and return it; raise TimeoutError after ``timeout`` seconds."""
        return self._wait(self._clicks, timeout, "mouse click")

    def wait_key_press(self, timeout: Optional[float] = None) -> KeyPress:
        """Wait for a key press and return it; raise TimeoutError after ``timeout`` seconds."""
        return self._wait(self._keys, timeout, "key press")

    def flush_key_queue(self) -> None:
        """Discard every waiting key press."""
        with self._lock:
            self._keys.clear()

    def flush_mouse_queue(self) -> None:
        """Discard every waiting mouse click."""
        with self._lock:
            self._clicks.clear()