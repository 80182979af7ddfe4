"""Game layout configuration and the operations the interface supports."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from brickbreaker.colors import BLUE, LAVENDER, LIGHTSEAGREEN, WHITE, Color


class OperationType(enum.IntEnum):
    """Operations that a click in the interface can request."""

    DRAW_LINE = 0
    DRAW_RECT = enum.auto()
    DRAW_TRI = enum.auto()
    DRAW_CIRC = enum.auto()
    CHNG_DRAW_CLR = enum.auto()
    CHNG_FILL_CLR = enum.auto()
    CHNG_BK_CLR = enum.auto()
    DEL = enum.auto()
    MOVE = enum.auto()
    RESIZE = enum.auto()
    ROTATE = enum.auto()
    SEND_BACK = enum.auto()
    BRNG_FRNT = enum.auto()
    SAVE = enum.auto()
    LOAD = enum.auto()
    EXIT = enum.auto()
    DRAWING_AREA = enum.auto()
    STATUS = enum.auto()
    EMPTY = enum.auto()
    TO_DRAW = enum.auto()
    TO_PLAY = enum.auto()


@dataclass(frozen=True)
class GameConfig:
    """Window geometry, colours and brick sizes.

    The window is split into a toolbar, the brick grid, the paddle area
    and a status bar, from top to bottom.
    """

    wind_width: int = 1200
    wind_height: int = 600
    wx: int = 5
    wy: int = 5
    tool_bar_height: int = 40
    status_bar_height: int = 50
    pen_color: Color = BLUE
    bk_grnd_color: Color = LAVENDER
    status_bar_color: Color = LIGHTSEAGREEN
    pen_width: int = 3
    brick_width: int = 60
    brick_height: int = 30
    grid_lines_color: Color = WHITE
    icon_width: int = 70

    @property
    def remaining_height(self) -> int:
        """Height left between the toolbar and the status bar."""
        return self.wind_height - self.tool_bar_height - self.status_bar_height

    @property
    def grid_height(self) -> int:
        """Height of the brick grid: two thirds of the remaining height."""
        return int(self.remaining_height * (2 / 3.0))

    @property
    def paddle_area_height(self) -> int:
        """Height of the area below the grid reserved for the paddle."""
        return self.remaining_height - self.grid_height


config = GameConfig()