"""An off-screen drawing surface with pen, brush and the basic shapes."""

from __future__ import annotations

import enum
import math
from typing import Callable, Iterator, Sequence

from PIL import Image as PILImage
from PIL import ImageChops, ImageDraw

from brickbreaker.colors import WHITE, Color

DEFAULT_PEN_WIDTH = 1
_BEZIER_STEPS = 64


class DrawStyle(enum.Enum):
    """How a shape is rendered."""

    NONE = 0
    FILLED = 1
    FRAME = 2
    INVERTED = 3
    TRANSLUCENT = 4
    ANTIALIASED = 5


class AngleType(enum.Enum):
    """Units for arc angles."""

    DEGREES = 0
    RADIANS = 1


def _line_points(x1: int, y1: int, x2: int, y2: int) -> Iterator[tuple[int, int]]:
    """Yield the pixels of a line from (x1, y1) up to but excluding (x2, y2)."""
    dx = abs(x2 - x1)
    dy = -abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx + dy
    x, y = x1, y1
    while (x, y) != (x2, y2):
        yield x, y
        doubled = 2 * err
        if doubled >= dy:
            err += dy
            x += sx
        if doubled <= dx:
            err += dx
            y += sy


def _bbox(x1: int, y1: int, x2: int, y2: int) -> tuple[int, int, int, int] | None:
    """Normalise a bounding box whose right and bottom edges are exclusive."""
    left, right = sorted((x1, x2))
    top, bottom = sorted((y1, y2))
    if right - 1 < left or bottom - 1 < top:
        return None
    return (left, top, right - 1, bottom - 1)


def _bezier_points(
    controls: Sequence[tuple[int, int]], steps: int = _BEZIER_STEPS
) -> list[tuple[float, float]]:
    (x0, y0), (x1, y1), (x2, y2), (x3, y3) = controls
    points = []
    for step in range(steps + 1):
        t = step / steps
        u = 1.0 - t
        a, b, c, d = u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t
        points.append(
            (a * x0 + b * x1 + c * x2 + d * x3, a * y0 + b * y1 + c * y2 + d * y3)
        )
    return points


class Canvas:
    """A raster surface drawn on with a pen (outlines) and a brush (fills)."""

    def __init__(self, width: int, height: int, background: Color = WHITE) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self._pixels = PILImage.new("RGB", (width, height), self._rgb(background))
        self._pen = WHITE
        self._pen_width = 0
        self._brush = WHITE

    @staticmethod
    def _rgb(color: Color) -> tuple[int, int, int]:
        if not isinstance(color, Color):
            raise TypeError(f"expected a Color, got {color!r}")
        return (color.red, color.green, color.blue)

    @property
    def width(self) -> int:
        return self._pixels.size[0]

    @property
    def height(self) -> int:
        return self._pixels.size[1]

    @property
    def pen(self) -> Color:
        return self._pen

    @property
    def pen_width(self) -> int:
        return self._pen_width

    @property
    def brush(self) -> Color:
        return self._brush

    @property
    def _stroke(self) -> int:
        return max(1, self._pen_width)

    def to_pil(self) -> PILImage.Image:
        """Return a copy of the pixels as a Pillow RGB image."""
        return self._pixels.copy()

    def set_pen(self, color: Color, width: int = DEFAULT_PEN_WIDTH) -> Color:
        """Set the outline colour and width; return the previous colour."""
        self._rgb(color)
        if width < 0:
            raise ValueError(f"pen width cannot be negative: {width!r}")
        previous = self._pen
        self._pen = color
        self._pen_width = width
        return previous

    def set_brush(self, color: Color) -> Color:
        """Set the fill colour; return the previous colour."""
        self._rgb(color)
        previous = self._brush
        self._brush = color
        return previous

    def _draw(self) -> ImageDraw.ImageDraw:
        return ImageDraw.Draw(self._pixels)

    def _invert_region(self, shape: Callable[[ImageDraw.ImageDraw], None]) -> None:
        mask = PILImage.new("L", self._pixels.size, 0)
        shape(ImageDraw.Draw(mask))
        self._pixels.paste(ImageChops.invert(self._pixels), (0, 0), mask)

    @staticmethod
    def _unsupported(style: DrawStyle, allowed: Sequence[DrawStyle]) -> ValueError:
        names = ", ".join(s.name for s in allowed)
        return ValueError(f"draw style {style!r} is not supported here; use {names}")

    def draw_pixel(self, x: int, y: int) -> None:
        """Set one pixel to the pen colour; pixels off the canvas are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self._pixels.putpixel((x, y), self._rgb(self._pen))

    def draw_line(
        self, x1: int, y1: int, x2: int, y2: int, style: DrawStyle = DrawStyle.FRAME
    ) -> None:
        """Draw a line from (x1, y1) towards (x2, y2), excluding the end point."""
        if style is not DrawStyle.FRAME:
            raise self._unsupported(style, (DrawStyle.FRAME,))
        if self._stroke == 1:
            for x, y in _line_points(x1, y1, x2, y2):
                self.draw_pixel(x, y)
        else:
            self._draw().line(
                [(x1, y1), (x2, y2)], fill=self._rgb(self._pen), width=self._stroke
            )

    def draw_rectangle(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        style: DrawStyle = DrawStyle.FILLED,
        corner_width: int = 0,
        corner_height: int = 0,
    ) -> None:
        """Draw a rectangle, rounded when corner sizes are given."""
        allowed = (DrawStyle.FILLED, DrawStyle.FRAME, DrawStyle.INVERTED)
        if style not in allowed:
            raise self._unsupported(style, allowed)
        box = _bbox(x1, y1, x2, y2)
        if box is None:
            return
        rounded = corner_width != 0 or corner_height != 0
        radius = min(abs(corner_width), abs(corner_height)) // 2

        def shape(draw: ImageDraw.ImageDraw, fill, outline, width: int) -> None:
            if rounded:
                draw.rounded_rectangle(box, radius, fill=fill, outline=outline, width=width)
            else:
                draw.rectangle(box, fill=fill, outline=outline, width=width)

        if style is DrawStyle.INVERTED:
            self._invert_region(lambda d: shape(d, 255, 255, 1))
        else:
            fill = self._rgb(self._brush) if style is DrawStyle.FILLED else None
            shape(self._draw(), fill, self._rgb(self._pen), self._stroke)

    def _draw_polygon_points(
        self, points: list[tuple[int, int]], style: DrawStyle
    ) -> None:
        allowed = (DrawStyle.FILLED, DrawStyle.FRAME, DrawStyle.INVERTED)
        if style not in allowed:
            raise self._unsupported(style, allowed)
        if style is DrawStyle.INVERTED:
            self._invert_region(lambda d: d.polygon(points, fill=255, outline=255))
            return
        draw = self._draw()
        fill = self._rgb(self._brush) if style is DrawStyle.FILLED else None
        draw.polygon(points, fill=fill, outline=self._rgb(self._pen))
        if self._stroke > 1:
            draw.line(
                points + [points[0]],
                fill=self._rgb(self._pen),
                width=self._stroke,
                joint="curve",
            )

    def draw_triangle(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        x3: int,
        y3: int,
        style: DrawStyle = DrawStyle.FILLED,
    ) -> None:
        """Draw a triangle through three vertices."""
        self._draw_polygon_points([(x1, y1), (x2, y2), (x3, y3)], style)

    def draw_polygon(
        self, xs: Sequence[int], ys: Sequence[int], style: DrawStyle = DrawStyle.FILLED
    ) -> None:
        """Draw a polygon from matching sequences of x and y coordinates."""
        if len(xs) != len(ys):
            raise ValueError(
                f"coordinate sequences differ in length: {len(xs)} and {len(ys)}"
            )
        if len(xs) < 2:
            raise ValueError("a polygon needs at least two vertices")
        self._draw_polygon_points(list(zip(xs, ys)), style)

    def draw_ellipse(
        self, x1: int, y1: int, x2: int, y2: int, style: DrawStyle = DrawStyle.FILLED
    ) -> None:
        """Draw an ellipse inside the given bounding rectangle."""
        allowed = (DrawStyle.FILLED, DrawStyle.FRAME, DrawStyle.INVERTED)
        if style not in allowed:
            raise self._unsupported(style, allowed)
        box = _bbox(x1, y1, x2, y2)
        if box is None:
            return
        if style is DrawStyle.INVERTED:
            self._invert_region(lambda d: d.ellipse(box, fill=255, outline=255))
            return
        fill = self._rgb(self._brush) if style is DrawStyle.FILLED else None
        self._draw().ellipse(
            box, fill=fill, outline=self._rgb(self._pen), width=self._stroke
        )

    def draw_circle(
        self, x: int, y: int, radius: int, style: DrawStyle = DrawStyle.FILLED
    ) -> None:
        """Draw a circle centred on (x, y)."""
        self.draw_ellipse(x - radius, y - radius, x + radius, y + radius, style)

    def draw_arc(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        start_angle: float,
        end_angle: float,
        style: DrawStyle = DrawStyle.FRAME,
        angle_type: AngleType = AngleType.DEGREES,
    ) -> None:
        """Draw the part of an ellipse from start to end angle, counter-clockwise.

        FRAME draws the curve only; FILLED and INVERTED draw a pie slice.
        """
        allowed = (DrawStyle.FILLED, DrawStyle.FRAME, DrawStyle.INVERTED)
        if style not in allowed:
            raise self._unsupported(style, allowed)
        if angle_type is AngleType.RADIANS:
            start_angle = math.degrees(start_angle)
            end_angle = math.degrees(end_angle)
        box = _bbox(x1, y1, x2, y2)
        if box is None:
            return
        # Screen y grows downwards, so counter-clockwise becomes clockwise.
        start, end = -end_angle, -start_angle
        if style is DrawStyle.FRAME:
            self._draw().arc(
                box, start, end, fill=self._rgb(self._pen), width=self._stroke
            )
        elif style is DrawStyle.FILLED:
            self._draw().pieslice(
                box,
                start,
                end,
                fill=self._rgb(self._brush),
                outline=self._rgb(self._pen),
                width=self._stroke,
            )
        else:
            self._invert_region(
                lambda d: d.pieslice(box, start, end, fill=255, outline=255)
            )

    def draw_bezier(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        x3: int,
        y3: int,
        x4: int,
        y4: int,
        style: DrawStyle = DrawStyle.FRAME,
    ) -> None:
        """Draw a cubic Bezier curve from (x1, y1) to (x4, y4)."""
        if style is not DrawStyle.FRAME:
            raise self._unsupported(style, (DrawStyle.FRAME,))
        points = _bezier_points([(x1, y1), (x2, y2), (x3, y3), (x4, y4)])
        self._draw().line(points, fill=self._rgb(self._pen), width=self._stroke)

    def get_color(self, x: int, y: int) -> Color:
        """Return the colour of the pixel at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas"
            )
        red, green, blue = self._pixels.getpixel((x, y))
        return Color(red, green, blue)

    def copy_from(self, other: Canvas) -> None:
        """Replace this canvas's pixels with those of a canvas of the same size."""
        if (other.width, other.height) != (self.width, self.height):
            raise ValueError(
                f"cannot copy a {other.width}x{other.height} canvas "
                f"onto a {self.width}x{self.height} canvas"
            )
        self._pixels.paste(other._pixels, (0, 0))