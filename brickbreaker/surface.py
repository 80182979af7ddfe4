"""A drawing surface that adds text, fonts and image blitting to the canvas."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from PIL import Image as PILImage
from PIL import ImageFont

from brickbreaker.canvas import Canvas
from brickbreaker.colors import WHITE, Color
from brickbreaker.image import Image, ImageType

DEFAULT_FONT_SIZE = 10


class FontStyle(enum.IntFlag):
    """Font style flags, combined with ``|``."""

    PLAIN = 0x00
    BOLD = 0x01
    ITALICIZED = 0x02
    UNDERLINED = 0x04
    STRIKEOUT = 0x08


class FontFamily(enum.Enum):
    """Generic font families."""

    BY_NAME = 0
    MODERN = 1
    ROMAN = 2
    SCRIPT = 3
    SWISS = 4


@dataclass(frozen=True)
class Font:
    """The font selected for drawing text."""

    size: int = DEFAULT_FONT_SIZE
    style: FontStyle = FontStyle.PLAIN
    family: FontFamily = FontFamily.SWISS
    name: str | None = None


def _load_font(font: Font):
    if font.name:
        try:
            return ImageFont.truetype(font.name, font.size)
        except OSError:
            pass
    try:
        return ImageFont.load_default(size=font.size)
    except (TypeError, OSError, ImportError):
        return ImageFont.load_default()


class Surface(Canvas):
    """A canvas that can also draw text and images and capture regions."""

    def __init__(self, width: int, height: int, background: Color = WHITE) -> None:
        super().__init__(width, height, background)
        self._font = Font()
        self._pil_font = _load_font(self._font)

    @property
    def font(self) -> Font:
        return self._font

    def set_font(
        self,
        size: int,
        style: FontStyle = FontStyle.PLAIN,
        family: FontFamily = FontFamily.SWISS,
        name: str | None = None,
    ) -> Font:
        """Select the font for later text; return it.

        Strike-out is not supported and is dropped from the style.
        """
        if size <= 0:
            raise ValueError(f"font size must be positive, got {size!r}")
        self._font = Font(size, FontStyle(style) & ~FontStyle.STRIKEOUT, family, name)
        self._pil_font = _load_font(self._font)
        return self._font

    def string_size(self, text: str) -> tuple[int, int]:
        """Return the width and height of ``text`` in the current font."""
        if not text:
            return (0, 0)
        _, _, right, bottom = self._draw().textbbox((0, 0), text, font=self._pil_font)
        return (int(right), int(bottom))

    def integer_size(self, number: int) -> tuple[int, int]:
        """Return the size of an integer drawn in the current font."""
        return self.string_size(f"{int(number):d}")

    def double_size(self, number: float) -> tuple[int, int]:
        """Return the size of a number drawn with six decimals."""
        return self.string_size(f"{float(number):f}")

    def draw_string(self, x: int, y: int, text: str) -> None:
        """Draw ``text`` in the pen colour with its top-left at (x, y)."""
        if not isinstance(text, str):
            raise TypeError(f"expected a string, got {text!r}")
        if not text:
            return
        pen = self._rgb(self.pen)
        draw = self._draw()
        draw.text((x, y), text, fill=pen, font=self._pil_font)
        if self._font.style & FontStyle.UNDERLINED:
            width, height = self.string_size(text)
            draw.line([(x, y + height), (x + width - 1, y + height)], fill=pen)

    def draw_integer(self, x: int, y: int, number: int) -> None:
        """Draw an integer as decimal text."""
        self.draw_string(x, y, f"{int(number):d}")

    def draw_double(self, x: int, y: int, number: float) -> None:
        """Draw a number with six decimals."""
        self.draw_string(x, y, f"{float(number):f}")

    def draw_image(
        self, image: Image, x: int, y: int, width: int = -1, height: int = -1
    ) -> None:
        """Draw ``image`` at (x, y), scaled when both width and height are given."""
        if image.width == 0 or image.height == 0:
            return
        if image.image_type not in (ImageType.JPEG, ImageType.SCREEN):
            raise ValueError(f"unsupported image type: {image.image_type!r}")
        picture = image.to_pil()
        if width != -1 and height != -1:
            if width <= 0 or height <= 0:
                return
            picture = picture.resize((width, height), PILImage.Resampling.NEAREST)
        self._pixels.paste(picture, (x, y))

    def store_image(self, x: int, y: int, width: int, height: int) -> Image:
        """Capture a region of the surface as a new image."""
        if x < 0 or y < 0 or width < 0 or height < 0:
            raise ValueError("region coordinates and size cannot be negative")
        if x + width > self.width or y + height > self.height:
            raise ValueError("selection extends outside the surface")
        region = self._pixels.crop((x, y, x + width, y + height))
        return Image.from_pil(region, ImageType.SCREEN)