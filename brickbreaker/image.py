"""Raster images loaded from JPEG files or captured from a drawing surface."""

from __future__ import annotations

import enum
import os
from typing import Union

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from brickbreaker.colors import Color

PathLike = Union[str, "os.PathLike[str]"]


class ImageType(enum.Enum):
    """Where an image's pixels came from."""

    JPEG = "jpeg"
    SCREEN = "screen"


class Image:
    """An RGB image; empty (0x0) unless a file is opened."""

    def __init__(
        self, path: PathLike | None = None, image_type: ImageType = ImageType.JPEG
    ) -> None:
        self.image_type: ImageType | None = None
        self._pixels = PILImage.new("RGB", (0, 0))
        if path is not None:
            self.open(path, image_type)

    def open(self, path: PathLike, image_type: ImageType = ImageType.JPEG) -> None:
        """Load a JPEG file, replacing the current contents."""
        if image_type is not ImageType.JPEG:
            raise ValueError(f"unsupported image type: {image_type!r}")
        try:
            with PILImage.open(path) as picture:
                if picture.format != "JPEG":
                    raise ValueError(f"{os.fspath(path)!s} is not a JPEG image")
                pixels = picture.convert("RGB")
        except FileNotFoundError:
            raise
        except (UnidentifiedImageError, OSError) as exc:
            raise ValueError(f"cannot read JPEG image {os.fspath(path)!s}") from exc
        self._pixels = pixels
        self.image_type = image_type

    @classmethod
    def from_pil(
        cls, picture: PILImage.Image, image_type: ImageType = ImageType.SCREEN
    ) -> Image:
        """Wrap a copy of a Pillow image."""
        image = cls()
        image._pixels = picture.convert("RGB")
        image.image_type = image_type
        return image

    def to_pil(self) -> PILImage.Image:
        """Return a copy of the pixels as a Pillow RGB image."""
        return self._pixels.copy()

    def copy(self) -> Image:
        """Return an independent copy of this image."""
        image = Image()
        image._pixels = self._pixels.copy()
        image.image_type = self.image_type
        return image

    @property
    def width(self) -> int:
        return self._pixels.size[0]

    @property
    def height(self) -> int:
        return self._pixels.size[1]

    def pixel(self, x: int, y: int) -> Color:
        """Return the colour at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        red, green, blue = self._pixels.getpixel((x, y))
        return Color(red, green, blue)