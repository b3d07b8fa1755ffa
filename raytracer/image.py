"""Loading images to use as textures."""

from __future__ import annotations

import os
from dataclasses import dataclass

from PIL import Image

from raytracer.color import Color


@dataclass(frozen=True, slots=True)
class ImgData:
    """Packed 8-bit RGB samples of an image."""

    data: bytes
    width: int
    height: int

    def pixel(self, x: int, y: int) -> Color:
        """The colour stored for column ``x`` of row ``y``."""
        if x < 0 or y < 0:
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        index = self._deinterlace(x, y)
        r, g, b = self.data[index], self.data[index + 1], self.data[index + 2]
        return Color(r / 256.0, g / 256.0, b / 256.0)

    def _deinterlace(self, x: int, y: int) -> int:
        h = self.height
        column = x if y % 2 == 0 else (x + h) % (h * 2)
        return (column + y * h) * 3


def load_image(path: str | os.PathLike[str]) -> ImgData:
    """Read an image file into RGB samples."""
    with Image.open(path) as img:
        rgb = img.convert("RGB")
        return ImgData(rgb.tobytes(), rgb.width, rgb.height)