"""Surface colour as a function of position."""

from __future__ import annotations

import math
import os
from abc import ABC, abstractmethod

from raytracer.color import Color
from raytracer.image import ImgData, load_image
from raytracer.vector import Point3


class Texture(ABC):
    """A colour looked up by surface coordinates and point."""

    @abstractmethod
    def value(self, u: float, v: float, p: Point3) -> Color:
        """The colour at surface coordinates ``(u, v)`` and point ``p``."""


class SolidTexture(Texture):
    """The same colour everywhere."""

    def __init__(self, albedo: Color) -> None:
        self.albedo = albedo

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> SolidTexture:
        return cls(Color(r, g, b))

    def value(self, u: float, v: float, p: Point3) -> Color:
        return self.albedo


class CheckerTexture(Texture):
    """Alternating cubes of two textures, each ``scale`` wide."""

    def __init__(self, scale: float, even: Texture, odd: Texture) -> None:
        self.inv_scale = 1.0 / scale
        self.even = even
        self.odd = odd

    @classmethod
    def from_colors(cls, scale: float, even: Color, odd: Color) -> CheckerTexture:
        return cls(scale, SolidTexture(even), SolidTexture(odd))

    def value(self, u: float, v: float, p: Point3) -> Color:
        total = sum(math.floor(self.inv_scale * c) for c in p)
        texture = self.even if total % 2 == 0 else self.odd
        return texture.value(u, v, p)


class ImageTexture(Texture):
    """An image wrapped over the surface coordinates."""

    def __init__(self, image: ImgData) -> None:
        self.image = image

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> ImageTexture:
        return cls(load_image(path))

    def value(self, u: float, v: float, p: Point3) -> Color:
        if u > 1.0 or u < 0.0 or v > 1.0 or v < 0.0:
            return Color.CYAN
        v = 1.0 - v
        i = int(u * self.image.width)
        j = int(v * self.image.width)
        return self.image.pixel(i, j)