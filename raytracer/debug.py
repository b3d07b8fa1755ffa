"""Textures that visualise surface parameters."""

from __future__ import annotations

import enum

from raytracer.color import Color
from raytracer.texture import Texture
from raytracer.vector import Point3


class DebugType(enum.Enum):
    UV = enum.auto()


class DebugTexture(Texture):
    """Shows surface coordinates as colour: ``u`` in red, ``v`` in green."""

    def __init__(self, debug_type: DebugType = DebugType.UV) -> None:
        self.debug_type = debug_type

    def value(self, u: float, v: float, p: Point3) -> Color:
        return Color(u, v, 0.0)