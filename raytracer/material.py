"""How surfaces scatter light."""

from __future__ import annotations

import math
import random as _random
from abc import ABC, abstractmethod
from dataclasses import dataclass

from raytracer.color import Color
from raytracer.hit import Hit
from raytracer.ray import Ray
from raytracer.texture import SolidTexture, Texture
from raytracer.vector import Vector3


class Material(ABC):
    """A surface response to incoming rays."""

    @abstractmethod
    def scatter(self, r_in: Ray, hit: Hit) -> tuple[Color, Ray] | None:
        """The attenuation and outgoing ray, or None if the ray is absorbed."""


class Lambertian(Material):
    """An ideal diffuse surface coloured by a texture."""

    def __init__(self, texture: Texture) -> None:
        self.texture = texture

    @classmethod
    def from_color(cls, albedo: Color) -> Lambertian:
        return cls(SolidTexture(albedo))

    def scatter(self, r_in: Ray, hit: Hit) -> tuple[Color, Ray] | None:
        direction = hit.normal + Vector3.random_unit()
        if direction.is_near_zero():
            direction = hit.normal
        scattered = Ray(hit.p, direction, r_in.time)
        return self.texture.value(hit.u, hit.v, hit.p), scattered


@dataclass(frozen=True, slots=True)
class Metal(Material):
    """A reflective surface, blurred by ``fuzz``."""

    albedo: Color
    fuzz: float

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, fuzz: float) -> Metal:
        return cls(Color(r, g, b), fuzz)

    def scatter(self, r_in: Ray, hit: Hit) -> tuple[Color, Ray] | None:
        reflected = r_in.direction.reflect(hit.normal)
        direction = reflected.unit() + Vector3.random_unit() * self.fuzz
        scattered = Ray(hit.p, direction, r_in.time)
        if scattered.direction.dot(hit.normal) > 0.0:
            return self.albedo, scattered
        return None


@dataclass(frozen=True, slots=True)
class Dielectric(Material):
    """A clear refracting surface with refractive ``index``."""

    index: float

    @staticmethod
    def reflectance(cosine: float, index: float) -> float:
        """Schlick's approximation of the reflected fraction."""
        r0 = (1.0 - index) / (1.0 + index)
        r0 = r0 * r0
        return r0 + (1.0 - r0) * (1.0 - cosine) ** 5

    def scatter(self, r_in: Ray, hit: Hit) -> tuple[Color, Ray] | None:
        ri = 1.0 / self.index if hit.front_face else self.index
        unit_dir = r_in.direction.unit()
        cos_theta = -min(unit_dir.dot(hit.normal), 1.0)
        sin_squared = 1.0 - cos_theta * cos_theta
        sin_theta = math.sqrt(sin_squared) if sin_squared >= 0.0 else math.nan
        can_refract = ri * sin_theta <= 1.0
        if not can_refract or self.reflectance(cos_theta, ri) > _random.random():
            direction = unit_dir.reflect(hit.normal)
        else:
            direction = unit_dir.refract(hit.normal, ri)
        return Color.WHITE, Ray(hit.p, direction, r_in.time)