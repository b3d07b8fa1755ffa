"""Spheres, possibly moving."""

from __future__ import annotations

import math

from raytracer.aabb import AABB
from raytracer.anim import Animation
from raytracer.hit import Hit, Hittable
from raytracer.interval import Interval
from raytracer.material import Material
from raytracer.ray import Ray
from raytracer.vector import Point3, Vector3


def get_sphere_uv(p: Point3) -> tuple[float, float]:
    """Surface coordinates of a point on the unit sphere."""
    cos_theta = -p.y
    theta = math.acos(cos_theta) if -1.0 <= cos_theta <= 1.0 else math.nan
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / math.tau, theta / math.pi


class Sphere(Hittable):
    """A sphere whose centre follows an animation."""

    def __init__(self, anim: Animation, radius: float, material: Material) -> None:
        self.anim = anim
        self.radius = radius
        self.material = material
        self._bbox = anim.bound_all()

    @classmethod
    def from_coords(
        cls, x: float, y: float, z: float, radius: float, material: Material
    ) -> Sphere:
        return cls(Animation.constant(Vector3(x, y, z), radius), radius, material)

    @classmethod
    def at_position(cls, pos: Point3, radius: float, material: Material) -> Sphere:
        return cls(Animation.constant(pos, radius), radius, material)

    def hit(self, ray: Ray, ray_t: Interval) -> Hit | None:
        center = self.anim.sample(ray.time)
        oc = center - ray.origin
        a = ray.direction.length_squared()
        h = ray.direction.dot(oc)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = h * h - a * c
        if discriminant < 0.0:
            return None
        sqrt_d = math.sqrt(discriminant)

        root = (h - sqrt_d) / a
        if not ray_t.surrounds(root):
            root = (h + sqrt_d) / a
            if not ray_t.surrounds(root):
                return None

        point = ray.at(root)
        outward_normal = (point - center) / self.radius
        front_face = ray.direction.dot(outward_normal) < 0.0
        u, v = get_sphere_uv(outward_normal)
        return Hit(
            p=point,
            normal=outward_normal if front_face else -outward_normal,
            material=self.material,
            t=root,
            u=u,
            v=v,
            front_face=front_face,
        )

    def bounding(self) -> AABB:
        return self._bbox