"""A thin-lens camera producing rays through image pixels."""

from __future__ import annotations

import math
import random

from raytracer.quality import QualityOptions
from raytracer.ray import Ray
from raytracer.vector import Point3, Vector3, degrees_to_radians


class Camera:
    """Maps pixel positions to primary rays."""

    def __init__(
        self,
        quality: QualityOptions = QualityOptions.DEFAULT,
        img_aspect: float = 16.0 / 9.0,
        pos: Point3 = Vector3(0.0, 0.0, 0.0),
        vert_fov: float = 20.0,
        lookat: Point3 = Vector3(1.0, 0.0, 0.0),
        vup: Vector3 = Vector3(0.0, 1.0, 0.0),
        defocus_angle: float = 0.0,
        focus_dist: float = 10.0,
        num_threads: int = 8,
    ) -> None:
        img_height = int(quality.img_width / img_aspect)
        if img_height <= 1:
            raise ValueError(
                f"image height {img_height} is too small; it must be more than 1"
            )

        self.img_width = quality.img_width
        self.img_height = img_height
        self.pos = pos
        self.samples_per_pixel = quality.samples_per_pixel
        self.max_depth = quality.max_depth
        self.defocus_angle = defocus_angle
        self.num_threads = num_threads
        self.pixel_samples_scale = 1.0 / quality.samples_per_pixel

        h = math.tan(degrees_to_radians(vert_fov) / 2.0)
        view_height = 2.0 * h * focus_dist
        view_width = view_height * (quality.img_width / img_height)

        w = (pos - lookat).unit()
        u = vup.cross(w).unit()
        v = w.cross(u)

        view_u = u * view_width
        view_v = -v * view_height

        self.pixel_du = view_u / quality.img_width
        self.pixel_dv = view_v / img_height

        view_upper_left = pos - w * focus_dist - view_u / 2.0 - view_v / 2.0
        self.pixel00 = view_upper_left + (self.pixel_du + self.pixel_dv) * 0.5

        defocus_radius = focus_dist * math.tan(degrees_to_radians(defocus_angle / 2.0))
        self.defocus_u = u * defocus_radius
        self.defocus_v = v * defocus_radius

    def get_ray(self, i: int, j: int) -> Ray:
        """A random ray through pixel column ``i`` of row ``j``."""
        offset_x = random.random() - 0.5
        offset_y = random.random() - 0.5
        pixel_sample = (
            self.pixel00
            + self.pixel_du * (i + offset_x)
            + self.pixel_dv * (j + offset_y)
        )
        origin = self.pos if self.defocus_angle <= 0.0 else self._defocus_sample()
        return Ray(origin, pixel_sample - origin, random.random())

    def _defocus_sample(self) -> Point3:
        p = Vector3.random_unit_disc()
        return self.pos + self.defocus_u * p.x + self.defocus_v * p.y

    def total_pixels(self) -> int:
        return self.img_height * self.img_width