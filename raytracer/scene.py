"""A camera together with the objects it looks at."""

from __future__ import annotations

from dataclasses import dataclass

from raytracer.camera import Camera
from raytracer.hit import Hittable

_SECONDS_PER_SAMPLE_BOUNCE = 0.0000002


@dataclass(frozen=True)
class Scene:
    camera: Camera
    root: Hittable

    def objects(self) -> int:
        return self.root.objects()

    def est_time(self) -> int:
        """A rough estimate of the rendering time in seconds."""
        return int(
            _SECONDS_PER_SAMPLE_BOUNCE
            * self.camera.total_pixels()
            * self.camera.samples_per_pixel
            * self.camera.max_depth
        )