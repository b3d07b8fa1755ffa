"""Renderers that turn a scene into a PPM image file."""

from __future__ import annotations

import math
import os
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from itertools import repeat
from typing import Callable

from tqdm import tqdm

from raytracer.color import Color, Pixel
from raytracer.interval import Interval
from raytracer.ray import Ray
from raytracer.scene import Scene
from raytracer.writer import ImgWriter

FILE_OUT = "out.ppm"


class Renderer(ABC):
    """Renders a scene into the image file ``output``."""

    def __init__(self, output: str | os.PathLike[str] = FILE_OUT, *, progress: bool = True) -> None:
        self.output = output
        self.progress = progress

    @abstractmethod
    def render(self, scene: Scene) -> None:
        """Render ``scene`` and write the image."""

    def _open(self):
        return open(self.output, "w", encoding="ascii", newline="\n")


def _render_samples(renderer: Renderer, scene: Scene, color_of: Callable[[Ray], Color]) -> None:
    camera = scene.camera

    def shade(i: int, j: int) -> Pixel:
        total = Color.BLACK
        for _ in range(camera.samples_per_pixel):
            total = total + color_of(camera.get_ray(i, j))
        return Pixel(total * camera.pixel_samples_scale, j, i)

    with renderer._open() as stream, ThreadPoolExecutor(
        max_workers=camera.num_threads
    ) as pool, tqdm(total=camera.total_pixels(), disable=not renderer.progress) as bar:
        writer = ImgWriter(stream, camera.img_width, camera.img_height)
        for j in range(camera.img_height):
            for pixel in pool.map(shade, range(camera.img_width), repeat(j)):
                writer.write(pixel)
                bar.update(1)
        writer.flush()


class DefaultRenderer(Renderer):
    """Full path tracing with the camera's samples and bounce depth."""

    def render(self, scene: Scene) -> None:
        depth = scene.camera.max_depth
        _render_samples(self, scene, lambda ray: ray.color(depth, scene.root))


class ScreenUV(Renderer):
    """Shows screen coordinates: column in red, row in green."""

    def render(self, scene: Scene) -> None:
        camera = scene.camera
        with self._open() as stream:
            writer = ImgWriter(stream, camera.img_width, camera.img_height)
            for j in range(camera.img_height):
                for i in range(camera.img_width):
                    color = Color(i / camera.img_width, j / camera.img_height, 0.0)
                    writer.write(Pixel(color, j, i))
            writer.flush()


class UV(Renderer):
    """Shows the surface coordinates of the first hit, blue where nothing is hit."""

    @staticmethod
    def _color(ray: Ray, scene: Scene) -> Color:
        hit = scene.root.hit(ray, Interval(0.001, math.inf))
        if hit is None:
            return Color(0.0, 0.0, 1.0)
        return Color(hit.u, hit.v, 0.0)

    def render(self, scene: Scene) -> None:
        _render_samples(self, scene, lambda ray: self._color(ray, scene))