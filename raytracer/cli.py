"""Command line entry point with the built-in scenes."""

from __future__ import annotations

import argparse
import os
import random
import sys
import time
from typing import Callable

from raytracer.anim import Animation
from raytracer.bvh import BVHNode
from raytracer.camera import Camera
from raytracer.color import Color
from raytracer.hit import HittableList
from raytracer.material import Dielectric, Lambertian, Metal
from raytracer.quality import QualityOptions
from raytracer.renderer import FILE_OUT, UV, DefaultRenderer, Renderer, ScreenUV
from raytracer.scene import Scene
from raytracer.sphere import Sphere
from raytracer.texture import CheckerTexture, ImageTexture
from raytracer.vector import Vector3

DEFAULT_IMAGE = "img/map.png"


def _checker() -> CheckerTexture:
    return CheckerTexture.from_colors(0.32, Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))


def bouncing_spheres() -> Scene:
    camera = Camera(
        QualityOptions.DEFAULT,
        16.0 / 9.0,
        Vector3(13.0, 2.0, 3.0),
        20.0,
        Vector3(0.0, 0.0, 0.0),
        Vector3(0.0, 1.0, 0.0),
        0.6,
        10.0,
        8,
    )

    world = HittableList()
    world.add(Sphere.from_coords(0.0, -1000.0, 0.0, 1000.0, Lambertian(_checker())))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random.random()
            center = Vector3(a + 0.9 * random.random(), 0.2, b + 0.9 * random.random())
            if (center - Vector3(4.0, 0.2, 0.0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                material = Lambertian.from_color(Color.random() * Color.random())
                end = center + Vector3(0.0, 0.0, 0.0)
                world.add(Sphere(Animation.linear([center, end], 0.2), 0.2, material))
            elif choose_mat < 0.95:
                albedo = Color.random_with(0.5, 1.0)
                fuzz = random.random() * 0.5
                world.add(Sphere.at_position(center, 0.2, Metal(albedo, fuzz)))
            else:
                world.add(Sphere.at_position(center, 0.2, Dielectric(1.5)))

    world.add(Sphere.from_coords(0.0, 1.0, 0.0, 1.0, Dielectric(1.5)))
    world.add(Sphere.from_coords(-4.0, 1.0, 0.0, 1.0, Lambertian.from_color(Color(0.4, 0.2, 0.1))))
    world.add(Sphere.from_coords(4.0, 1.0, 0.0, 1.0, Metal.from_rgb(0.7, 0.6, 0.5, 0.0)))

    return Scene(camera, BVHNode(world.items()))


def checkered_spheres() -> Scene:
    camera = Camera(
        QualityOptions.DEFAULT,
        16.0 / 9.0,
        Vector3(13.0, 2.0, 3.0),
        20.0,
        Vector3(0.0, 0.0, 0.0),
        Vector3(0.0, 1.0, 0.0),
        0.0,
        10.0,
        8,
    )
    checker = Lambertian(_checker())
    world = HittableList()
    world.add(Sphere.at_position(Vector3(0.0, -10.0, 0.0), 10.0, checker))
    world.add(Sphere.from_coords(0.0, 10.0, 0.0, 10.0, checker))
    return Scene(camera, BVHNode(world.items()))


def earth(image_path: str | os.PathLike[str] = DEFAULT_IMAGE) -> Scene:
    camera = Camera(
        QualityOptions.DEFAULT,
        16.0 / 9.0,
        Vector3(0.0, 0.0, 12.0),
        20.0,
        Vector3(0.0, 0.0, 0.0),
        Vector3(0.0, 1.0, 0.0),
        0.0,
        10.0,
        8,
    )
    surface = Lambertian(ImageTexture.from_file(image_path))
    globe = Sphere.from_coords(0.0, 0.0, 0.0, 2.0, surface)
    return Scene(camera, BVHNode([globe]))


def get_time_str(seconds: int) -> str:
    """A duration in words, from weeks down to seconds."""
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24
    weeks = days // 7

    seconds_str = "1 second" if seconds % 60 == 1 else f"{seconds % 60} seconds"

    if minutes % 60 == 1:
        minutes_str = "1 minute and "
    elif minutes >= 1:
        minutes_str = f"{minutes % 60} minutes and "
    else:
        minutes_str = ""

    if hours % 24 == 1:
        hours_str = "1 hour, "
    elif hours >= 1:
        hours_str = f"{hours % 24} hours, "
    else:
        hours_str = ""

    if days % 7 == 1:
        days_str = "1 day, "
    elif days >= 1:
        days_str = f"{days % 7} days, "
    else:
        days_str = ""

    if weeks == 1:
        weeks_str = "1 week, "
    elif weeks >= 1:
        weeks_str = f"{weeks} weeks, "
    else:
        weeks_str = ""

    return f"{weeks_str}{days_str}{hours_str}{minutes_str}{seconds_str}"


_RENDERERS: dict[int, Callable[..., Renderer]] = {0: DefaultRenderer, 1: ScreenUV, 2: UV}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="raytracer", description="Render a built-in scene.")
    parser.add_argument("--scene", type=int, default=0, choices=(0, 1, 2),
                        help="0: bouncing spheres, 1: checkered spheres, 2: earth")
    parser.add_argument("--renderer", type=int, default=0, choices=sorted(_RENDERERS),
                        help="0: path tracing, 1: screen UV, 2: surface UV")
    parser.add_argument("--output", default=FILE_OUT, help="PPM file to write")
    parser.add_argument("--image", default=DEFAULT_IMAGE, help="texture for the earth scene")
    parser.add_argument("--yes", action="store_true", help="do not ask before rendering")
    parser.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    print("Generating Scene...  ", end="", flush=True)
    if args.scene == 0:
        scene = bouncing_spheres()
    elif args.scene == 1:
        scene = checkered_spheres()
    else:
        scene = earth(args.image)
    renderer = _RENDERERS[args.renderer](args.output, progress=not args.no_progress)
    print("Done!")

    camera = scene.camera
    print(
        f"This program will render {scene.objects()} objects into a "
        f"{camera.img_height} by {camera.img_width} image "
        f"({camera.total_pixels() // 1000}K pixels) into {args.output}."
    )
    print("Are you sure you want to continue? (Ctrl-c if you don't)")
    if not args.yes:
        sys.stdin.readline()

    print("Rendering...")
    begin = time.monotonic()
    renderer.render(scene)
    elapsed = time.monotonic() - begin
    print("Done!")
    print(f"Successfully rendered scene in {get_time_str(int(elapsed))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())