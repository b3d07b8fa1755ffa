# raytracer

A small path tracer. It builds scenes of spheres with diffuse, metal and
glass materials, organises them in a bounding volume hierarchy, and renders
them to a plain-text PPM image (`out.ppm` by default).

## Installation

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Running

    raytracer

The command builds a scene, reports how many objects it holds and how large
the image will be, and waits for you to press Enter before it renders. Press
Ctrl-C at that point to cancel. When rendering finishes it prints the elapsed
time in words (for example `2 minutes and 5 seconds`).

Options:

- `--scene N` — `0` bouncing spheres (default), `1` checkered spheres,
  `2` earth;
- `--renderer N` — `0` path tracing (default), `1` screen coordinates,
  `2` surface coordinates of the first hit;
- `--output FILE` — the PPM file to write (default `out.ppm`);
- `--image FILE` — the texture for the earth scene (default `img/map.png`;
  any format Pillow can read);
- `--yes` — do not wait for Enter before rendering;
- `--no-progress` — hide the progress bar.

The scenes are also available as functions in `raytracer.cli`:

- `bouncing_spheres()` — a field of small random spheres around three large
  ones on a checkered ground, seen through a slightly defocused lens;
- `checkered_spheres()` — two large checker-textured spheres;
- `earth(image_path)` — a globe textured with an image.

Each uses `QualityOptions.DEFAULT`: 100 samples per pixel, bounce depth 50,
image width 400, 16:9 aspect.

## Using the library

```python
from raytracer.bvh import BVHNode
from raytracer.camera import Camera
from raytracer.color import Color
from raytracer.hit import HittableList
from raytracer.material import Dielectric, Lambertian, Metal
from raytracer.quality import QualityOptions
from raytracer.renderer import DefaultRenderer
from raytracer.scene import Scene
from raytracer.sphere import Sphere
from raytracer.vector import Vector3

world = HittableList()
world.add(Sphere.from_coords(0.0, -1000.0, 0.0, 1000.0,
                             Lambertian.from_color(Color(0.5, 0.5, 0.5))))
world.add(Sphere.from_coords(0.0, 1.0, 0.0, 1.0, Dielectric(1.5)))
world.add(Sphere.from_coords(4.0, 1.0, 0.0, 1.0, Metal.from_rgb(0.7, 0.6, 0.5, 0.0)))

camera = Camera(
    quality=QualityOptions(samples_per_pixel=10, max_depth=10, img_width=200),
    pos=Vector3(13.0, 2.0, 3.0),
    lookat=Vector3(0.0, 0.0, 0.0),
)
scene = Scene(camera, BVHNode(world.items()))
DefaultRenderer("scene.ppm").render(scene)
```

The modules:

- `vector` — `Vector3` (also used as `Point3`), `lerp`, `degrees_to_radians`;
- `interval`, `aabb` — intervals and axis-aligned boxes with a ray slab test;
- `color` — `Color`, gamma-corrected PPM output via `Color.to_ppm`, and `Pixel`;
- `ray` — `Ray`, with `Ray.color` estimating the light along a ray;
- `hit` — the `Hittable` interface, `Hit` records and `HittableList`;
- `sphere` — `Sphere`, whose centre follows an `Animation`;
- `spline`, `anim` — `LinearSpline` and `ConstantSpline` paths and the
  `Animation` that bounds an object moving along them;
- `material` — `Lambertian`, `Metal` and `Dielectric`;
- `texture` — `SolidTexture`, `CheckerTexture` and `ImageTexture`;
  `debug.DebugTexture` shows surface coordinates as colour;
- `image` — `load_image` and `ImgData`;
- `perlin` — `Perlin` lattice value noise;
- `bvh` — `BVHNode`, built from a list of hittables;
- `camera` — a thin-lens `Camera`; its `num_threads` sets how many worker
  threads the renderers use;
- `scene` — `Scene`, with `est_time()` giving a rough time estimate;
- `renderer` — `DefaultRenderer`, `ScreenUV` and `UV`, each taking an output
  path and a `progress` flag;
- `writer` — `ImgWriter` for PPM output and `Debugger`/`DebugWriter` for
  debugging text files.

## Limitations

- Output is plain-text PPM only; convert it with another tool if you need
  PNG or JPEG.
- Spheres are the only shape, and scenes are built in Python: there is no
  scene file format.
- There are no light-emitting materials; all light comes from the sky
  gradient behind the scene.
- `Perlin` noise is not used by any texture, and its permutation tables are
  kept in ascending order, so the noise is not shuffled.
- Rendering is done in pure Python and is slow at the default quality;
  lower `QualityOptions` for quick previews.