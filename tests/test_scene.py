from raytracer.bvh import BVHNode
from raytracer.camera import Camera
from raytracer.color import Color
from raytracer.material import Lambertian
from raytracer.quality import QualityOptions
from raytracer.scene import Scene
from raytracer.sphere import Sphere


def _root(count):
    material = Lambertian.from_color(Color(0.1, 0.2, 0.3))
    return BVHNode(
        Sphere.from_coords(float(n), 0.0, 0.0, 0.4, material) for n in range(count)
    )


def test_objects_counts_the_root():
    root = _root(4)
    scene = Scene(Camera(QualityOptions(1, 1, 8), img_aspect=2.0), root)
    assert scene.objects() == 4
    assert scene.objects() == root.objects()


def test_tiny_render_estimates_zero_seconds():
    scene = Scene(Camera(QualityOptions(1, 1, 8), img_aspect=2.0), _root(1))
    assert scene.est_time() == 0


def test_estimate_grows_with_quality():
    small = Scene(Camera(QualityOptions(10, 10, 100), img_aspect=2.0), _root(1))
    large = Scene(Camera(QualityOptions(1000, 50, 800), img_aspect=2.0), _root(1))
    assert large.est_time() > 0
    assert large.est_time() >= small.est_time()