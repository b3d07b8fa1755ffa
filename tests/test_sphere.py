import math
import random

from raytracer.aabb import AABB
from raytracer.anim import Animation
from raytracer.color import Color
from raytracer.interval import Interval
from raytracer.material import Metal
from raytracer.ray import Ray
from raytracer.sphere import Sphere, get_sphere_uv
from raytracer.vector import Vector3

MATERIAL = Metal(Color.WHITE, 0.0)
WINDOW = Interval(0.001, math.inf)
RAY = Ray(Vector3(0.0, 0.0, -5.0), Vector3(0.0, 0.0, 1.0))


def test_hit_from_outside():
    sphere = Sphere.from_coords(0.0, 0.0, 0.0, 1.0, MATERIAL)
    hit = sphere.hit(RAY, WINDOW)
    assert hit.front_face
    assert hit.p == RAY.at(hit.t)
    assert math.isclose(hit.p.length(), 1.0)
    assert hit.p.z < 0.0
    assert hit.normal.dot(RAY.direction) < 0.0
    assert hit.material is MATERIAL


def test_hit_from_inside():
    sphere = Sphere.at_position(Vector3(), 1.0, MATERIAL)
    ray = Ray(Vector3(), Vector3(0.0, 0.0, 1.0))
    hit = sphere.hit(ray, WINDOW)
    assert not hit.front_face
    assert hit.p.z > 0.0
    assert hit.normal.dot(ray.direction) < 0.0


def test_miss():
    sphere = Sphere.from_coords(0.0, 0.0, 0.0, 1.0, MATERIAL)
    ray = Ray(Vector3(2.0, 0.0, -5.0), Vector3(0.0, 0.0, 1.0))
    assert sphere.hit(ray, WINDOW) is None


def test_window_excludes_both_roots():
    sphere = Sphere.from_coords(0.0, 0.0, 0.0, 1.0, MATERIAL)
    near = sphere.hit(RAY, WINDOW)
    assert sphere.hit(RAY, Interval(0.001, near.t)) is None


def test_window_picks_far_root():
    sphere = Sphere.from_coords(0.0, 0.0, 0.0, 1.0, MATERIAL)
    near = sphere.hit(RAY, WINDOW)
    far = sphere.hit(RAY, Interval(near.t + 0.5, 100.0))
    assert far.t > near.t
    assert far.p.z > 0.0
    assert not far.front_face


def test_bounding_box():
    sphere = Sphere.from_coords(1.0, 2.0, 3.0, 0.5, MATERIAL)
    center = Vector3(1.0, 2.0, 3.0)
    assert sphere.bounding() == AABB.from_points(center, center).expand(0.5)


def test_moving_sphere_uses_ray_time():
    anim = Animation.linear([Vector3(0.0, 0.0, 0.0), Vector3(10.0, 0.0, 0.0)], 1.0)
    sphere = Sphere(anim, 1.0, MATERIAL)
    origin = Vector3(10.0, 0.0, -5.0)
    direction = Vector3(0.0, 0.0, 1.0)
    assert sphere.hit(Ray(origin, direction, 0.0), WINDOW) is None
    assert sphere.hit(Ray(origin, direction, 0.99), WINDOW) is not None
    assert sphere.bounding() == anim.bound_all()
    assert sphere.objects() == 1


def test_uv_poles_and_seam():
    assert get_sphere_uv(Vector3(0.0, -1.0, 0.0))[1] == 0.0
    assert get_sphere_uv(Vector3(0.0, 1.0, 0.0))[1] == 1.0
    assert get_sphere_uv(Vector3(-1.0, 0.0, 0.0))[0] == 0.0


def test_uv_in_unit_square():
    rng = random.Random(11)
    for _ in range(100):
        p = Vector3(rng.gauss(0, 1), rng.gauss(0, 1), rng.gauss(0, 1)).unit()
        u, v = get_sphere_uv(p)
        assert 0.0 <= u <= 1.0
        assert 0.0 <= v <= 1.0


def test_hit_uv_matches_surface_point():
    sphere = Sphere.from_coords(0.0, 0.0, 0.0, 2.0, MATERIAL)
    hit = sphere.hit(RAY, WINDOW)
    assert (hit.u, hit.v) == get_sphere_uv(hit.p / 2.0)