from raytracer.aabb import AABB
from raytracer.anim import Animation
from raytracer.spline import ConstantSpline, LinearSpline
from raytracer.vector import Vector3, lerp

P = Vector3(1.0, 2.0, 3.0)
Q = Vector3(5.0, -2.0, 3.0)


def test_constant_animation_stays_put():
    anim = Animation.constant(P, 0.5)
    assert anim.sample(0.0) == P
    assert anim.sample(0.7) == P


def test_constant_bound_all():
    anim = Animation.constant(P, 0.5)
    assert anim.bound_all() == AABB.from_points(P, P).expand(0.5)


def test_linear_animation_moves():
    anim = Animation.linear([P, Q], 0.2)
    assert anim.sample(0.0) == P
    assert anim.sample(0.5) == lerp(P, Q, 0.5)


def test_linear_bound_all_covers_path():
    anim = Animation.linear([P, Q], 0.2)
    assert anim.bound_all() == AABB.from_points(P, Q).expand(0.2)


def test_custom_curve():
    anim = Animation(LinearSpline([P, Q]), 1.0)
    assert anim.bound_all() == LinearSpline([P, Q]).bound_radius(1.0)
    assert Animation(ConstantSpline(Q), 0.0).bound_all() == AABB.from_points(Q, Q)