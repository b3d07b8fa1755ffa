"""Bounding volume hierarchies over hittable objects."""

from __future__ import annotations

from functools import reduce
from typing import Callable, Iterable

from raytracer.aabb import AABB
from raytracer.hit import Hit, Hittable
from raytracer.interval import Interval
from raytracer.ray import Ray

_AXIS_MINIMUMS: tuple[Callable[[AABB], float], ...] = (
    lambda box: box.x.min,
    lambda box: box.y.min,
    lambda box: box.z.min,
)


class BVHNode(Hittable):
    """A binary tree of objects, each node enclosing its children in a box."""

    def __init__(self, objects: Iterable[Hittable]) -> None:
        items = list(objects)
        if not items:
            raise ValueError("a bounding volume hierarchy needs at least one object")

        self.left: Hittable
        self.right: Hittable | None
        if len(items) == 1:
            self.left = items[0]
            self.right = None
            self._bbox = items[0].bounding()
        elif len(items) == 2:
            self.left, self.right = items
            self._bbox = AABB.enclose(self.left.bounding(), self.right.bounding())
        else:
            bbox = reduce(AABB.enclose, (obj.bounding() for obj in items), AABB.EMPTY)
            axis_min = _AXIS_MINIMUMS[bbox.longest_axis()]
            items.sort(key=lambda obj: axis_min(obj.bounding()))
            mid = len(items) // 2
            self.left = BVHNode(items[:mid])
            self.right = BVHNode(items[mid:])
            self._bbox = bbox

    def hit(self, ray: Ray, ray_t: Interval) -> Hit | None:
        if self._bbox.test(ray, ray_t) is None:
            return None
        if self.right is None:
            return self.left.hit(ray, ray_t)
        left_hit = self.left.hit(ray, ray_t)
        if left_hit is None:
            return self.right.hit(ray, ray_t)
        right_hit = self.right.hit(ray, Interval(ray_t.min, left_hit.t))
        return right_hit if right_hit is not None else left_hit

    def bounding(self) -> AABB:
        return self._bbox

    def objects(self) -> int:
        right = self.right.objects() if self.right is not None else 0
        return self.left.objects() + right