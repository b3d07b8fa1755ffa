"""Ray hit records and the interface of things a ray can hit."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator

from raytracer.aabb import AABB
from raytracer.interval import Interval
from raytracer.ray import Ray
from raytracer.vector import Point3, Vector3

if TYPE_CHECKING:
    from raytracer.material import Material


@dataclass(frozen=True, slots=True)
class Hit:
    """Where and how a ray met a surface."""

    p: Point3
    normal: Vector3
    material: Material
    t: float
    u: float
    v: float
    front_face: bool


class Hittable(ABC):
    """Something a ray can intersect."""

    @abstractmethod
    def hit(self, ray: Ray, ray_t: Interval) -> Hit | None:
        """The nearest intersection of ``ray`` within ``ray_t``, if any."""

    @abstractmethod
    def bounding(self) -> AABB:
        """A box enclosing the object."""

    def objects(self) -> int:
        """How many primitive objects this stands for."""
        return 1


class HittableList(Hittable):
    """A flat collection of hittable objects."""

    def __init__(self, objects: Iterable[Hittable] = ()) -> None:
        self._items: list[Hittable] = []
        self._bbox = AABB.EMPTY
        for obj in objects:
            self.add(obj)

    def add(self, obj: Hittable) -> None:
        self._bbox = AABB.enclose(self._bbox, obj.bounding())
        self._items.append(obj)

    def num_objects(self) -> int:
        return len(self._items)

    def items(self) -> list[Hittable]:
        """The objects in the order they were added."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self._items)

    def hit(self, ray: Ray, ray_t: Interval) -> Hit | None:
        best: Hit | None = None
        for obj in self._items:
            hit = obj.hit(ray, ray_t)
            if hit is not None and (best is None or hit.t <= best.t):
                best = hit
        return best

    def bounding(self) -> AABB:
        return self._bbox

    def objects(self) -> int:
        return len(self._items)