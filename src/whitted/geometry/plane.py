"""Infinite xz-plane with its normal along +y."""

from __future__ import annotations

import math

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Tuple, point, vector
from src.whitted.geometry.bounds import Bounds
from src.whitted.geometry.shape import Shape
from src.whitted.scene.intersection import Intersection

_PLANE_BOUNDS = Bounds(point(-math.inf, 0, -math.inf), point(math.inf, 0, math.inf))
_UP = vector(0, 1, 0)


class Plane(Shape):
    """The object-space plane y = 0.

    Rays parallel to the plane (including rays lying in it) never hit.
    """

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        if abs(ray.direction.y) < EPSILON:
            return []
        t = -ray.origin.y / ray.direction.y
        return [Intersection(t, self)]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return _UP

    def local_bounds(self) -> Bounds:
        return _PLANE_BOUNDS
