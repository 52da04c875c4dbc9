"""Axis-aligned cube spanning -1..1 on every object-space axis."""

from __future__ import annotations

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import Tuple, point, vector
from src.whitted.geometry.bounds import Bounds, check_axis
from src.whitted.geometry.shape import Shape
from src.whitted.scene.intersection import Intersection

_CUBE_BOUNDS = Bounds(point(-1, -1, -1), point(1, 1, 1))


class Cube(Shape):
    """A unit cube intersected with the slab method.

    A hit always returns both the entry and exit t, even when the ray
    starts inside the cube.
    """

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        xtmin, xtmax = check_axis(ray.origin.x, ray.direction.x, -1.0, 1.0)
        ytmin, ytmax = check_axis(ray.origin.y, ray.direction.y, -1.0, 1.0)
        ztmin, ztmax = check_axis(ray.origin.z, ray.direction.z, -1.0, 1.0)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)
        if tmin > tmax:
            return []
        return [Intersection(tmin, self), Intersection(tmax, self)]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        """Normal of the face whose axis has the largest absolute coordinate."""
        ax, ay, az = abs(local_point.x), abs(local_point.y), abs(local_point.z)
        maxc = max(ax, ay, az)
        if maxc == ax:
            return vector(local_point.x, 0, 0)
        if maxc == ay:
            return vector(0, local_point.y, 0)
        return vector(0, 0, local_point.z)

    def local_bounds(self) -> Bounds:
        return _CUBE_BOUNDS
