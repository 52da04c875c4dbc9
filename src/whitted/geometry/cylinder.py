"""Cylinder of radius 1 around the object-space y axis.

The cylinder is infinite by default. ``minimum`` and ``maximum`` truncate
it (both bounds exclusive for the side walls) and ``closed`` adds flat
caps at the truncation heights.

Example:
    >>> from src.whitted.geometry.cylinder import Cylinder
    >>> cyl = Cylinder(minimum=1, maximum=2, closed=True)
"""

from __future__ import annotations

import math

from src.whitted.core.matrices import Matrix
from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Tuple, point, vector
from src.whitted.geometry.bounds import Bounds
from src.whitted.geometry.shape import Shape
from src.whitted.materials.material import Material
from src.whitted.scene.intersection import Intersection


def check_cap(ray: Ray, t: float, radius: float) -> bool:
    """Check that the ray at t lies within a cap of the given radius."""
    x = ray.origin.x + t * ray.direction.x
    z = ray.origin.z + t * ray.direction.z
    return x * x + z * z <= radius * radius


class Cylinder(Shape):
    """A (possibly truncated and capped) unit cylinder.

    Attributes:
        minimum: Lower y limit, exclusive. Defaults to -inf.
        maximum: Upper y limit, exclusive. Defaults to +inf.
        closed: Whether the ends are capped.
    """

    def __init__(
        self,
        minimum: float = -math.inf,
        maximum: float = math.inf,
        closed: bool = False,
        transform: Matrix | None = None,
        material: Material | None = None,
    ) -> None:
        super().__init__(transform=transform, material=material)
        self._minimum = minimum
        self._maximum = maximum
        self._closed = closed

    @property
    def minimum(self) -> float:
        return self._minimum

    @minimum.setter
    def minimum(self, value: float) -> None:
        self._minimum = value
        self._bounds_changed()

    @property
    def maximum(self) -> float:
        return self._maximum

    @maximum.setter
    def maximum(self, value: float) -> None:
        self._maximum = value
        self._bounds_changed()

    @property
    def closed(self) -> bool:
        return self._closed

    @closed.setter
    def closed(self, value: bool) -> None:
        self._closed = value
        self._bounds_changed()

    def _intersect_sides(self, ray: Ray) -> list[Intersection]:
        dx, dy, dz = ray.direction.x, ray.direction.y, ray.direction.z
        ox, oy, oz = ray.origin.x, ray.origin.y, ray.origin.z

        a = dx * dx + dz * dz
        # Parallel to the axis: the walls are never crossed
        if abs(a) < EPSILON:
            return []

        b = 2.0 * (ox * dx + oz * dz)
        c = ox * ox + oz * oz - 1.0
        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        xs = []
        for t in ((-b - sqrt_d) / (2.0 * a), (-b + sqrt_d) / (2.0 * a)):
            y = oy + t * dy
            if self.minimum < y < self.maximum:
                xs.append(Intersection(t, self))
        return xs

    def _intersect_caps(self, ray: Ray) -> list[Intersection]:
        if not self.closed or abs(ray.direction.y) < EPSILON:
            return []
        xs = []
        for limit in (self.minimum, self.maximum):
            t = (limit - ray.origin.y) / ray.direction.y
            if check_cap(ray, t, 1.0):
                xs.append(Intersection(t, self))
        return xs

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        return self._intersect_sides(ray) + self._intersect_caps(ray)

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        dist = local_point.x * local_point.x + local_point.z * local_point.z
        if dist < 1.0 and local_point.y >= self.maximum - EPSILON:
            return vector(0, 1, 0)
        if dist < 1.0 and local_point.y <= self.minimum + EPSILON:
            return vector(0, -1, 0)
        return vector(local_point.x, 0, local_point.z)

    def local_bounds(self) -> Bounds:
        return Bounds(point(-1, self.minimum, -1), point(1, self.maximum, 1))
