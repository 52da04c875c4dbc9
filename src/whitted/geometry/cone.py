"""Double-napped cone x^2 + z^2 = y^2 around the object-space y axis.

Like the cylinder, the cone is infinite unless ``minimum``/``maximum``
truncate it, and ``closed`` caps the ends. The radius at height y is |y|,
so the caps grow with their distance from the apex.
"""

from __future__ import annotations

import math

from src.whitted.core.matrices import Matrix
from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Tuple, point, vector
from src.whitted.geometry.bounds import Bounds
from src.whitted.geometry.cylinder import check_cap
from src.whitted.geometry.shape import Shape
from src.whitted.materials.material import Material
from src.whitted.scene.intersection import Intersection


class Cone(Shape):
    """A (possibly truncated and capped) double cone.

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

    def _in_range(self, ray: Ray, t: float) -> bool:
        y = ray.origin.y + t * ray.direction.y
        return self.minimum < y < self.maximum

    def _intersect_sides(self, ray: Ray) -> list[Intersection]:
        dx, dy, dz = ray.direction.x, ray.direction.y, ray.direction.z
        ox, oy, oz = ray.origin.x, ray.origin.y, ray.origin.z

        a = dx * dx - dy * dy + dz * dz
        b = 2.0 * (ox * dx - oy * dy + oz * dz)
        c = ox * ox - oy * oy + oz * oz

        if abs(a) < EPSILON:
            # Parallel to one nappe: at most one crossing of the other
            if abs(b) <= EPSILON:
                return []
            t = -c / (2.0 * b)
            return [Intersection(t, self)] if self._in_range(ray, t) else []

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        roots = ((-b - sqrt_d) / (2.0 * a), (-b + sqrt_d) / (2.0 * a))
        return [Intersection(t, self) for t in roots if self._in_range(ray, t)]

    def _intersect_caps(self, ray: Ray) -> list[Intersection]:
        if not self.closed or abs(ray.direction.y) < EPSILON:
            return []
        xs = []
        for limit in (self.minimum, self.maximum):
            # An unbounded end has no cap
            if not math.isfinite(limit):
                continue
            t = (limit - ray.origin.y) / ray.direction.y
            if check_cap(ray, t, limit):
                xs.append(Intersection(t, self))
        return xs

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        return self._intersect_sides(ray) + self._intersect_caps(ray)

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        x, y, z = local_point.x, local_point.y, local_point.z
        dist = x * x + z * z
        if dist < self.maximum * self.maximum and y >= self.maximum - EPSILON:
            return vector(0, 1, 0)
        if dist < self.minimum * self.minimum and y <= self.minimum + EPSILON:
            return vector(0, -1, 0)

        side = math.sqrt(dist)
        if y > 0.0:
            side = -side
        return vector(x, side, z)

    def local_bounds(self) -> Bounds:
        limit = max(abs(self.minimum), abs(self.maximum))
        return Bounds(point(-limit, self.minimum, -limit), point(limit, self.maximum, limit))
