"""Flat triangle primitive.

Intersection uses the Moller-Trumbore algorithm. The edge vectors and the
face normal are computed once at construction, so the vertices are
fixed for the lifetime of the triangle.

Example:
    >>> from src.whitted.core.tuples import point
    >>> from src.whitted.geometry.triangle import Triangle
    >>> t = Triangle(point(0, 1, 0), point(-1, 0, 0), point(1, 0, 0))
    >>> t.normal
    Tuple(x=0.0, y=0.0, z=-1.0, w=0.0)
"""

from __future__ import annotations

from src.whitted.core.matrices import Matrix
from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Tuple
from src.whitted.geometry.bounds import Bounds
from src.whitted.geometry.shape import Shape
from src.whitted.materials.material import Material
from src.whitted.scene.intersection import Intersection


class Triangle(Shape):
    """A triangle through three object-space points.

    Attributes:
        p1: First vertex.
        p2: Second vertex.
        p3: Third vertex.
        e1: Edge p2 - p1.
        e2: Edge p3 - p1.
        normal: Unit face normal, e2 x e1.
    """

    def __init__(
        self,
        p1: Tuple,
        p2: Tuple,
        p3: Tuple,
        transform: Matrix | None = None,
        material: Material | None = None,
    ) -> None:
        super().__init__(transform=transform, material=material)
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3
        self.e1 = p2 - p1
        self.e2 = p3 - p1
        self.normal = self.e2.cross(self.e1).normalize()
        self._bounds = Bounds.enclosing((p1, p2, p3))

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        dir_cross_e2 = ray.direction.cross(self.e2)
        det = self.e1.dot(dir_cross_e2)
        # Ray parallel to the face
        if abs(det) < EPSILON:
            return []

        f = 1.0 / det
        p1_to_origin = ray.origin - self.p1
        u = f * p1_to_origin.dot(dir_cross_e2)
        if u < 0.0 or u > 1.0:
            return []

        origin_cross_e1 = p1_to_origin.cross(self.e1)
        v = f * ray.direction.dot(origin_cross_e1)
        if v < 0.0 or u + v > 1.0:
            return []

        t = f * self.e2.dot(origin_cross_e1)
        return [Intersection(t, self)]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return self.normal

    def local_bounds(self) -> Bounds:
        return self._bounds
