"""Unit sphere primitive.

The sphere is centered at the object-space origin with radius 1. Position
and size come from the shape transform, so a sphere of radius 0.5 at
(0, 0, -1) is ``Sphere(transform=translation(0, 0, -1) * scaling(0.5, 0.5, 0.5))``.

Ray-sphere intersection solves |O + tD|^2 = 1 for t. A tangent ray yields
the same t twice, and a ray starting inside the sphere yields one negative
and one positive root.

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuples import point, vector
    >>> from src.whitted.geometry.sphere import Sphere
    >>> xs = Sphere().intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
    >>> [i.t for i in xs]
    [4.0, 6.0]
"""

from __future__ import annotations

import math

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import Tuple, point, vector
from src.whitted.geometry.bounds import Bounds
from src.whitted.geometry.shape import Shape
from src.whitted.materials.material import Material
from src.whitted.scene.intersection import Intersection

# Object-space bounds shared by every sphere
_UNIT_BOUNDS = Bounds(point(-1, -1, -1), point(1, 1, 1))


class Sphere(Shape):
    """A unit sphere at the object-space origin."""

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        """Solve the ray-sphere quadratic.

        Args:
            ray: Ray in object space (direction not necessarily unit length).

        Returns:
            Two intersections sorted by t, or none when the discriminant is
            negative.
        """
        sphere_to_ray = ray.origin - point(0, 0, 0)
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)
        return [Intersection(t1, self), Intersection(t2, self)]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return vector(local_point.x, local_point.y, local_point.z)

    def local_bounds(self) -> Bounds:
        return _UNIT_BOUNDS


def glass_sphere() -> Sphere:
    """Create a fully transparent sphere with the refractive index of glass."""
    return Sphere(material=Material(transparency=1.0, refractive_index=1.5))
