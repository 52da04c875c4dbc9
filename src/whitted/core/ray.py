"""Ray data structure.

A ray is an origin point plus a direction vector. Rays are never mutated;
moving a ray into another coordinate frame produces a new ray.

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuples import point, vector
    >>> ray = Ray(origin=point(2.0, 3.0, 4.0), direction=vector(1.0, 0.0, 0.0))
    >>> ray.position(2.5)  # Point 2.5 units along the ray
    Tuple(x=4.5, y=3.0, z=4.0, w=1.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.whitted.core.matrices import Matrix
from src.whitted.core.tuples import Tuple


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray (w=1).
        direction: The direction vector of the ray (w=0). It is not
            normalized here, since rays transformed into object space
            carry the transform's scale in their direction and the
            intersection parameter t must stay comparable across frames.
    """

    origin: Tuple
    direction: Tuple

    def position(self, t: float) -> Tuple:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point origin + t * direction.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Apply a transform to both the origin and the direction.

        Args:
            matrix: The 4x4 transform to apply.

        Returns:
            A new Ray in the transformed frame.
        """
        return Ray(matrix * self.origin, matrix * self.direction)
