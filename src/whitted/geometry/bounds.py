"""Axis-aligned bounding boxes.

Bounds are a cheap conservative pre-filter: a Group only descends into its
children when the ray passes through the Group's box. The box test never
replaces the exact per-primitive intersection.

Transforming a box encloses its eight transformed corners. Under rotation
this is looser than the tightest box, but it always contains the
transformed shape, which is the property pruning relies on.

Example:
    >>> from src.whitted.geometry.bounds import Bounds
    >>> from src.whitted.core.tuples import point
    >>> a = Bounds(point(-1, 1, 2), point(2, 3, 4))
    >>> b = Bounds(point(10, 20, -30), point(11, 22, 31))
    >>> (a + b).min
    Tuple(x=-1.0, y=1.0, z=-30.0, w=1.0)
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce
from itertools import product

from src.whitted.core.matrices import Matrix
from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Tuple, point

# Stand-in for division by a (near) zero direction component
LARGE_NUMBER = 1e100


def check_axis(origin: float, direction: float, minimum: float, maximum: float) -> tuple[float, float]:
    """Compute the entry and exit t for one slab.

    Args:
        origin: Ray origin component along the axis.
        direction: Ray direction component along the axis.
        minimum: Lower slab boundary.
        maximum: Upper slab boundary.

    Returns:
        Tuple (t_min, t_max) with t_min <= t_max.
    """
    tmin_numerator = minimum - origin
    tmax_numerator = maximum - origin

    if abs(direction) >= EPSILON:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        # Parallel to the slab: approximate +/- infinity without branching on zero
        tmin = tmin_numerator * LARGE_NUMBER
        tmax = tmax_numerator * LARGE_NUMBER

    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


def _transform_corner(matrix: Matrix, corner: Tuple) -> tuple[float, float, float]:
    """Apply a matrix to a corner, skipping zero entries.

    Corners of unbounded boxes hold infinities, and 0 * inf would turn an
    unaffected axis into NaN.
    """
    coords = (corner.x, corner.y, corner.z, 1.0)
    return tuple(
        sum(matrix[row, col] * coords[col] for col in range(4) if matrix[row, col] != 0.0)
        for row in range(3)
    )


@dataclass(frozen=True)
class Bounds:
    """An axis-aligned box given by its minimum and maximum corners.

    Attributes:
        min: Corner with the smallest coordinates.
        max: Corner with the largest coordinates.
    """

    min: Tuple
    max: Tuple

    @classmethod
    def single(cls, p: Tuple) -> Bounds:
        """Create a degenerate box around one point."""
        return cls(p, p)

    @classmethod
    def enclosing(cls, points: Iterable[Tuple]) -> Bounds:
        """Create the smallest box containing all given points.

        Raises:
            ValueError: If no points are given.
        """
        boxes = [cls.single(p) for p in points]
        if not boxes:
            raise ValueError("Cannot build bounds from an empty set of points")
        return reduce(Bounds.union, boxes)

    def union(self, other: Bounds) -> Bounds:
        """Smallest box containing both boxes."""
        return Bounds(
            point(
                min(self.min.x, other.min.x),
                min(self.min.y, other.min.y),
                min(self.min.z, other.min.z),
            ),
            point(
                max(self.max.x, other.max.x),
                max(self.max.y, other.max.y),
                max(self.max.z, other.max.z),
            ),
        )

    __add__ = union

    def corners(self) -> list[Tuple]:
        """The eight corner points of the box."""
        return [
            point(x, y, z)
            for x, y, z in product(
                (self.min.x, self.max.x),
                (self.min.y, self.max.y),
                (self.min.z, self.max.z),
            )
        ]

    def transform(self, matrix: Matrix) -> Bounds:
        """Enclose the box after applying an affine transform.

        Infinite extents (planes, open cylinders) stay infinite. When a
        transform mixes opposite infinities into one axis (inf - inf), that
        axis becomes unbounded, which keeps the result conservative.

        Args:
            matrix: The transform to apply.

        Returns:
            A new box enclosing the 8 transformed corners.
        """
        transformed = [_transform_corner(matrix, corner) for corner in self.corners()]
        mins = []
        maxs = []
        for axis in range(3):
            values = [corner[axis] for corner in transformed]
            if any(math.isnan(v) for v in values):
                mins.append(-math.inf)
                maxs.append(math.inf)
            else:
                mins.append(min(values))
                maxs.append(max(values))
        return Bounds(point(*mins), point(*maxs))

    def intersects(self, ray: Ray) -> bool:
        """Slab test against a ray.

        The ray hits when the overlapping t interval is non-empty and at
        least part of it lies in front of the origin, which includes rays
        starting inside the box.
        """
        xtmin, xtmax = check_axis(ray.origin.x, ray.direction.x, self.min.x, self.max.x)
        ytmin, ytmax = check_axis(ray.origin.y, ray.direction.y, self.min.y, self.max.y)
        ztmin, ztmax = check_axis(ray.origin.z, ray.direction.z, self.min.z, self.max.z)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)

        return tmin <= tmax and (tmin >= 0.0 or tmax >= 0.0)
