"""Procedural color patterns.

A pattern maps a point in pattern space to a color. Patterns have their
own transform, applied on top of the shape's, so a stripe can be rotated
or scaled independently of the object it decorates:

    object_point  = shape.world_to_object(world_point)
    pattern_point = pattern.invtransform * object_point

Example:
    >>> from src.whitted.core.tuples import BLACK, WHITE, point
    >>> from src.whitted.materials.patterns import StripePattern
    >>> stripes = StripePattern(WHITE, BLACK)
    >>> stripes.color_at(point(1.5, 0, 0)) == BLACK
    True
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from src.whitted.core.matrices import IDENTITY, Matrix
from src.whitted.core.tuples import Color, Tuple

if TYPE_CHECKING:
    from src.whitted.geometry.shape import Shape


class Pattern(ABC):
    """Base class for patterns.

    Attributes:
        transform: Object-to-pattern transform. Assigning it recomputes the
            cached inverse.
        invtransform: Cached inverse of ``transform``.
    """

    def __init__(self, transform: Matrix | None = None) -> None:
        self._transform = IDENTITY
        self._invtransform = IDENTITY
        if transform is not None:
            self.transform = transform

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        self._invtransform = matrix.inverse()
        self._transform = matrix

    @property
    def invtransform(self) -> Matrix:
        return self._invtransform

    @abstractmethod
    def color_at(self, pattern_point: Tuple) -> Color:
        """Color at a point already in pattern space."""

    def color_at_shape(self, shape: Shape, world_point: Tuple) -> Color:
        """Color at a world-space point on a shape."""
        object_point = shape.world_to_object(world_point)
        return self.color_at(self._invtransform * object_point)


class _TwoColorPattern(Pattern):
    """Pattern alternating or blending between two colors."""

    def __init__(self, a: Color, b: Color, transform: Matrix | None = None) -> None:
        super().__init__(transform)
        self.a = a
        self.b = b

    def __repr__(self) -> str:
        return f"{type(self).__name__}(a={self.a!r}, b={self.b!r})"


class StripePattern(_TwoColorPattern):
    """Alternating stripes along x, one unit wide."""

    def color_at(self, pattern_point: Tuple) -> Color:
        return self.a if math.floor(pattern_point.x) % 2 == 0 else self.b


class GradientPattern(_TwoColorPattern):
    """Linear blend from a to b across each unit of x."""

    def color_at(self, pattern_point: Tuple) -> Color:
        fraction = pattern_point.x - math.floor(pattern_point.x)
        return self.a + (self.b - self.a) * fraction


class RingPattern(_TwoColorPattern):
    """Concentric rings in the xz-plane."""

    def color_at(self, pattern_point: Tuple) -> Color:
        distance = math.sqrt(pattern_point.x * pattern_point.x + pattern_point.z * pattern_point.z)
        return self.a if math.floor(distance) % 2 == 0 else self.b


class CheckersPattern(_TwoColorPattern):
    """3D checkerboard of unit cubes."""

    def color_at(self, pattern_point: Tuple) -> Color:
        total = math.floor(pattern_point.x) + math.floor(pattern_point.y) + math.floor(pattern_point.z)
        return self.a if total % 2 == 0 else self.b
