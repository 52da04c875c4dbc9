"""Homogeneous tuples and RGB colors.

Points and vectors share a single 4-component representation. The w
component tells them apart: w=1 is a point (affected by translation) and
w=0 is a vector (direction only). Colors are a separate 3-component type
because they are combined component-wise (Hadamard product) rather than
through dot and cross products.

Both types are immutable and compare with a small tolerance so that values
produced by different chains of floating-point operations still match.

Example:
    >>> from src.whitted.core.tuples import point, vector
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = vector(0.0, 0.0, 1.0)
    >>> p + v * 2.0
    Tuple(x=1.0, y=2.0, z=5.0, w=1.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Tolerance for float comparison and for surface offsets (acne avoidance)
EPSILON = 1e-5


def approx_equal(a: float, b: float) -> bool:
    """Compare two floats within EPSILON.

    Exact equality is checked first so that matching infinities compare equal.
    """
    return a == b or abs(a - b) <= EPSILON


@dataclass(frozen=True, eq=False)
class Tuple:
    """A homogeneous 4-component tuple.

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
        w: 1.0 for points, 0.0 for vectors.
    """

    x: float
    y: float
    z: float
    w: float

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (
            approx_equal(self.x, other.x)
            and approx_equal(self.y, other.y)
            and approx_equal(self.z, other.z)
            and approx_equal(self.w, other.w)
        )

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Tuple) -> Tuple:
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple) -> Tuple:
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple:
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def magnitude(self) -> float:
        """Compute the Euclidean length of the tuple."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> Tuple:
        """Scale the tuple to unit length.

        Returns:
            A unit-length tuple in the same direction. A zero-length input
            yields the zero tuple instead of dividing by zero.
        """
        length = self.magnitude()
        if length == 0.0:
            return Tuple(0.0, 0.0, 0.0, 0.0)
        return self / length

    def dot(self, other: Tuple) -> float:
        """Compute the 4-component dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: Tuple) -> Tuple:
        """Compute the cross product of two vectors.

        Only the x, y and z components participate; the result is a vector.
        """
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: Tuple) -> Tuple:
        """Reflect this vector about a normal.

        Args:
            normal: The surface normal (should be normalized).

        Returns:
            The reflected vector.
        """
        return self - normal * (2.0 * self.dot(normal))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w


def tuple4(x: float, y: float, z: float, w: float) -> Tuple:
    """Create a raw homogeneous tuple."""
    return Tuple(float(x), float(y), float(z), float(w))


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w=1)."""
    return Tuple(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (w=0)."""
    return Tuple(float(x), float(y), float(z), 0.0)


@dataclass(frozen=True, eq=False)
class Color:
    """An RGB color with unclamped float channels.

    Attributes:
        red: Red channel, typically in [0, 1] but not limited to it.
        green: Green channel.
        blue: Blue channel.
    """

    red: float
    green: float
    blue: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            approx_equal(self.red, other.red)
            and approx_equal(self.green, other.green)
            and approx_equal(self.blue, other.blue)
        )

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Color) -> Color:
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Color) -> Color:
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: Color | float) -> Color:
        # Hadamard product for colors, plain scaling for numbers
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Color(self.red * other, self.green * other, self.blue * other)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.red
        yield self.green
        yield self.blue


def color(red: float, green: float, blue: float) -> Color:
    """Create a color from its three channels."""
    return Color(float(red), float(green), float(blue))


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
