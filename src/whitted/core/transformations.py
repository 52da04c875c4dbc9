"""Builders for the standard 4x4 affine transforms.

All angles are in radians. Transforms compose right to left, so
``translation(...) * scaling(...) * rotation_x(...)`` rotates first,
then scales, then translates.
"""

import math

import numpy as np

from src.whitted.core.matrices import Matrix
from src.whitted.core.tuples import Tuple


def translation(x: float, y: float, z: float) -> Matrix:
    data = np.identity(4)
    data[0, 3] = x
    data[1, 3] = y
    data[2, 3] = z
    return Matrix(data)


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix(np.diag([x, y, z, 1.0]))


def rotation_x(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    data = np.identity(4)
    data[1, 1] = c
    data[1, 2] = -s
    data[2, 1] = s
    data[2, 2] = c
    return Matrix(data)


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    data = np.identity(4)
    data[0, 0] = c
    data[0, 2] = s
    data[2, 0] = -s
    data[2, 2] = c
    return Matrix(data)


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    data = np.identity(4)
    data[0, 0] = c
    data[0, 1] = -s
    data[1, 0] = s
    data[1, 1] = c
    return Matrix(data)


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Create a shearing transform.

    Each argument moves one component in proportion to another, e.g. ``xy``
    moves x in proportion to y.
    """
    data = np.identity(4)
    data[0, 1] = xy
    data[0, 2] = xz
    data[1, 0] = yx
    data[1, 2] = yz
    data[2, 0] = zx
    data[2, 1] = zy
    return Matrix(data)


def view_transform(from_point: Tuple, to_point: Tuple, up: Tuple) -> Matrix:
    """Orient the world relative to an eye position.

    Builds an orthonormal basis from the viewing direction and an
    approximate up vector, then moves the eye to the origin.

    Args:
        from_point: Eye position in world space.
        to_point: Point the eye looks at.
        up: Approximate up direction (need not be orthogonal or normalized).

    Returns:
        The world-to-camera transform.
    """
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation * translation(-from_point.x, -from_point.y, -from_point.z)
