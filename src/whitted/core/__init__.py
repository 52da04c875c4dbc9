"""Core module containing the math primitives, pixel buffer and render drivers.

Components:
    tuples: Points, vectors and colors with tolerant comparison
    matrices: Immutable 4x4 matrices with explicit inverse
    transformations: Translation, scaling, rotation, shearing, view transform
    ray: Ray data structure
    canvas: Row-major pixel buffer
    renderer: Serial and parallel render drivers (import from the module)
"""

from .canvas import Canvas
from .matrices import IDENTITY, Matrix, identity_matrix
from .ray import Ray
from .transformations import (
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .tuples import BLACK, EPSILON, WHITE, Color, Tuple, color, point, tuple4, vector

__all__ = [
    "EPSILON",
    "Tuple",
    "Color",
    "tuple4",
    "point",
    "vector",
    "color",
    "BLACK",
    "WHITE",
    "Matrix",
    "IDENTITY",
    "identity_matrix",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
    "Ray",
    "Canvas",
]
