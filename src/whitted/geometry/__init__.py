"""Geometry module for shape primitives and bounding boxes.

Components:
    bounds: Axis-aligned bounding boxes for ray rejection
    shape: Abstract Shape with transform and normal plumbing
    sphere, plane, cube, cylinder, cone, triangle: Primitives
    group: Composite shape with cached bounds

Every primitive solves its intersection in object space:
    xs = shape.intersect(ray)  # world-space ray in, sorted-or-not hits out
"""

from .bounds import Bounds
from .cone import Cone
from .cube import Cube
from .cylinder import Cylinder
from .group import Group
from .plane import Plane
from .shape import Shape
from .sphere import Sphere, glass_sphere
from .triangle import Triangle

__all__ = [
    "Bounds",
    "Shape",
    "Sphere",
    "glass_sphere",
    "Plane",
    "Cube",
    "Cylinder",
    "Cone",
    "Triangle",
    "Group",
]
