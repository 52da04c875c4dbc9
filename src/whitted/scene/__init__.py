"""Scene module for intersections, lights and worlds.

Components:
    intersection: Intersection records, hit selection and shading computations
    light: Point lights
    world: Scene container and recursive shading (import from the module)
    scenes: Default world and showcase scene (import from the module)
"""

from .intersection import Computations, Intersection, hit, intersections, prepare_computations
from .light import PointLight

__all__ = [
    "Intersection",
    "Computations",
    "hit",
    "intersections",
    "prepare_computations",
    "PointLight",
]
