"""Pytest configuration for ray tracer tests.

This module provides shared fixtures for all test modules: the default
two-sphere world, a glass sphere factory, and recording stand-ins for
shapes and patterns that expose what the base classes pass to them.
"""

import pytest

from src.whitted.core.tuples import color, vector
from src.whitted.geometry.shape import Shape
from src.whitted.materials.patterns import Pattern


class RecordingShape(Shape):
    """Shape that remembers the last object-space ray it was given."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.saved_ray = None

    def local_intersect(self, ray):
        self.saved_ray = ray
        return []

    def local_normal_at(self, local_point):
        return vector(local_point.x, local_point.y, local_point.z)

    def local_bounds(self):
        from src.whitted.core.tuples import point
        from src.whitted.geometry.bounds import Bounds

        return Bounds(point(-1, -1, -1), point(1, 1, 1))


class PointPattern(Pattern):
    """Pattern whose color is the pattern-space point it was evaluated at."""

    def color_at(self, pattern_point):
        return color(pattern_point.x, pattern_point.y, pattern_point.z)


@pytest.fixture
def recording_shape():
    """A fresh RecordingShape with identity transform."""
    return RecordingShape()


@pytest.fixture
def point_pattern():
    """A fresh PointPattern with identity transform."""
    return PointPattern()


@pytest.fixture
def default_world():
    """The reference world: two concentric spheres and one light."""
    from src.whitted.scene.scenes import default_world as make_default_world

    return make_default_world()


@pytest.fixture
def glass_sphere_factory():
    """Factory for glass spheres with an optional transform and index."""
    from src.whitted.geometry.sphere import glass_sphere

    def _make(transform=None, refractive_index=1.5):
        sphere = glass_sphere()
        if transform is not None:
            sphere.transform = transform
        sphere.material.refractive_index = refractive_index
        return sphere

    return _make
