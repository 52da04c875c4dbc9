"""Unit tests for rays.

Tests cover:
- Construction and immutability
- Position along the ray
- Translating and scaling rays
"""

import pytest


class TestRay:
    """Tests for the Ray dataclass."""

    def test_create_ray(self):
        from src.whitted.core.ray import Ray
        from src.whitted.core.tuples import point, vector

        r = Ray(point(1, 2, 3), vector(4, 5, 6))
        assert r.origin == point(1, 2, 3)
        assert r.direction == vector(4, 5, 6)

    def test_ray_is_frozen(self):
        from dataclasses import FrozenInstanceError

        from src.whitted.core.ray import Ray
        from src.whitted.core.tuples import point, vector

        r = Ray(point(1, 2, 3), vector(4, 5, 6))
        with pytest.raises(FrozenInstanceError):
            r.origin = point(0, 0, 0)

    @pytest.mark.parametrize(
        "t,expected",
        [(0, (2, 3, 4)), (1, (3, 3, 4)), (-1, (1, 3, 4)), (2.5, (4.5, 3, 4))],
    )
    def test_position(self, t, expected):
        from src.whitted.core.ray import Ray
        from src.whitted.core.tuples import point, vector

        r = Ray(point(2, 3, 4), vector(1, 0, 0))
        assert r.position(t) == point(*expected)


class TestRayTransform:
    """Tests for moving rays between frames."""

    def test_translate_ray(self):
        from src.whitted.core.ray import Ray
        from src.whitted.core.transformations import translation
        from src.whitted.core.tuples import point, vector

        r = Ray(point(1, 2, 3), vector(0, 1, 0))
        r2 = r.transform(translation(3, 4, 5))
        assert r2.origin == point(4, 6, 8)
        assert r2.direction == vector(0, 1, 0)

    def test_scale_ray(self):
        """Scaling changes the direction length as well."""
        from src.whitted.core.ray import Ray
        from src.whitted.core.transformations import scaling
        from src.whitted.core.tuples import point, vector

        r = Ray(point(1, 2, 3), vector(0, 1, 0))
        r2 = r.transform(scaling(2, 3, 4))
        assert r2.origin == point(2, 6, 12)
        assert r2.direction == vector(0, 3, 0)

    def test_transform_returns_new_ray(self):
        from src.whitted.core.ray import Ray
        from src.whitted.core.transformations import translation
        from src.whitted.core.tuples import point, vector

        r = Ray(point(1, 2, 3), vector(0, 1, 0))
        r.transform(translation(3, 4, 5))
        assert r.origin == point(1, 2, 3)
