"""Unit tests for the world and recursive shading.

Tests cover:
- The default reference world
- World intersection and shadows
- Phong shading of hits from outside and inside
- Reflection, including mutually reflective surfaces
- Refraction, total internal reflection and Schlick blending
"""

import math

import pytest


def _ray(origin, direction):
    from src.whitted.core.ray import Ray
    from src.whitted.core.tuples import point, vector

    return Ray(point(*origin), vector(*direction))


def assert_color(actual, r, g, b, tol=1e-4):
    assert actual.red == pytest.approx(r, abs=tol)
    assert actual.green == pytest.approx(g, abs=tol)
    assert actual.blue == pytest.approx(b, abs=tol)


class TestDefaultWorld:
    """Tests for world construction."""

    def test_empty_world(self):
        from src.whitted.scene.world import World

        w = World()
        assert w.objects == []
        assert w.lights == []

    def test_default_world(self, default_world):
        from src.whitted.core.transformations import scaling
        from src.whitted.core.tuples import color, point

        light = default_world.lights[0]
        assert light.position == point(-10, 10, -10)
        assert light.intensity == color(1, 1, 1)
        outer, inner = default_world.objects
        assert outer.material.color == color(0.8, 1.0, 0.6)
        assert outer.material.diffuse == 0.7
        assert outer.material.specular == 0.2
        assert inner.transform == scaling(0.5, 0.5, 0.5)

    def test_intersect_world(self, default_world):
        xs = default_world.intersect(_ray((0, 0, -5), (0, 0, 1)))
        assert [i.t for i in xs] == [4, 4.5, 5.5, 6]


class TestShadows:
    """Tests for shadow rays."""

    @pytest.mark.parametrize(
        "p,shadowed",
        [
            ((0, 10, 0), False),
            ((10, -10, 10), True),
            ((-20, 20, -20), False),
            ((-2, 2, -2), False),
        ],
    )
    def test_is_shadowed(self, default_world, p, shadowed):
        from src.whitted.core.tuples import point

        light = default_world.lights[0]
        assert default_world.is_shadowed(light, point(*p)) is shadowed

    def test_shade_hit_in_shadow(self):
        from src.whitted.core.transformations import translation
        from src.whitted.core.tuples import color, point
        from src.whitted.geometry.sphere import Sphere
        from src.whitted.scene.intersection import Intersection, prepare_computations
        from src.whitted.scene.light import PointLight
        from src.whitted.scene.world import World

        s2 = Sphere(transform=translation(0, 0, 10))
        w = World(objects=[Sphere(), s2], lights=[PointLight(point(0, 0, -10), color(1, 1, 1))])
        r = _ray((0, 0, 5), (0, 0, 1))
        comps = prepare_computations(Intersection(4, s2), r)
        assert_color(w.shade_hit(comps), 0.1, 0.1, 0.1)


class TestShading:
    """Tests for shade_hit and color_at."""

    def test_shade_outside(self, default_world):
        from src.whitted.scene.intersection import Intersection, prepare_computations

        shape = default_world.objects[0]
        r = _ray((0, 0, -5), (0, 0, 1))
        comps = prepare_computations(Intersection(4, shape), r)
        assert_color(default_world.shade_hit(comps), 0.38066, 0.47583, 0.2855)

    def test_shade_inside(self, default_world):
        from src.whitted.core.tuples import color, point
        from src.whitted.scene.intersection import Intersection, prepare_computations
        from src.whitted.scene.light import PointLight

        default_world.lights = [PointLight(point(0, 0.25, 0), color(1, 1, 1))]
        shape = default_world.objects[1]
        r = _ray((0, 0, 0), (0, 0, 1))
        comps = prepare_computations(Intersection(0.5, shape), r)
        assert_color(default_world.shade_hit(comps), 0.90498, 0.90498, 0.90498)

    def test_color_when_ray_misses(self, default_world):
        from src.whitted.core.tuples import BLACK

        assert default_world.color_at(_ray((0, 0, -5), (0, 1, 0))) == BLACK

    def test_color_when_ray_hits(self, default_world):
        assert_color(default_world.color_at(_ray((0, 0, -5), (0, 0, 1))), 0.38066, 0.47583, 0.2855)

    def test_color_with_hit_behind_ray(self, default_world):
        outer, inner = default_world.objects
        outer.material.ambient = 1
        inner.material.ambient = 1
        result = default_world.color_at(_ray((0, 0, 0.75), (0, 0, -1)))
        assert result == inner.material.color

    def test_lights_add_up(self, default_world):
        """Two identical lights give twice the contribution of one."""
        single = default_world.color_at(_ray((0, 0, -5), (0, 0, 1)))
        default_world.add_light(default_world.lights[0])
        double = default_world.color_at(_ray((0, 0, -5), (0, 0, 1)))
        assert double == single * 2


class TestReflection:
    """Tests for reflected color."""

    def test_nonreflective_material(self, default_world):
        from src.whitted.core.tuples import BLACK
        from src.whitted.scene.intersection import Intersection, prepare_computations

        shape = default_world.objects[1]
        shape.material.ambient = 1
        comps = prepare_computations(Intersection(1, shape), _ray((0, 0, 0), (0, 0, 1)))
        assert default_world.reflected_color(comps) == BLACK

    def _reflective_plane(self, world):
        from src.whitted.core.transformations import translation
        from src.whitted.geometry.plane import Plane
        from src.whitted.materials.material import Material

        return world.add_object(Plane(transform=translation(0, -1, 0), material=Material(reflective=0.5)))

    def test_reflective_material(self, default_world):
        from src.whitted.scene.intersection import Intersection, prepare_computations

        plane = self._reflective_plane(default_world)
        r = _ray((0, 0, -3), (0, -math.sqrt(2) / 2, math.sqrt(2) / 2))
        comps = prepare_computations(Intersection(math.sqrt(2), plane), r)
        assert_color(default_world.reflected_color(comps), 0.19033, 0.23791, 0.14274)

    def test_shade_hit_reflective(self, default_world):
        from src.whitted.scene.intersection import Intersection, prepare_computations

        plane = self._reflective_plane(default_world)
        r = _ray((0, 0, -3), (0, -math.sqrt(2) / 2, math.sqrt(2) / 2))
        comps = prepare_computations(Intersection(math.sqrt(2), plane), r)
        assert_color(default_world.shade_hit(comps), 0.87675, 0.92433, 0.82917)

    def test_reflection_at_max_depth(self, default_world):
        from src.whitted.core.tuples import BLACK
        from src.whitted.scene.intersection import Intersection, prepare_computations

        plane = self._reflective_plane(default_world)
        r = _ray((0, 0, -3), (0, -math.sqrt(2) / 2, math.sqrt(2) / 2))
        comps = prepare_computations(Intersection(math.sqrt(2), plane), r)
        assert default_world.reflected_color(comps, 0) == BLACK

    def test_mutually_reflective_surfaces_terminate(self):
        from src.whitted.core.transformations import translation
        from src.whitted.core.tuples import color, point
        from src.whitted.geometry.plane import Plane
        from src.whitted.materials.material import Material
        from src.whitted.scene.light import PointLight
        from src.whitted.scene.world import World

        w = World(lights=[PointLight(point(0, 0, 0), color(1, 1, 1))])
        w.add_object(Plane(transform=translation(0, -1, 0), material=Material(reflective=1)))
        w.add_object(Plane(transform=translation(0, 1, 0), material=Material(reflective=1)))
        # Seven bounces (depths 6..0), each lit at 1.9
        assert_color(w.color_at(_ray((0, 0, 0), (0, 1, 0))), 13.3, 13.3, 13.3)


class TestRefraction:
    """Tests for refracted color."""

    def test_opaque_surface(self, default_world):
        from src.whitted.core.tuples import BLACK
        from src.whitted.scene.intersection import Intersection, prepare_computations

        shape = default_world.objects[0]
        xs = [Intersection(4, shape), Intersection(6, shape)]
        comps = prepare_computations(xs[0], _ray((0, 0, -5), (0, 0, 1)), xs)
        assert default_world.refracted_color(comps, 5) == BLACK

    def test_at_max_depth(self, default_world):
        from src.whitted.core.tuples import BLACK
        from src.whitted.scene.intersection import Intersection, prepare_computations

        shape = default_world.objects[0]
        shape.material.transparency = 1.0
        shape.material.refractive_index = 1.5
        xs = [Intersection(4, shape), Intersection(6, shape)]
        comps = prepare_computations(xs[0], _ray((0, 0, -5), (0, 0, 1)), xs)
        assert default_world.refracted_color(comps, 0) == BLACK

    def test_total_internal_reflection(self, default_world):
        from src.whitted.core.tuples import BLACK
        from src.whitted.scene.intersection import Intersection, prepare_computations

        shape = default_world.objects[0]
        shape.material.transparency = 1.0
        shape.material.refractive_index = 1.5
        r = _ray((0, 0, math.sqrt(2) / 2), (0, 1, 0))
        xs = [Intersection(-math.sqrt(2) / 2, shape), Intersection(math.sqrt(2) / 2, shape)]
        comps = prepare_computations(xs[1], r, xs)
        assert default_world.refracted_color(comps, 5) == BLACK

    def test_refracted_color(self, default_world, point_pattern):
        from src.whitted.scene.intersection import Intersection, prepare_computations

        a, b = default_world.objects
        a.material.ambient = 1.0
        a.material.pattern = point_pattern
        b.material.transparency = 1.0
        b.material.refractive_index = 1.5
        r = _ray((0, 0, 0.1), (0, 1, 0))
        xs = [
            Intersection(-0.9899, a),
            Intersection(-0.4899, b),
            Intersection(0.4899, b),
            Intersection(0.9899, a),
        ]
        comps = prepare_computations(xs[2], r, xs)
        assert_color(default_world.refracted_color(comps, 5), 0, 0.99888, 0.04725, tol=1e-3)

    def _glass_floor_scene(self, world, reflective=0.0):
        from src.whitted.core.transformations import translation
        from src.whitted.core.tuples import color
        from src.whitted.geometry.plane import Plane
        from src.whitted.geometry.sphere import Sphere
        from src.whitted.materials.material import Material

        floor = world.add_object(
            Plane(
                transform=translation(0, -1, 0),
                material=Material(transparency=0.5, refractive_index=1.5, reflective=reflective),
            )
        )
        world.add_object(
            Sphere(
                transform=translation(0, -3.5, -0.5),
                material=Material(color=color(1, 0, 0), ambient=0.5),
            )
        )
        return floor

    def test_shade_hit_transparent(self, default_world):
        from src.whitted.scene.intersection import Intersection, prepare_computations

        floor = self._glass_floor_scene(default_world)
        r = _ray((0, 0, -3), (0, -math.sqrt(2) / 2, math.sqrt(2) / 2))
        xs = [Intersection(math.sqrt(2), floor)]
        comps = prepare_computations(xs[0], r, xs)
        assert_color(default_world.shade_hit(comps, 5), 0.93642, 0.68642, 0.68642)

    def test_shade_hit_schlick(self, default_world):
        from src.whitted.scene.intersection import Intersection, prepare_computations

        floor = self._glass_floor_scene(default_world, reflective=0.5)
        r = _ray((0, 0, -3), (0, -math.sqrt(2) / 2, math.sqrt(2) / 2))
        xs = [Intersection(math.sqrt(2), floor)]
        comps = prepare_computations(xs[0], r, xs)
        assert_color(default_world.shade_hit(comps, 5), 0.93391, 0.69643, 0.69243)
