"""Ready-made scenes.

``default_world`` is the two-sphere reference scene that shading results
are checked against. ``create_showcase_scene`` builds a larger scene that
exercises every primitive, every pattern, reflection and refraction, and
returns it together with a matching camera.

Example:
    >>> from src.whitted.scene.scenes import create_showcase_scene
    >>> world, camera = create_showcase_scene(width=320, height=180)
    >>> len(world.lights)
    1
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.whitted.camera.camera import Camera
from src.whitted.core.transformations import (
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    translation,
    view_transform,
)
from src.whitted.core.tuples import Color, color, point, vector
from src.whitted.geometry.cone import Cone
from src.whitted.geometry.cube import Cube
from src.whitted.geometry.cylinder import Cylinder
from src.whitted.geometry.group import Group
from src.whitted.geometry.plane import Plane
from src.whitted.geometry.sphere import Sphere, glass_sphere
from src.whitted.geometry.triangle import Triangle
from src.whitted.materials.material import Material
from src.whitted.materials.patterns import (
    CheckersPattern,
    GradientPattern,
    RingPattern,
    StripePattern,
)
from src.whitted.scene.light import PointLight
from src.whitted.scene.world import World

# =============================================================================
# Default World
# =============================================================================


def default_world() -> World:
    """Two concentric spheres lit from the upper left.

    The outer unit sphere is green-yellow with a reduced specular term.
    The inner sphere is scaled by 0.5 and uses the default material.
    """
    light = PointLight(point(-10, 10, -10), color(1, 1, 1))

    outer = Sphere(material=Material(color=color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))

    return World(objects=[outer, inner], lights=[light])


# =============================================================================
# Showcase Scene
# =============================================================================


@dataclass
class ShowcaseParams:
    """Parameters for the showcase scene.

    Attributes:
        field_of_view: Camera field of view in radians.
        light_position: Position of the single point light.
        light_color: Intensity of the light.
        floor_reflective: Reflectivity of the checkered floor.
    """

    field_of_view: float = math.pi / 3
    light_position: tuple[float, float, float] = (-10.0, 10.0, -10.0)
    light_color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    floor_reflective: float = 0.2


def _pyramid(base_color: Color) -> Group:
    """Four-sided pyramid made of triangles, apex at y=1."""
    apex = point(0, 1, 0)
    corners = [point(-1, 0, -1), point(1, 0, -1), point(1, 0, 1), point(-1, 0, 1)]
    pyramid = Group()
    for i, corner in enumerate(corners):
        following = corners[(i + 1) % len(corners)]
        pyramid.add_child(Triangle(apex, corner, following))
    pyramid.material = Material(color=base_color, diffuse=0.8, specular=0.3)
    return pyramid


def create_showcase_scene(
    width: int = 400,
    height: int = 200,
    params: ShowcaseParams | None = None,
) -> tuple[World, Camera]:
    """Create a scene using every primitive and pattern.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        params: Optional overrides for the camera and lighting.

    Returns:
        A tuple of (World, Camera).
    """
    if params is None:
        params = ShowcaseParams()

    world = World()
    world.add_light(PointLight(point(*params.light_position), color(*params.light_color)))

    # =========================================================================
    # Floor and backdrop
    # =========================================================================

    world.add_object(
        Plane(
            material=Material(
                pattern=CheckersPattern(color(0.9, 0.9, 0.9), color(0.2, 0.2, 0.2)),
                specular=0.0,
                reflective=params.floor_reflective,
            )
        )
    )
    world.add_object(
        Plane(
            transform=translation(0, 0, 10) * rotation_x(math.pi / 2),
            material=Material(
                pattern=GradientPattern(
                    color(0.2, 0.3, 0.6),
                    color(0.6, 0.8, 1.0),
                    transform=translation(-1, 0, 0) * scaling(2, 1, 1) * rotation_z(math.pi / 2),
                ),
                specular=0.0,
                ambient=0.3,
            ),
        )
    )

    # =========================================================================
    # Primitives
    # =========================================================================

    glass = glass_sphere()
    glass.transform = translation(0, 1, 0)
    glass.material.color = color(0.1, 0.1, 0.1)
    glass.material.reflective = 0.9
    glass.material.diffuse = 0.1
    glass.material.shininess = 300.0
    world.add_object(glass)

    world.add_object(
        Cube(
            transform=translation(-2.8, 0.75, 1.5) * rotation_y(math.pi / 5) * scaling(0.75, 0.75, 0.75),
            material=Material(
                pattern=StripePattern(
                    color(0.9, 0.3, 0.2),
                    color(1.0, 0.9, 0.8),
                    transform=scaling(0.25, 0.25, 0.25),
                ),
            ),
        )
    )

    world.add_object(
        Cylinder(
            minimum=0,
            maximum=1.5,
            closed=True,
            transform=translation(2.6, 0, 1) * scaling(0.6, 1, 0.6),
            material=Material(
                pattern=RingPattern(
                    color(0.2, 0.6, 0.3),
                    color(0.9, 0.9, 0.4),
                    transform=scaling(0.2, 0.2, 0.2),
                ),
            ),
        )
    )

    world.add_object(
        Cone(
            minimum=-1,
            maximum=0,
            closed=True,
            transform=translation(-1.2, 1, -1.5) * scaling(0.5, 1, 0.5),
            material=Material(color=color(0.8, 0.5, 0.9), reflective=0.1),
        )
    )

    world.add_object(
        Sphere(
            transform=translation(1.3, 0.4, -1.6) * scaling(0.4, 0.4, 0.4),
            material=Material(color=color(0.9, 0.9, 0.9), reflective=0.6, diffuse=0.3),
        )
    )

    # =========================================================================
    # Nested groups
    # =========================================================================

    pyramids = Group(transform=translation(0, 0, 4))
    for i, offset in enumerate((-3.5, 0.0, 3.5)):
        pyramid = _pyramid(color(0.9, 0.7 - 0.2 * i, 0.2 + 0.2 * i))
        pyramid.transform = translation(offset, 0, 0) * scaling(1, 1.5, 1)
        pyramids.add_child(pyramid)
    world.add_object(pyramids)

    camera = Camera(
        width,
        height,
        params.field_of_view,
        view_transform(point(0, 2.5, -7), point(0, 1, 0), vector(0, 1, 0)),
    )
    return world, camera
