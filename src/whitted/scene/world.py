"""Scene container and recursive Whitted shading.

A World holds the top-level shapes and the light sources. ``color_at``
traces a ray into the scene and returns the color seen along it: the
nearest visible hit is shaded with Phong lighting per light (with a shadow
test), plus recursively traced reflected and refracted contributions.

Recursion is bounded by ``remaining``. Every reflected or refracted ray
decrements it, and an exhausted budget contributes black, so mutually
reflective surfaces always terminate.

The world is only read while rendering, so one instance can be shared by
any number of render workers.

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuples import point, vector
    >>> from src.whitted.scene.scenes import default_world
    >>> world = default_world()
    >>> world.color_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
    Color(red=0.38066..., green=0.47583..., blue=0.28549...)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import BLACK, Color, Tuple
from src.whitted.geometry.shape import Shape
from src.whitted.scene.intersection import Computations, Intersection, hit, prepare_computations
from src.whitted.scene.light import PointLight

# Default recursion budget for reflected and refracted rays
MAX_REFLECTIONS = 6


@dataclass
class World:
    """A collection of shapes lit by point lights.

    Attributes:
        objects: Top-level shapes (Groups may nest further shapes).
        lights: Light sources. Each contributes its own Phong term.
    """

    objects: list[Shape] = field(default_factory=list)
    lights: list[PointLight] = field(default_factory=list)

    def add_object(self, shape: Shape) -> Shape:
        """Append a top-level shape and return it."""
        self.objects.append(shape)
        return shape

    def add_light(self, light: PointLight) -> PointLight:
        """Append a light source and return it."""
        self.lights.append(light)
        return light

    def intersect(self, ray: Ray) -> list[Intersection]:
        """All intersections of the ray with every object, sorted by t."""
        xs: list[Intersection] = []
        for obj in self.objects:
            xs.extend(obj.intersect(ray))
        xs.sort(key=lambda i: i.t)
        return xs

    def is_shadowed(self, light: PointLight, position: Tuple) -> bool:
        """Check whether anything lies between a point and a light.

        Args:
            light: The light to test against.
            position: World-space point, usually a hit's over_point.

        Returns:
            True when the nearest hit toward the light is strictly closer
            than the light itself.
        """
        v = light.position - position
        distance = v.magnitude()
        direction = v.normalize()

        h = hit(self.intersect(Ray(position, direction)))
        return h is not None and h.t < distance

    def shade_hit(self, comps: Computations, remaining: int = MAX_REFLECTIONS) -> Color:
        """Color at a prepared hit.

        For each light: Phong lighting at the over point (with its shadow
        test) plus the reflected and refracted colors. When a surface is
        both reflective and transparent, the Schlick reflectance splits
        the two contributions.
        """
        material = comps.object.material

        if material.reflective > 0.0 and material.transparency > 0.0:
            reflectance = comps.schlick()
            refl, refr = reflectance, 1.0 - reflectance
        else:
            refl, refr = 1.0, 1.0

        reflected = self.reflected_color(comps, remaining) * refl
        refracted = self.refracted_color(comps, remaining) * refr

        result = BLACK
        for light in self.lights:
            surface = material.lighting(
                comps.object,
                light,
                comps.over_point,
                comps.eyev,
                comps.normalv,
                self.is_shadowed(light, comps.over_point),
            )
            result = result + surface + reflected + refracted
        return result

    def color_at(self, ray: Ray, remaining: int = MAX_REFLECTIONS) -> Color:
        """Trace a ray and return the color it sees (black on a miss)."""
        xs = self.intersect(ray)
        h = hit(xs)
        if h is None:
            return BLACK
        comps = prepare_computations(h, ray, xs)
        return self.shade_hit(comps, remaining)

    def reflected_color(self, comps: Computations, remaining: int = MAX_REFLECTIONS) -> Color:
        """Contribution of the mirror-reflected ray."""
        reflective = comps.object.material.reflective
        if remaining < 1 or reflective == 0.0:
            return BLACK
        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps: Computations, remaining: int = MAX_REFLECTIONS) -> Color:
        """Contribution of the transmitted ray (black under total internal reflection)."""
        transparency = comps.object.material.transparency
        if remaining <= 0 or transparency == 0.0 or comps.is_internal_reflection():
            return BLACK
        refract_ray = Ray(comps.under_point, comps.refracted_direction())
        return self.color_at(refract_ray, remaining - 1) * transparency
