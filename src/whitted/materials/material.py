"""Surface materials and Phong lighting.

A Material describes how a surface responds to light: its base color (or
a procedural pattern), the weights of the ambient, diffuse and specular
terms, and the reflective and refractive properties used by the recursive
tracer.

Example:
    >>> from src.whitted.materials.material import Material
    >>> glass = Material(transparency=1.0, refractive_index=1.5)
    >>> glass.ambient
    0.1
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from src.whitted.core.tuples import BLACK, Color, Tuple
from src.whitted.materials.patterns import Pattern

if TYPE_CHECKING:
    from src.whitted.geometry.shape import Shape
    from src.whitted.scene.light import PointLight


@dataclass
class Material:
    """Phong material with reflection and refraction parameters.

    Attributes:
        color: Base surface color, used when no pattern is set.
        ambient: Weight of the constant ambient term.
        diffuse: Weight of the Lambertian term.
        specular: Weight of the specular highlight.
        shininess: Phong exponent; larger values give tighter highlights.
        reflective: Fraction of the reflected ray's color added (0 = matte).
        transparency: Fraction of the refracted ray's color added (0 = opaque).
        refractive_index: Index of refraction (1.0 vacuum, 1.5 glass).
        pattern: Optional pattern overriding ``color``.
    """

    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0
    pattern: Pattern | None = None

    def lighting(
        self,
        shape: Shape,
        light: PointLight,
        position: Tuple,
        eyev: Tuple,
        normalv: Tuple,
        in_shadow: bool = False,
    ) -> Color:
        """Phong shading of one point by one light.

        Args:
            shape: The shape being shaded, used to evaluate patterns.
            light: The light source.
            position: World-space point being shaded.
            eyev: Unit vector toward the eye.
            normalv: Unit surface normal facing the eye.
            in_shadow: Whether the light is blocked. Only ambient remains.

        Returns:
            ambient + diffuse + specular.
        """
        if self.pattern is not None:
            surface_color = self.pattern.color_at_shape(shape, position)
        else:
            surface_color = self.color

        effective_color = surface_color * light.intensity
        lightv = (light.position - position).normalize()
        ambient = effective_color * self.ambient

        # Negative cosine means the light is behind the surface
        light_dot_normal = lightv.dot(normalv)
        if in_shadow or light_dot_normal < 0.0:
            return ambient

        diffuse = effective_color * (self.diffuse * light_dot_normal)

        reflectv = (-lightv).reflect(normalv)
        reflect_dot_eye = reflectv.dot(eyev)
        if reflect_dot_eye <= 0.0:
            specular = BLACK
        else:
            factor = reflect_dot_eye**self.shininess
            specular = light.intensity * (self.specular * factor)

        return ambient + diffuse + specular
