"""Ray-surface intersections and the per-hit shading record.

An Intersection pairs a ray parameter t with the shape that was hit. Hits
inside a Group refer to a lightweight wrapper that carries the group's
transform, so equality compares the surface *and* the group path used to
reach it (``Shape.surface_key``), never object copies.

``prepare_computations`` turns the visible hit into a Computations record
holding everything the shading code needs: the hit point nudged above and
below the surface, the eye and normal vectors, the reflection vector and
the refractive indices on both sides of the surface.

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuples import point, vector
    >>> from src.whitted.geometry.sphere import Sphere
    >>> from src.whitted.scene.intersection import hit, prepare_computations
    >>> ray = Ray(point(0, 0, -5), vector(0, 0, 1))
    >>> xs = Sphere().intersect(ray)
    >>> comps = prepare_computations(hit(xs), ray, xs)
    >>> comps.inside
    False
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Tuple, approx_equal

if TYPE_CHECKING:
    from src.whitted.geometry.shape import Shape


class Intersection:
    """A hit at parameter t on a shape.

    Attributes:
        t: Ray parameter of the hit. Negative values lie behind the origin.
        object: The shape (or group wrapper) that was hit. Shared, never copied.
    """

    __slots__ = ("t", "object")

    def __init__(self, t: float, obj: Shape) -> None:
        self.t = t
        self.object = obj

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return approx_equal(self.t, other.t) and self.object.surface_key == other.object.surface_key

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Intersection(t={self.t!r}, object={self.object!r})"


def intersections(*xs: Intersection) -> list[Intersection]:
    """Collect intersections into a list sorted by t."""
    return sorted(xs, key=lambda i: i.t)


def hit(xs: Sequence[Intersection]) -> Intersection | None:
    """Select the visible intersection.

    Args:
        xs: Intersections in any order.

    Returns:
        The intersection with the lowest non-negative t, or None when every
        hit lies behind the ray origin.
    """
    visible = [i for i in xs if i.t >= 0.0]
    if not visible:
        return None
    return min(visible, key=lambda i: i.t)


@dataclass(frozen=True)
class Computations:
    """Precomputed state for shading one hit.

    Attributes:
        t: Ray parameter of the hit.
        object: The shape that was hit.
        point: World-space hit point.
        eyev: Unit vector pointing back toward the eye.
        normalv: Surface normal, flipped to face the eye.
        inside: Whether the hit is on the inside of the surface.
        over_point: point nudged along the normal, for shadow and reflection rays.
        under_point: point nudged against the normal, for refraction rays.
        reflectv: Ray direction reflected about the normal.
        n1: Refractive index of the medium being left.
        n2: Refractive index of the medium being entered.
    """

    t: float
    object: Shape
    point: Tuple
    eyev: Tuple
    normalv: Tuple
    inside: bool
    over_point: Tuple
    under_point: Tuple
    reflectv: Tuple
    n1: float
    n2: float

    def is_internal_reflection(self) -> bool:
        """Check Snell's law for total internal reflection."""
        n_ratio = self.n1 / self.n2
        cos_i = self.eyev.dot(self.normalv)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        return sin2_t > 1.0

    def refracted_direction(self) -> Tuple:
        """Direction of the transmitted ray.

        Only meaningful when ``is_internal_reflection()`` is False.
        """
        n_ratio = self.n1 / self.n2
        cos_i = self.eyev.dot(self.normalv)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        cos_t = math.sqrt(1.0 - sin2_t)
        return self.normalv * (n_ratio * cos_i - cos_t) - self.eyev * n_ratio

    def schlick(self) -> float:
        """Approximate the fraction of light reflected (Fresnel term).

        Returns:
            Reflectance in [0, 1]. Exactly 1.0 under total internal reflection.
        """
        cos = self.eyev.dot(self.normalv)

        if self.n1 > self.n2:
            n = self.n1 / self.n2
            sin2_t = n * n * (1.0 - cos * cos)
            if sin2_t > 1.0:
                return 1.0
            # Use the transmitted angle when leaving the denser medium
            cos = math.sqrt(1.0 - sin2_t)

        r0 = ((self.n1 - self.n2) / (self.n1 + self.n2)) ** 2
        return r0 + (1.0 - r0) * (1.0 - cos) ** 5


def _refractive_indices(target: Intersection, xs: Sequence[Intersection]) -> tuple[float, float]:
    """Walk the sorted hits tracking which volumes enclose each one.

    n1 is read from the innermost container before the target is processed
    and n2 after it. An empty container list means air (1.0).
    """
    containers: list[Shape] = []
    n1 = 1.0
    n2 = 1.0

    for i in xs:
        is_target = i == target
        if is_target:
            n1 = containers[-1].material.refractive_index if containers else 1.0

        key = i.object.surface_key
        for index, shape in enumerate(containers):
            if shape.surface_key == key:
                del containers[index]
                break
        else:
            containers.append(i.object)

        if is_target:
            n2 = containers[-1].material.refractive_index if containers else 1.0
            break

    return n1, n2


def prepare_computations(
    intersection: Intersection,
    ray: Ray,
    xs: Sequence[Intersection] | None = None,
) -> Computations:
    """Build the shading record for a hit.

    Args:
        intersection: The hit being shaded.
        ray: The ray that produced it.
        xs: All intersections along the ray, sorted by t. Used to find the
            refractive indices on both sides of the surface. Defaults to
            just the hit itself.

    Returns:
        The populated Computations.
    """
    if xs is None:
        xs = [intersection]

    obj = intersection.object
    position = ray.position(intersection.t)
    eyev = -ray.direction
    normalv = obj.normal_at(position)

    inside = normalv.dot(eyev) < 0.0
    if inside:
        normalv = -normalv

    reflectv = ray.direction.reflect(normalv)
    offset = normalv * EPSILON
    n1, n2 = _refractive_indices(intersection, xs)

    return Computations(
        t=intersection.t,
        object=obj,
        point=position,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        over_point=position + offset,
        under_point=position - offset,
        reflectv=reflectv,
        n1=n1,
        n2=n2,
    )
