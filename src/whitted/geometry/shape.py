"""Abstract shape with the transform plumbing shared by all primitives.

Every primitive is defined in its own object space, where its equation is
simplest (unit sphere, xz-plane, unit cube, ...). A Shape owns the
object-to-world transform together with its cached inverse, and converts
rays, points and normals between the two frames. Subclasses only solve the
object-space problem:

    local_intersect(local_ray)   intersections in object space
    local_normal_at(local_point) object-space normal
    local_bounds()               object-space bounding box

Shapes placed inside a Group keep a ``parent`` back-reference so that a
change to anything feeding a child's bounds (its transform, or a
cylinder's or cone's limits) refreshes the group's cached bounds.

Example:
    >>> from src.whitted.geometry.sphere import Sphere
    >>> from src.whitted.core.transformations import translation
    >>> from src.whitted.core.tuples import point
    >>> s = Sphere(transform=translation(0, 1, 0))
    >>> s.normal_at(point(0, 1.70711, -0.70711))
    Tuple(x=0.0, y=0.70711, z=-0.70711, w=0.0)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import TYPE_CHECKING

from src.whitted.core.matrices import IDENTITY, Matrix
from src.whitted.core.ray import Ray
from src.whitted.core.tuples import Tuple
from src.whitted.geometry.bounds import Bounds
from src.whitted.materials.material import Material

if TYPE_CHECKING:
    from src.whitted.geometry.group import Group
    from src.whitted.scene.intersection import Intersection


class Shape(ABC):
    """Base class for everything a ray can hit.

    Attributes:
        transform: Object-to-world transform. Assigning it recomputes the
            cached inverse.
        invtransform: Cached inverse of ``transform`` (read-only).
        material: Surface material.
        parent: Group containing this shape, or None at the top level.
    """

    def __init__(self, transform: Matrix | None = None, material: Material | None = None) -> None:
        self.parent: Group | None = None
        self._material = material if material is not None else Material()
        self._transform = IDENTITY
        self._invtransform = IDENTITY
        self._normal_matrix = IDENTITY
        if transform is not None:
            self.transform = transform

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        # Raises ValueError for singular matrices before any state changes
        inverse = matrix.inverse()
        self._transform = matrix
        self._invtransform = inverse
        self._normal_matrix = inverse.transpose()
        self._bounds_changed()

    @property
    def invtransform(self) -> Matrix:
        return self._invtransform

    @property
    def material(self) -> Material:
        return self._material

    @material.setter
    def material(self, material: Material) -> None:
        self._material = material

    @property
    def surface_key(self) -> Hashable:
        """Identity of the surface, including the group path used to reach it."""
        return id(self)

    # =========================================================================
    # Frame conversions
    # =========================================================================

    def world_to_object(self, world_point: Tuple) -> Tuple:
        """Convert a point from the caller's frame into object space."""
        return self._invtransform * world_point

    def normal_to_world(self, local_normal: Tuple) -> Tuple:
        """Convert an object-space normal into the caller's frame.

        Normals transform by the inverse transpose. The translation part
        leaks into w, which is reset before normalizing.
        """
        n = self._normal_matrix * local_normal
        return Tuple(n.x, n.y, n.z, 0.0).normalize()

    def normal_at(self, world_point: Tuple) -> Tuple:
        """Unit surface normal at a world-space point on the shape."""
        local_point = self.world_to_object(world_point)
        return self.normal_to_world(self.local_normal_at(local_point))

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with this shape.

        Returns:
            Intersections tagged with this shape (or with group wrappers
            for hits inside a Group).
        """
        return self.local_intersect(ray.transform(self._invtransform))

    def bounds(self) -> Bounds:
        """Bounding box in the parent's frame."""
        return self.local_bounds().transform(self._transform)

    def _bounds_changed(self) -> None:
        """Let the enclosing group recompute its cached bounds."""
        if self.parent is not None:
            self.parent.refresh_bounds()

    # =========================================================================
    # Object-space primitives
    # =========================================================================

    @abstractmethod
    def local_intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect an object-space ray."""

    @abstractmethod
    def local_normal_at(self, local_point: Tuple) -> Tuple:
        """Object-space normal at an object-space point."""

    @abstractmethod
    def local_bounds(self) -> Bounds:
        """Bounding box in object space."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(transform={self._transform!r})"
