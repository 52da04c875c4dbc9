"""Composite shape holding child shapes under a shared transform.

A Group has no surface of its own. It transforms incoming rays into its
local frame, rejects rays that miss its cached bounding box, and otherwise
asks every child. Each child hit is re-tagged with a single-child wrapper
Group carrying this group's transform, so that the hit's point and normal
conversions walk back out through every enclosing group:

    world_to_object(p)   = child.world_to_object(group.invtransform * p)
    normal_to_world(n)   = normalize(group.invtransform^T * child.normal_to_world(n))

Children are shared, never copied. A child keeps a ``parent`` reference to
the group it was added to, and changing a child's transform refreshes the
bounds of every group above it.

Example:
    >>> from src.whitted.core.transformations import scaling, translation
    >>> from src.whitted.geometry.group import Group
    >>> from src.whitted.geometry.sphere import Sphere
    >>> g = Group(transform=scaling(2, 2, 2))
    >>> s = g.add_child(Sphere(transform=translation(5, 0, 0)))
    >>> s.parent is g
    True
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from functools import reduce

from src.whitted.core.matrices import Matrix
from src.whitted.core.ray import Ray
from src.whitted.core.tuples import Tuple, point
from src.whitted.geometry.bounds import Bounds
from src.whitted.geometry.shape import Shape
from src.whitted.materials.material import Material
from src.whitted.scene.intersection import Intersection

# Bounds of a group with no children
_EMPTY_BOUNDS = Bounds.single(point(0, 0, 0))


class Group(Shape):
    """An ordered collection of shapes with a common transform.

    Attributes:
        children: The child shapes, in insertion order.
    """

    def __init__(
        self,
        children: Iterable[Shape] = (),
        transform: Matrix | None = None,
    ) -> None:
        self.children: list[Shape] = []
        self._bounds = _EMPTY_BOUNDS
        self._origin: Group | None = None
        super().__init__(transform=transform)
        for child in children:
            self.add_child(child)

    @classmethod
    def _wrap(cls, origin: Group, child: Shape) -> Group:
        """Build the hit wrapper for a child of ``origin``.

        The wrapper shares the origin's matrices and is not registered as
        the child's parent.
        """
        wrapper = cls.__new__(cls)
        wrapper.parent = None
        wrapper.children = [child]
        wrapper._bounds = child.local_bounds()
        wrapper._origin = origin
        wrapper._material = child.material
        wrapper._transform = origin._transform
        wrapper._invtransform = origin._invtransform
        wrapper._normal_matrix = origin._normal_matrix
        return wrapper

    def add_child(self, child: Shape) -> Shape:
        """Append a child and grow the cached bounds.

        Returns:
            The child, for chaining.
        """
        child.parent = self
        self.children.append(child)
        self.refresh_bounds()
        return child

    def refresh_bounds(self) -> None:
        """Recompute the union of the children's bounds.

        Propagates upward so that enclosing groups stay conservative.
        """
        if self.children:
            self._bounds = reduce(Bounds.union, (child.bounds() for child in self.children))
        else:
            self._bounds = _EMPTY_BOUNDS
        self._bounds_changed()

    @property
    def material(self) -> Material:
        """Material of the first child (the default material when empty)."""
        if self.children:
            return self.children[0].material
        return self._material

    @material.setter
    def material(self, material: Material) -> None:
        self._material = material
        for child in self.children:
            child.material = material

    @property
    def surface_key(self) -> Hashable:
        if self._origin is None:
            return id(self)
        return (id(self._origin), self.children[0].surface_key)

    def world_to_object(self, world_point: Tuple) -> Tuple:
        local_point = self._invtransform * world_point
        if self._origin is None:
            return local_point
        return self.children[0].world_to_object(local_point)

    def normal_to_world(self, local_normal: Tuple) -> Tuple:
        if self._origin is None:
            return super().normal_to_world(local_normal)
        return super().normal_to_world(self.children[0].normal_to_world(local_normal))

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        if not self.children or not self._bounds.intersects(ray):
            return []
        xs = []
        for child in self.children:
            for i in child.intersect(ray):
                xs.append(Intersection(i.t, Group._wrap(self, i.object)))
        xs.sort(key=lambda i: i.t)
        return xs

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        # Only hit wrappers resolve to a surface; their point is already in leaf space
        if self._origin is None:
            raise RuntimeError("A group has no surface normal; use the normal of one of its hits")
        return self.children[0].local_normal_at(local_point)

    def local_bounds(self) -> Bounds:
        return self._bounds
