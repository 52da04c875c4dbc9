"""Perspective camera generating one primary ray per pixel.

The camera sits at the origin of its own frame looking down -z at a
virtual canvas one unit away. ``transform`` (usually built with
``view_transform``) orients the world relative to the camera; its inverse
is cached once and used to move each pixel ray into world space.

The canvas is sized from the field of view along the longer image axis:

    half_view = tan(field_of_view / 2)
    aspect >= 1: half_width = half_view,          half_height = half_view / aspect
    aspect <  1: half_width = half_view * aspect, half_height = half_view

Rays pass through pixel centers, and x grows to the left in camera space
because the camera looks toward -z.

Example:
    >>> import math
    >>> from src.whitted.camera.camera import Camera
    >>> camera = Camera(hsize=201, vsize=101, field_of_view=math.pi / 2)
    >>> camera.ray_for_pixel(100, 50).direction
    Tuple(x=0.0, y=0.0, z=-1.0, w=0.0)
"""

from __future__ import annotations

import math

from src.whitted.core.matrices import IDENTITY, Matrix
from src.whitted.core.ray import Ray
from src.whitted.core.tuples import point

# =============================================================================
# Camera
# =============================================================================


class Camera:
    """An immutable pinhole camera.

    Attributes:
        hsize: Image width in pixels.
        vsize: Image height in pixels.
        field_of_view: Angle (radians) covered by the longer image axis.
        transform: World-to-camera transform.
        pixel_size: World-space size of one pixel on the canvas.
        half_width: Half the canvas width at z = -1.
        half_height: Half the canvas height at z = -1.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Matrix = IDENTITY,
    ) -> None:
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")
        if not 0.0 < field_of_view < math.pi:
            raise ValueError(f"field_of_view must be in (0, pi), got {field_of_view}")

        self._hsize = hsize
        self._vsize = vsize
        self._field_of_view = field_of_view
        self._transform = transform
        self._invtransform = transform.inverse()

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self._half_width = half_view
            self._half_height = half_view / aspect
        else:
            self._half_width = half_view * aspect
            self._half_height = half_view
        self._pixel_size = (self._half_width * 2.0) / hsize

    @property
    def hsize(self) -> int:
        return self._hsize

    @property
    def vsize(self) -> int:
        return self._vsize

    @property
    def field_of_view(self) -> float:
        return self._field_of_view

    @property
    def transform(self) -> Matrix:
        return self._transform

    @property
    def invtransform(self) -> Matrix:
        return self._invtransform

    @property
    def pixel_size(self) -> float:
        return self._pixel_size

    @property
    def half_width(self) -> float:
        return self._half_width

    @property
    def half_height(self) -> float:
        return self._half_height

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Build the world-space ray through the center of a pixel.

        Args:
            px: Column, 0 at the left edge.
            py: Row, 0 at the top edge.

        Returns:
            A ray from the camera position with a normalized direction.
        """
        xoffset = (px + 0.5) * self._pixel_size
        yoffset = (py + 0.5) * self._pixel_size

        world_x = self._half_width - xoffset
        world_y = self._half_height - yoffset

        pixel = self._invtransform * point(world_x, world_y, -1.0)
        origin = self._invtransform * point(0.0, 0.0, 0.0)
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def __repr__(self) -> str:
        return (
            f"Camera(hsize={self._hsize}, vsize={self._vsize}, "
            f"field_of_view={self._field_of_view!r})"
        )
