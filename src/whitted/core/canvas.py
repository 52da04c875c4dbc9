"""Pixel buffer for rendered images.

The canvas stores unclamped linear RGB values in a row-major NumPy array
of shape (height, width, 3). Callers clip and encode when exporting.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from src.whitted.core.tuples import Color


class Canvas:
    """A width x height grid of colors, initially black.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) is outside the {self._width}x{self._height} canvas"
            )

    def write_pixel(self, x: int, y: int, pixel: Color) -> None:
        self._check_bounds(x, y)
        self._pixels[y, x] = (pixel.red, pixel.green, pixel.blue)

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return Color(float(r), float(g), float(b))

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the pixel data with shape (height, width, 3)."""
        return self._pixels.copy()

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"
