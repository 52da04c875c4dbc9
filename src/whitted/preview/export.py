"""Image export utilities for rendered canvases.

Canvases hold unclamped linear floats. Export clips them to [0, 1],
optionally applies gamma correction, and quantizes to 8 bits before
writing a PNG through Pillow.

Phong colors in scene descriptions are usually picked by eye, so the
default gamma is 1.0 (values written as they are). Pass ``gamma=2.2`` to
treat the canvas as linear light.

Example:
    >>> from src.whitted.core.renderer import render
    >>> from src.whitted.preview.export import save_png
    >>> canvas = render(camera, world)
    >>> save_png(canvas, "output.png")
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from src.whitted.core.canvas import Canvas


def apply_gamma(
    image: npt.NDArray[np.float64],
    gamma: float = 2.2,
) -> npt.NDArray[np.float64]:
    """Clip to [0, 1] and apply gamma encoding (out = in^(1/gamma)).

    Args:
        image: Image array of shape (H, W, 3).
        gamma: Gamma value. 1.0 only clips.

    Returns:
        The processed image.

    Raises:
        ValueError: If gamma is not positive.
    """
    if gamma <= 0.0:
        raise ValueError(f"gamma must be positive, got {gamma}")

    # Clamp first: negative values would turn into NaN under the power
    image = np.clip(image, 0.0, 1.0)
    if gamma == 1.0:
        return image
    return np.power(image, 1.0 / gamma)


def image_to_uint8(
    image: npt.NDArray[np.float64],
    *,
    gamma: float = 1.0,
) -> npt.NDArray[np.uint8]:
    """Convert a float image to 8-bit values, rounding to the nearest level.

    Args:
        image: Image array of shape (H, W, 3).
        gamma: Gamma correction value.

    Returns:
        8-bit image array of shape (H, W, 3) with dtype uint8.
    """
    processed = apply_gamma(image, gamma)
    return np.rint(processed * 255.0).astype(np.uint8)


def canvas_to_uint8(canvas: Canvas, *, gamma: float = 1.0) -> npt.NDArray[np.uint8]:
    """Convert a canvas to an 8-bit (height, width, 3) array."""
    return image_to_uint8(canvas.to_numpy(), gamma=gamma)


def save_png(canvas: Canvas, filepath: str | Path, *, gamma: float = 1.0) -> None:
    """Save a canvas as an 8-bit RGB PNG.

    Args:
        canvas: The rendered canvas.
        filepath: Output file path (should end in .png).
        gamma: Gamma correction value (default 1.0, no correction).
    """
    save_png_from_array(canvas.to_numpy(), filepath, gamma=gamma)


def save_png_from_array(
    image: npt.NDArray[np.float64],
    filepath: str | Path,
    *,
    gamma: float = 1.0,
) -> None:
    """Save a float image array of shape (H, W, 3) as a PNG file."""
    image_uint8 = image_to_uint8(image, gamma=gamma)
    pil_image = PILImage.fromarray(image_uint8)
    pil_image.save(filepath)
