"""Preview module for exporting rendered images.

Components:
    export: Gamma correction and PNG output via Pillow
"""

from .export import (
    apply_gamma,
    canvas_to_uint8,
    image_to_uint8,
    save_png,
    save_png_from_array,
)

__all__ = [
    "apply_gamma",
    "image_to_uint8",
    "canvas_to_uint8",
    "save_png",
    "save_png_from_array",
]
