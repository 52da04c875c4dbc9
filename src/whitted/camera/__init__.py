"""Camera module for primary ray generation."""

from .camera import Camera

__all__ = ["Camera"]
