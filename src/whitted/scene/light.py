"""Point light sources."""

from __future__ import annotations

from dataclasses import dataclass

from src.whitted.core.tuples import Color, Tuple


@dataclass(frozen=True)
class PointLight:
    """A light with no size emitting equally in all directions.

    Attributes:
        position: World-space position of the light.
        intensity: Color and brightness of the light.
    """

    position: Tuple
    intensity: Color
