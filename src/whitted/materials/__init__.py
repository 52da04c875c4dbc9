"""Materials module for surface appearance.

Components:
    material: Phong material and the lighting function
    patterns: Stripe, gradient, ring and checkers patterns
"""

from .material import Material
from .patterns import CheckersPattern, GradientPattern, Pattern, RingPattern, StripePattern

__all__ = [
    "Material",
    "Pattern",
    "StripePattern",
    "GradientPattern",
    "RingPattern",
    "CheckersPattern",
]
