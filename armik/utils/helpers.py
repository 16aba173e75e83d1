"""
Small stateless helpers used across the armik package.

Provides scalar clamping and the domain-safe inverse cosine used wherever a
cosine is reconstructed from floating-point products.
"""

from __future__ import annotations

import math


def clamp(value: float, lo: float, hi: float) -> float:
    """Return *value* clamped to the closed interval [*lo*, *hi*].

    Args:
        value: The scalar to clamp.
        lo: Lower bound (inclusive).
        hi: Upper bound (inclusive).

    Returns:
        The clamped scalar.
    """
    return max(lo, min(hi, value))


def safe_acos(cosine: float) -> float:
    """Return ``acos`` of *cosine* after clamping it into [-1, 1].

    Round-off can push a computed cosine a few ulps outside the domain of
    ``acos``; clamping keeps the result finite.

    Args:
        cosine: Cosine value, possibly slightly out of range.

    Returns:
        Angle in radians within [0, pi].
    """
    return math.acos(clamp(cosine, -1.0, 1.0))
