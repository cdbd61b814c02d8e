"""Linear interpolation between two endpoints."""
from __future__ import annotations


def lerp(start: float, end: float, t: float) -> float:
    """Interpolate from start to end by weight t. Not clamped."""
    return start + (end - start) * t
