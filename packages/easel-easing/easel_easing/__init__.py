"""easel-easing - Easing curves and interpolation for the easel sketch."""
from __future__ import annotations

from easel_easing.easing import EASINGS, UnknownEasingError, get_easing, sample_curve
from easel_easing.interpolate import lerp

__all__ = ["EASINGS", "UnknownEasingError", "get_easing", "sample_curve", "lerp"]
