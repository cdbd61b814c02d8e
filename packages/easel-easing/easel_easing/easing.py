"""Easing functions mapping normalized time to eased progress.

All curves are total over the reals: values of t outside [0, 1] are
extrapolated by the same formula, never clamped.
"""
from __future__ import annotations

import math
from typing import Callable, Union

EasingFn = Callable[[float], float]

_BOUNCE_N1 = 7.5625
_BOUNCE_D1 = 2.75


class UnknownEasingError(KeyError):
    """Raised when an easing curve is looked up by a name that is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown easing {name!r}")


def linear(t: float) -> float:
    return t


def ease_out_sine(t: float) -> float:
    return math.sin(t * math.pi / 2)


def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def ease_out_bounce(t: float) -> float:
    n1 = _BOUNCE_N1
    d1 = _BOUNCE_D1
    # Boundary values fall into the next segment.
    if t < 1 / d1:
        return n1 * t * t
    if t < 2 / d1:
        u = t - 1.5 / d1
        return n1 * u * u + 0.75
    if t < 2.5 / d1:
        u = t - 2.25 / d1
        return n1 * u * u + 0.9375
    u = t - 2.625 / d1
    return n1 * u * u + 0.984375


EASINGS: dict[str, EasingFn] = {
    "linear": linear,
    "ease_out_sine": ease_out_sine,
    "ease_in_out_sine": ease_in_out_sine,
    "ease_in_out_cubic": ease_in_out_cubic,
    "ease_out_bounce": ease_out_bounce,
}


def get_easing(name: str) -> EasingFn:
    try:
        return EASINGS[name]
    except KeyError:
        raise UnknownEasingError(name) from None


def sample_curve(
    easing: Union[str, EasingFn], samples: int = 80
) -> list[tuple[float, float]]:
    """Evaluate a curve at samples + 1 evenly spaced points over [0, 1].

    Returns (t, eased) pairs, first at t=0 and last at t=1.
    """
    if samples <= 0:
        raise ValueError("samples must be positive")
    fn = get_easing(easing) if isinstance(easing, str) else easing
    points = []
    for i in range(samples + 1):
        t = i / samples
        points.append((t, fn(t)))
    return points
