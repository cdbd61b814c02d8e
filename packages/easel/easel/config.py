"""Sketch configuration and the reference marker layout."""

from __future__ import annotations

import colorsys
from dataclasses import dataclass

from easel.types import Color


def hsb(hue: float, saturation: float, brightness: float) -> Color:
    """Convert HSB on a 360/100/100 scale to an 8-bit RGB tuple."""
    r, g, b = colorsys.hsv_to_rgb(
        (hue % 360) / 360, saturation / 100, brightness / 100
    )
    return (int(r * 255 + 0.5), int(g * 255 + 0.5), int(b * 255 + 0.5))


@dataclass(frozen=True)
class SketchConfig:
    width: float = 720
    height: float = 450
    duration: float = 1.2  # seconds per cycle
    diameter: float = 60
    margin: float = 50
    stroke_weight: float = 4
    background: Color = hsb(0, 0, 30)
    trail_alpha: int = 26

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValueError("duration must be positive")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")
        if self.diameter <= 0:
            raise ValueError("diameter must be positive")
        if self.margin < 0:
            raise ValueError("margin must be non-negative")
        if not 0 <= self.trail_alpha <= 255:
            raise ValueError("trail_alpha must be in 0..255")

    @property
    def start_x(self) -> float:
        return self.margin

    @property
    def end_x(self) -> float:
        return self.width - self.margin


# (easing, y, hue) in draw order.
DEFAULT_MARKERS: list[tuple[str, float, float]] = [
    ("linear", 50, 0),
    ("ease_out_sine", 140, 40),
    ("ease_in_out_sine", 230, 80),
    ("ease_in_out_cubic", 320, 120),
    ("ease_out_bounce", 410, 160),
]
