"""Shared types for the easel sketch: markers, frame context, draw instructions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Union

Color = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class Marker:
    name: str
    easing: str
    y: float
    color: Color


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    elapsed: float
    progress: float
    cycle: int


@dataclass(frozen=True, slots=True)
class FillCanvas:
    """Translucent fill over the whole canvas.

    Emitted before the markers each frame instead of a full clear, so
    earlier marker positions fade out as trails.
    """

    color: Color
    alpha: int
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class DrawMarker:
    name: str
    color: Color
    x: float
    y: float
    diameter: float
    stroke_weight: float


DrawInstruction = Union[FillCanvas, DrawMarker]

if TYPE_CHECKING:
    from easel.sketch import Sketch

CycleHook = Callable[["Sketch", FrameContext], None]
