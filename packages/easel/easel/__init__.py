"""easel - A caller-driven easing sketch: one timeline, many curves."""

from easel.config import DEFAULT_MARKERS, SketchConfig, hsb
from easel.sketch import Sketch
from easel.timeline import Timeline
from easel.types import DrawInstruction, DrawMarker, FillCanvas, FrameContext, Marker

__all__ = [
    "Sketch",
    "SketchConfig",
    "Timeline",
    "Marker",
    "FrameContext",
    "FillCanvas",
    "DrawMarker",
    "DrawInstruction",
    "DEFAULT_MARKERS",
    "hsb",
]
