"""Sketch - frame step, marker registry, and cycle hooks."""

from __future__ import annotations

import logging

from easel_easing import get_easing, lerp

from easel.config import DEFAULT_MARKERS, SketchConfig, hsb
from easel.timeline import Timeline
from easel.types import (
    Color,
    CycleHook,
    DrawInstruction,
    DrawMarker,
    FillCanvas,
    FrameContext,
    Marker,
)

logger = logging.getLogger(__name__)

_DEFAULT_COLOR: Color = (255, 255, 255)


class Sketch:
    def __init__(self, config: SketchConfig | None = None) -> None:
        self._config = config if config is not None else SketchConfig()
        self._timeline = Timeline(self._config.duration)
        self._markers: list[Marker] = []
        self._cycle_hooks: list[CycleHook] = []
        self._frame_number = 0
        self._cycle_count = 0

    @classmethod
    def default(cls, config: SketchConfig | None = None) -> Sketch:
        """Sketch with the five reference markers registered."""
        sketch = cls(config)
        for easing, y, hue in DEFAULT_MARKERS:
            sketch.add_marker(easing, y, color=hsb(hue, 50, 100))
        return sketch

    @property
    def config(self) -> SketchConfig:
        return self._config

    @property
    def timeline(self) -> Timeline:
        return self._timeline

    @property
    def markers(self) -> tuple[Marker, ...]:
        return tuple(self._markers)

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def cycle_count(self) -> int:
        return self._cycle_count

    def add_marker(
        self,
        easing: str,
        y: float,
        color: Color = _DEFAULT_COLOR,
        name: str | None = None,
    ) -> Marker:
        get_easing(easing)
        marker = Marker(name=name or easing, easing=easing, y=y, color=color)
        self._markers.append(marker)
        logger.debug("registered marker %s (easing=%s, y=%s)", marker.name, easing, y)
        return marker

    def on_cycle(self, hook: CycleHook) -> None:
        self._cycle_hooks.append(hook)

    def advance_frame(self, delta_ms: float) -> list[DrawInstruction]:
        cfg = self._config
        self._timeline.advance(delta_ms)
        self._frame_number += 1
        t = self._timeline.current_progress()

        instructions: list[DrawInstruction] = [
            FillCanvas(
                color=cfg.background,
                alpha=cfg.trail_alpha,
                width=cfg.width,
                height=cfg.height,
            )
        ]
        for marker in self._markers:
            eased = get_easing(marker.easing)(t)
            instructions.append(
                DrawMarker(
                    name=marker.name,
                    color=marker.color,
                    x=lerp(cfg.start_x, cfg.end_x, eased),
                    y=marker.y,
                    diameter=cfg.diameter,
                    stroke_weight=cfg.stroke_weight,
                )
            )

        # Trailing reset: the completing frame has already rendered with t >= 1.
        if self._timeline.expired:
            elapsed = self._timeline.elapsed
            self._timeline.reset()
            self._cycle_count += 1
            logger.debug(
                "cycle %d complete at frame %d (elapsed=%.3fs, t=%.3f)",
                self._cycle_count,
                self._frame_number,
                elapsed,
                t,
            )
            ctx = FrameContext(
                frame_number=self._frame_number,
                elapsed=elapsed,
                progress=t,
                cycle=self._cycle_count,
            )
            for hook in self._cycle_hooks:
                hook(self, ctx)

        return instructions

    def restart(self) -> None:
        """Rewind to the start of a cycle without counting it as completed."""
        self._timeline.reset()
