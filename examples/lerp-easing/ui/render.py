"""Draw instruction renderer."""
from __future__ import annotations

from typing import Iterable

import pygame

from easel import DrawInstruction, DrawMarker, FillCanvas

from ui.constants import ORIGIN_SHIFT_Y, OUTLINE_COLOR


def render_instructions(
    canvas: pygame.Surface, instructions: Iterable[DrawInstruction]
) -> None:
    """Apply one frame of instructions to a persistent canvas.

    The canvas is never cleared: each FillCanvas only dims what is already
    there, which leaves trails behind the markers.
    """
    for inst in instructions:
        if isinstance(inst, FillCanvas):
            overlay = pygame.Surface((int(inst.width), int(inst.height)), pygame.SRCALPHA)
            overlay.fill((*inst.color, inst.alpha))
            canvas.blit(overlay, (0, 0))
        elif isinstance(inst, DrawMarker):
            draw_marker(canvas, inst)


def draw_marker(canvas: pygame.Surface, marker: DrawMarker) -> None:
    center = (int(marker.x), int(marker.y + ORIGIN_SHIFT_Y))
    radius = int(marker.diameter / 2)
    pygame.draw.circle(canvas, marker.color, center, radius)
    stroke = int(marker.stroke_weight)
    if stroke > 0:
        pygame.draw.circle(canvas, OUTLINE_COLOR, center, radius, stroke)
