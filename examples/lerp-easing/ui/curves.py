"""Easing curve plot renderer."""
from __future__ import annotations

import pygame

from easel import Marker
from easel_easing import get_easing, sample_curve

from ui.constants import ORIGIN_SHIFT_Y, PLOT_BG, PLOT_H, PLOT_PAD, PLOT_SAMPLES, PLOT_W, TEXT_DIM


def draw_curve_plot(
    surface: pygame.Surface,
    marker: Marker,
    x: int,
    y: int,
    current_t: float,
    font: pygame.font.Font,
) -> None:
    """Draw a marker's easing curve with a tracking dot."""
    pygame.draw.rect(surface, PLOT_BG, (x, y, PLOT_W, PLOT_H))

    plot_x = x + PLOT_PAD
    plot_y = y + PLOT_PAD
    plot_w = PLOT_W - 2 * PLOT_PAD
    plot_h = PLOT_H - 2 * PLOT_PAD

    # Axes
    pygame.draw.line(
        surface, TEXT_DIM, (plot_x, plot_y + plot_h), (plot_x + plot_w, plot_y + plot_h)
    )
    pygame.draw.line(surface, TEXT_DIM, (plot_x, plot_y + plot_h), (plot_x, plot_y))

    points = [
        (plot_x + t * plot_w, plot_y + plot_h - v * plot_h)
        for t, v in sample_curve(marker.easing, PLOT_SAMPLES)
    ]
    pygame.draw.lines(surface, marker.color, False, points, 2)

    # Moving dot
    if 0.0 <= current_t <= 1.0:
        v = get_easing(marker.easing)(current_t)
        dot = (int(plot_x + current_t * plot_w), int(plot_y + plot_h - v * plot_h))
        pygame.draw.circle(surface, (255, 255, 255), dot, 4)
        pygame.draw.circle(surface, marker.color, dot, 3)

    label = font.render(marker.name, True, TEXT_DIM)
    surface.blit(label, (x + PLOT_W + 6, y + PLOT_H // 2 - label.get_height() // 2))


def draw_curve_plots(
    surface: pygame.Surface,
    markers: tuple[Marker, ...],
    current_t: float,
    font: pygame.font.Font,
) -> None:
    """Draw one plot per marker, centered on the marker's lane."""
    for marker in markers:
        y = int(marker.y + ORIGIN_SHIFT_Y - PLOT_H // 2)
        draw_curve_plot(surface, marker, 8, y, current_t, font)
