"""Lerp Easing — five easing curves racing across a canvas.

Exercises easel and easel-easing. One shared timeline drives five markers;
each applies a different curve to the same progress value, and the canvas
is dimmed rather than cleared every frame so the markers leave trails.

Controls:
  Space   Pause / resume
  R       Restart the cycle
  C       Toggle curve plots
  Esc     Quit

Headless:
  python main.py --headless --frames 6 --dt 200
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from easel import DrawInstruction, DrawMarker, FillCanvas, Sketch, SketchConfig

from ui.constants import FPS, TEXT_COLOR
from ui.curves import draw_curve_plots
from ui.render import render_instructions

logger = logging.getLogger("lerp_easing")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Lerp Easing — easel easing curve demo")
    p.add_argument("--duration", type=float, default=1.2,
                   help="Seconds per cycle (default: 1.2)")
    p.add_argument("--width", type=int, default=720, help="Canvas width (default: 720)")
    p.add_argument("--height", type=int, default=450, help="Canvas height (default: 450)")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frame cap (default: {FPS})")
    p.add_argument("--headless", action="store_true",
                   help="print draw instructions instead of opening a window")
    p.add_argument("--frames", "-n", type=int, default=10,
                   help="frames to simulate in headless mode (default: 10)")
    p.add_argument("--dt", type=float, default=1000 / FPS,
                   help="frame delta in ms for headless mode (default: 1000/60)")
    p.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return p.parse_args()


def format_instruction(inst: DrawInstruction) -> str:
    if isinstance(inst, FillCanvas):
        return f"  fill   rgb{inst.color} a={inst.alpha} {inst.width:g}x{inst.height:g}"
    if isinstance(inst, DrawMarker):
        return (
            f"  marker {inst.name:<18} x={inst.x:8.2f} y={inst.y:6.1f} "
            f"d={inst.diameter:g} rgb{inst.color}"
        )
    return f"  {inst!r}"


def run_headless(sketch: Sketch, frames: int, dt: float) -> None:
    def report_cycle(s: Sketch, ctx) -> None:
        print(f"-- cycle {ctx.cycle} complete at frame {ctx.frame_number} (t={ctx.progress:.3f})")

    sketch.on_cycle(report_cycle)
    for _ in range(frames):
        instructions = sketch.advance_frame(dt)
        print(f"frame {sketch.frame_number}")
        for inst in instructions:
            print(format_instruction(inst))


def run_window(sketch: Sketch, fps: int) -> None:
    cfg = sketch.config
    pygame.init()
    screen = pygame.display.set_mode((int(cfg.width), int(cfg.height)))
    pygame.display.set_caption("Lerp Easing — easel demo")
    canvas = pygame.Surface(screen.get_size())
    canvas.fill(cfg.background)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 12)

    paused = False
    show_curves = False
    running = True

    while running:
        delta_ms = clock.tick(fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                    logger.info("paused" if paused else "resumed")
                elif event.key == pygame.K_r:
                    sketch.restart()
                    canvas.fill(cfg.background)
                elif event.key == pygame.K_c:
                    show_curves = not show_curves

        # --- Frame ---
        if not paused:
            render_instructions(canvas, sketch.advance_frame(delta_ms))

        # --- Render ---
        screen.blit(canvas, (0, 0))
        if show_curves:
            draw_curve_plots(
                screen, sketch.markers, sketch.timeline.current_progress(), font
            )
        status = f"cycle {sketch.cycle_count}  {'PAUSED' if paused else ''}"
        screen.blit(font.render(status, True, TEXT_COLOR), (8, int(cfg.height) - 18))

        pygame.display.flip()

    pygame.quit()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = SketchConfig(
            width=args.width, height=args.height, duration=args.duration
        )
    except ValueError as exc:
        logger.error("invalid configuration: %s", exc)
        sys.exit(2)

    sketch = Sketch.default(config)
    logger.info(
        "%d markers, %.2fs cycle, %gx%g canvas",
        len(sketch.markers), config.duration, config.width, config.height,
    )

    if args.headless:
        run_headless(sketch, args.frames, args.dt)
    else:
        run_window(sketch, args.fps)


if __name__ == "__main__":
    main()
