"""Layout constants and color definitions."""

# Timing
FPS = 60

# The sketch draws everything shifted up by this many pixels.
ORIGIN_SHIFT_Y = -5

# Curve plot overlay
PLOT_W = 110
PLOT_H = 70
PLOT_PAD = 8
PLOT_SAMPLES = 60

# Colors
OUTLINE_COLOR = (0, 0, 0)
PLOT_BG = (15, 15, 25)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
