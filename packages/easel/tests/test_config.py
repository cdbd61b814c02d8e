"""Tests for sketch configuration and colour conversion."""

import pytest
from easel.config import DEFAULT_MARKERS, SketchConfig, hsb


def test_reference_defaults():
    cfg = SketchConfig()
    assert (cfg.width, cfg.height) == (720, 450)
    assert cfg.duration == 1.2
    assert cfg.diameter == 60
    assert cfg.start_x == 50
    assert cfg.end_x == 670


def test_end_x_follows_width():
    cfg = SketchConfig(width=400)
    assert cfg.end_x == 350


@pytest.mark.parametrize(
    "kwargs",
    [
        {"duration": 0},
        {"duration": -1},
        {"width": 0},
        {"height": -10},
        {"diameter": 0},
        {"margin": -1},
        {"trail_alpha": 256},
        {"trail_alpha": -1},
    ],
)
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ValueError):
        SketchConfig(**kwargs)


def test_config_is_frozen():
    cfg = SketchConfig()
    with pytest.raises(AttributeError):
        cfg.duration = 2.0


def test_hsb_primaries():
    assert hsb(0, 100, 100) == (255, 0, 0)
    assert hsb(120, 100, 100) == (0, 255, 0)
    assert hsb(240, 100, 100) == (0, 0, 255)


def test_hsb_greys_and_tints():
    assert hsb(0, 0, 30) == (77, 77, 77)
    assert hsb(0, 50, 100) == (255, 128, 128)
    assert hsb(360, 100, 100) == hsb(0, 100, 100)


def test_default_markers_layout():
    assert [easing for easing, _, _ in DEFAULT_MARKERS] == [
        "linear",
        "ease_out_sine",
        "ease_in_out_sine",
        "ease_in_out_cubic",
        "ease_out_bounce",
    ]
    assert [y for _, y, _ in DEFAULT_MARKERS] == [50, 140, 230, 320, 410]
    assert [hue for _, _, hue in DEFAULT_MARKERS] == [0, 40, 80, 120, 160]
