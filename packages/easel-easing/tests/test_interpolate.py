"""Tests for position interpolation."""

import pytest
from easel_easing import lerp


def test_lerp_endpoints():
    assert lerp(50, 670, 0) == 50
    assert lerp(50, 670, 1) == 670


def test_lerp_midpoint():
    assert lerp(50, 670, 0.5) == 360


def test_lerp_not_clamped():
    """Weights beyond [0, 1] extrapolate past the endpoints."""
    assert lerp(50, 670, 1.25) == 825
    assert lerp(50, 670, -0.5) == -260


def test_lerp_reversed_endpoints():
    assert lerp(10, 0, 0.25) == pytest.approx(7.5)
