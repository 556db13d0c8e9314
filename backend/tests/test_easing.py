"""Tests for cubic-bézier timing curves."""

from __future__ import annotations

import pytest

from backend.ui.easing import EASE_OUT, LINEAR, REVEAL_EASE, CubicBezier, interpolate


@pytest.mark.parametrize("curve", [LINEAR, EASE_OUT, REVEAL_EASE])
def test_curves_start_at_zero_and_end_at_one(curve):
    assert curve(0.0) == 0.0
    assert curve(1.0) == 1.0


@pytest.mark.parametrize("curve", [LINEAR, EASE_OUT, REVEAL_EASE])
def test_out_of_range_progress_is_clamped(curve):
    assert curve(-0.5) == 0.0
    assert curve(1.5) == 1.0


@pytest.mark.parametrize("curve", [LINEAR, EASE_OUT, REVEAL_EASE])
def test_curves_are_non_decreasing(curve):
    samples = [curve(i / 50) for i in range(51)]
    assert all(a <= b + 1e-9 for a, b in zip(samples, samples[1:]))


def test_linear_is_identity():
    for x in (0.1, 0.3, 0.5, 0.9):
        assert LINEAR(x) == pytest.approx(x, abs=1e-4)


def test_ease_out_front_loads_progress():
    """Ease-out moves faster at the start than linear."""
    assert EASE_OUT(0.5) > 0.5
    assert REVEAL_EASE(0.5) > 0.5


def test_x_control_points_must_be_in_unit_range():
    with pytest.raises(ValueError):
        CubicBezier(1.5, 0.0, 0.5, 1.0)


def test_interpolate():
    assert interpolate(40.0, 0.0, 0.0) == 40.0
    assert interpolate(40.0, 0.0, 0.25) == 30.0
    assert interpolate(40.0, 0.0, 1.0) == 0.0
