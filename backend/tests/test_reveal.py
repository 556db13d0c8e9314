"""Tests for the fade-in-on-view state machine."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from backend.ui.reveal import (
    IDENTITY,
    REVEAL_OFFSET,
    Rect,
    Reveal,
    RevealOptions,
    VisualStyle,
    hidden_style,
    parse_margin,
)

VIEWPORT = Rect(left=0, top=0, right=1200, bottom=800)


def _box(top: float, height: float = 200) -> Rect:
    return Rect(left=100, top=top, right=500, bottom=top + height)


@pytest.mark.parametrize(
    "direction,expected",
    [
        ("up", VisualStyle(x=0.0, y=REVEAL_OFFSET, opacity=0.0)),
        ("down", VisualStyle(x=0.0, y=-REVEAL_OFFSET, opacity=0.0)),
        ("left", VisualStyle(x=REVEAL_OFFSET, y=0.0, opacity=0.0)),
        ("right", VisualStyle(x=-REVEAL_OFFSET, y=0.0, opacity=0.0)),
        ("none", VisualStyle(x=0.0, y=0.0, opacity=0.0)),
    ],
)
def test_hidden_style_per_direction(direction, expected):
    assert hidden_style(direction) == expected
    assert Reveal(RevealOptions(direction=direction)).style_at(0.0) == expected


def test_defaults():
    options = RevealOptions()
    assert options.delay == 0.0
    assert options.duration == 0.5
    assert options.direction == "up"
    assert options.viewport_margin == "-50px"


def test_never_intersected_stays_hidden():
    reveal = Reveal()
    for t in range(100):
        assert reveal.observe(_box(top=2000 + t), VIEWPORT, now=float(t)) is False
    assert reveal.state == "hidden"
    assert reveal.style_at(10_000.0) == hidden_style("up")


def test_negative_margin_shrinks_viewport():
    """With -50px the element must be more than 50px inside the viewport."""
    reveal = Reveal()
    assert reveal.observe(_box(top=770), VIEWPORT, now=0.0) is False
    assert reveal.state == "hidden"
    assert reveal.observe(_box(top=740), VIEWPORT, now=1.0) is True
    assert reveal.state == "revealed"
    assert reveal.revealed_at == 1.0


def test_positive_margin_grows_viewport():
    reveal = Reveal(RevealOptions(viewport_margin="100px"))
    assert reveal.observe(_box(top=850), VIEWPORT, now=0.0) is True


def test_box_touching_viewport_edge_reveals():
    reveal = Reveal(RevealOptions(viewport_margin="0"))
    assert reveal.observe(Rect(left=0, top=800, right=1000, bottom=900), VIEWPORT, now=0.0) is True
    assert reveal.state == "revealed"


def test_box_one_pixel_past_edge_stays_hidden():
    reveal = Reveal(RevealOptions(viewport_margin="0"))
    assert reveal.observe(Rect(left=0, top=801, right=1000, bottom=900), VIEWPORT, now=0.0) is False


def test_reveal_fires_once():
    reveal = Reveal()
    assert reveal.observe(_box(top=300), VIEWPORT, now=1.0) is True

    # scroll away and back a few times
    for t in (2.0, 3.0, 4.0):
        assert reveal.observe(_box(top=5000), VIEWPORT, now=t) is False
        assert reveal.observe(_box(top=300), VIEWPORT, now=t + 0.5) is False

    assert reveal.state == "revealed"
    assert reveal.revealed_at == 1.0
    assert reveal.style_at(10.0) == IDENTITY


def test_transition_respects_delay_and_duration():
    reveal = Reveal(RevealOptions(delay=0.2, duration=0.5))
    reveal.observe(_box(top=300), VIEWPORT, now=10.0)

    assert reveal.style_at(10.1) == hidden_style("up")

    mid = reveal.style_at(10.45)
    assert 0.0 < mid.opacity < 1.0
    assert 0.0 < mid.y < REVEAL_OFFSET
    assert not reveal.is_settled(10.45)

    assert reveal.style_at(10.8) == IDENTITY
    assert reveal.is_settled(10.8)


def test_zero_duration_snaps_after_delay():
    reveal = Reveal(RevealOptions(delay=0.3, duration=0.0))
    reveal.observe(_box(top=300), VIEWPORT, now=0.0)
    assert reveal.style_at(0.2).opacity == 0.0
    assert reveal.style_at(0.3) == IDENTITY


@pytest.mark.parametrize(
    "margin,expected",
    [("-50px", -50.0), ("20px", 20.0), ("0", 0.0), (" 12.5px ", 12.5), (-8, -8.0)],
)
def test_parse_margin(margin, expected):
    assert parse_margin(margin) == expected


@pytest.mark.parametrize("margin", ["10%", "auto", "-50 px", ""])
def test_parse_margin_rejects_other_units(margin):
    with pytest.raises(ValueError):
        parse_margin(margin)


def test_options_reject_unknown_direction():
    with pytest.raises(ValidationError):
        RevealOptions(direction="diagonal")


def test_options_reject_negative_timing():
    with pytest.raises(ValidationError):
        RevealOptions(delay=-1.0)
