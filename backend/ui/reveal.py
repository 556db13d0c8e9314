"""
Fade-in-on-view primitive.

A revealed element starts displaced and transparent. The first time its
bounds intersect the viewport it animates once to its resting position and
full opacity, and it never goes back to hidden for the lifetime of the
instance.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field

from backend.ui.easing import REVEAL_EASE, interpolate

Direction = Literal["up", "down", "left", "right", "none"]

REVEAL_OFFSET = 40.0

_MARGIN_PATTERN = re.compile(r"^\s*(-?\d+(?:\.\d+)?)(px)?\s*$")


class RevealOptions(BaseModel):
    """Configuration for one revealed element. Sent to the front-end as-is."""

    model_config = {"extra": "forbid", "frozen": True}

    delay: float = Field(default=0.0, ge=0.0)
    duration: float = Field(default=0.5, ge=0.0)
    direction: Direction = "up"
    viewport_margin: str = "-50px"


@dataclass(frozen=True)
class VisualStyle:
    """Transform and opacity applied to an element."""

    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0
    opacity: float = 1.0


IDENTITY = VisualStyle()


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box in viewport coordinates (y grows downwards)."""

    left: float
    top: float
    right: float
    bottom: float

    def expanded(self, margin: float) -> Rect:
        """Grow the box by `margin` on every side (shrink when negative)."""
        return Rect(self.left - margin, self.top - margin, self.right + margin, self.bottom + margin)

    def intersects(self, other: Rect) -> bool:
        """Overlap test. Boxes that only share an edge count as intersecting."""
        return (
            self.left <= other.right
            and other.left <= self.right
            and self.top <= other.bottom
            and other.top <= self.bottom
        )


def parse_margin(margin: str | float | int) -> float:
    """
    Parse a viewport margin.

    Accepts numbers or CSS pixel lengths such as "-50px", "20px" or "0".
    """
    if isinstance(margin, int | float):
        return float(margin)
    match = _MARGIN_PATTERN.match(margin)
    if not match:
        raise ValueError(f"Unsupported viewport margin: {margin!r}")
    return float(match.group(1))


def hidden_style(direction: Direction) -> VisualStyle:
    """Starting style for a direction: displaced by REVEAL_OFFSET and transparent."""
    x = y = 0.0
    if direction == "up":
        y = REVEAL_OFFSET
    elif direction == "down":
        y = -REVEAL_OFFSET
    elif direction == "left":
        x = REVEAL_OFFSET
    elif direction == "right":
        x = -REVEAL_OFFSET
    return VisualStyle(x=x, y=y, opacity=0.0)


class Reveal:
    """
    Two-state machine: hidden -> revealed, triggered once by viewport entry.

    Time is passed in explicitly (seconds, any monotonic origin) so the
    machine can be driven by a real frame clock or by tests.
    """

    def __init__(self, options: RevealOptions | None = None):
        self.options = options or RevealOptions()
        self._margin = parse_margin(self.options.viewport_margin)
        self._hidden = hidden_style(self.options.direction)
        self._revealed_at: float | None = None

    @property
    def state(self) -> Literal["hidden", "revealed"]:
        return "hidden" if self._revealed_at is None else "revealed"

    @property
    def revealed_at(self) -> float | None:
        return self._revealed_at

    def observe(self, bounds: Rect, viewport: Rect, now: float) -> bool:
        """
        Report the element's current position.

        Returns True only for the observation that triggered the reveal.
        """
        if self._revealed_at is not None:
            return False
        if not bounds.intersects(viewport.expanded(self._margin)):
            return False
        self._revealed_at = now
        return True

    def progress_at(self, now: float) -> float:
        """Eased progress of the reveal transition in [0, 1]."""
        if self._revealed_at is None:
            return 0.0
        elapsed = now - self._revealed_at - self.options.delay
        if elapsed < 0:
            return 0.0
        if self.options.duration == 0 or elapsed >= self.options.duration:
            return 1.0
        return REVEAL_EASE(elapsed / self.options.duration)

    def style_at(self, now: float) -> VisualStyle:
        fraction = self.progress_at(now)
        return VisualStyle(
            x=interpolate(self._hidden.x, IDENTITY.x, fraction),
            y=interpolate(self._hidden.y, IDENTITY.y, fraction),
            opacity=interpolate(self._hidden.opacity, IDENTITY.opacity, fraction),
        )

    def is_settled(self, now: float) -> bool:
        return self.progress_at(now) >= 1.0
