"""Hover-elevate primitive: lift and scale a card while the pointer is over it."""

from __future__ import annotations

from pydantic import BaseModel, Field

from backend.ui.easing import EASE_OUT, interpolate
from backend.ui.reveal import IDENTITY, VisualStyle

HOVER_LIFT = 5.0
HOVER_DURATION = 0.2


class HoverOptions(BaseModel):
    """Configuration for one hover card. Sent to the front-end as-is."""

    model_config = {"extra": "forbid", "frozen": True}

    scale: float = Field(default=1.02, gt=0.0)


class HoverElevate:
    """
    Tracks whether the pointer is over the element and eases between the
    resting and lifted styles.

    Each enter/leave starts a new transition from wherever the previous one
    had got to, so a quick in-and-out never jumps.
    """

    def __init__(self, options: HoverOptions | None = None):
        self.options = options or HoverOptions()
        self.hovered = False
        self._from = IDENTITY
        self._started_at: float | None = None

    @property
    def lifted(self) -> VisualStyle:
        return VisualStyle(y=-HOVER_LIFT, scale=self.options.scale)

    def _target(self) -> VisualStyle:
        return self.lifted if self.hovered else IDENTITY

    def _retarget(self, hovered: bool, now: float) -> None:
        if hovered == self.hovered:
            return
        self._from = self.style_at(now)
        self.hovered = hovered
        self._started_at = now

    def pointer_enter(self, now: float) -> None:
        self._retarget(True, now)

    def pointer_leave(self, now: float) -> None:
        self._retarget(False, now)

    def style_at(self, now: float) -> VisualStyle:
        target = self._target()
        if self._started_at is None:
            return target
        elapsed = now - self._started_at
        if elapsed >= HOVER_DURATION:
            return target
        fraction = EASE_OUT(max(elapsed, 0.0) / HOVER_DURATION)
        return VisualStyle(
            y=interpolate(self._from.y, target.y, fraction),
            scale=interpolate(self._from.scale, target.scale, fraction),
        )
