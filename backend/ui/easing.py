"""
Cubic-bézier timing curves.

Same parametrisation as CSS `cubic-bezier(x1, y1, x2, y2)`: the curve runs
from (0, 0) to (1, 1) with two control points, x is elapsed time and y is
progress. Solving for y at a given x uses Newton's method with a bisection
fallback.
"""

from __future__ import annotations

from dataclasses import dataclass

_NEWTON_ITERATIONS = 8
_EPSILON = 1e-7


@dataclass(frozen=True)
class CubicBezier:
    """A timing curve. Call it with a time fraction in [0, 1] to get progress."""

    x1: float
    y1: float
    x2: float
    y2: float

    def __post_init__(self) -> None:
        if not (0.0 <= self.x1 <= 1.0 and 0.0 <= self.x2 <= 1.0):
            raise ValueError("cubic-bezier x control points must lie in [0, 1]")

    def _sample(self, t: float, p1: float, p2: float) -> float:
        # Bernstein form with P0 = 0 and P3 = 1
        a = 1.0 - 3.0 * p2 + 3.0 * p1
        b = 3.0 * p2 - 6.0 * p1
        c = 3.0 * p1
        return ((a * t + b) * t + c) * t

    def _slope_x(self, t: float) -> float:
        a = 1.0 - 3.0 * self.x2 + 3.0 * self.x1
        b = 3.0 * self.x2 - 6.0 * self.x1
        c = 3.0 * self.x1
        return (3.0 * a * t + 2.0 * b) * t + c

    def _solve_t(self, x: float) -> float:
        t = x
        for _ in range(_NEWTON_ITERATIONS):
            error = self._sample(t, self.x1, self.x2) - x
            if abs(error) < _EPSILON:
                return t
            slope = self._slope_x(t)
            if abs(slope) < 1e-6:
                break
            t -= error / slope

        lo, hi = 0.0, 1.0
        t = x
        while hi - lo > _EPSILON:
            current = self._sample(t, self.x1, self.x2)
            if abs(current - x) < _EPSILON:
                return t
            if current < x:
                lo = t
            else:
                hi = t
            t = (lo + hi) / 2.0
        return t

    def __call__(self, progress: float) -> float:
        if progress <= 0.0:
            return 0.0
        if progress >= 1.0:
            return 1.0
        return self._sample(self._solve_t(progress), self.y1, self.y2)


LINEAR = CubicBezier(0.0, 0.0, 1.0, 1.0)
EASE_OUT = CubicBezier(0.0, 0.0, 0.58, 1.0)
# Long soft tail used by the section reveal
REVEAL_EASE = CubicBezier(0.25, 0.25, 0.0, 1.0)


def interpolate(start: float, end: float, fraction: float) -> float:
    """Linear interpolation between two values."""
    return start + (end - start) * fraction
