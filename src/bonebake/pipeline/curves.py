"""Interpolation curves applied between two consecutive keyframes.

Every curve is expressed as a remapping of the normalised progress ``t`` in
``[0, 1]``; the value itself is always a linear blend at the remapped progress.
"""

from __future__ import annotations

from collections.abc import Callable

from bonebake.models.enums import CurveKind

# Control points of the symmetric ease-in-out timing curve: (0.42, 0) and (0.58, 1).
EASE_IN_OUT = (0.42, 0.0, 0.58, 1.0)

_NEWTON_ITERATIONS = 8
_BISECTION_ITERATIONS = 40
_EPSILON = 1e-7


def lerp(start: float, end: float, t: float) -> float:
    # Exact at both endpoints.
    return start * (1.0 - t) + end * t


def _linear(t: float) -> float:
    return t


def _smoothstep(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


def _step(t: float) -> float:
    return 1.0 if t >= 1.0 else 0.0


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Callable[[float], float]:
    """Return a timing function for the cubic bezier ``(0,0) (x1,y1) (x2,y2) (1,1)``.

    The curve's x(s) is inverted with a few Newton steps, falling back to
    bisection where the derivative flattens out.
    """
    cx = 3.0 * x1
    bx = 3.0 * (x2 - x1) - cx
    ax = 1.0 - cx - bx
    cy = 3.0 * y1
    by = 3.0 * (y2 - y1) - cy
    ay = 1.0 - cy - by

    def sample_x(s: float) -> float:
        return ((ax * s + bx) * s + cx) * s

    def sample_y(s: float) -> float:
        return ((ay * s + by) * s + cy) * s

    def slope_x(s: float) -> float:
        return (3.0 * ax * s + 2.0 * bx) * s + cx

    def solve_s(x: float) -> float:
        s = x
        for _ in range(_NEWTON_ITERATIONS):
            error = sample_x(s) - x
            if abs(error) < _EPSILON:
                return s
            slope = slope_x(s)
            if abs(slope) < 1e-6:
                break
            s -= error / slope

        lo, hi = 0.0, 1.0
        s = x
        for _ in range(_BISECTION_ITERATIONS):
            error = sample_x(s) - x
            if abs(error) < _EPSILON:
                break
            if error > 0:
                hi = s
            else:
                lo = s
            s = (lo + hi) * 0.5
        return s

    def timing(t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return sample_y(solve_s(t))

    return timing


_PROGRESS: dict[CurveKind, Callable[[float], float]] = {
    CurveKind.LINEAR: _linear,
    CurveKind.SMOOTHED: _smoothstep,
    CurveKind.EASED: cubic_bezier(*EASE_IN_OUT),
    CurveKind.STEP: _step,
}


def progress(curve: CurveKind | str, t: float) -> float:
    """Remap progress *t* through *curve*. Unknown curves are linear.

    String names are parsed like :class:`CurveKind` values, so wire names and
    member names are accepted in any case.
    """
    try:
        kind = CurveKind(curve)
    except ValueError:
        return _linear(t)
    return _PROGRESS[kind](t)


def evaluate(curve: CurveKind | str, start: float, end: float, t: float) -> float:
    """Blend from *start* to *end* at progress *t* along *curve*."""
    return lerp(start, end, progress(curve, t))
