"""Curve semantics helpers.

Inspection helpers for sampled curves: value range, monotonicity, how far a
curve leaves [0, 1], and the mismatch across an in_out curve's split point.
"""

from __future__ import annotations

import math

from eased.core.curves.models import CurvePoint, EasingFunction


def value_range(points: list[CurvePoint]) -> tuple[float, float]:
    """Return the (min, max) of curve values.

    Raises:
        ValueError: If points is empty.

    Example:
        >>> value_range([CurvePoint(t=0.0, v=0.0), CurvePoint(t=1.0, v=1.2)])
        (0.0, 1.2)
    """
    if not points:
        raise ValueError("points cannot be empty")

    values = [p.v for p in points]
    return min(values), max(values)


def is_non_decreasing(points: list[CurvePoint], tolerance: float = 0.0) -> bool:
    """Check that each value is >= the previous one (within tolerance).

    Args:
        points: Curve points ordered by t.
        tolerance: Allowed drop between consecutive values.

    Raises:
        ValueError: If points is empty.
    """
    if not points:
        raise ValueError("points cannot be empty")

    return all(b.v >= a.v - tolerance for a, b in zip(points, points[1:]))


def overshoot(points: list[CurvePoint]) -> float:
    """Largest distance any value lies outside [0, 1].

    Returns 0.0 when every value is contained.

    Raises:
        ValueError: If points is empty.

    Example:
        >>> overshoot([CurvePoint(t=0.0, v=-0.1), CurvePoint(t=1.0, v=1.0)])
        0.1
    """
    low, high = value_range(points)
    return max(0.0, -low, high - 1.0)


def midpoint_gap(easing: EasingFunction, epsilon: float | None = None) -> float:
    """Mismatch between the two halves of an in_out curve at t = 0.5.

    in_out curves switch formula at 0.5 (strict less-than), so the value
    just below 0.5 comes from the first half and the value at 0.5 from the
    second.

    Args:
        easing: Curve to probe.
        epsilon: Distance below 0.5 used for the left-hand value. If None,
            the largest float below 0.5 is used.

    Returns:
        Absolute difference between the left and right values.

    Raises:
        ValueError: If epsilon is not in (0, 0.5).

    Example:
        >>> from eased.core.curves.functions import cubic_in_out
        >>> midpoint_gap(cubic_in_out) < 1e-9
        True
    """
    if epsilon is None:
        left = math.nextafter(0.5, 0.0)
    elif 0.0 < epsilon < 0.5:
        left = 0.5 - epsilon
    else:
        raise ValueError("epsilon must be in (0, 0.5)")

    return abs(easing(0.5) - easing(left))
