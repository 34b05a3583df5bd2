"""Sinusoidal, circular and exponential easing curves."""

import math

from eased.core.utils.math import cos, exp2, sin, sqrt

_HALF_PI = math.pi / 2.0


def sinusoidal_in(t: float) -> float:
    """Modeled after quarter-cycle of sine wave."""
    return sin((t - 1.0) * _HALF_PI) + 1.0


def sinusoidal_out(t: float) -> float:
    """Modeled after quarter-cycle of sine wave (different phase)."""
    return sin(t * _HALF_PI)


def sinusoidal_in_out(t: float) -> float:
    """Modeled after half sine wave."""
    return 0.5 * (1.0 - cos(t * math.pi))


# Short aliases
sin_in = sinusoidal_in
sin_out = sinusoidal_out
sin_in_out = sinusoidal_in_out


def circular_in(t: float) -> float:
    """Modeled after shifted quadrant IV of unit circle."""
    return 1.0 - sqrt(1.0 - t * t)


def circular_out(t: float) -> float:
    """Modeled after shifted quadrant II of unit circle."""
    return sqrt(2.0 - t) * t


def circular_in_out(t: float) -> float:
    """Modeled after the piecewise circular function.

        y = (1/2)(1 - sqrt(1 - 4x^2))           ; [0, 0.5)
        y = (1/2)(sqrt(-(2x - 3)*(2x - 1)) + 1) ; [0.5, 1]
    """
    if t < 0.5:
        return 0.5 * (1.0 - sqrt(1.0 - 4.0 * t * t))
    return 0.5 * (sqrt(-(2.0 * t - 3.0) * (2.0 * t - 1.0)) + 1.0)


def exponential_in(t: float) -> float:
    """Modeled after the exponential function y = 2^(10(x - 1)).

    The curve never reaches 0 on its own (2^-10 at x = 0), so t == 0 is
    returned unchanged. The check is exact equality, not a tolerance.

    Example:
        >>> exponential_in(0.0)
        0.0
        >>> exponential_in(1.0)
        1.0
    """
    if t == 0.0:
        return t
    return exp2(10.0 * (t - 1.0))


def exponential_out(t: float) -> float:
    """Modeled after the exponential function y = -2^(-10x) + 1.

    t == 1 is returned unchanged, mirroring :func:`exponential_in`.
    """
    if t == 1.0:
        return t
    return 1.0 - exp2(-10.0 * t)


def exponential_in_out(t: float) -> float:
    """Modeled after the piecewise exponential.

        y = (1/2)2^(10(2x - 1))         ; [0, 0.5)
        y = -(1/2)*2^(-10(2x - 1)) + 1  ; [0.5, 1]

    t == 0 and t == 1 are returned unchanged.
    """
    if t == 0.0 or t == 1.0:
        return t
    if t < 0.5:
        return 0.5 * exp2(20.0 * t - 10.0)
    return -0.5 * exp2(-20.0 * t + 10.0) + 1.0
