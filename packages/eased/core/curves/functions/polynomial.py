"""Polynomial easing curves: linear, quadratic, cubic, quartic and quintic.

Every function takes a normalized progress ``t`` and returns the eased value.
Nothing is clamped or validated; inputs outside [0, 1] extrapolate the same
polynomial.
"""


def linear(t: float) -> float:
    """Modeled after the line y = x."""
    return t


def quadratic_in(t: float) -> float:
    """Modeled after the parabola y = x^2."""
    return t * t


def quadratic_out(t: float) -> float:
    """Modeled after the parabola y = -x^2 + 2x."""
    return -(t * (t - 2.0))


def quadratic_in_out(t: float) -> float:
    """Modeled after the piecewise quadratic.

        y = (1/2)((2x)^2)             ; [0, 0.5)
        y = -(1/2)((2x-1)*(2x-3) - 1) ; [0.5, 1]

    Example:
        >>> quadratic_in_out(0.25)
        0.125
    """
    if t < 0.5:
        return 2.0 * t * t
    return (-2.0 * t * t) + (4.0 * t) - 1.0


def cubic_in(t: float) -> float:
    """Modeled after the cubic y = x^3."""
    return t * t * t


def cubic_out(t: float) -> float:
    """Modeled after the cubic y = (x - 1)^3 + 1."""
    f = t - 1.0
    return f * f * f + 1.0


def cubic_in_out(t: float) -> float:
    """Modeled after the piecewise cubic.

        y = (1/2)((2x)^3)       ; [0, 0.5)
        y = (1/2)((2x-2)^3 + 2) ; [0.5, 1]

    Example:
        >>> cubic_in_out(0.25)
        0.0625
    """
    if t < 0.5:
        return 4.0 * t * t * t
    f = (2.0 * t) - 2.0
    return 0.5 * f * f * f + 1.0


def quartic_in(t: float) -> float:
    """Modeled after the quartic y = x^4."""
    return t * t * t * t


def quartic_out(t: float) -> float:
    """Modeled after the quartic y = 1 - (x - 1)^4.

    Evaluated as (x - 1)^3 * (1 - x) + 1. The (1 - x) factor multiplies;
    adding it instead would give quartic_out(0) == 1.
    """
    f = t - 1.0
    return f * f * f * (1.0 - t) + 1.0


def quartic_in_out(t: float) -> float:
    """Modeled after the piecewise quartic.

        y = (1/2)((2x)^4)        ; [0, 0.5)
        y = -(1/2)((2x-2)^4 - 2) ; [0.5, 1]
    """
    if t < 0.5:
        return 8.0 * t * t * t * t
    f = t - 1.0
    return -8.0 * f * f * f * f + 1.0


def quintic_in(t: float) -> float:
    """Modeled after the quintic y = x^5."""
    return t * t * t * t * t


def quintic_out(t: float) -> float:
    """Modeled after the quintic y = (x - 1)^5 + 1."""
    f = t - 1.0
    return f * f * f * f * f + 1.0


def quintic_in_out(t: float) -> float:
    """Modeled after the piecewise quintic.

        y = (1/2)((2x)^5)       ; [0, 0.5)
        y = (1/2)((2x-2)^5 + 2) ; [0.5, 1]
    """
    if t < 0.5:
        return 16.0 * t * t * t * t * t
    f = (2.0 * t) - 2.0
    return 0.5 * f * f * f * f * f + 1.0
