"""Dynamic easing curves: elastic, back and bounce.

Elastic and back curves leave [0, 1] on purpose (oscillation, anticipation
and overshoot). Bounce stays within [0, 1] and touches 1.0 at each
segment boundary.
"""

import math

from eased.core.utils.math import exp2, sin

_HALF_PI = math.pi / 2.0
_TWO_PI = 2.0 * math.pi

# Bounce-out breakpoints. Adjacent parabolas meet at y = 1 on each one.
_BOUNCE_SEGMENT_1 = 4.0 / 11.0
_BOUNCE_SEGMENT_2 = 8.0 / 11.0
_BOUNCE_SEGMENT_3 = 9.0 / 10.0


def elastic_in(t: float) -> float:
    """Modeled after the damped sine wave y = sin(13*2pi*x)*pow(2, 10 * (x - 1))."""
    return sin(13.0 * _TWO_PI * t) * exp2(10.0 * (t - 1.0))


def elastic_out(t: float) -> float:
    """Modeled after the phase-shifted damped sine y = sin(-13*2pi*(x+1))*pow(2, 10(x-1)).

    Shares the envelope of :func:`elastic_in`, so it starts near 0 and
    oscillates up to +-1 rather than settling at 1.
    """
    return sin(-13.0 * _TWO_PI * (t + 1.0)) * exp2(10.0 * (t - 1.0))


def elastic_in_out(t: float) -> float:
    """Modeled after the piecewise exponentially-damped sine wave.

        y = (1/2)*sin(13pi/2*(2*x))*pow(2, 10 * ((2*x) - 1))      ; [0, 0.5)
        y = (1/2)*(sin(-13pi/2*((2x-1)+1))*pow(2,-10(2*x-1)) + 2) ; [0.5, 1]
    """
    if t < 0.5:
        return 0.5 * sin(13.0 * _HALF_PI * (2.0 * t)) * exp2(10.0 * ((2.0 * t) - 1.0))
    return 0.5 * (
        sin(-13.0 * _HALF_PI * ((2.0 * t - 1.0) + 1.0)) * exp2(-10.0 * (2.0 * t - 1.0)) + 2.0
    )


def back_in(t: float) -> float:
    """Modeled after the overshooting cubic y = x^3-x*sin(x*pi)."""
    return t * t * t - t * sin(t * math.pi)


def back_out(t: float) -> float:
    """Modeled after overshooting cubic y = 1-((1-x)^3-(1-x)*sin((1-x)*pi))."""
    f = 1.0 - t
    return 1.0 - (f * f * f - f * sin(f * math.pi))


def back_in_out(t: float) -> float:
    """Modeled after the piecewise overshooting cubic function.

        y = (1/2)*((2x)^3-(2x)*sin(2*x*pi))           ; [0, 0.5)
        y = (1/2)*(1-((1-x)^3-(1-x)*sin((1-x)*pi))+1) ; [0.5, 1]

    The second half ends in a trailing ``+ 0.5``.
    """
    if t < 0.5:
        f = 2.0 * t
        return 0.5 * (f * f * f - f * sin(f * math.pi))
    f = 1.0 - (2.0 * t - 1.0)
    return 0.5 * (1.0 - (f * f * f - f * sin(f * math.pi))) + 0.5


def bounce_in(t: float) -> float:
    """Each bounce is modelled as a parabola; mirror image of :func:`bounce_out`."""
    return 1.0 - bounce_out(1.0 - t)


def bounce_out(t: float) -> float:
    """Each bounce is modelled as a parabola.

    Four segments split at 4/11, 8/11 and 9/10.

    Example:
        >>> bounce_out(0.0)
        0.0
        >>> round(bounce_out(4.0 / 11.0), 12)
        1.0
    """
    if t < _BOUNCE_SEGMENT_1:
        return (121.0 / 16.0) * t * t
    if t < _BOUNCE_SEGMENT_2:
        return (363.0 / 40.0) * t * t + (-99.0 / 10.0) * t + (17.0 / 5.0)
    if t < _BOUNCE_SEGMENT_3:
        return (4356.0 / 361.0) * t * t + (-35442.0 / 1805.0) * t + (16061.0 / 1805.0)
    return (54.0 / 5.0) * t * t + (-513.0 / 25.0) * t + (268.0 / 25.0)


def bounce_in_out(t: float) -> float:
    """Each bounce is modelled as a parabola; halves built from in and out."""
    if t < 0.5:
        return 0.5 * bounce_in(t * 2.0)
    return 0.5 * bounce_out(t * 2.0 - 1.0) + 0.5
