"""Curve library: identifiers for the built-in easing curves."""

from __future__ import annotations

from enum import Enum

from eased.core.curves.functions import (
    back_in,
    back_in_out,
    back_out,
    bounce_in,
    bounce_in_out,
    bounce_out,
    circular_in,
    circular_in_out,
    circular_out,
    cubic_in,
    cubic_in_out,
    cubic_out,
    elastic_in,
    elastic_in_out,
    elastic_out,
    exponential_in,
    exponential_in_out,
    exponential_out,
    linear,
    quadratic_in,
    quadratic_in_out,
    quadratic_out,
    quartic_in,
    quartic_in_out,
    quartic_out,
    quintic_in,
    quintic_in_out,
    quintic_out,
    sinusoidal_in,
    sinusoidal_in_out,
    sinusoidal_out,
)
from eased.core.curves.models import EasingFunction


class CurveLibrary(str, Enum):
    """Identifiers for built-in curves.

    Each value is the name of the catalog function implementing the curve.
    """

    LINEAR = "linear"

    # Polynomial
    QUADRATIC_IN = "quadratic_in"
    QUADRATIC_OUT = "quadratic_out"
    QUADRATIC_IN_OUT = "quadratic_in_out"
    CUBIC_IN = "cubic_in"
    CUBIC_OUT = "cubic_out"
    CUBIC_IN_OUT = "cubic_in_out"
    QUARTIC_IN = "quartic_in"
    QUARTIC_OUT = "quartic_out"
    QUARTIC_IN_OUT = "quartic_in_out"
    QUINTIC_IN = "quintic_in"
    QUINTIC_OUT = "quintic_out"
    QUINTIC_IN_OUT = "quintic_in_out"

    # Periodic
    SINUSOIDAL_IN = "sinusoidal_in"
    SINUSOIDAL_OUT = "sinusoidal_out"
    SINUSOIDAL_IN_OUT = "sinusoidal_in_out"
    CIRCULAR_IN = "circular_in"
    CIRCULAR_OUT = "circular_out"
    CIRCULAR_IN_OUT = "circular_in_out"
    EXPONENTIAL_IN = "exponential_in"
    EXPONENTIAL_OUT = "exponential_out"
    EXPONENTIAL_IN_OUT = "exponential_in_out"

    # Dynamic - Elastic (oscillates outside [0, 1])
    ELASTIC_IN = "elastic_in"
    ELASTIC_OUT = "elastic_out"
    ELASTIC_IN_OUT = "elastic_in_out"

    # Dynamic - Back (anticipation/overshoot)
    BACK_IN = "back_in"
    BACK_OUT = "back_out"
    BACK_IN_OUT = "back_in_out"

    # Dynamic - Bounce
    BOUNCE_IN = "bounce_in"
    BOUNCE_OUT = "bounce_out"
    BOUNCE_IN_OUT = "bounce_in_out"


CURVE_FUNCTIONS: dict[CurveLibrary, EasingFunction] = {
    CurveLibrary.LINEAR: linear,
    CurveLibrary.QUADRATIC_IN: quadratic_in,
    CurveLibrary.QUADRATIC_OUT: quadratic_out,
    CurveLibrary.QUADRATIC_IN_OUT: quadratic_in_out,
    CurveLibrary.CUBIC_IN: cubic_in,
    CurveLibrary.CUBIC_OUT: cubic_out,
    CurveLibrary.CUBIC_IN_OUT: cubic_in_out,
    CurveLibrary.QUARTIC_IN: quartic_in,
    CurveLibrary.QUARTIC_OUT: quartic_out,
    CurveLibrary.QUARTIC_IN_OUT: quartic_in_out,
    CurveLibrary.QUINTIC_IN: quintic_in,
    CurveLibrary.QUINTIC_OUT: quintic_out,
    CurveLibrary.QUINTIC_IN_OUT: quintic_in_out,
    CurveLibrary.SINUSOIDAL_IN: sinusoidal_in,
    CurveLibrary.SINUSOIDAL_OUT: sinusoidal_out,
    CurveLibrary.SINUSOIDAL_IN_OUT: sinusoidal_in_out,
    CurveLibrary.CIRCULAR_IN: circular_in,
    CurveLibrary.CIRCULAR_OUT: circular_out,
    CurveLibrary.CIRCULAR_IN_OUT: circular_in_out,
    CurveLibrary.EXPONENTIAL_IN: exponential_in,
    CurveLibrary.EXPONENTIAL_OUT: exponential_out,
    CurveLibrary.EXPONENTIAL_IN_OUT: exponential_in_out,
    CurveLibrary.ELASTIC_IN: elastic_in,
    CurveLibrary.ELASTIC_OUT: elastic_out,
    CurveLibrary.ELASTIC_IN_OUT: elastic_in_out,
    CurveLibrary.BACK_IN: back_in,
    CurveLibrary.BACK_OUT: back_out,
    CurveLibrary.BACK_IN_OUT: back_in_out,
    CurveLibrary.BOUNCE_IN: bounce_in,
    CurveLibrary.BOUNCE_OUT: bounce_out,
    CurveLibrary.BOUNCE_IN_OUT: bounce_in_out,
}

# Alternate names accepted wherever a curve id is looked up.
CURVE_ALIASES: dict[str, CurveLibrary] = {
    "sin_in": CurveLibrary.SINUSOIDAL_IN,
    "sin_out": CurveLibrary.SINUSOIDAL_OUT,
    "sin_in_out": CurveLibrary.SINUSOIDAL_IN_OUT,
}

EASING_FUNCTIONS: dict[str, EasingFunction] = {
    curve.value: function for curve, function in CURVE_FUNCTIONS.items()
}
