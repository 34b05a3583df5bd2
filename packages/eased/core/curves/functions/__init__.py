"""Flat catalog of easing functions.

Each function maps normalized progress ``t`` to an eased value. They are pure,
stateless and safe to call from any thread.
"""

from eased.core.curves.functions.dynamic import (
    back_in,
    back_in_out,
    back_out,
    bounce_in,
    bounce_in_out,
    bounce_out,
    elastic_in,
    elastic_in_out,
    elastic_out,
)
from eased.core.curves.functions.periodic import (
    circular_in,
    circular_in_out,
    circular_out,
    exponential_in,
    exponential_in_out,
    exponential_out,
    sin_in,
    sin_in_out,
    sin_out,
    sinusoidal_in,
    sinusoidal_in_out,
    sinusoidal_out,
)
from eased.core.curves.functions.polynomial import (
    cubic_in,
    cubic_in_out,
    cubic_out,
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
)

__all__ = [
    # Polynomial
    "linear",
    "quadratic_in",
    "quadratic_out",
    "quadratic_in_out",
    "cubic_in",
    "cubic_out",
    "cubic_in_out",
    "quartic_in",
    "quartic_out",
    "quartic_in_out",
    "quintic_in",
    "quintic_out",
    "quintic_in_out",
    # Periodic
    "sinusoidal_in",
    "sinusoidal_out",
    "sinusoidal_in_out",
    "sin_in",
    "sin_out",
    "sin_in_out",
    "circular_in",
    "circular_out",
    "circular_in_out",
    "exponential_in",
    "exponential_out",
    "exponential_in_out",
    # Dynamic
    "elastic_in",
    "elastic_out",
    "elastic_in_out",
    "back_in",
    "back_out",
    "back_in_out",
    "bounce_in",
    "bounce_out",
    "bounce_in_out",
]
