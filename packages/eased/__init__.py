"""eased: closed-form easing curves over normalized progress.

Every curve is a plain function ``f(t) -> float``:

    >>> from eased import bounce_out, quadratic_in
    >>> quadratic_in(0.5)
    0.25
    >>> bounce_out(0.0)
    0.0
"""

from eased.core.curves import (
    EASING_FUNCTIONS,
    CurveLibrary,
    build_default_registry,
    get_curve,
)
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
    sin_in,
    sin_in_out,
    sin_out,
    sinusoidal_in,
    sinusoidal_in_out,
    sinusoidal_out,
)

__version__ = "0.1.0"

__all__ = [
    "EASING_FUNCTIONS",
    "CurveLibrary",
    "build_default_registry",
    "get_curve",
    "back_in",
    "back_in_out",
    "back_out",
    "bounce_in",
    "bounce_in_out",
    "bounce_out",
    "circular_in",
    "circular_in_out",
    "circular_out",
    "cubic_in",
    "cubic_in_out",
    "cubic_out",
    "elastic_in",
    "elastic_in_out",
    "elastic_out",
    "exponential_in",
    "exponential_in_out",
    "exponential_out",
    "linear",
    "quadratic_in",
    "quadratic_in_out",
    "quadratic_out",
    "quartic_in",
    "quartic_in_out",
    "quartic_out",
    "quintic_in",
    "quintic_in_out",
    "quintic_out",
    "sin_in",
    "sin_in_out",
    "sin_out",
    "sinusoidal_in",
    "sinusoidal_in_out",
    "sinusoidal_out",
]
