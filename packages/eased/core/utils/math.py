"""Math utilities for curve evaluation.

The :mod:`math` module raises where C's libm returns a non-finite value
(``sin(inf)``, ``sqrt(-1)``, an overflowing power). Curve functions evaluate
through these helpers so that any float input yields the IEEE 754 result
instead of an exception.
"""

from __future__ import annotations

import math


def sin(x: float) -> float:
    """Sine of x, NaN for infinite x.

    Example:
        >>> sin(0.0)
        0.0
        >>> sin(math.inf)
        nan
    """
    if math.isinf(x):
        return math.nan
    return math.sin(x)


def cos(x: float) -> float:
    """Cosine of x, NaN for infinite x."""
    if math.isinf(x):
        return math.nan
    return math.cos(x)


def sqrt(x: float) -> float:
    """Square root of x, NaN for negative x.

    Example:
        >>> sqrt(4.0)
        2.0
        >>> sqrt(-1.0)
        nan
    """
    if x < 0.0:
        return math.nan
    return math.sqrt(x)


def exp2(x: float) -> float:
    """Compute 2**x, saturating to inf on overflow.

    Example:
        >>> exp2(-1.0)
        0.5
        >>> exp2(1e6)
        inf
    """
    try:
        return 2.0**x
    except OverflowError:
        return math.inf
