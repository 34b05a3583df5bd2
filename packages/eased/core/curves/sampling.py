"""Curve sampling infrastructure.

This module provides functions for sampling easing curves at uniform
intervals, either as CurvePoints or as a numpy array. Sampling never clamps:
overshooting curves keep their out-of-range values.
"""

import numpy as np

from eased.core.curves.models import CurvePoint, EasingFunction


def sample_uniform_grid(n: int, *, include_end: bool = False) -> list[float]:
    """Generate N evenly-spaced samples in [0, 1) or [0, 1].

    Returns N samples: [0.0, 1/N, 2/N, ..., (N-1)/N], or with include_end
    [0.0, 1/(N-1), ..., 1.0].

    Args:
        n: Number of samples to generate. Must be >= 2.
        include_end: If True, the last sample is exactly 1.0.

    Returns:
        List of N evenly-spaced float values.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_uniform_grid(4)
        [0.0, 0.25, 0.5, 0.75]
        >>> sample_uniform_grid(5, include_end=True)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    if include_end:
        return [i / (n - 1) for i in range(n)]
    return [i / n for i in range(n)]


def sample_curve(
    easing: EasingFunction,
    n_samples: int,
    *,
    include_end: bool = True,
) -> list[CurvePoint]:
    """Evaluate an easing function on a uniform grid.

    Args:
        easing: Easing function to evaluate.
        n_samples: Number of samples to generate (must be >= 2).
        include_end: If True (default), the grid ends at t = 1.0.

    Returns:
        List of CurvePoints, one per grid position.

    Raises:
        ValueError: If n_samples < 2.

    Example:
        >>> from eased.core.curves.functions import quadratic_in
        >>> [p.v for p in sample_curve(quadratic_in, 3)]
        [0.0, 0.25, 1.0]
    """
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")

    t_grid = sample_uniform_grid(n_samples, include_end=include_end)
    return [CurvePoint(t=t, v=easing(t)) for t in t_grid]


def sample_array(
    easing: EasingFunction,
    n_samples: int,
    *,
    include_end: bool = True,
) -> np.ndarray:
    """Evaluate an easing function on a uniform grid into a float64 array.

    Args:
        easing: Easing function to evaluate.
        n_samples: Number of samples to generate (must be >= 2).
        include_end: If True (default), the grid ends at t = 1.0.

    Returns:
        Array of shape (n_samples,) holding the eased values.

    Raises:
        ValueError: If n_samples < 2.
    """
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")

    t_grid = np.linspace(0.0, 1.0, n_samples, endpoint=include_end)
    return np.fromiter(
        (easing(float(t)) for t in t_grid),
        dtype=np.float64,
        count=n_samples,
    )
