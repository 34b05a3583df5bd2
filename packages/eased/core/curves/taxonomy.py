"""Curve taxonomy and classification system.

Categorizes every curve by family and variant, and records which curves
leave [0, 1] and which are guaranteed non-decreasing.
"""

from __future__ import annotations

from enum import Enum

from eased.core.curves.library import CURVE_ALIASES, CurveLibrary


class CurveFamily(str, Enum):
    """Curve family classification.

    Groups curves by the formula they are built from.
    """

    LINEAR = "linear"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"
    QUARTIC = "quartic"
    QUINTIC = "quintic"
    SINUSOIDAL = "sinusoidal"
    CIRCULAR = "circular"
    EXPONENTIAL = "exponential"
    ELASTIC = "elastic"  # Damped oscillation
    BACK = "back"  # Anticipation/overshoot
    BOUNCE = "bounce"  # Piecewise parabolas


class CurveVariant(str, Enum):
    """Where a curve's acceleration happens."""

    IDENTITY = "identity"  # linear only
    IN = "in"  # Slow start, accelerates
    OUT = "out"  # Decelerates into the target
    IN_OUT = "in_out"  # Symmetric split at t = 0.5


def _classify(curve: CurveLibrary) -> tuple[CurveFamily, CurveVariant]:
    if curve is CurveLibrary.LINEAR:
        return CurveFamily.LINEAR, CurveVariant.IDENTITY
    family, _, variant = curve.value.partition("_")
    return CurveFamily(family), CurveVariant(variant)


CURVE_TAXONOMY: dict[CurveLibrary, tuple[CurveFamily, CurveVariant]] = {
    curve: _classify(curve) for curve in CurveLibrary
}

OVERSHOOTING_FAMILIES: frozenset[CurveFamily] = frozenset({CurveFamily.ELASTIC, CurveFamily.BACK})

MONOTONIC_CURVES: frozenset[CurveLibrary] = frozenset(
    {
        CurveLibrary.LINEAR,
        CurveLibrary.QUADRATIC_IN,
        CurveLibrary.QUADRATIC_OUT,
        CurveLibrary.CUBIC_IN,
        CurveLibrary.CUBIC_OUT,
        CurveLibrary.QUARTIC_IN,
        CurveLibrary.QUARTIC_OUT,
        CurveLibrary.QUINTIC_IN,
        CurveLibrary.QUINTIC_OUT,
        CurveLibrary.SINUSOIDAL_IN,
        CurveLibrary.SINUSOIDAL_OUT,
        CurveLibrary.CIRCULAR_IN,
        CurveLibrary.CIRCULAR_OUT,
    }
)


def _as_curve(curve: str | CurveLibrary) -> CurveLibrary:
    alias = CURVE_ALIASES.get(curve)
    if alias is not None:
        return alias
    try:
        return CurveLibrary(curve)
    except ValueError as exc:
        raise KeyError(curve) from exc


def get_curve_family(curve: str | CurveLibrary) -> CurveFamily:
    """Get the family classification for a curve.

    Args:
        curve: Curve to classify, as a CurveLibrary member, its value or an alias

    Returns:
        Curve family

    Raises:
        KeyError: If curve not in taxonomy
    """
    return CURVE_TAXONOMY[_as_curve(curve)][0]


def get_curve_variant(curve: str | CurveLibrary) -> CurveVariant:
    """Get the variant (in, out, in_out, identity) for a curve.

    Raises:
        KeyError: If curve not in taxonomy
    """
    return CURVE_TAXONOMY[_as_curve(curve)][1]


def is_overshooting(curve: str | CurveLibrary) -> bool:
    """Check if a curve can produce values outside [0, 1] for t in [0, 1]."""
    return get_curve_family(curve) in OVERSHOOTING_FAMILIES


def is_monotonic(curve: str | CurveLibrary) -> bool:
    """Check if a curve is non-decreasing over [0, 1].

    Raises:
        KeyError: If curve not in taxonomy
    """
    return _as_curve(curve) in MONOTONIC_CURVES
