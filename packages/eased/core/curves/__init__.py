"""Curve utilities and models."""

from eased.core.curves.library import EASING_FUNCTIONS, CurveLibrary
from eased.core.curves.models import CurvePoint, EasingFunction
from eased.core.curves.registry import (
    CurveDefinition,
    CurveRegistry,
    build_default_registry,
    get_curve,
    get_default_registry,
)
from eased.core.curves.sampling import sample_array, sample_curve, sample_uniform_grid
from eased.core.curves.taxonomy import CurveFamily, CurveVariant

__all__ = [
    "EASING_FUNCTIONS",
    "CurveDefinition",
    "CurveFamily",
    "CurveLibrary",
    "CurvePoint",
    "CurveRegistry",
    "CurveVariant",
    "EasingFunction",
    "build_default_registry",
    "get_curve",
    "get_default_registry",
    "sample_array",
    "sample_curve",
    "sample_uniform_grid",
]
