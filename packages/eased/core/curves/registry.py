"""Curve registry: lookup, evaluation and sampling by curve id."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from dataclasses import dataclass

from eased.core.curves.library import CURVE_ALIASES, CURVE_FUNCTIONS, CurveLibrary
from eased.core.curves.models import CurvePoint, EasingFunction
from eased.core.curves.sampling import sample_curve
from eased.core.curves.taxonomy import (
    CurveFamily,
    CurveVariant,
    get_curve_family,
    get_curve_variant,
    is_monotonic,
    is_overshooting,
)

logger = logging.getLogger(__name__)

_DEFAULT_SAMPLES = 64


@dataclass(frozen=True)
class CurveDefinition:
    """Registry entry for one easing curve."""

    curve_id: str
    function: EasingFunction
    family: CurveFamily
    variant: CurveVariant
    overshoots: bool = False
    monotonic: bool = False
    description: str | None = None


class CurveRegistry:
    """Registry of easing curves keyed by curve id.

    Lookups accept a plain string, a CurveLibrary member or one of the
    short aliases (``sin_in`` for ``sinusoidal_in``).
    """

    def __init__(self, default_samples: int = _DEFAULT_SAMPLES, include_end: bool = True) -> None:
        if default_samples < 2:
            raise ValueError("default_samples must be >= 2")
        self._registry: dict[str, CurveDefinition] = {}
        self.default_samples = default_samples
        self.include_end = include_end

    def register(self, definition: CurveDefinition) -> None:
        if definition.curve_id in self._registry:
            raise ValueError(f"Curve '{definition.curve_id}' already registered")
        self._registry[definition.curve_id] = definition
        logger.debug("Registered curve %s (%s)", definition.curve_id, definition.family.value)

    def get(self, curve_id: str | CurveLibrary) -> CurveDefinition:
        key = _normalize_curve_id(curve_id)
        try:
            return self._registry[key]
        except KeyError as exc:
            logger.warning("Lookup of unregistered curve '%s'", key)
            raise ValueError(f"Curve '{key}' is not registered") from exc

    def evaluate(self, curve_id: str | CurveLibrary, t: float) -> float:
        """Evaluate a curve at t.

        The value is returned exactly as the curve function computes it,
        without clamping.

        Example:
            >>> registry = build_default_registry()
            >>> registry.evaluate("quadratic_in", 0.5)
            0.25
        """
        return self.get(curve_id).function(t)

    def sample(
        self, curve_id: str | CurveLibrary, n_samples: int | None = None
    ) -> list[CurvePoint]:
        """Sample a curve on a uniform grid.

        Args:
            curve_id: Curve to sample.
            n_samples: Optional override for sample count (default_samples if None).

        Returns:
            List of CurvePoints.

        Raises:
            ValueError: If the curve is not registered or n_samples < 2.
        """
        definition = self.get(curve_id)
        sample_count = self.default_samples if n_samples is None else n_samples
        return sample_curve(definition.function, sample_count, include_end=self.include_end)

    def ids(self) -> list[str]:
        """Registered curve ids in registration order."""
        return list(self._registry)

    def by_family(self, family: CurveFamily) -> list[CurveDefinition]:
        return [d for d in self._registry.values() if d.family is family]

    def __contains__(self, curve_id: object) -> bool:
        if not isinstance(curve_id, str):
            return False
        return _normalize_curve_id(curve_id) in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    def __iter__(self) -> Iterator[CurveDefinition]:
        return iter(self._registry.values())


def _normalize_curve_id(curve_id: str | CurveLibrary) -> str:
    if isinstance(curve_id, CurveLibrary):
        return curve_id.value
    alias = CURVE_ALIASES.get(curve_id)
    if alias is not None:
        return alias.value
    return curve_id


def _summary(function: EasingFunction) -> str | None:
    doc = (function.__doc__ or "").strip()
    return doc.splitlines()[0] if doc else None


def build_default_registry(
    default_samples: int = _DEFAULT_SAMPLES, include_end: bool = True
) -> CurveRegistry:
    """Construct a registry containing all built-in curves."""
    registry = CurveRegistry(default_samples=default_samples, include_end=include_end)

    for curve, function in CURVE_FUNCTIONS.items():
        registry.register(
            CurveDefinition(
                curve_id=curve.value,
                function=function,
                family=get_curve_family(curve),
                variant=get_curve_variant(curve),
                overshoots=is_overshooting(curve),
                monotonic=is_monotonic(curve),
                description=_summary(function),
            )
        )

    return registry


_default_registry: CurveRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> CurveRegistry:
    """Return the shared registry of built-in curves, building it on first use."""
    global _default_registry

    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = build_default_registry()
    return _default_registry


def get_curve(curve_id: str | CurveLibrary) -> EasingFunction:
    """Look up a built-in easing function by id.

    Example:
        >>> get_curve("bounce_out")(0.0)
        0.0
    """
    return get_default_registry().get(curve_id).function
