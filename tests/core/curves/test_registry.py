"""Tests for the curve registry."""

import logging
import threading

import pytest

from eased.core.curves import registry as registry_module
from eased.core.curves.functions import linear, sinusoidal_in
from eased.core.curves.library import CurveLibrary
from eased.core.curves.registry import (
    CurveDefinition,
    CurveRegistry,
    build_default_registry,
    get_curve,
    get_default_registry,
)
from eased.core.curves.taxonomy import CurveFamily, CurveVariant


def _linear_definition() -> CurveDefinition:
    return CurveDefinition(
        curve_id="linear",
        function=linear,
        family=CurveFamily.LINEAR,
        variant=CurveVariant.IDENTITY,
        monotonic=True,
    )


def test_registry_register_and_get() -> None:
    registry = CurveRegistry()
    registry.register(_linear_definition())
    fetched = registry.get("linear")
    assert fetched.curve_id == "linear"
    assert fetched.function is linear


def test_registry_duplicate_register_raises() -> None:
    registry = CurveRegistry()
    registry.register(_linear_definition())
    with pytest.raises(ValueError, match="already registered"):
        registry.register(_linear_definition())


def test_registry_unknown_curve_raises(
    registry: CurveRegistry, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="eased.core.curves.registry"):
        with pytest.raises(ValueError, match="'wobble_in' is not registered"):
            registry.get("wobble_in")
    assert "wobble_in" in caplog.text


def test_registry_rejects_small_default_samples() -> None:
    with pytest.raises(ValueError, match="default_samples must be >= 2"):
        CurveRegistry(default_samples=1)


def test_default_registry_contents(registry: CurveRegistry) -> None:
    assert len(registry) == 31
    assert registry.ids() == [curve.value for curve in CurveLibrary]


def test_lookup_by_enum_and_alias(registry: CurveRegistry) -> None:
    by_name = registry.get("sinusoidal_in")
    assert registry.get(CurveLibrary.SINUSOIDAL_IN) is by_name
    assert registry.get("sin_in") is by_name
    assert by_name.function is sinusoidal_in


def test_contains(registry: CurveRegistry) -> None:
    assert "bounce_out" in registry
    assert CurveLibrary.BACK_IN in registry
    assert "sin_out" in registry
    assert "wobble" not in registry
    assert 3 not in registry


def test_definitions_carry_taxonomy(registry: CurveRegistry) -> None:
    back = registry.get("back_out")
    assert back.family is CurveFamily.BACK
    assert back.variant is CurveVariant.OUT
    assert back.overshoots
    assert not back.monotonic

    quad = registry.get("quadratic_in")
    assert quad.monotonic
    assert not quad.overshoots


def test_definitions_have_descriptions(registry: CurveRegistry) -> None:
    assert all(definition.description for definition in registry)


def test_by_family(registry: CurveRegistry) -> None:
    elastic = registry.by_family(CurveFamily.ELASTIC)
    assert [d.curve_id for d in elastic] == ["elastic_in", "elastic_out", "elastic_in_out"]


def test_evaluate_does_not_clamp(registry: CurveRegistry) -> None:
    assert registry.evaluate("quadratic_in", 0.5) == 0.25
    assert registry.evaluate("back_in", 0.25) < 0.0


def test_sample_uses_default_samples() -> None:
    registry = build_default_registry(default_samples=8)
    points = registry.sample("linear")
    assert len(points) == 8
    assert points[-1].t == 1.0


def test_sample_override_and_include_end() -> None:
    registry = build_default_registry(include_end=False)
    points = registry.sample("linear", n_samples=4)
    assert [p.t for p in points] == [0.0, 0.25, 0.5, 0.75]


def test_get_curve_returns_function() -> None:
    assert get_curve("linear") is linear
    assert get_curve(CurveLibrary.SINUSOIDAL_IN) is sinusoidal_in
    with pytest.raises(ValueError, match="is not registered"):
        get_curve("nope")


def test_default_registry_built_once(monkeypatch: pytest.MonkeyPatch) -> None:
    """Concurrent first use builds exactly one shared registry."""
    monkeypatch.setattr(registry_module, "_default_registry", None)
    results: list[CurveRegistry] = []

    def worker() -> None:
        results.append(get_default_registry())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 8
    assert all(result is results[0] for result in results)
