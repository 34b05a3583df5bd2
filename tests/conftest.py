"""Shared pytest fixtures for eased tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from eased.core.curves.models import CurvePoint
from eased.core.curves.registry import CurveRegistry, build_default_registry
from eased.core.curves.sampling import sample_uniform_grid

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Curve Fixtures
# ============================================================================


@pytest.fixture
def registry() -> CurveRegistry:
    """Fresh registry containing every built-in curve."""
    return build_default_registry()


@pytest.fixture
def fine_grid() -> list[float]:
    """1001 evenly spaced t values covering [0, 1] inclusive."""
    return sample_uniform_grid(1001, include_end=True)


@pytest.fixture
def ramp_up_points() -> list[CurvePoint]:
    """Create ascending ramp points."""
    return [
        CurvePoint(t=0.0, v=0.0),
        CurvePoint(t=0.5, v=0.5),
        CurvePoint(t=1.0, v=1.0),
    ]


@pytest.fixture
def overshoot_points() -> list[CurvePoint]:
    """Create points that dip below 0 and rise above 1."""
    return [
        CurvePoint(t=0.0, v=0.0),
        CurvePoint(t=0.25, v=-0.2),
        CurvePoint(t=0.75, v=1.1),
        CurvePoint(t=1.0, v=1.0),
    ]
