"""Tests for the CurvePoint model and EasingFunction protocol."""

import math

from pydantic import ValidationError
import pytest

from eased.core.curves.functions import cubic_in
from eased.core.curves.models import CurvePoint, EasingFunction


class TestCurvePoint:
    """Tests for CurvePoint model."""

    def test_accepts_valid_values(self) -> None:
        """Test CurvePoint accepts t at both ends of [0, 1]."""
        p1 = CurvePoint(t=0.0, v=0.0)
        assert p1.t == 0.0
        assert p1.v == 0.0

        p2 = CurvePoint(t=1.0, v=1.0)
        assert p2.t == 1.0
        assert p2.v == 1.0

    def test_rejects_t_below_zero(self) -> None:
        """Test CurvePoint rejects t < 0."""
        with pytest.raises(ValidationError) as exc_info:
            CurvePoint(t=-0.1, v=0.5)
        assert "t" in str(exc_info.value).lower()

    def test_rejects_t_above_one(self) -> None:
        """Test CurvePoint rejects t > 1."""
        with pytest.raises(ValidationError) as exc_info:
            CurvePoint(t=1.1, v=0.5)
        assert "t" in str(exc_info.value).lower()

    def test_allows_v_outside_unit_range(self) -> None:
        """Overshooting curves produce values below 0 and above 1."""
        assert CurvePoint(t=0.2, v=-0.35).v == -0.35
        assert CurvePoint(t=0.8, v=1.27).v == 1.27

    def test_allows_nan_value(self) -> None:
        """Values are stored exactly as computed, NaN included."""
        assert math.isnan(CurvePoint(t=0.5, v=math.nan).v)

    def test_is_frozen(self) -> None:
        """Test CurvePoint is immutable."""
        point = CurvePoint(t=0.5, v=0.5)
        with pytest.raises(ValidationError):
            point.v = 0.7  # type: ignore[misc]

    def test_rejects_extra_fields(self) -> None:
        with pytest.raises(ValidationError):
            CurvePoint(t=0.5, v=0.5, curve="linear")  # type: ignore[call-arg]

    def test_json_round_trip(self) -> None:
        """Test CurvePoint serializes and reloads from JSON."""
        point = CurvePoint(t=0.25, v=0.125)
        assert CurvePoint.model_validate_json(point.model_dump_json()) == point


class TestEasingFunction:
    """Plain functions and lambdas satisfy the protocol."""

    def test_catalog_function(self) -> None:
        easing: EasingFunction = cubic_in
        assert easing(0.5) == 0.125

    def test_lambda(self) -> None:
        easing: EasingFunction = lambda t: 1.0 - t  # noqa: E731
        assert easing(0.25) == 0.75
