"""Tests for sinusoidal, circular and exponential easing curves."""

from __future__ import annotations

import math

import pytest

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


class TestSinusoidal:
    """Tests for sine-wave curves."""

    def test_in_quarter_wave(self) -> None:
        """sinusoidal_in follows sin((t - 1) * pi/2) + 1."""
        assert sinusoidal_in(0.5) == pytest.approx(1.0 - math.sqrt(0.5))

    def test_out_quarter_wave(self) -> None:
        """sinusoidal_out follows sin(t * pi/2)."""
        assert sinusoidal_out(0.5) == pytest.approx(math.sqrt(0.5))

    def test_in_out_half_wave(self) -> None:
        """sinusoidal_in_out follows 0.5 * (1 - cos(t * pi))."""
        assert sinusoidal_in_out(0.5) == pytest.approx(0.5)
        assert sinusoidal_in_out(0.25) == pytest.approx(0.5 * (1 - math.cos(math.pi / 4)))

    def test_short_aliases(self) -> None:
        """sin_* names refer to the same functions."""
        assert sin_in is sinusoidal_in
        assert sin_out is sinusoidal_out
        assert sin_in_out is sinusoidal_in_out

    def test_infinite_input_gives_nan(self) -> None:
        """sin(inf) is NaN rather than an exception."""
        assert math.isnan(sinusoidal_out(math.inf))
        assert math.isnan(sinusoidal_in_out(-math.inf))


class TestCircular:
    """Tests for quarter-circle curves."""

    def test_in(self) -> None:
        assert circular_in(0.6) == pytest.approx(0.2)

    def test_out(self) -> None:
        """circular_out is sqrt(2 - t) * t."""
        assert circular_out(0.5) == pytest.approx(math.sqrt(1.5) * 0.5)

    def test_in_out_meets_at_half(self) -> None:
        assert circular_in_out(0.5) == pytest.approx(0.5)
        assert circular_in_out(0.5 - 1e-12) == pytest.approx(0.5, abs=1e-5)

    def test_outside_domain_is_nan(self) -> None:
        """Square root of a negative yields NaN, not an exception."""
        assert math.isnan(circular_in(2.0))
        assert math.isnan(circular_out(3.0))


class TestExponential:
    """Tests for exponential curves and their boundary short-circuits."""

    def test_in_at_zero_is_exact(self) -> None:
        """exponential_in(0.0) is 0.0, not 2^-10."""
        assert exponential_in(0.0) == 0.0

    def test_in_near_zero_uses_formula(self) -> None:
        """Just above zero the formula applies (no tolerance window)."""
        assert exponential_in(1e-300) == pytest.approx(2.0**-10)

    def test_in_at_one(self) -> None:
        assert exponential_in(1.0) == 1.0

    def test_out_at_one_is_exact(self) -> None:
        """exponential_out(1.0) is exactly 1.0."""
        assert exponential_out(1.0) == 1.0

    def test_out_at_zero(self) -> None:
        assert exponential_out(0.0) == 0.0

    def test_in_out_boundaries_exact(self) -> None:
        assert exponential_in_out(0.0) == 0.0
        assert exponential_in_out(1.0) == 1.0

    def test_in_out_halves(self) -> None:
        """First half is 0.5 * 2^(20t - 10), second half mirrors it."""
        assert exponential_in_out(0.25) == pytest.approx(0.5 * 2.0**-5)
        assert exponential_in_out(0.75) == pytest.approx(1.0 - 0.5 * 2.0**-5)

    def test_in_out_stays_within_unit_range(self) -> None:
        values = [exponential_in_out(i / 100) for i in range(101)]
        assert all(0.0 <= v <= 1.0 for v in values)

    def test_large_input_saturates(self) -> None:
        """Overflowing powers give inf instead of raising."""
        assert exponential_in(1e6) == math.inf
        assert exponential_out(-1e6) == -math.inf
