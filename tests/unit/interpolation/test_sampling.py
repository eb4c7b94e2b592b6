"""Tests for curve and timeline sampling."""

from __future__ import annotations

import pytest

from vertigo.core.interpolation import (
    Curvature,
    Direction,
    Interpolator,
    InvalidArgumentError,
    sample_curve,
    sample_uniform_grid,
    simulate,
)


class TestSampleUniformGrid:
    """Tests for sample_uniform_grid function."""

    def test_includes_both_ends(self) -> None:
        assert sample_uniform_grid(5) == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])

    def test_two_samples(self) -> None:
        assert sample_uniform_grid(2) == [0.0, 1.0]

    def test_less_than_two_raises(self) -> None:
        with pytest.raises(ValueError, match="n must be >= 2"):
            sample_uniform_grid(1)


class TestSampleCurve:
    """Tests for sample_curve function."""

    @pytest.mark.parametrize("curvature", list(Curvature))
    def test_endpoints(self, curvature: Curvature) -> None:
        points = sample_curve(curvature, 24.0, 11)
        assert len(points) == 11
        assert points[0].t == 0.0
        assert points[0].v == pytest.approx(0.0)
        assert points[-1].t == 1.0
        assert points[-1].v == pytest.approx(1.0)

    def test_concave_front_loaded(self) -> None:
        points = sample_curve(Curvature.CONCAVE, 24.0, 3)
        assert points[1].v > 0.5

    def test_convex_back_loaded(self) -> None:
        points = sample_curve(Curvature.CONVEX, 24.0, 3)
        assert points[1].v < 0.5

    def test_invalid_strength_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            sample_curve(Curvature.CONCAVE, 1.0)


class TestSimulate:
    """Tests for simulate function."""

    def test_records_every_step(self, incremental_concave: Interpolator) -> None:
        states = simulate(incremental_concave, 0.25, 4)
        assert [s.raw_value for s in states] == pytest.approx([0.25, 0.5, 0.75, 1.0])
        assert incremental_concave.is_finished

    def test_mutates_interpolator(self, incremental_concave: Interpolator) -> None:
        simulate(incremental_concave, 0.1, 3)
        assert incremental_concave.raw_value == pytest.approx(0.3)

    def test_ping_pong_directions(self, ping_pong: Interpolator) -> None:
        states = simulate(ping_pong, 0.5, 4)
        assert [s.raw_value for s in states] == pytest.approx([0.5, 1.0, 0.5, 0.0])
        assert [s.direction for s in states] == [
            Direction.INCREMENTAL,
            Direction.INCREMENTAL,
            Direction.DECREMENTAL,
            Direction.DECREMENTAL,
        ]

    def test_zero_steps(self, incremental_concave: Interpolator) -> None:
        assert simulate(incremental_concave, 0.1, 0) == []

    def test_negative_steps_raises(self, incremental_concave: Interpolator) -> None:
        with pytest.raises(ValueError, match="steps must be >= 0"):
            simulate(incremental_concave, 0.1, -1)

    def test_negative_delta_raises(self, incremental_concave: Interpolator) -> None:
        with pytest.raises(InvalidArgumentError):
            simulate(incremental_concave, -0.1, 2)
