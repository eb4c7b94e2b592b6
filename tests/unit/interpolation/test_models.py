"""Tests for interpolation models and enums."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from vertigo.core.interpolation import (
    Curvature,
    CurvePoint,
    Direction,
    InterpolatorConfig,
    InterpolatorState,
    RepeatMode,
)


class TestEnums:
    """Tests for the configuration enums."""

    def test_enum_values(self) -> None:
        """Enum values used by config files and CLI flags."""
        assert Direction.INCREMENTAL.value == "incremental"
        assert Direction.DECREMENTAL.value == "decremental"
        assert Curvature.CONCAVE.value == "concave"
        assert Curvature.CONVEX.value == "convex"
        assert RepeatMode.NO_REPEAT.value == "norepeat"
        assert RepeatMode.REPEAT.value == "repeat"
        assert RepeatMode.PING_PONG.value == "pingpong"

    def test_enum_is_string(self) -> None:
        """Enums compare equal to their string values."""
        assert isinstance(RepeatMode.PING_PONG, str)
        assert Curvature.CONVEX == "convex"

    def test_direction_boundaries(self) -> None:
        """Each direction knows its start and end value."""
        assert Direction.INCREMENTAL.start == 0.0
        assert Direction.INCREMENTAL.end == 1.0
        assert Direction.DECREMENTAL.start == 1.0
        assert Direction.DECREMENTAL.end == 0.0

    def test_direction_opposite(self) -> None:
        assert Direction.INCREMENTAL.opposite() is Direction.DECREMENTAL
        assert Direction.DECREMENTAL.opposite() is Direction.INCREMENTAL


class TestInterpolatorConfig:
    """Tests for InterpolatorConfig validation."""

    def test_defaults(self) -> None:
        config = InterpolatorConfig(direction="incremental", curvature="concave", interval=1.0)
        assert config.strength == 24.0
        assert config.repeat_mode is RepeatMode.NO_REPEAT

    def test_is_frozen(self) -> None:
        config = InterpolatorConfig(direction="incremental", curvature="concave", interval=1.0)
        with pytest.raises(ValidationError):
            config.interval = 2.0  # type: ignore[misc]

    def test_rejects_extra_fields(self) -> None:
        with pytest.raises(ValidationError, match="extra"):
            InterpolatorConfig(
                direction="incremental", curvature="concave", interval=1.0, speed=2.0
            )

    @pytest.mark.parametrize("interval", [0.0, -0.5, float("inf")])
    def test_rejects_bad_interval(self, interval: float) -> None:
        with pytest.raises(ValidationError, match="interval"):
            InterpolatorConfig(direction="incremental", curvature="concave", interval=interval)

    def test_rejects_bad_strength(self) -> None:
        with pytest.raises(ValidationError, match="strength"):
            InterpolatorConfig(
                direction="incremental", curvature="concave", interval=1.0, strength=1.0
            )

    def test_rejects_unknown_curvature(self) -> None:
        with pytest.raises(ValidationError, match="curvature"):
            InterpolatorConfig(direction="incremental", curvature="linear", interval=1.0)


class TestStateAndPoints:
    """Tests for InterpolatorState and CurvePoint."""

    def test_state_range_checked(self) -> None:
        with pytest.raises(ValidationError):
            InterpolatorState(raw_value=1.5, interpolated_value=0.5, direction="incremental")

    def test_curve_point_is_frozen(self) -> None:
        point = CurvePoint(t=0.5, v=0.7)
        with pytest.raises(ValidationError):
            point.v = 0.2  # type: ignore[misc]

    def test_curve_point_range_checked(self) -> None:
        with pytest.raises(ValidationError):
            CurvePoint(t=0.5, v=-0.1)
