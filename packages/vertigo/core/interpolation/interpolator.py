"""Stateful concave/convex interpolator.

The interpolator advances a linear raw value in [0, 1] by caller-supplied
time deltas and maps it through a concave (logarithmic) or convex (power)
curve. It does not read a clock; callers invoke advance() once per frame
with their own delta time.

To preview the curves, plot
    y = log((a-1)x + 1) / log(a)  and  y = (a^x - 1) / (a - 1)
for a = 24 over x in [0, 1]. The upper graph is the concave curve and the
lower graph is the convex curve. Change a to modify strength.
"""

from __future__ import annotations

import logging
import math

from pydantic import ValidationError

from vertigo.core.interpolation.enums import Curvature, Direction, RepeatMode
from vertigo.core.interpolation.errors import InvalidArgumentError, describe_validation_error
from vertigo.core.interpolation.functions import DEFAULT_STRENGTH, evaluate_curve
from vertigo.core.interpolation.models import InterpolatorConfig, InterpolatorState

logger = logging.getLogger(__name__)


class Interpolator:
    """Time-stepped interpolator over a concave or convex curve.

    Instances are mutable and not safe for unsynchronized use from multiple
    threads.

    Args:
        direction: INCREMENTAL moves raw progress 0->1, DECREMENTAL 1->0.
        curvature: CONCAVE or CONVEX curve.
        interval: Seconds to traverse the full 0..1 range. Must be positive.
        strength: Curve steepness. Must be bigger than 1.
        repeat_mode: Behavior at the end boundary.

    Raises:
        InvalidArgumentError: If interval <= 0, strength <= 1, or an enum
            value is unknown.

    Example:
        >>> interp = Interpolator(Direction.INCREMENTAL, Curvature.CONVEX, interval=2.0)
        >>> interp.advance(1.0)
        >>> interp.raw_value
        0.5
    """

    def __init__(
        self,
        direction: Direction | str,
        curvature: Curvature | str,
        interval: float,
        strength: float = DEFAULT_STRENGTH,
        repeat_mode: RepeatMode | str = RepeatMode.NO_REPEAT,
    ) -> None:
        try:
            config = InterpolatorConfig(
                direction=direction,
                curvature=curvature,
                interval=interval,
                strength=strength,
                repeat_mode=repeat_mode,
            )
        except ValidationError as e:
            raise InvalidArgumentError(describe_validation_error(e)) from e

        self._direction = config.direction
        self._curvature = config.curvature
        self._interval = config.interval
        self._strength = config.strength
        self._repeat_mode = config.repeat_mode
        self._raw_value = 0.0
        self._interpolated_value = 0.0

        self.reset()

    @classmethod
    def from_config(cls, config: InterpolatorConfig) -> Interpolator:
        """Create an interpolator from a validated configuration."""
        return cls(
            direction=config.direction,
            curvature=config.curvature,
            interval=config.interval,
            strength=config.strength,
            repeat_mode=config.repeat_mode,
        )

    def reset(self) -> None:
        """Set both raw and interpolated values to the start of the direction."""
        # Both curves map 0 -> 0 and 1 -> 1 exactly
        self._raw_value = self._direction.start
        self._interpolated_value = self._direction.start
        logger.debug("Interpolator reset to %s (%s)", self._raw_value, self._direction.value)

    def advance(self, delta: float) -> None:
        """Progress raw value by delta seconds and recompute the interpolated value.

        Args:
            delta: Elapsed time in seconds. Must be finite and non-negative.

        Raises:
            InvalidArgumentError: If delta is negative or not finite, or if
                delta / interval overflows. State is left unchanged.
        """
        if not math.isfinite(delta) or delta < 0.0:
            raise InvalidArgumentError(f"delta must be a finite non-negative number, got {delta}")

        if self.is_finished:
            return

        step = delta / self._interval
        if not math.isfinite(step):
            raise InvalidArgumentError(
                f"delta {delta} over interval {self._interval} is not a finite step"
            )
        if self._direction is Direction.INCREMENTAL:
            raw = self._raw_value + step
        else:
            raw = self._raw_value - step

        if raw > 1.0 or raw < 0.0:
            raw = self._resolve_overshoot(raw)

        self._raw_value = raw
        self._interpolated_value = evaluate_curve(raw, self._curvature, self._strength)

    def _resolve_overshoot(self, raw: float) -> float:
        """Bring an out-of-range raw value back into [0, 1] per repeat mode.

        The excess past the boundary is preserved for REPEAT and PING_PONG.
        A delta spanning several intervals is folded in one pass, as if the
        value had wrapped or reflected at every boundary it crossed. An excess
        landing exactly on a whole number ends on a boundary, not past it.
        """
        if self._repeat_mode is RepeatMode.NO_REPEAT:
            logger.debug("Raw value reached end boundary %s", self._direction.end)
            return self._direction.end

        incremental = raw > 1.0
        excess = raw - 1.0 if incremental else -raw

        if self._repeat_mode is RepeatMode.REPEAT:
            frac = math.fmod(excess, 1.0)
            if incremental:
                wrapped = frac if frac > 0.0 else 1.0
            else:
                wrapped = 1.0 - frac if frac > 0.0 else 0.0
            logger.debug("Raw value wrapped from %.6f to %.6f", raw, wrapped)
            return wrapped

        # PING_PONG: the path repeats every two intervals. Crossing count is
        # ceil(excess); direction flips only when it is odd.
        m = math.fmod(excess, 2.0)
        if m == 0.0:
            reflected, flipped = (1.0, False) if incremental else (0.0, False)
        elif m <= 1.0:
            reflected, flipped = (1.0 - m, True) if incremental else (m, True)
        else:
            reflected, flipped = (m - 1.0, False) if incremental else (2.0 - m, False)

        if flipped:
            self._direction = self._direction.opposite()
        logger.debug("Raw value reflected to %.6f, now %s", reflected, self._direction.value)
        return reflected

    def set_raw_value(self, value: float) -> None:
        """Set raw value directly and recompute the interpolated value.

        Direction and repeat mode are left unchanged.

        Raises:
            InvalidArgumentError: If value is outside [0, 1]. State is unchanged.
        """
        if not (0.0 <= value <= 1.0):
            raise InvalidArgumentError(f"raw value must be between 0 and 1, got {value}")
        self._raw_value = float(value)
        self._interpolated_value = evaluate_curve(self._raw_value, self._curvature, self._strength)

    @property
    def strength(self) -> float:
        return self._strength

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def raw_value(self) -> float:
        return self._raw_value

    @property
    def interpolated_value(self) -> float:
        return self._interpolated_value

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def curvature(self) -> Curvature:
        return self._curvature

    @property
    def repeat_mode(self) -> RepeatMode:
        return self._repeat_mode

    @property
    def is_finished(self) -> bool:
        """True when a NO_REPEAT interpolator has reached its end boundary."""
        return self._repeat_mode is RepeatMode.NO_REPEAT and self._raw_value == self._direction.end

    @property
    def config(self) -> InterpolatorConfig:
        """Current configuration, reflecting any runtime reconfiguration.

        Built without validation, since the unsafe setters may have stored
        values a validated config would reject.
        """
        return InterpolatorConfig.model_construct(
            direction=self._direction,
            curvature=self._curvature,
            interval=self._interval,
            strength=self._strength,
            repeat_mode=self._repeat_mode,
        )

    def snapshot(self) -> InterpolatorState:
        """Return an immutable snapshot of the current state."""
        return InterpolatorState(
            raw_value=self._raw_value,
            interpolated_value=self._interpolated_value,
            direction=self._direction,
        )

    # The setters below skip validation against the current state and can
    # cause sudden jumps in the output. Use at your own risk.

    def set_interval(self, interval: float) -> None:
        """Set interval without validation."""
        logger.debug("Interval changed from %s to %s", self._interval, interval)
        self._interval = interval

    def set_direction(self, direction: Direction | str) -> None:
        """Set direction without resetting state."""
        direction = Direction(direction)
        logger.debug("Direction changed from %s to %s", self._direction.value, direction.value)
        self._direction = direction

    def set_curvature(self, curvature: Curvature | str) -> None:
        """Set curvature; the interpolated value updates on the next state change."""
        curvature = Curvature(curvature)
        logger.debug("Curvature changed from %s to %s", self._curvature.value, curvature.value)
        self._curvature = curvature

    def __repr__(self) -> str:
        return (
            f"Interpolator(direction={self._direction.value}, curvature={self._curvature.value}, "
            f"interval={self._interval}, strength={self._strength}, "
            f"repeat_mode={self._repeat_mode.value}, raw_value={self._raw_value:.6f}, "
            f"interpolated_value={self._interpolated_value:.6f})"
        )
