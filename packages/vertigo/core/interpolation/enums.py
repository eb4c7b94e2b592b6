"""Enumerations for interpolator configuration."""

from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """Direction in which raw progress moves on each time-step."""

    INCREMENTAL = "incremental"  # 0 -> 1
    DECREMENTAL = "decremental"  # 1 -> 0

    @property
    def start(self) -> float:
        """Boundary value the raw progress starts from."""
        return 0.0 if self is Direction.INCREMENTAL else 1.0

    @property
    def end(self) -> float:
        """Boundary value the raw progress moves toward."""
        return 1.0 if self is Direction.INCREMENTAL else 0.0

    def opposite(self) -> Direction:
        """Return the reversed direction."""
        if self is Direction.INCREMENTAL:
            return Direction.DECREMENTAL
        return Direction.INCREMENTAL


class Curvature(str, Enum):
    """Curve family used to map raw progress to the interpolated value.

    CONCAVE is logarithmic: fast initial change that flattens out.
    CONVEX is a power curve: flat start that accelerates toward the end.
    """

    CONCAVE = "concave"
    CONVEX = "convex"


class RepeatMode(str, Enum):
    """Behavior when raw progress crosses its end boundary."""

    NO_REPEAT = "norepeat"  # Stop at the end value
    REPEAT = "repeat"  # Wrap around to the start, keeping the excess
    PING_PONG = "pingpong"  # Reflect the excess and reverse direction
