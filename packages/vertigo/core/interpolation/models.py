"""Interpolator schema models.

This module defines the data primitives of the interpolation package:
- InterpolatorConfig: validated, immutable interpolator configuration
- InterpolatorState: immutable snapshot of an interpolator's state
- CurvePoint: a single normalized (t, v) sample of a curve

All models are frozen and validate on construction.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from vertigo.core.interpolation.enums import Curvature, Direction, RepeatMode
from vertigo.core.interpolation.functions import DEFAULT_STRENGTH


class InterpolatorConfig(BaseModel):
    """Configuration of an Interpolator.

    Attributes:
        direction: Whether raw progress moves 0->1 or 1->0.
        curvature: Curve family used for the interpolated value.
        interval: Seconds needed to traverse the full 0..1 range.
        strength: Curve steepness, must be bigger than 1.
        repeat_mode: Behavior when raw progress reaches its end boundary.

    Example:
        >>> config = InterpolatorConfig(direction="incremental", curvature="concave", interval=0.5)
        >>> config.strength
        24.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    direction: Direction = Field(..., description="Progress direction")
    curvature: Curvature = Field(..., description="Curve family")
    interval: float = Field(..., gt=0.0, description="Seconds to traverse 0..1")
    strength: float = Field(
        default=DEFAULT_STRENGTH, gt=1.0, description="Curve steepness (> 1)"
    )
    repeat_mode: RepeatMode = Field(
        default=RepeatMode.NO_REPEAT, description="Boundary behavior"
    )


class InterpolatorState(BaseModel):
    """Immutable snapshot of interpolator state."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    raw_value: float = Field(..., ge=0.0, le=1.0, description="Linear progress [0,1]")
    interpolated_value: float = Field(..., ge=0.0, le=1.0, description="Curve output [0,1]")
    direction: Direction


class CurvePoint(BaseModel):
    """A single point on a normalized curve.

    Attributes:
        t: Normalized raw progress in range [0, 1].
        v: Curve value in range [0, 1].
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, le=1.0, description="Normalized progress [0,1]")
    v: float = Field(..., ge=0.0, le=1.0, description="Curve value [0,1]")
