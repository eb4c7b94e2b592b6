"""Concave/convex interpolation for animation timing."""

from vertigo.core.interpolation.enums import Curvature, Direction, RepeatMode
from vertigo.core.interpolation.errors import InvalidArgumentError
from vertigo.core.interpolation.functions import (
    DEFAULT_STRENGTH,
    concave,
    convex,
    evaluate_curve,
    evaluate_curve_array,
)
from vertigo.core.interpolation.interpolator import Interpolator
from vertigo.core.interpolation.models import CurvePoint, InterpolatorConfig, InterpolatorState
from vertigo.core.interpolation.sampling import sample_curve, sample_uniform_grid, simulate

__all__ = [
    "DEFAULT_STRENGTH",
    "Curvature",
    "CurvePoint",
    "Direction",
    "Interpolator",
    "InterpolatorConfig",
    "InterpolatorState",
    "InvalidArgumentError",
    "RepeatMode",
    "concave",
    "convex",
    "evaluate_curve",
    "evaluate_curve_array",
    "sample_curve",
    "sample_uniform_grid",
    "simulate",
]
