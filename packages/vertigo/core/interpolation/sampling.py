"""Curve and timeline sampling.

Provides uniform sampling of the concave/convex curves for previews, and a
deterministic stepping helper that drives an Interpolator with a fixed delta.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from vertigo.core.interpolation.enums import Curvature
from vertigo.core.interpolation.functions import DEFAULT_STRENGTH, evaluate_curve_array
from vertigo.core.interpolation.models import CurvePoint, InterpolatorState

if TYPE_CHECKING:
    from vertigo.core.interpolation.interpolator import Interpolator


def sample_uniform_grid(n: int) -> list[float]:
    """Generate N evenly-spaced samples in [0, 1], both ends included.

    Args:
        n: Number of samples to generate. Must be >= 2.

    Returns:
        List of N evenly-spaced float values from 0.0 to 1.0.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_uniform_grid(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return [float(t) for t in np.linspace(0.0, 1.0, n)]


def sample_curve(
    curvature: Curvature,
    strength: float = DEFAULT_STRENGTH,
    n_samples: int = 11,
) -> list[CurvePoint]:
    """Sample a curve at a uniform grid over [0, 1].

    Args:
        curvature: Curve family to sample.
        strength: Curve steepness (> 1).
        n_samples: Number of samples (must be >= 2).

    Returns:
        List of CurvePoints with v = curve(t).

    Raises:
        ValueError: If n_samples < 2.
        InvalidArgumentError: If strength <= 1.
    """
    t_grid = sample_uniform_grid(n_samples)
    values = evaluate_curve_array(t_grid, curvature, strength)
    return [CurvePoint(t=t, v=float(v)) for t, v in zip(t_grid, values, strict=True)]


def simulate(interpolator: Interpolator, delta: float, steps: int) -> list[InterpolatorState]:
    """Advance an interpolator by a fixed delta and record each resulting state.

    The interpolator passed in is mutated. No clock is read; timing is
    entirely given by delta.

    Args:
        interpolator: Interpolator to drive.
        delta: Seconds per step.
        steps: Number of advance() calls. Must be >= 0.

    Returns:
        One InterpolatorState per step, in order.

    Raises:
        ValueError: If steps is negative.
        InvalidArgumentError: If delta is negative or not finite.
    """
    if steps < 0:
        raise ValueError("steps must be >= 0")

    states: list[InterpolatorState] = []
    for _ in range(steps):
        interpolator.advance(delta)
        states.append(interpolator.snapshot())
    return states
