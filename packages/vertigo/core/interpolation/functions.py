"""Concave and convex curve functions.

Both curves map normalized progress x in [0, 1] onto [0, 1] with
curve(0) == 0 and curve(1) == 1, and are strictly increasing in x.
The strength s (> 1) controls how pronounced the curvature is:

    concave(x) = log((s - 1) * x + 1) / log(s)
    convex(x)  = (s ** x - 1) / (s - 1)

The logarithm base cancels in the concave ratio; natural log is used
throughout.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from vertigo.core.interpolation.enums import Curvature
from vertigo.core.interpolation.errors import InvalidArgumentError

DEFAULT_STRENGTH = 24.0


def _check_strength(strength: float) -> None:
    if not strength > 1.0:
        raise InvalidArgumentError(f"strength must be bigger than 1, got {strength}")


def concave(x: float, strength: float = DEFAULT_STRENGTH) -> float:
    """Logarithmic curve: rises steeply near 0, flattens toward 1.

    Args:
        x: Raw progress in [0, 1].
        strength: Curve steepness (> 1).

    Returns:
        Curve value in [0, 1].

    Example:
        >>> round(concave(0.5, 24.0), 4)
        0.7947
    """
    _check_strength(strength)
    return math.log((strength - 1.0) * x + 1.0) / math.log(strength)


def convex(x: float, strength: float = DEFAULT_STRENGTH) -> float:
    """Power curve: stays flat near 0, rises steeply toward 1.

    Args:
        x: Raw progress in [0, 1].
        strength: Curve steepness (> 1).

    Returns:
        Curve value in [0, 1].

    Example:
        >>> round(convex(0.5, 24.0), 4)
        0.1695
    """
    _check_strength(strength)
    return (strength**x - 1.0) / (strength - 1.0)


def evaluate_curve(x: float, curvature: Curvature, strength: float = DEFAULT_STRENGTH) -> float:
    """Evaluate the curve selected by curvature at x."""
    if curvature is Curvature.CONCAVE:
        return concave(x, strength)
    return convex(x, strength)


def evaluate_curve_array(
    x: NDArray[np.float64] | list[float],
    curvature: Curvature,
    strength: float = DEFAULT_STRENGTH,
) -> NDArray[np.float64]:
    """Vectorized evaluate_curve over an array of raw progress values.

    Args:
        x: Raw progress values in [0, 1].
        curvature: Curve family.
        strength: Curve steepness (> 1).

    Returns:
        Array of curve values with the same shape as x.

    Raises:
        InvalidArgumentError: If strength <= 1 or any x is outside [0, 1].
    """
    _check_strength(strength)
    arr = np.asarray(x, dtype=np.float64)
    if arr.size and (np.any(arr < 0.0) or np.any(arr > 1.0) or np.any(np.isnan(arr))):
        raise InvalidArgumentError("x values must be in [0, 1]")

    if curvature is Curvature.CONCAVE:
        result: NDArray[np.float64] = np.log((strength - 1.0) * arr + 1.0) / np.log(strength)
    else:
        result = (np.power(strength, arr) - 1.0) / (strength - 1.0)
    return result
