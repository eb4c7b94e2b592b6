"""Interpolation error types."""

from __future__ import annotations

from pydantic import ValidationError


class InvalidArgumentError(ValueError):
    """Raised when an interpolator receives an argument outside its contract.

    Subclasses ValueError so callers catching ValueError (including code that
    already handles pydantic validation failures) keep working.
    """


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a single readable message.

    Example:
        "interval: Input should be greater than 0; strength: Input should be greater than 1"
    """
    parts = []
    for detail in error.errors():
        loc = ".".join(str(p) for p in detail["loc"]) or "value"
        parts.append(f"{loc}: {detail['msg']}")
    return "; ".join(parts)
