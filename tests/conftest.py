"""Shared pytest fixtures for vertigo tests."""

from __future__ import annotations

import logging

import pytest

from vertigo.core.interpolation import Curvature, Direction, Interpolator, RepeatMode

# ============================================================================
# Interpolator Fixtures
# ============================================================================


@pytest.fixture
def incremental_concave() -> Interpolator:
    """Incremental concave interpolator with a 1s interval and no repeat."""
    return Interpolator(Direction.INCREMENTAL, Curvature.CONCAVE, interval=1.0)


@pytest.fixture
def decremental_convex() -> Interpolator:
    """Decremental convex interpolator with a 1s interval and no repeat."""
    return Interpolator(Direction.DECREMENTAL, Curvature.CONVEX, interval=1.0)


@pytest.fixture
def repeating() -> Interpolator:
    """Incremental concave interpolator with a 1s interval that wraps around."""
    return Interpolator(
        Direction.INCREMENTAL, Curvature.CONCAVE, interval=1.0, repeat_mode=RepeatMode.REPEAT
    )


@pytest.fixture
def ping_pong() -> Interpolator:
    """Incremental convex interpolator with a 1s interval that reflects."""
    return Interpolator(
        Direction.INCREMENTAL, Curvature.CONVEX, interval=1.0, repeat_mode=RepeatMode.PING_PONG
    )


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
