"""Test suite for vertigo.

Test Structure:
- unit/: Unit tests for individual components
  - interpolation/: Curve math, models, sampling and the Interpolator
  - config/: Config file loading
  - logging/: Logging configuration helpers
  - cli/: Command-line interface
- conftest.py: Shared fixtures
"""
