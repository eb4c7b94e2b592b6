"""Configuration management for Vertigo."""

from vertigo.core.config.loader import detect_format, load_config, load_interpolator_config

__all__ = [
    "detect_format",
    "load_config",
    "load_interpolator_config",
]
