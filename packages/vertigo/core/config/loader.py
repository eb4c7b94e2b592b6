"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
import yaml

from vertigo.core.interpolation.errors import InvalidArgumentError, describe_validation_error
from vertigo.core.interpolation.models import InterpolatorConfig
from vertigo.core.utils.json import read_json

logger = logging.getLogger(__name__)

# Top-level key under which an interpolator config may be nested
INTERPOLATOR_KEY = "interpolator"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("config.json")
        'json'
        >>> detect_format("config.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Format is auto-detected from file extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            content = read_json(path)
        except ValueError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if content is None:
            content = {}

    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}, got {type(content).__name__}")

    return content


def load_interpolator_config(path: str | Path) -> InterpolatorConfig:
    """Load and validate an interpolator configuration.

    The fields may sit at the top level of the file or be nested under an
    "interpolator" key.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Validated InterpolatorConfig

    Raises:
        FileNotFoundError: If config file does not exist
        InvalidArgumentError: If the configuration values are invalid
        ValueError: If the file cannot be parsed

    Example:
        >>> config = load_interpolator_config("fade_in.yaml")
        >>> interp = Interpolator.from_config(config)
    """
    raw_config = load_config(path)
    if INTERPOLATOR_KEY in raw_config:
        raw_config = raw_config[INTERPOLATOR_KEY]

    try:
        config = InterpolatorConfig.model_validate(raw_config)
    except ValidationError as e:
        raise InvalidArgumentError(
            f"Invalid interpolator config in {path}: {describe_validation_error(e)}"
        ) from e

    logger.debug("Loaded interpolator config from %s: %s", path, config)
    return config
