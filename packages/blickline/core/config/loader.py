"""Reading blickline config files (YAML or JSON) into validated models."""

from __future__ import annotations

from collections.abc import Callable
import json
import logging
from pathlib import Path
from typing import Any, TextIO

from pydantic import ValidationError
import yaml

from blickline.core.config.models import AppConfig
from blickline.core.errors import InvalidConfigurationError
from blickline.core.utils.logging import configure_logging as _configure_root_logging

logger = logging.getLogger(__name__)

_SUFFIX_FORMATS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}

_PARSERS: dict[str, tuple[Callable[[TextIO], Any], type[Exception]]] = {
    "json": (json.load, json.JSONDecodeError),
    "yaml": (yaml.safe_load, yaml.YAMLError),
}


def detect_format(file_path: Path | str) -> str:
    """Map a config file suffix to its parser name.

    Raises:
        InvalidConfigurationError: For any suffix other than .json, .yaml, .yml.

    Example:
        >>> detect_format("blickline.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()
    try:
        return _SUFFIX_FORMATS[suffix]
    except KeyError:
        raise InvalidConfigurationError(f"Unsupported config format: {suffix}") from None


def load_config(path: str | Path) -> dict[str, Any]:
    """Parse a config file into a plain mapping, without validation.

    An empty YAML file yields an empty mapping.

    Raises:
        FileNotFoundError: If path does not exist.
        InvalidConfigurationError: If the suffix is unsupported, the file does
            not parse, or its top level is not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)
    parse, parse_error = _PARSERS[fmt]
    try:
        with path.open("r", encoding="utf-8") as f:
            content = parse(f)
    except parse_error as e:
        raise InvalidConfigurationError(f"Invalid {fmt.upper()} in {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise InvalidConfigurationError(
            f"Config root in {path} must be a mapping, got {type(content).__name__}"
        )
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load the application config.

    Without a path, ``blickline.yaml`` in the working directory is read if it
    exists; otherwise every setting keeps its default.

    Args:
        path: Explicit config file. Must exist when given.

    Returns:
        Validated AppConfig.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
        InvalidConfigurationError: If the file does not parse or validate.
    """
    try:
        config = AppConfig.load_or_default(path)
    except ValidationError as e:
        source = AppConfig.default_path() if path is None else path
        raise InvalidConfigurationError(f"Invalid config in {source}: {e}") from e

    if path is not None:
        logger.debug(f"Loaded app config from {path}")
    return config


def configure_logging(config: AppConfig | None = None) -> None:
    """Apply the logging section of an app config to the root logger."""
    settings = (config or load_app_config()).logging
    _configure_root_logging(
        level=settings.level,
        format_string=settings.format,
        filename=settings.filename,
        structured=settings.structured,
    )
