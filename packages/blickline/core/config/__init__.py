"""Configuration management for blickline."""

from blickline.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from blickline.core.config.models import (
    AppConfig,
    ConfigBase,
    CurveDefaults,
    LoggingConfig,
    TimeAxisDefaults,
)

__all__ = [
    # Loaders
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    # Models
    "AppConfig",
    "ConfigBase",
    "CurveDefaults",
    "LoggingConfig",
    "TimeAxisDefaults",
]
