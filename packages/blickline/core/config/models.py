"""Configuration models for blickline."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blickline.core.curves.definitions import InterpolationMethod, resolve_interpolation
from blickline.core.utils.logging import DEFAULT_FORMAT

logger = logging.getLogger(__name__)


class ConfigBase(BaseModel):
    """Shared base for file-backed blickline configs.

    Unknown keys are ignored so older binaries accept newer config files.
    """

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def default_path(cls) -> Path:
        """Location read when no explicit config path is given."""
        raise NotImplementedError(f"{cls.__name__} has no default config location")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Validate the file at path, falling back to defaults.

        Without a path, default_path() is read if it exists; otherwise every
        setting keeps its default.

        Raises:
            FileNotFoundError: If an explicit path does not exist.
            InvalidConfigurationError: If the file does not parse.
            pydantic.ValidationError: If a value fails validation.
        """
        from blickline.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
            if not path.exists():
                logger.debug(f"No config at {path}, using {cls.__name__} defaults")
                return cls()

        return cls.model_validate(load_config(path))


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = DEFAULT_FORMAT
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (stdout if None)")


class TimeAxisDefaults(BaseModel):
    """Origin marks for newly created time axes."""

    model_config = ConfigDict(frozen=True)

    bpm: float = Field(default=120.0, gt=0.0, le=10000.0)
    numerator: int = Field(default=4, ge=1)
    denominator: int = Field(default=4, ge=1)


class CurveDefaults(BaseModel):
    """Defaults for automation curve editing.

    Attributes:
        simplify_threshold: Threshold passed to CurveStore.simplify when the
            caller does not give one.
        interpolation: Optional override of the catalog interpolation
            method for curves created from config-driven tools.
    """

    model_config = ConfigDict(frozen=True)

    simplify_threshold: float = Field(default=0.002, ge=0.0)
    interpolation: InterpolationMethod | None = None

    @field_validator("interpolation", mode="before")
    @classmethod
    def _resolve_interpolation(cls, value: object) -> object:
        """Accept interpolation names case-insensitively."""
        if isinstance(value, str):
            return resolve_interpolation(value)
        return value


class AppConfig(ConfigBase):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    time_axis: TimeAxisDefaults = TimeAxisDefaults()
    curves: CurveDefaults = CurveDefaults()

    @classmethod
    def default_path(cls) -> Path:
        return Path("blickline.yaml")
