"""Configuration settings and loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from givenwhen.errors import ConfigError, ErrorCode

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_LOG_FORMATS = {"text", "json"}


class GivenWhenConfig(BaseSettings):
    """Configuration for givenwhen."""

    model_config = SettingsConfigDict(
        env_prefix="GIVENWHEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_diff_items: int = Field(default=10, ge=1)
    max_repr_length: int = Field(default=120, ge=10)
    log_level: str = "WARNING"
    log_format: str = "text"
    color: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Valid: {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        fmt = str(v).lower()
        if fmt not in _LOG_FORMATS:
            raise ValueError(f"Invalid log format: {v}. Valid: {sorted(_LOG_FORMATS)}")
        return fmt


_config: GivenWhenConfig | None = None


def load_config(config_path: str | Path | None = None) -> GivenWhenConfig:
    """Load configuration from file and environment.

    Priority: env vars > config file > defaults
    """
    config_data: dict[str, Any] = {}

    if config_path is not None:
        config_path = Path(config_path)
        if config_path.exists():
            try:
                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(
                    f"Could not parse {config_path}: {e}",
                    error_code=ErrorCode.CONFIG_NOT_READABLE,
                    cause=e,
                ) from e
            if not isinstance(config_data, dict):
                raise ConfigError(f"{config_path} must contain a mapping")
            logger.debug(f"Loaded config file: {config_path}")

    try:
        # init kwargs outrank env vars in pydantic-settings, so only pass
        # file values the environment does not override
        settings = GivenWhenConfig()
        env_set = settings.model_fields_set
        file_values = {k: v for k, v in config_data.items() if k not in env_set}
        return GivenWhenConfig(**file_values)
    except ValidationError as e:
        raise ConfigError(str(e), cause=e) from e


def get_config() -> GivenWhenConfig:
    """Get the process-wide configuration, loading it from the environment once."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def configure(config: GivenWhenConfig | None = None, **overrides: Any) -> GivenWhenConfig:
    """Install a configuration and apply its logging settings.

    Example:
        >>> configure(log_level="DEBUG", log_format="json")
    """
    from givenwhen.observability.logging import configure_logging

    global _config
    base = config if config is not None else get_config()
    if overrides:
        try:
            base = GivenWhenConfig(**{**base.model_dump(), **overrides})
        except ValidationError as e:
            raise ConfigError(str(e), cause=e) from e
    _config = base
    configure_logging(level=base.log_level, json_format=base.log_format == "json")
    return base


def reset_config() -> None:
    """Forget the installed configuration so the next access reloads it."""
    global _config
    _config = None
