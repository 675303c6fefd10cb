from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError, field_validator

from textopts.constants import ENV_PREFIX, OutputFormat
from textopts.core.common.exceptions import ConfigurationError
from textopts.core.common.structlog_config import LogFormat
from textopts.core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(DomainModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.PLAIN
    log_file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value


class OutputConfig(DomainModel):
    """How the CLI renders a parsed option store."""

    format: OutputFormat = OutputFormat.TEXT
    expand_collections: bool = False

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value


class AppConfig(DomainModel):
    """Top-level application configuration."""

    logging: LoggingConfig = LoggingConfig()
    output: OutputConfig = OutputConfig()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AppConfig:
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise ConfigurationError(
                "Invalid configuration",
                details={"errors": exc.errors(include_url=False)},
            ) from exc


# Environment variable name -> dotted config path
ENV_MAPPING: dict[str, str] = {
    f"{ENV_PREFIX}LOG_LEVEL": "logging.level",
    f"{ENV_PREFIX}LOG_FORMAT": "logging.format",
    f"{ENV_PREFIX}LOG_FILE": "logging.log_file",
    f"{ENV_PREFIX}OUTPUT_FORMAT": "output.format",
    f"{ENV_PREFIX}EXPAND_COLLECTIONS": "output.expand_collections",
}

_BOOLEAN_PATHS = {"output.expand_collections"}


def _str_to_bool(val: str) -> bool:
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _merge_dicts(d1: dict[str, Any], d2: Mapping[str, Any]) -> dict[str, Any]:
    for k, v in d2.items():
        if k in d1 and isinstance(d1[k], dict) and isinstance(v, Mapping):
            _merge_dicts(d1[k], v)
        else:
            d1[k] = v
    return d1


def _set_by_path(target: dict[str, Any], path: str, value: Any) -> None:
    parts = path.split(".")
    current: dict[str, Any] = target
    for key in parts[:-1]:
        current = current.setdefault(key, {})
    current[parts[-1]] = value


def _load_config_file(config_path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file.

    Raises:
        ConfigurationError: If the file is missing, not YAML, or not a mapping
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {path}", details={"path": str(path)}
        )
    if path.suffix.lower() not in (".yaml", ".yml"):
        raise ConfigurationError(
            f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
            details={"path": str(path)},
        )

    try:
        with open(path, encoding="utf-8") as f:
            file_config: Any = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(
            f"Could not read configuration file: {exc}", details={"path": str(path)}
        ) from exc

    if not isinstance(file_config, dict):
        raise ConfigurationError(
            "Configuration file must contain a mapping at the top level",
            details={"path": str(path)},
        )
    return file_config


def _env_overrides(env: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for env_name, path in ENV_MAPPING.items():
        raw = env.get(env_name)
        if raw is None or raw == "":
            continue
        value: Any = _str_to_bool(raw) if path in _BOOLEAN_PATHS else raw
        _set_by_path(overrides, path, value)
        logger.debug("Config %s set from environment variable %s", path, env_name)
    return overrides


def load_config(
    config_path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Build the application configuration.

    Defaults are overlaid by the YAML file at ``config_path`` and then by
    ``TEXTOPTS_*`` environment variables. When ``environ`` is omitted the
    process environment is used, after loading a ``.env`` file if present.
    """
    if environ is None:
        load_dotenv(override=False)
        environ = os.environ

    config_data: dict[str, Any] = AppConfig().model_dump(mode="json")

    if config_path:
        _merge_dicts(config_data, _load_config_file(config_path))
        logger.debug("Loaded configuration file %s", config_path)

    _merge_dicts(config_data, _env_overrides(environ))
    return AppConfig.from_dict(config_data)
