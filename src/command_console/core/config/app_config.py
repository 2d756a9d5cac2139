from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum
from importlib import metadata
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError, field_validator

from command_console.core.common.exceptions import ConfigurationError
from command_console.core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "console-command-processor"


def _distribution_metadata() -> Mapping[str, Any]:
    """Return the installed distribution's metadata, or an empty mapping."""
    try:
        return metadata.metadata(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        logger.debug("Distribution %s is not installed", DISTRIBUTION_NAME)
        return {}


def _default_title() -> str:
    return _distribution_metadata().get("Name") or DISTRIBUTION_NAME


def _default_version() -> str:
    return _distribution_metadata().get("Version") or "0.0.0"


def _default_company() -> str:
    return _distribution_metadata().get("Author") or "Unknown"


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class AppIdentityConfig(DomainModel):
    """Application identity shown in the session banner."""

    title: str = Field(default_factory=_default_title)
    version: str = Field(default_factory=_default_version)
    company: str = Field(default_factory=_default_company)


class ConsoleConfig(DomainModel):
    """Interactive console settings."""

    prompt: str = "> "
    password_mask: str = "*"
    show_banner: bool = True

    @field_validator("password_mask")
    @classmethod
    def validate_password_mask(cls, v: str) -> str:
        """Ensure the mask is exactly one printable character."""
        if len(v) != 1 or not v.isprintable():
            raise ValueError("password_mask must be a single printable character")
        return v


class LoggingConfig(DomainModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.WARNING
    log_file: str | None = None


class AppConfig(DomainModel):
    """Complete application configuration."""

    identity: AppIdentityConfig = Field(default_factory=AppIdentityConfig)
    console: ConsoleConfig = Field(default_factory=ConsoleConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def save(self, path: str | Path) -> None:
        """Save the current configuration to a YAML file."""
        data = self.model_dump(mode="json", exclude_none=True)
        with Path(path).open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False)

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Create AppConfig from environment variables.

        Returns:
            AppConfig instance
        """
        env: Mapping[str, str] = os.environ if environ is None else environ
        return cls.from_dict(_env_overrides(env))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AppConfig:
        """Validate a nested configuration mapping.

        Raises:
            ConfigurationError: If the mapping does not describe a valid config
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid configuration", details={"errors": e.errors()}
            ) from e


# env var -> (section, key)
_ENV_MAP: dict[str, tuple[str, str]] = {
    "CONSOLE_APP_TITLE": ("identity", "title"),
    "CONSOLE_APP_VERSION": ("identity", "version"),
    "CONSOLE_APP_COMPANY": ("identity", "company"),
    "CONSOLE_PROMPT": ("console", "prompt"),
    "CONSOLE_PASSWORD_MASK": ("console", "password_mask"),
    "CONSOLE_LOG_LEVEL": ("logging", "level"),
    "CONSOLE_LOG_FILE": ("logging", "log_file"),
}


def _env_overrides(env: Mapping[str, str]) -> dict[str, dict[str, Any]]:
    result: dict[str, dict[str, Any]] = {}
    for name, (section, key) in _ENV_MAP.items():
        if name in env:
            value: Any = env[name]
            if key == "level":
                value = value.strip().upper()
            result.setdefault(section, {})[key] = value
    return result


def _merge_dicts(d1: dict[str, Any], d2: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(d1)
    for key, value in d2.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(
    path: str | Path | None = None, *, environ: Mapping[str, str] | None = None
) -> AppConfig:
    """Load configuration from an optional YAML file overlaid with environment values.

    Args:
        path: Optional YAML file path
        environ: Environment mapping, defaults to ``os.environ``

    Returns:
        AppConfig instance

    Raises:
        ConfigurationError: If the file is missing, malformed or invalid
    """
    data: dict[str, Any] = {}
    if path is not None:
        p = Path(path)
        if not p.exists():
            raise ConfigurationError(f"Configuration file not found: {p}")
        try:
            loaded = yaml.safe_load(p.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed configuration file: {p}") from e
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {p}"
            )
        data = loaded
        logger.info("Loaded configuration from %s", p)

    env: Mapping[str, str] = os.environ if environ is None else environ
    return AppConfig.from_dict(_merge_dicts(data, _env_overrides(env)))
