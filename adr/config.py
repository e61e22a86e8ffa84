"""
Configuration settings for the ADR tool.

Uses Pydantic Settings for defaults and environment overrides, with the
project's YAML configuration file (default `.adr.yaml`) layered on top.
A fresh `Settings` value is built once per invocation by `load_settings` and
handed explicitly to every command; nothing here is cached or mutated.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from adr.errors import ConfigError
from adr.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_CONFIG_PATH = ".adr.yaml"

# Keys written by `init` and documented for the configuration file.
CONFIG_FILE_KEYS = ("adr_directory", "adr_template", "toc_template", "date_format")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    # Configuration file keys
    adr_directory: str = Field("./docs/adr", description="Directory holding the records.")
    adr_template: str = Field("", description="Override template for new records.")
    toc_template: str = Field("", description="Override template for README.md.")
    date_format: str = Field("%Y/%m/%d", description="strftime pattern for record dates.")

    # Application
    log_level: str = Field("WARNING", alias="ADR_LOG_LEVEL")
    log_json: bool = Field(False, alias="ADR_LOG_JSON")
    strict_templates: bool = Field(
        False, description="Fail instead of falling back when an override template is unreadable."
    )

    model_config = SettingsConfigDict(
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().upper()
            if value not in LOG_LEVELS:
                expected = ", ".join(LOG_LEVELS)
                raise ValueError(f"unknown log level {value!r}, expected one of {expected}")
        return value

    @property
    def directory(self) -> Path:
        """Absolute record directory, resolved against the working directory."""
        return Path(self.adr_directory).expanduser().absolute()


def default_config() -> Dict[str, Any]:
    """
    Configuration written by `init`: the file keys with their defaults,
    omitting empty values.
    """
    fields = Settings.model_fields
    values = {key: fields[key].default for key in CONFIG_FILE_KEYS}
    return {key: value for key, value in values.items() if value != ""}


def write_default_config(config_path: Union[str, Path]) -> None:
    """Serialize the default configuration to `config_path`."""
    path = Path(config_path)
    document = yaml.safe_dump(default_config(), sort_keys=False, default_flow_style=False)
    try:
        path.write_text(document, encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot write config {path}: {exc}") from exc
    log.debug("Default config written", extra={"config": str(path)})


def default_settings() -> Settings:
    """Settings from defaults and environment variables only."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"invalid settings from environment: {exc}") from exc


def load_settings(
    config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
    notify: Optional[Callable[[str], None]] = None,
) -> Settings:
    """
    Build the settings for one invocation.

    Parameters
    ----------
    config_path : str | Path
        YAML configuration file. An unreadable or missing file means defaults.
    notify : callable, optional
        Receives the user-facing notice emitted when defaults are used.

    Raises
    ------
    ConfigError
        The file exists but is not valid YAML, is not a mapping, or holds
        values of the wrong type.
    """
    path = Path(config_path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError:
        if notify is not None:
            notify("no config found, using defaults")
        log.debug("Config not readable, using defaults", extra={"config": str(path)})
        return default_settings()

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"malformed config {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"malformed config {path}: expected a mapping, got {type(data).__name__}")

    try:
        settings = Settings(**{str(key): value for key, value in data.items()})
    except ValidationError as exc:
        raise ConfigError(f"invalid config {path}: {exc}") from exc

    log.debug("Config loaded", extra={"config": str(path), "adr_directory": settings.adr_directory})
    return settings


__all__ = [
    "CONFIG_FILE_KEYS",
    "DEFAULT_CONFIG_PATH",
    "LOG_LEVELS",
    "Settings",
    "default_config",
    "default_settings",
    "load_settings",
    "write_default_config",
]
