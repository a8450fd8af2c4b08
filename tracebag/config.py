"""Tracer configuration: TOML file, environment and explicit overrides."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from tracebag.errors import ConfigError
from tracebag.propagation.format import Format

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "tracebag.toml"
_USER_CONFIG_DIR = Path("~/.config/tracebag")

# Environment variable -> config field
_ENV_VARS = {
    "TRACEBAG_SERVICE_NAME": "service_name",
    "TRACEBAG_FORMATS": "formats",
    "TRACEBAG_DEBUG": "debug",
}


class TracerConfig(BaseModel):
    """Validated tracer settings."""

    service_name: str = Field(default="unknown-service", min_length=1)
    formats: List[Format] = Field(default_factory=lambda: list(Format), min_length=1)
    debug: bool = False

    @field_validator("formats", mode="before")
    @classmethod
    def _split_formats(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


def find_config_file() -> Optional[str]:
    """
    Locate a config file.
    
    Looks in the current directory first, then ``~/.config/tracebag``.
    Returns None if neither holds a ``tracebag.toml``.
    """
    candidates = [
        Path.cwd() / CONFIG_FILE_NAME,
        _USER_CONFIG_DIR.expanduser() / CONFIG_FILE_NAME,
    ]
    for candidate in candidates:
        if candidate.is_file():
            return str(candidate)
    return None


def load_toml_config(path: str) -> Dict[str, Any]:
    """
    Read a TOML config file.
    
    Returns an empty dict if the file does not exist.
    
    Raises:
        ConfigError: if the file cannot be parsed
    """
    config_path = Path(path)
    if not config_path.is_file():
        logger.debug("Config file not found at %s", config_path)
        return {}

    try:
        with open(config_path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError("Invalid TOML in config file", {"path": str(config_path), "error": exc}) from exc
    except OSError as exc:
        raise ConfigError("Could not read config file", {"path": str(config_path), "error": exc}) from exc


def load_env_config() -> Dict[str, Any]:
    """Collect settings from ``TRACEBAG_*`` environment variables."""
    values: Dict[str, Any] = {}
    for env_name, field_name in _ENV_VARS.items():
        value = os.getenv(env_name)
        if value is not None and value != "":
            values[field_name] = value
    return values


def validate_config(values: Dict[str, Any]) -> TracerConfig:
    """
    Validate raw settings.
    
    Raises:
        ConfigError: if any value is invalid
    """
    try:
        return TracerConfig(**values)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(loc) for loc in err["loc"]) for err in exc.errors())
        raise ConfigError("Invalid tracer configuration", {"fields": fields}) from exc


def load_config(path: Optional[str] = None, **overrides: Any) -> TracerConfig:
    """
    Load configuration.
    
    Priority (lowest to highest): config file, environment, ``overrides``.
    The file is read from ``path`` if given, else from ``find_config_file()``.
    The ``[tracer]`` table of the file is used; top-level keys are accepted
    too.
    """
    values: Dict[str, Any] = {}

    config_path = path or find_config_file()
    if config_path:
        raw = load_toml_config(config_path)
        section = raw.get("tracer", raw)
        if not isinstance(section, dict):
            raise ConfigError("[tracer] must be a table", {"path": config_path})
        values.update(section)

    values.update(load_env_config())
    values.update({k: v for k, v in overrides.items() if v is not None})

    return validate_config(values)
