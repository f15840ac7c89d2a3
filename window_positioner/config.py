"""Configuration loader for the window positioner daemon.

Values come from built-in defaults, then ~/.config/window-positioner/config.json,
then WINDOW_POSITIONER_* environment variables.
"""

import json
import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError

logger = logging.getLogger(__name__)

# D-Bus compatibility surface: must not change between versions
INTERFACE_NAME = "org.gnome.Shell.WindowPositioner"
OBJECT_PATH = "/org/gnome/Shell/WindowPositioner"

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "window-positioner" / "config.json"

ENV_LOG_LEVEL = "WINDOW_POSITIONER_LOG_LEVEL"
ENV_SOCKET = "WINDOW_POSITIONER_SOCKET"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ServiceConfig(BaseModel):
    """Daemon configuration."""

    bus_name: str = Field(INTERFACE_NAME, description="Well-known session bus name to own")
    object_path: str = Field(OBJECT_PATH, description="Exported object path")
    ipc_socket: Optional[Path] = Field(None, description="Sway/i3 IPC socket (autodetect if unset)")
    log_level: str = Field("INFO", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v} (expected one of {', '.join(LOG_LEVELS)})")
        return level

    @field_validator("object_path")
    @classmethod
    def validate_object_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"Object path must be absolute: {v}")
        return v


def load_config(
    config_file: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ServiceConfig:
    """Load daemon configuration.

    Args:
        config_file: JSON config path (defaults to ~/.config/window-positioner/config.json)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Validated ServiceConfig

    Raises:
        ConfigError: If the file is unreadable, not JSON, or fails validation
    """
    config_file = config_file or DEFAULT_CONFIG_FILE
    environ = os.environ if environ is None else environ

    data = {}
    if config_file.exists():
        try:
            with open(config_file) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(str(config_file), str(e)) from e

        if not isinstance(data, dict):
            raise ConfigError(str(config_file), "top-level value must be an object")

        logger.debug(f"Loaded configuration from {config_file}")
    else:
        logger.debug(f"No config file at {config_file}, using defaults")

    if environ.get(ENV_LOG_LEVEL):
        data["log_level"] = environ[ENV_LOG_LEVEL]
    if environ.get(ENV_SOCKET):
        data["ipc_socket"] = environ[ENV_SOCKET]

    try:
        return ServiceConfig(**data)
    except ValidationError as e:
        raise ConfigError(str(config_file), str(e)) from e
