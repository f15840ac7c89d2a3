"""Tests for configuration loading."""

import json
from pathlib import Path

import pytest

from window_positioner.config import (
    INTERFACE_NAME,
    OBJECT_PATH,
    ServiceConfig,
    load_config,
)
from window_positioner.errors import ConfigError


def test_defaults_when_file_missing(tmp_path):
    config = load_config(tmp_path / "missing.json", environ={})

    assert config.bus_name == INTERFACE_NAME
    assert config.object_path == OBJECT_PATH
    assert config.ipc_socket is None
    assert config.log_level == "INFO"


def test_file_values(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"log_level": "debug", "ipc_socket": "/run/user/1000/sway.sock"}))

    config = load_config(config_file, environ={})

    assert config.log_level == "DEBUG"
    assert config.ipc_socket == Path("/run/user/1000/sway.sock")


def test_environment_overrides_file(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"log_level": "ERROR"}))

    config = load_config(
        config_file,
        environ={
            "WINDOW_POSITIONER_LOG_LEVEL": "warning",
            "WINDOW_POSITIONER_SOCKET": "/tmp/i3.sock",
        },
    )

    assert config.log_level == "WARNING"
    assert config.ipc_socket == Path("/tmp/i3.sock")


def test_invalid_json(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text("{not json")

    with pytest.raises(ConfigError, match="config.json"):
        load_config(config_file, environ={})


def test_non_object_json(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text("[]")

    with pytest.raises(ConfigError):
        load_config(config_file, environ={})


def test_invalid_log_level(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.json", environ={"WINDOW_POSITIONER_LOG_LEVEL": "LOUD"})


def test_relative_object_path_rejected():
    with pytest.raises(ValueError):
        ServiceConfig(object_path="org/gnome/Shell/WindowPositioner")
