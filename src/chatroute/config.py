"""Settings for chatroute.

Settings come from ~/.chatroute/config.yaml (the directory can be moved
with CHATROUTE_HOME), with a couple of environment overrides on top.
Routing thresholds are constants of the routing package and are not
read from here.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator

from chatroute.routing.models import ModelFamily, SpeedPreference

HOME_ENV = "CHATROUTE_HOME"
LOG_LEVEL_ENV = "CHATROUTE_LOG_LEVEL"
TRACE_ENV = "CHATROUTE_TRACE"

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Resolved chatroute settings."""
    log_level: str = "WARNING"
    trace_decisions: bool = True
    default_family: ModelFamily = ModelFamily.AUTO
    default_speed: SpeedPreference = SpeedPreference.AUTO
    default_plan: str = "free"

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


def get_config_dir() -> Path:
    """Get the chatroute config directory."""
    override = os.environ.get(HOME_ENV)
    return Path(override) if override else Path.home() / ".chatroute"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.yaml"


def load_config() -> dict[str, Any]:
    """Load the raw configuration mapping, empty if no file exists."""
    config_path = get_config_path()
    if config_path.exists():
        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    return {}


def save_config(config: dict[str, Any]) -> None:
    """Save configuration to file."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.dump(config, f, default_flow_style=False)


def get_settings() -> Settings:
    """Build Settings from the config file plus environment overrides."""
    data = load_config()

    level = os.environ.get(LOG_LEVEL_ENV)
    if level:
        data["log_level"] = level

    trace = os.environ.get(TRACE_ENV)
    if trace is not None:
        data["trace_decisions"] = trace.strip().lower() in _TRUTHY

    return Settings(**data)
