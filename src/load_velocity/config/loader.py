from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from load_velocity.config.models import AppConfig


# ConfigError is raised for invalid configuration: fail fast before any input is read.
class ConfigError(ValueError):
    pass


def load_config(path: Path) -> AppConfig:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config {path} is not valid YAML: {exc}") from exc

    # An empty file means "all defaults".
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")

    try:
        return AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {path}: {exc}") from exc
