"""Load and validate the md2html YAML config."""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Any

import yaml


# Default config values
DEFAULTS: dict[str, Any] = {
    "encoding": {
        "input": "utf-8",
        "output": "utf-8",
    },
    "output": {
        "separator": "\n",
        "trailing_newline": True,
    },
    "logging": {
        "level": "WARNING",
    },
}

# Looked up in cwd when no explicit config path is given
DEFAULT_CONFIG_NAME = ".md2html.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigError(Exception):
    """Raised when config is invalid or missing."""


def _deep_merge(base: dict, override: dict) -> dict:
    """Merge override into base recursively. Override wins on conflicts."""
    result = base.copy()
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _validate(config: dict) -> None:
    """Validate field types and values in config."""
    for section in ("encoding", "output", "logging"):
        if not isinstance(config.get(section), dict):
            raise ConfigError(f"'{section}' must be a mapping")

    for key in ("input", "output"):
        name = config["encoding"].get(key)
        if not isinstance(name, str):
            raise ConfigError(f"'encoding.{key}' must be a string")
        try:
            codecs.lookup(name)
        except LookupError:
            raise ConfigError(f"Unknown encoding for 'encoding.{key}': {name}") from None

    if not isinstance(config["output"].get("separator"), str):
        raise ConfigError("'output.separator' must be a string")
    if not isinstance(config["output"].get("trailing_newline"), bool):
        raise ConfigError("'output.trailing_newline' must be true or false")

    level = config["logging"].get("level")
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ConfigError(
            f"Unsupported log level '{level}'. Expected one of: {', '.join(LOG_LEVELS)}."
        )


def load_config(config_path: Path | None = None) -> dict:
    """Load config from *config_path*, merged over DEFAULTS.

    An explicit path must exist. Without one, ``.md2html.yaml`` in cwd is
    used if present; otherwise the defaults are returned as-is.
    """
    if config_path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_NAME
        if not candidate.exists():
            return _deep_merge(DEFAULTS, {})
        config_path = candidate

    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Config not found: {path}")

    with open(path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Config is not valid YAML: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config must be a YAML mapping, got {type(raw).__name__}")

    config = _deep_merge(DEFAULTS, raw)
    _validate(config)
    return config
