"""Configuration management for conlog."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .files import ROTATION_POLICIES
from .log import get_logger
from .styles import COLOR_MODES

_log = get_logger("config")

CONFIG_ENV = "CONLOG_CONFIG"
LOG_DIR_ENV = "CONLOG_LOG_DIR"
DEBUG_ENV = "CONLOG_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def get_config_path() -> Path:
    """Get the path to the conlog config file.

    $CONLOG_CONFIG if set, otherwise ~/.config/conlog/config.toml.
    """
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "conlog" / "config.toml"


def get_default_config() -> str:
    """Return the default config file contents."""
    return """\
# conlog configuration

[logging]
# Directory for log_YYYY-MM-DD.txt files. Defaults to <program dir>/logs.
# log_dir = "/var/log/myapp"

# Whether debug() calls produce output.
debug = true

# Console colors: "auto" (only on a color terminal), "always", or "never".
color = "auto"

# When to start a new file: "date" (calendar date changes) or
# "day" (day of month changes; legacy behaviour).
rotation = "date"
"""


@dataclass
class LoggingConfig:
    """Settings for the process-wide logger."""

    log_dir: str | None = None  # None means <executable dir>/logs
    debug: bool = True
    color: str = "auto"  # "auto", "always" or "never"
    rotation: str = "date"  # "date" or "day"


def load_config(config_path: Path | None = None) -> LoggingConfig:
    """Load configuration from file, or return defaults.

    Environment overrides ($CONLOG_LOG_DIR, $CONLOG_DEBUG) are applied on
    top of whatever the file says.
    """
    if config_path is None:
        config_path = get_config_path()

    config = LoggingConfig()
    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            config = _parse_config(data)
        except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
            # Log warning but return defaults
            print(f"Warning: Could not load config from {config_path}: {e}")
            _log.warning(f"Could not load config from {config_path}: {e}")
            config = LoggingConfig()

    return _apply_env(config, os.environ)


def _parse_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUTHY:
            return True
        if lowered in _FALSY:
            return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _parse_config(data: dict[str, Any]) -> LoggingConfig:
    """Parse config dict into LoggingConfig."""
    section = data.get("logging", {})
    defaults = LoggingConfig()

    log_dir = section.get("log_dir", defaults.log_dir)
    color = section.get("color", defaults.color)
    if color not in COLOR_MODES:
        raise ValueError(f"color must be one of {', '.join(COLOR_MODES)}, got {color!r}")
    rotation = section.get("rotation", defaults.rotation)
    if rotation not in ROTATION_POLICIES:
        raise ValueError(f"rotation must be 'date' or 'day', got {rotation!r}")

    return LoggingConfig(
        log_dir=str(Path(log_dir).expanduser()) if log_dir else None,
        debug=_parse_bool(section.get("debug", defaults.debug), "debug"),
        color=color,
        rotation=rotation,
    )


def _apply_env(config: LoggingConfig, environ: Any) -> LoggingConfig:
    log_dir = environ.get(LOG_DIR_ENV)
    if log_dir:
        config.log_dir = str(Path(log_dir).expanduser())
    debug = environ.get(DEBUG_ENV)
    if debug:
        try:
            config.debug = _parse_bool(debug, DEBUG_ENV)
        except ValueError as e:
            _log.warning(str(e))
    return config


def ensure_config_exists() -> Path:
    """Ensure the config file exists, creating with defaults if needed."""
    config_path = get_config_path()

    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(get_default_config())

    return config_path
