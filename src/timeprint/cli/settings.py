"""Settings: default format, code character, and timezone from timeprint.yaml."""

from __future__ import annotations

import logging
import os
import warnings
from dataclasses import dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

FORMAT_ENV_VAR = "TIMEFORMAT"


@dataclass
class Settings:
    """User defaults. Command-line values always take precedence."""

    format: str | None = None
    code_char: str | None = None
    time_zone: str | None = None


def default_settings_path(config_dir: Path | None = None) -> Path:
    """Return the default path for timeprint.yaml.

    Args:
        config_dir: Override config directory. If None, uses ~/.config/timeprint.
    """
    if config_dir:
        return config_dir / "timeprint.yaml"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "timeprint" / "timeprint.yaml"
    return Path.home() / ".config" / "timeprint" / "timeprint.yaml"


def load_settings(path: Path | None = None) -> Settings:
    """Load Settings from YAML.

    A missing file gives empty settings. An unreadable or malformed file
    also gives empty settings, with a UserWarning.

    Args:
        path: Path to timeprint.yaml. Uses default_settings_path() if None.
    """
    settings_path = path or default_settings_path()
    if not settings_path.exists():
        return Settings()

    try:
        with open(settings_path) as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError) as e:
        warnings.warn(
            f"Failed to load settings from {settings_path}: {e}. Using defaults.",
            UserWarning,
        )
        return Settings()

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        warnings.warn(
            f"Ignoring {settings_path}: expected a mapping at the top level.",
            UserWarning,
        )
        return Settings()

    settings = Settings(
        format=_optional_str(data, "format", settings_path),
        code_char=_optional_str(data, "code_char", settings_path),
        time_zone=_optional_str(data, "time_zone", settings_path),
    )
    logger.debug("Loaded settings from %s: %s", settings_path, settings)
    return settings


def _optional_str(data: dict, key: str, path: Path) -> str | None:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    warnings.warn(f"Ignoring non-string '{key}' in {path}.", UserWarning)
    return None


def resolve_format(words: tuple[str, ...], settings: Settings) -> str | None:
    """Pick the format template: arguments, then $TIMEFORMAT, then settings.

    Returns None when none of them supplies one.
    """
    if words:
        return " ".join(words)
    env_format = os.environ.get(FORMAT_ENV_VAR)
    if env_format:
        return env_format
    return settings.format
