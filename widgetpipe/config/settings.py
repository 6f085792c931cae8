"""Environment-driven settings for widgetpipe."""

import math
import os
from pathlib import Path
from typing import List, Optional, Tuple

from .constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_TICK_INTERVAL_SECONDS,
    ENV_VAR_DEFINITIONS,
    MIN_TICK_INTERVAL_SECONDS,
    STYLES_FILENAME,
)


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS or value is None:
        return True, None

    valid_values = ENV_VAR_DEFINITIONS[name].get("valid_values")
    if valid_values is None:
        return True, None

    if value.upper() not in [v.upper() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def validate_all_env_vars() -> List[str]:
    """Validate all widgetpipe environment variables.

    Returns:
        List of error messages (empty if all valid).
    """
    errors = []
    for name in ENV_VAR_DEFINITIONS:
        is_valid, error = validate_env_var(name, os.environ.get(name))
        if not is_valid:
            errors.append(error)
    return errors


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable, falling back to its documented default.

    Raises:
        ValueError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ValueError(error)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def get_config_dir() -> Path:
    return Path(get_env_var("WIDGETPIPE_CONFIG_DIR") or "").expanduser()


def get_styles_path() -> Path:
    return get_config_dir() / STYLES_FILENAME


def get_log_level() -> str:
    """Log level name; an invalid WIDGETPIPE_LOG_LEVEL falls back to the default."""
    try:
        return str(get_env_var("WIDGETPIPE_LOG_LEVEL")).upper()
    except ValueError:
        return DEFAULT_LOG_LEVEL


def get_tick_interval() -> float:
    """Seconds between animation ticks; invalid values fall back to the default."""
    raw = get_env_var("WIDGETPIPE_TICK_INTERVAL")
    try:
        interval = float(raw)
    except (TypeError, ValueError):
        return DEFAULT_TICK_INTERVAL_SECONDS
    if not math.isfinite(interval) or interval < MIN_TICK_INTERVAL_SECONDS:
        return DEFAULT_TICK_INTERVAL_SECONDS
    return interval
