"""Configuration for widgetpipe: environment settings and style presets."""

from .settings import (
    get_config_dir,
    get_env_var,
    get_log_level,
    get_styles_path,
    get_tick_interval,
    validate_all_env_vars,
)
from .styles import load_style, load_styles, parse_style

__all__ = [
    "get_config_dir",
    "get_env_var",
    "get_log_level",
    "get_styles_path",
    "get_tick_interval",
    "validate_all_env_vars",
    "load_style",
    "load_styles",
    "parse_style",
]
