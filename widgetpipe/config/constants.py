"""
Centralized constants for widgetpipe.

Default values for the environment-driven settings and the style preset
file live here so the settings and style loaders share one source.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "widgetpipe"
STYLES_FILENAME = "styles.yaml"

# =============================================================================
# ANIMATION
# =============================================================================

DEFAULT_TICK_INTERVAL_SECONDS = 1 / 30  # How often a host polls the animation engine
MIN_TICK_INTERVAL_SECONDS = 0.001

# =============================================================================
# LOGGING
# =============================================================================

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "WIDGETPIPE_CONFIG_DIR": {
        "description": "Directory holding styles.yaml",
        "default": str(DEFAULT_CONFIG_DIR),
        "valid_values": None,
    },
    "WIDGETPIPE_LOG_LEVEL": {
        "description": "Log level for widgetpipe loggers",
        "default": DEFAULT_LOG_LEVEL,
        "valid_values": LOG_LEVELS,
    },
    "WIDGETPIPE_TICK_INTERVAL": {
        "description": "Seconds between animation engine ticks in the Textual host",
        "default": str(DEFAULT_TICK_INTERVAL_SECONDS),
        "valid_values": None,
    },
}
