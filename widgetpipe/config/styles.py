"""
Named style presets loaded from YAML.

A preset is an ordered list of operation invocations. Each entry is either
a bare factory name or a single-key mapping from factory name to its
argument:

    styles:
      card:
        - bordered
        - rounded_corners
        - fg: cyan
        - add: [bold]
        - north_wall: {attributes: [underline]}
        - fixed_height: 5

Loading a preset returns one composed Operation that applies the entries
in the order written. The file is only ever read.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from widgetpipe.exceptions import StyleConfigError, WidgetPipeError
from widgetpipe.pipe.core import Operation, chain
from widgetpipe.pipe.registry import FactoryRegistry, factory_registry, register_builtin_factories

from .settings import get_styles_path

logger = logging.getLogger(__name__)


def load_styles_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Read the raw styles mapping from YAML.

    Returns:
        Mapping of style name -> list of entries; empty if the file is missing

    Raises:
        StyleConfigError: If the file is not valid YAML or not shaped right
    """
    config_path = path or get_styles_path()
    if not config_path.exists():
        logger.debug(f"No styles file at {config_path}")
        return {}

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise StyleConfigError(f"Invalid YAML: {e}", path=str(config_path)) from e
    except OSError as e:
        raise StyleConfigError(f"Cannot read styles file: {e}", path=str(config_path)) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise StyleConfigError("Top level must be a mapping", path=str(config_path))

    styles = config.get("styles") or {}
    if not isinstance(styles, dict):
        raise StyleConfigError("'styles' must be a mapping of name -> list", path=str(config_path))
    return styles


def parse_style(
    name: str,
    entries: Any,
    registry: Optional[FactoryRegistry] = None,
) -> Operation:
    """Build one composed Operation from a preset's entry list.

    Raises:
        StyleConfigError: If an entry names an unknown operation or its
            argument is rejected by the factory
    """
    registry = _ensure_registry(registry)
    if not isinstance(entries, list) or not entries:
        raise StyleConfigError("Style must be a non-empty list of operations", style=name)

    operations: List[Operation] = []
    for index, entry in enumerate(entries):
        op_name, value = _split_entry(name, index, entry)
        if not registry.has(op_name):
            raise StyleConfigError(f"Unknown operation '{op_name}'", style=name, entry=index)
        try:
            operations.append(registry.create(op_name, value))
        except (WidgetPipeError, TypeError, ValueError) as e:
            raise StyleConfigError(
                f"Bad argument for '{op_name}': {e}", style=name, entry=index
            ) from e

    return chain(*operations)


def load_styles(
    path: Optional[Path] = None,
    registry: Optional[FactoryRegistry] = None,
) -> Dict[str, Operation]:
    """Load and build every preset in the styles file."""
    styles = load_styles_config(path)
    built = {name: parse_style(name, entries, registry) for name, entries in styles.items()}
    logger.debug(f"Loaded {len(built)} style preset(s)")
    return built


def load_style(
    name: str,
    path: Optional[Path] = None,
    registry: Optional[FactoryRegistry] = None,
) -> Operation:
    """Load a single preset by name.

    Raises:
        StyleConfigError: If the preset does not exist or is malformed
    """
    styles = load_styles_config(path)
    if name not in styles:
        raise StyleConfigError("Unknown style", style=name)
    return parse_style(name, styles[name], registry)


def _split_entry(style: str, index: int, entry: Any) -> tuple:
    if isinstance(entry, str):
        return entry, None
    if isinstance(entry, dict) and len(entry) == 1:
        (op_name, value), = entry.items()
        return str(op_name), value
    raise StyleConfigError(
        "Entry must be an operation name or a single-key mapping", style=style, entry=index
    )


def _ensure_registry(registry: Optional[FactoryRegistry]) -> FactoryRegistry:
    if registry is not None:
        return registry
    if not factory_registry.list_names():
        register_builtin_factories(factory_registry)
    return factory_registry
