"""
Factory registry for pipe operations.

Factories register under their function name so data-driven callers
(the YAML style presets) can build operations from plain values. Each
registration knows how to turn one config value into factory arguments.
Event filters and signal hookups need live Python objects and are not
registered.
"""

import inspect
import logging
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Callable, Dict, List, Optional, Tuple

from widgetpipe.widget import Attribute, FocusPolicy

from . import border_ops, glyph_sets, layout_ops, widget_ops
from .core import Operation

logger = logging.getLogger(__name__)

Factory = Callable[..., Operation]
ArgConverter = Callable[[Any], Tuple[Any, ...]]


def positional_args(value: Any) -> Tuple[Any, ...]:
    """None -> no args, list -> each item, anything else -> one arg."""
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return (value,)


def attribute_args(value: Any) -> Tuple[Attribute, ...]:
    """Attribute names (case-insensitive) -> Attribute flags."""
    names = positional_args(value)
    attributes = []
    for item in names:
        if isinstance(item, Attribute):
            attributes.append(item)
            continue
        try:
            attributes.append(Attribute[str(item).upper()])
        except KeyError:
            valid = ", ".join(a.name.lower() for a in Attribute)
            raise ValueError(f"Unknown attribute '{item}'. Must be one of: {valid}") from None
    return tuple(attributes)


def segment_args(value: Any) -> Tuple[Any, ...]:
    """A glyph string, or {"attributes": [...]} to add attributes."""
    if isinstance(value, dict):
        if set(value) != {"attributes"}:
            raise ValueError(f"Expected a glyph or {{attributes: [...]}}, got: {value}")
        return attribute_args(value["attributes"])
    return (value,)


def focus_args(value: Any) -> Tuple[FocusPolicy]:
    try:
        return (FocusPolicy(str(value).lower()),)
    except ValueError:
        valid = ", ".join(p.value for p in FocusPolicy)
        raise ValueError(f"Unknown focus policy '{value}'. Must be one of: {valid}") from None


@dataclass
class FactoryRegistration:
    """Registration information for an operation factory.

    Attributes:
        name: Name used to refer to the factory in config
        factory: Function returning an Operation
        convert: Turns one config value into factory arguments
        category: Group the factory belongs to (module short name)
        description: First line of the factory docstring
    """

    name: str
    factory: Factory
    convert: ArgConverter = positional_args
    category: str = ""
    description: str = ""

    def create(self, value: Any = None) -> Operation:
        """Build an operation from a config value."""
        return self.factory(*self.convert(value))


class FactoryRegistry:
    """Registry of operation factories by name.

    Usage:
        factory_registry.register("bg", widget_ops.bg)
        op = factory_registry.create("bg", "blue")
    """

    def __init__(self) -> None:
        self._factories: Dict[str, FactoryRegistration] = {}

    def register(
        self,
        name: str,
        factory: Factory,
        *,
        convert: ArgConverter = positional_args,
        category: str = "",
        description: str = "",
    ) -> None:
        if name in self._factories:
            logger.warning(f"Overwriting existing factory registration: {name}")
        self._factories[name] = FactoryRegistration(
            name=name,
            factory=factory,
            convert=convert,
            category=category,
            description=description,
        )

    def unregister(self, name: str) -> bool:
        if name in self._factories:
            del self._factories[name]
            return True
        return False

    def get(self, name: str) -> Optional[FactoryRegistration]:
        return self._factories.get(name)

    def has(self, name: str) -> bool:
        return name in self._factories

    def create(self, name: str, value: Any = None) -> Operation:
        """Build an operation by factory name.

        Raises:
            ValueError: If name is not registered
        """
        registration = self._factories.get(name)
        if not registration:
            raise ValueError(f"Unknown operation: {name}")
        return registration.create(value)

    def list_names(self) -> List[str]:
        return sorted(self._factories)

    def list_category(self, category: str) -> List[str]:
        return sorted(r.name for r in self._factories.values() if r.category == category)

    def register_module(self, module: ModuleType, converters: Dict[str, ArgConverter]) -> None:
        """Register every public factory function defined in module."""
        category = module.__name__.rsplit(".", 1)[-1]
        for name, func in inspect.getmembers(module, inspect.isfunction):
            if name.startswith("_") or func.__module__ != module.__name__:
                continue
            if name in _NOT_DATA_DRIVEN:
                continue
            doc = inspect.getdoc(func) or ""
            self.register(
                name,
                func,
                convert=converters.get(name, positional_args),
                category=category,
                description=doc.splitlines()[0] if doc else "",
            )


# Factories whose arguments cannot come from config data.
_NOT_DATA_DRIVEN = frozenset({"install_filter", "remove_filter"})

_SEGMENT_FACTORIES = (
    "north_wall",
    "south_wall",
    "east_wall",
    "west_wall",
    "north_south_walls",
    "east_west_walls",
    "north_east_corner",
    "north_west_corner",
    "south_east_corner",
    "south_west_corner",
    "north_east_walls",
    "north_west_walls",
    "south_east_walls",
    "south_west_walls",
)

BUILTIN_CONVERTERS: Dict[str, ArgConverter] = {
    "add": attribute_args,
    "remove": attribute_args,
    "focus": focus_args,
    # null clears the wallpaper instead of meaning "no arguments".
    "wallpaper": lambda value: (value,),
    # A list here is one (column, row) point, not two arguments.
    "put_cursor": lambda value: (tuple(value),),
    **{name: segment_args for name in _SEGMENT_FACTORIES},
}

# Global factory registry instance
factory_registry = FactoryRegistry()


def register_builtin_factories(registry: Optional[FactoryRegistry] = None) -> FactoryRegistry:
    """Register the built-in data-driven factories and return the registry."""
    registry = registry if registry is not None else factory_registry
    for module in (widget_ops, layout_ops, border_ops, glyph_sets):
        registry.register_module(module, BUILTIN_CONVERTERS)
    logger.debug("Registered %d built-in operation factories", len(registry.list_names()))
    return registry
