"""
Append-only signals.

A Signal keeps its handlers in registration order and calls every one of
them on emit. Handlers cannot be disconnected.
"""

import logging
from typing import Any, Callable, List

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class Signal:
    """Named list of handlers invoked in the order they were connected."""

    __slots__ = ("name", "_handlers")

    def __init__(self, name: str) -> None:
        self.name = name
        self._handlers: List[Handler] = []

    def __repr__(self) -> str:
        return f"Signal({self.name!r}, handlers={len(self._handlers)})"

    def __len__(self) -> int:
        return len(self._handlers)

    def connect(self, handler: Handler) -> None:
        if not callable(handler):
            raise TypeError(f"Signal handler must be callable, got {type(handler).__name__}")
        self._handlers.append(handler)

    def emit(self, *args: Any) -> None:
        logger.debug("Emitting %s to %d handler(s)", self.name, len(self._handlers))
        # Handlers connected while emitting run on the next emit.
        for handler in list(self._handlers):
            handler(*args)

    __call__ = emit
