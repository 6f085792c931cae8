"""Custom exception hierarchy for widgetpipe.

Errors fall into two groups. Construction-time errors are raised by an
operation factory before any widget is touched, when an argument cannot be
converted (a glyph or a color). Application-time errors come from the
widget-side objects being mutated (size policies, the animation engine) and
propagate through a pipe expression unmodified.

Exception Hierarchy:
    WidgetPipeError (base)
    ├── GlyphError - value not convertible to a Glyph
    ├── ColorError - value not convertible to a Color
    ├── SizePolicyError - rejected size hint/bound/stretch
    ├── AnimationError - rejected animation period
    └── StyleConfigError - malformed style preset file

Usage:
    from widgetpipe.exceptions import GlyphError

    try:
        op = north_wall("too long")
    except GlyphError as e:
        logger.warning("bad border glyph: %s", e)
"""

from typing import Any, Optional


class WidgetPipeError(Exception):
    """Base exception for all widgetpipe errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (values, field names)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Construction-time Errors
# =============================================================================


class GlyphError(WidgetPipeError):
    """A value could not be converted to a Glyph."""

    def __init__(
        self,
        message: str = "Value is not convertible to a glyph",
        *,
        value: Any = None,
        **context: Any,
    ) -> None:
        if value is not None:
            context["value"] = value
        super().__init__(message, **context)


class ColorError(WidgetPipeError):
    """A value could not be converted to a Color."""

    def __init__(
        self,
        message: str = "Value is not convertible to a color",
        *,
        value: Any = None,
        **context: Any,
    ) -> None:
        if value is not None:
            context["value"] = value
        super().__init__(message, **context)


# =============================================================================
# Application-time Errors
# =============================================================================


class SizePolicyError(WidgetPipeError):
    """A size policy rejected a hint, bound or stretch factor."""

    def __init__(
        self,
        message: str = "Invalid size policy value",
        *,
        field: Optional[str] = None,
        value: Any = None,
        **context: Any,
    ) -> None:
        if field:
            context["field"] = field
        if value is not None:
            context["value"] = value
        super().__init__(message, **context)


class AnimationError(WidgetPipeError):
    """The animation engine rejected a period or period source."""

    def __init__(
        self,
        message: str = "Invalid animation period",
        *,
        period: Any = None,
        **context: Any,
    ) -> None:
        if period is not None:
            context["period"] = period
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class StyleConfigError(WidgetPipeError):
    """A style preset file or entry is malformed."""

    def __init__(
        self,
        message: str = "Invalid style configuration",
        *,
        path: Optional[str] = None,
        style: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        if style:
            context["style"] = style
        super().__init__(message, **context)
