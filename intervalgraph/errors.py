"""Exception hierarchy for intervalgraph.

All errors surface synchronously to the caller of the stage that detected
them. Library code never catches and converts them; the CLI and tools do.
"""

from __future__ import annotations


class IntervalGraphError(Exception):
    """Base class; never raised directly."""


class ValidationError(IntervalGraphError, ValueError):
    """An interval, bound or value does not convert with the configured functions."""


class ComparisonError(IntervalGraphError, TypeError):
    """Bounds are not mutually comparable."""


class ConfigurationError(IntervalGraphError):
    """A configured function was invoked in a state it cannot handle (e.g. an empty reduce)."""


class LogicError(IntervalGraphError):
    """Signed weights did not cancel out where they must (incremental-sum flattening only)."""


class PaletteError(IntervalGraphError, LookupError):
    """A percentage matched no range of the color palette."""


__all__ = [
    "IntervalGraphError",
    "ValidationError",
    "ComparisonError",
    "ConfigurationError",
    "LogicError",
    "PaletteError",
]
