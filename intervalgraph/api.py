"""intervalgraph.api

Stable *library* entrypoint for intervalgraph.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from intervalgraph.aggregator import aggregate, reduce_values
from intervalgraph.config import (
    GraphConfig,
    default_bound_to_numeric,
    default_bound_to_string,
    default_combine,
    default_value_to_numeric,
    default_value_to_string,
)
from intervalgraph.errors import (
    ComparisonError,
    ConfigurationError,
    IntervalGraphError,
    LogicError,
    PaletteError,
    ValidationError,
)
from intervalgraph.flattener import flatten, join, signed_bounds, sweep
from intervalgraph.graph import IntervalGraph
from intervalgraph.model import (
    AggregatedSpan,
    FlatSpan,
    Interval,
    PointView,
    SignedBound,
    SpanView,
    view_from_row,
    view_to_rows,
)
from intervalgraph.normalizer import compute_numeric_values, create_view
from intervalgraph.palette import Palette
from intervalgraph.preprocess import extract_discrete, normalize_intervals, validate_intervals
from intervalgraph.serialize import dumps_view, loads_view, spans_from_rows, spans_to_rows
from intervalgraph.truncator import max_bound, min_bound, truncate
from intervalgraph.util.dates import date_graph, intv, second_step_config

__all__ = [
    # Model
    "Interval",
    "SignedBound",
    "FlatSpan",
    "AggregatedSpan",
    "SpanView",
    "PointView",
    "view_from_row",
    "view_to_rows",
    # Configuration
    "GraphConfig",
    "default_bound_to_numeric",
    "default_bound_to_string",
    "default_value_to_numeric",
    "default_value_to_string",
    "default_combine",
    # Errors
    "IntervalGraphError",
    "ValidationError",
    "ComparisonError",
    "ConfigurationError",
    "LogicError",
    "PaletteError",
    # Pipeline stages
    "extract_discrete",
    "normalize_intervals",
    "validate_intervals",
    "signed_bounds",
    "sweep",
    "flatten",
    "join",
    "aggregate",
    "reduce_values",
    "create_view",
    "compute_numeric_values",
    "truncate",
    "min_bound",
    "max_bound",
    # Graph, palette, serialization
    "IntervalGraph",
    "Palette",
    "dumps_view",
    "loads_view",
    "spans_to_rows",
    "spans_from_rows",
    # Date helpers
    "intv",
    "second_step_config",
    "date_graph",
]
