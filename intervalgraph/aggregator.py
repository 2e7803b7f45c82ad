# intervalgraph/aggregator.py
from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Iterable, List, Sequence

from .config import default_combine
from .errors import ConfigurationError
from .model import AggregatedSpan, FlatSpan, Interval

CombineFn = Callable[[Any, Any], Any]


def reduce_values(values: Sequence[Any], combine: CombineFn = default_combine) -> Any:
    """Left fold without an initial value: a single value comes back unchanged."""
    if not values:
        raise ConfigurationError("combine function invoked on an empty collection")
    return reduce(combine, values)


def aggregate(
    flat_spans: Iterable[FlatSpan],
    original_intervals: Sequence[Any],
    combine: CombineFn = default_combine,
) -> List[AggregatedSpan]:
    """Replace each span's active set with one combined value.

    `original_intervals` is the sequence the spans were flattened from; active
    keys index into it. Valueless intervals contribute explicit None.
    """
    originals = [Interval.coerce(i).value for i in original_intervals]
    out: List[AggregatedSpan] = []
    for span in flat_spans:
        if not span.active:
            value = None
        else:
            value = reduce_values([originals[k] for k in sorted(span.active)], combine)
        out.append(AggregatedSpan(span.low, span.high, value))
    return out


__all__ = [
    "aggregate",
    "reduce_values",
]
