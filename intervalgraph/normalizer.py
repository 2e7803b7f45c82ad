"""Percentage view builder.

Maps aggregated spans onto a 0..100 axis anchored at the global min/max
bound. Span rows store their end as a distance from the right edge so a
renderer can anchor bars with `left`/`right` and stay correct on resize.
Discrete points go last so renderers draw them on top of the bars.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Sequence, Tuple

from .config import GraphConfig
from .model import AggregatedSpan, PointView, SpanView, ViewEntry
from .util.rounding import round_half_away

ColorFn = Callable[[Any], Any]


def _numeric_bounds(spans: Sequence[AggregatedSpan], cfg: GraphConfig) -> List[Tuple[Any, Any]]:
    return [(cfg.bound_to_numeric(s.low), cfg.bound_to_numeric(s.high)) for s in spans]


def _extent(nums: Sequence[Tuple[Any, Any]]) -> Tuple[Any, Any]:
    # Points are zero-width, so their single position takes part in both ends.
    return min(lo for lo, _ in nums), max(hi for _, hi in nums)


def create_view(
    aggregated: Sequence[AggregatedSpan],
    config: Optional[GraphConfig] = None,
    color_for: Optional[ColorFn] = None,
) -> List[ViewEntry]:
    """Aggregated spans -> SpanView / PointView rows.

    `color_for` receives the numeric value (config.value_to_numeric) of each
    valued span; without it the numeric value itself fills the color slot.
    """
    cfg = config or GraphConfig()
    if not aggregated:
        return []

    nums = _numeric_bounds(aggregated, cfg)
    lo_min, hi_max = _extent(nums)
    width = hi_max - lo_min

    def pct(n: Any) -> float:
        if width == 0:
            return 0.0
        return (n - lo_min) * 100 / width

    spans: List[ViewEntry] = []
    points: List[ViewEntry] = []
    for span, (lo, hi) in zip(aggregated, nums):
        if span.is_discrete:
            points.append(PointView(round_half_away(pct(lo), cfg.precision), cfg.bound_to_string(span.low)))
            continue

        if span.value is None:
            color = None
            value_label = None
        else:
            numeric = cfg.value_to_numeric(span.value)
            color = color_for(numeric) if color_for is not None else numeric
            value_label = cfg.value_to_string(span.value)

        spans.append(
            SpanView(
                start_pct=round_half_away(pct(lo), cfg.precision),
                end_pct=round_half_away(100 - pct(hi), cfg.precision),
                color=color,
                start_label=cfg.bound_to_string(span.low),
                end_label=cfg.bound_to_string(span.high),
                value_label=value_label,
            )
        )

    return spans + points


def compute_numeric_values(
    aggregated: Sequence[AggregatedSpan],
    config: Optional[GraphConfig] = None,
) -> List[list]:
    """Rows of [low - min, high - min, numeric value] before any rescaling."""
    cfg = config or GraphConfig()
    if not aggregated:
        return []
    nums = _numeric_bounds(aggregated, cfg)
    lo_min, _ = _extent(nums)
    return [
        [lo - lo_min, hi - lo_min, cfg.value_to_numeric(s.value)]
        for s, (lo, hi) in zip(aggregated, nums)
    ]


__all__ = [
    "compute_numeric_values",
    "create_view",
]
