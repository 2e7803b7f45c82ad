# intervalgraph/truncator.py
from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, List, Optional

from .errors import ComparisonError
from .model import Interval
from .preprocess import normalize_intervals
from .util.console import eprint, obs_enabled

LOWER = 0
UPPER = 1


def min_bound(intervals: Iterable[Interval]) -> Any:
    lows = [i.low for i in intervals]
    return min(lows) if lows else None


def max_bound(intervals: Iterable[Interval]) -> Any:
    highs = [i.high for i in intervals]
    return max(highs) if highs else None


def _beyond(value: Any, limit: Any, side: int) -> bool:
    try:
        return value < limit if side == LOWER else value > limit
    except TypeError as ex:
        raise ComparisonError(f"bound {value!r} is not comparable to limit {limit!r}") from ex


def _clip(intervals: List[Interval], limit: Any, side: int) -> List[Interval]:
    out: List[Interval] = []
    for iv in intervals:
        outer, inner = (iv.low, iv.high) if side == LOWER else (iv.high, iv.low)
        if not _beyond(outer, limit, side):
            out.append(iv)
        elif _beyond(inner, limit, side):
            if obs_enabled():
                eprint(f"[intervalgraph.truncator] drop interval outside limit={limit!r}: {iv!r}")
        elif side == LOWER:
            out.append(replace(iv, low=limit))
        else:
            out.append(replace(iv, high=limit))
    return out


def _pad(intervals: List[Interval], limit: Any, side: int) -> List[Interval]:
    if side == LOWER:
        bound = min_bound(intervals)
        if bound is not None and _beyond(limit, bound, LOWER):
            return [Interval(limit, bound)] + intervals
    else:
        bound = max_bound(intervals)
        if bound is not None and _beyond(limit, bound, UPPER):
            return intervals + [Interval(bound, limit)]
    return intervals


def truncate(
    intervals: Iterable[Any],
    lower: Optional[Any] = None,
    upper: Optional[Any] = None,
    padding: bool = False,
) -> List[Interval]:
    """Clip intervals to [lower, upper].

    Intervals entirely beyond a limit are dropped, partially beyond ones are
    clipped. With `padding`, a valueless interval fills the gap between a
    limit and the nearest remaining bound: prepended for the lower limit,
    appended for the upper one. Truncating twice to the same limits is a no-op.
    """
    out = normalize_intervals(intervals)
    for side, limit in ((LOWER, lower), (UPPER, upper)):
        if limit is None:
            continue
        out = _clip(out, limit, side)
        if padding:
            out = _pad(out, limit, side)
    return out


__all__ = [
    "max_bound",
    "min_bound",
    "truncate",
]
