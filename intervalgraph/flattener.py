# intervalgraph/flattener.py
from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Iterable, List, Mapping, Optional, TypeVar

from .errors import ComparisonError
from .model import FlatSpan, Interval, SignedBound
from .preprocess import extract_discrete, normalize_intervals
from .util.console import eprint, obs_enabled

StepFn = Callable[[Any], Any]
S = TypeVar("S")


def signed_bounds(items: Mapping[int, Interval]) -> List[SignedBound]:
    """Two signed bounds per interval, sorted ascending.

    On ties "-" sorts before "+": an interval ending where another starts is
    closed before the next one opens.
    """
    pts: List[SignedBound] = []
    for key, iv in items.items():
        pts.append(SignedBound(iv.low, "+", key, iv.low_included, iv.value))
        pts.append(SignedBound(iv.high, "-", key, iv.high_included, iv.value))
    try:
        pts.sort(key=lambda b: (b.value, b.sign == "+"))
    except TypeError as ex:
        raise ComparisonError(f"interval bounds are not mutually comparable: {ex}") from ex
    return pts


def sweep(
    bounds: List[SignedBound],
    increment: Optional[StepFn] = None,
    decrement: Optional[StepFn] = None,
) -> List[FlatSpan]:
    """Sweep sorted signed bounds left to right and emit adjacent spans.

    The active set is updated with the current bound before the span up to
    the next bound is emitted. Equal consecutive bounds emit nothing.
    """
    active: set[int] = set()
    spans: List[FlatSpan] = []

    for cur, nxt in zip(bounds, bounds[1:]):
        if cur.sign == "+":
            active.add(cur.key)
        else:
            active.discard(cur.key)

        if cur.value == nxt.value:
            continue

        low, high = cur.value, nxt.value
        # Half-open emulation on discontinuous domains.
        if decrement is not None and nxt.sign == "+":
            high = decrement(high)
        if increment is not None and cur.sign == "-" and cur.included:
            low = increment(low)

        if not low < high:
            if obs_enabled():
                eprint(f"[intervalgraph.flattener] drop collapsed span low={low!r} high={high!r}")
            continue

        spans.append(FlatSpan(low, high, frozenset(active)))

    return spans


def flatten(
    intervals: Iterable[Any],
    increment: Optional[StepFn] = None,
    decrement: Optional[StepFn] = None,
) -> List[FlatSpan]:
    """Overlapping intervals -> adjacent, non-overlapping spans.

    Active keys are indices into `intervals`. Discrete points (low == high)
    are never swept; they are appended unchanged after every span.
    """
    spans, points = extract_discrete(normalize_intervals(intervals))
    flat = sweep(signed_bounds(spans), increment=increment, decrement=decrement)
    flat.extend(FlatSpan(p.low, p.high, frozenset()) for p in points.values())
    return flat


def _touches(high: Any, low: Any, increment: Optional[StepFn]) -> bool:
    if high == low:
        return True
    return increment is not None and increment(high) == low


def join(spans: Iterable[S], increment: Optional[StepFn] = None) -> List[S]:
    """Merge spans carrying the same value whose bounds touch.

    Works on anything with low/high/value fields (Interval, AggregatedSpan).
    Each span merges into the first earlier output entry it touches on
    either side; overlapping spans are left alone. Input order is kept.
    """
    out: List[Any] = []
    for span in spans:
        merged = False
        if not span.low == span.high:
            for i, prev in enumerate(out):
                if prev.low == prev.high or prev.value != span.value:
                    continue
                if _touches(prev.high, span.low, increment):
                    out[i] = replace(prev, high=span.high)
                elif _touches(span.high, prev.low, increment):
                    out[i] = replace(prev, low=span.low)
                else:
                    continue
                merged = True
                break
        if not merged:
            out.append(span)
    return out


__all__ = [
    "flatten",
    "join",
    "signed_bounds",
    "sweep",
]
