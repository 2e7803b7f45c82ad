"""Interval preprocessing: coercion, discrete-point extraction, explicit validation."""

from __future__ import annotations

from numbers import Number
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .config import GraphConfig
from .errors import ValidationError
from .model import Interval


def normalize_intervals(intervals: Iterable[Any]) -> List[Interval]:
    """Coerce every element to an Interval with low <= high."""
    return [Interval.coerce(i).normalized() for i in intervals]


def extract_discrete(intervals: Iterable[Any]) -> Tuple[Dict[int, Interval], Dict[int, Interval]]:
    """Split intervals into (spans, discrete points), keyed by original index.

    Keys are positions in the input sequence; they are the identifiers the
    flattener puts in each span's active set.
    """
    spans: Dict[int, Interval] = {}
    points: Dict[int, Interval] = {}
    for key, raw in enumerate(intervals):
        iv = Interval.coerce(raw)
        if iv.is_discrete:
            points[key] = iv
        else:
            spans[key] = iv
    return spans, points


def _is_numeric(x: Any) -> bool:
    return isinstance(x, Number) and not isinstance(x, bool)


def _check_conversion(
    fn: Callable[[Any], Any],
    fn_name: str,
    subject: Any,
    label: str,
    expected: str,
) -> None:
    try:
        out = fn(subject)
    except Exception as ex:
        raise ValidationError(
            f"{label} cannot be converted to a {expected} value with the given '{fn_name}' function. Error : {ex}"
        ) from ex
    ok = _is_numeric(out) if expected == "numeric" else isinstance(out, str)
    if not ok:
        raise ValidationError(
            f"{label} is not converted to a {expected} value by the given '{fn_name}' function. "
            f"Returned type : {type(out).__name__}"
        )


def validate_intervals(intervals: Iterable[Any], config: Optional[GraphConfig] = None) -> List[Interval]:
    """Explicit validation; returns the normalized intervals.

    Bounds must convert to both a number and a string; non-null values too.
    Valueless intervals skip the value checks.
    """
    cfg = config or GraphConfig()
    out: List[Interval] = []
    for key, raw in enumerate(intervals):
        try:
            iv = Interval.coerce(raw)
        except ValidationError as ex:
            raise ValidationError(f"interval {key}: {ex}") from ex
        checks = [
            ("Lower bound", iv.low, "bound"),
            ("Higher bound", iv.high, "bound"),
            ("Value", iv.value, "value"),
        ]
        for title, subject, kind in checks:
            if kind == "value" and subject is None:
                continue
            label = f"{title} of interval {key}"
            _check_conversion(getattr(cfg, f"{kind}_to_numeric"), f"{kind}_to_numeric", subject, label, "numeric")
            _check_conversion(getattr(cfg, f"{kind}_to_string"), f"{kind}_to_string", subject, label, "string")
        out.append(iv.normalized())
    return out


__all__ = [
    "extract_discrete",
    "normalize_intervals",
    "validate_intervals",
]
