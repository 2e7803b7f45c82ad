# intervalgraph/config.py
from __future__ import annotations

import datetime as dt
import os
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

from .util.rounding import format_number, round_half_away

BoundFn = Callable[[Any], Any]
CombineFn = Callable[[Any, Any], Any]

SUPPORTED_PRECISIONS = (0, 2)


def _env_precision() -> int:
    raw = (os.getenv("INTERVALGRAPH_PRECISION", "") or "").strip()
    try:
        p = int(raw)
    except ValueError:
        return 2
    return p if p in SUPPORTED_PRECISIONS else 2


DEFAULT_PRECISION = _env_precision()


def default_bound_to_numeric(bound: Any) -> float:
    """Absolute timestamp for dates; numbers pass through."""
    if isinstance(bound, dt.datetime):
        return bound.timestamp()
    if isinstance(bound, dt.date):
        return dt.datetime(bound.year, bound.month, bound.day, tzinfo=dt.timezone.utc).timestamp()
    if isinstance(bound, (int, float)) and not isinstance(bound, bool):
        return bound
    raise TypeError(f"cannot convert bound of type {type(bound).__name__} to a number")


def default_bound_to_string(bound: Any) -> str:
    if isinstance(bound, (dt.date, dt.datetime)):
        return bound.strftime("%Y-%m-%d")
    return str(bound)


def default_value_to_numeric(v: Any) -> Optional[int]:
    # Values are fractions of 1; the palette works in percent.
    return None if v is None else int(v * 100)


def default_value_to_string(v: Any) -> Optional[str]:
    return None if v is None else format_number(round_half_away(v * 100, 2)) + "%"


def default_combine(a: Any, b: Any) -> Any:
    if a is None and b is None:
        return None
    return round_half_away((a or 0) + (b or 0), 2)


@dataclass(frozen=True)
class GraphConfig:
    """Injection points for the pipeline. Every field has a working default."""

    bound_to_numeric: BoundFn = default_bound_to_numeric
    bound_to_string: BoundFn = default_bound_to_string
    value_to_numeric: BoundFn = default_value_to_numeric
    value_to_string: BoundFn = default_value_to_string
    combine: CombineFn = default_combine

    # Discontinuous domains only (e.g. datetimes at one-second granularity).
    increment: Optional[BoundFn] = None
    decrement: Optional[BoundFn] = None

    precision: int = DEFAULT_PRECISION   # 2 decimals, or 0 for whole-number percentages
    join_adjacent: bool = False

    def __post_init__(self) -> None:
        if self.precision not in SUPPORTED_PRECISIONS:
            raise ValueError(f"precision must be one of {SUPPORTED_PRECISIONS}, got {self.precision!r}")

    def replace(self, **changes: Any) -> "GraphConfig":
        return replace(self, **changes)


__all__ = [
    "DEFAULT_PRECISION",
    "GraphConfig",
    "SUPPORTED_PRECISIONS",
    "default_bound_to_numeric",
    "default_bound_to_string",
    "default_combine",
    "default_value_to_numeric",
    "default_value_to_string",
]
