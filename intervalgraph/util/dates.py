# intervalgraph/util/dates.py
from __future__ import annotations

import datetime as dt
from typing import Any, Iterable, Optional

from ..config import GraphConfig
from ..model import Interval

ONE_SECOND = dt.timedelta(seconds=1)
DEFAULT_ORIGIN = dt.date(2019, 1, 1)


def add_second(bound: dt.datetime) -> dt.datetime:
    return bound + ONE_SECOND


def sub_second(bound: dt.datetime) -> dt.datetime:
    return bound - ONE_SECOND


def intv(start: int, end: int, value: Any = None, origin: dt.date = DEFAULT_ORIGIN) -> Interval:
    """Day offsets from `origin` -> UTC interval [start 00:00:00, end 23:59:59]."""
    base = dt.datetime(origin.year, origin.month, origin.day, tzinfo=dt.timezone.utc)
    low = base + dt.timedelta(days=int(start))
    high = base + dt.timedelta(days=int(end), hours=23, minutes=59, seconds=59)
    return Interval(low, high, value)


def second_step_config(**overrides: Any) -> GraphConfig:
    """Config for datetimes at one-second granularity (closed bounds shown half-open)."""
    return GraphConfig(increment=add_second, decrement=sub_second).replace(**overrides)


def date_graph(intervals: Optional[Iterable[Any]] = None, **overrides: Any):
    from ..graph import IntervalGraph

    return IntervalGraph(intervals, config=second_step_config(**overrides))


def parse_bound(s: str) -> dt.datetime:
    """ISO-8601 date or datetime; naive values are taken as UTC."""
    d = dt.datetime.fromisoformat(str(s).strip())
    if d.tzinfo is None:
        d = d.replace(tzinfo=dt.timezone.utc)
    return d
