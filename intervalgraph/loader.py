# intervalgraph/loader.py
from __future__ import annotations

from pathlib import Path
from typing import Any, List, Union

from .errors import ValidationError
from .model import Interval
from .serialize import loads
from .util.dates import parse_bound

JsonPath = Union[str, Path]

BOUND_KINDS = ("number", "date")


def _bound(raw: Any, kind: str, where: str) -> Any:
    if kind == "date":
        if not isinstance(raw, str):
            raise ValidationError(f"{where}: date bound must be an ISO-8601 string, got {raw!r}")
        try:
            return parse_bound(raw)
        except ValueError as ex:
            raise ValidationError(f"{where}: invalid date bound {raw!r}") from ex
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValidationError(f"{where}: numeric bound expected, got {raw!r}")
    return raw


def intervals_from_json(obj: Any, bounds: str = "number") -> List[Interval]:
    """[[low, high, value?], ...] or [{"low":..,"high":..,"value":..}, ...] -> Intervals."""
    if bounds not in BOUND_KINDS:
        raise ValueError(f"bounds must be one of {BOUND_KINDS}, got {bounds!r}")
    if not isinstance(obj, list):
        raise ValidationError(f"intervals must be a JSON array; got {type(obj).__name__}")
    out: List[Interval] = []
    for i, item in enumerate(obj):
        where = f"intervals[{i}]"
        if isinstance(item, dict):
            item = [item.get("low"), item.get("high"), item.get("value")]
        if not isinstance(item, list) or len(item) not in (2, 3):
            raise ValidationError(f"{where} must be [low, high] or [low, high, value]")
        value = item[2] if len(item) == 3 else None
        out.append(Interval(_bound(item[0], bounds, where), _bound(item[1], bounds, where), value))
    return out


def load_intervals(path: JsonPath, bounds: str = "number") -> List[Interval]:
    p = Path(path)
    return intervals_from_json(loads(p.read_text(encoding="utf-8", errors="replace")), bounds=bounds)


def parse_limit(raw: Any, bounds: str = "number") -> Any:
    if raw is None:
        return None
    if bounds == "date":
        return _bound(str(raw), bounds, "limit")
    try:
        return float(raw) if "." in str(raw) else int(raw)
    except ValueError as ex:
        raise ValidationError(f"limit: numeric value expected, got {raw!r}") from ex
