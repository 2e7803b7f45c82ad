# intervalgraph/serialize.py
from __future__ import annotations

import datetime as dt
import json
from typing import Any, Callable, Iterable, List, Optional, Sequence

try:
    import orjson  # type: ignore
except Exception:  # pragma: no cover
    orjson = None  # type: ignore

from .errors import ValidationError
from .model import AggregatedSpan, ViewEntry, view_from_row, view_to_rows


def dumps(obj: Any) -> str:
    if orjson is not None:
        return orjson.dumps(obj).decode("utf-8")
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))


def loads(text: str) -> Any:
    if orjson is not None:
        return orjson.loads(text)
    return json.loads(text)


def dumps_view(view: Sequence[ViewEntry]) -> str:
    """Ordered arrays: 6 items per span, 2 per point."""
    return dumps(view_to_rows(view))


def loads_view(text: str) -> List[ViewEntry]:
    rows = loads(text)
    if not isinstance(rows, list):
        raise ValidationError(f"view must be a JSON array, got {type(rows).__name__}")
    return [view_from_row(r) for r in rows]


def _bound_to_json(b: Any) -> Any:
    if isinstance(b, (dt.date, dt.datetime)):
        return b.isoformat()
    return b


def _bound_from_json(b: Any) -> Any:
    if isinstance(b, str):
        try:
            if len(b) == 10:
                return dt.date.fromisoformat(b)
            return dt.datetime.fromisoformat(b)
        except ValueError:
            return b
    return b


def spans_to_rows(
    spans: Iterable[AggregatedSpan],
    bound_to_json: Optional[Callable[[Any], Any]] = None,
) -> List[list]:
    enc = bound_to_json or _bound_to_json
    return [[enc(s.low), enc(s.high), s.value] for s in spans]


def spans_from_rows(
    rows: Iterable[Sequence[Any]],
    bound_from_json: Optional[Callable[[Any], Any]] = None,
) -> List[AggregatedSpan]:
    dec = bound_from_json or _bound_from_json
    out: List[AggregatedSpan] = []
    for i, r in enumerate(rows):
        if not isinstance(r, (list, tuple)) or len(r) != 3:
            raise ValidationError(f"span row {i} must be a [low, high, value] array")
        out.append(AggregatedSpan(dec(r[0]), dec(r[1]), r[2]))
    return out


__all__ = [
    "dumps",
    "dumps_view",
    "loads",
    "loads_view",
    "spans_from_rows",
    "spans_to_rows",
]
