# intervalgraph/model.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, FrozenSet, List, Optional, Sequence, Union

from .errors import ComparisonError, ValidationError


@dataclass(frozen=True)
class Interval:
    """A (low, high, value) triple over any totally ordered bound type.

    Construction never compares or converts anything, so malformed intervals
    are cheap to build; see `normalized()` and `preprocess.validate_intervals`.
    """

    low: Any
    high: Any
    value: Any = None

    low_included: bool = True
    high_included: bool = True

    @property
    def is_discrete(self) -> bool:
        return self.low == self.high

    def normalized(self) -> "Interval":
        try:
            inverted = self.high < self.low
        except TypeError as ex:
            raise ComparisonError(f"bounds are not comparable: {self.low!r} / {self.high!r}") from ex
        if not inverted:
            return self
        return Interval(
            low=self.high,
            high=self.low,
            value=self.value,
            low_included=self.high_included,
            high_included=self.low_included,
        )

    @classmethod
    def coerce(cls, obj: Any) -> "Interval":
        if isinstance(obj, Interval):
            return obj
        if isinstance(obj, (list, tuple)) and len(obj) in (2, 3):
            return cls(obj[0], obj[1], obj[2] if len(obj) == 3 else None)
        raise ValidationError(
            f"interval must be an Interval or a [low, high(, value)] sequence, got {type(obj).__name__}"
        )


@dataclass(frozen=True)
class SignedBound:
    value: Any
    sign: str              # "+" low bound | "-" high bound
    key: int               # index of the original interval
    included: bool = True
    payload: Any = None    # original interval value, carried for aggregation


@dataclass(frozen=True)
class FlatSpan:
    low: Any
    high: Any
    active: FrozenSet[int] = frozenset()

    @property
    def is_discrete(self) -> bool:
        return self.low == self.high


@dataclass(frozen=True)
class AggregatedSpan:
    low: Any
    high: Any
    value: Any = None

    @property
    def is_discrete(self) -> bool:
        return self.low == self.high


# Percentage view rows. Field order is the wire contract consumed by renderers.


@dataclass(frozen=True)
class SpanView:
    start_pct: float
    end_pct: float         # distance from the right edge (100 - end position)
    color: Any
    start_label: str
    end_label: str
    value_label: Optional[str]

    def to_row(self) -> list:
        return [self.start_pct, self.end_pct, self.color, self.start_label, self.end_label, self.value_label]


@dataclass(frozen=True)
class PointView:
    position_pct: float
    label: str

    def to_row(self) -> list:
        return [self.position_pct, self.label]


ViewEntry = Union[SpanView, PointView]


def view_from_row(row: Sequence[Any]) -> ViewEntry:
    if not isinstance(row, (list, tuple)):
        raise ValidationError(f"view row must be an array, got {type(row).__name__}")
    if len(row) == 6:
        return SpanView(*row)
    if len(row) == 2:
        return PointView(*row)
    raise ValidationError(f"view row must have 6 (span) or 2 (point) items, got {len(row)}")


def view_to_rows(view: Sequence[ViewEntry]) -> List[list]:
    return [e.to_row() for e in view]


__all__ = [
    "Interval",
    "SignedBound",
    "FlatSpan",
    "AggregatedSpan",
    "SpanView",
    "PointView",
    "ViewEntry",
    "view_from_row",
    "view_to_rows",
]
