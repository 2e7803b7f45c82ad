# intervalgraph/graph.py
from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .aggregator import aggregate
from .config import GraphConfig
from .flattener import flatten, join
from .model import AggregatedSpan, FlatSpan, ViewEntry, view_to_rows
from .normalizer import compute_numeric_values, create_view
from .palette import Palette
from .preprocess import validate_intervals
from .render.bars import render_bars
from .serialize import dumps
from .truncator import truncate
from .util.console import eprint, obs_enabled


class IntervalGraph:
    """A set of value-bearing intervals and its lazily computed views.

    flat_intervals() -> aggregated() -> view() are each computed once per
    interval set and cached as tuples, so callers cannot alter a cached stage.
    Replacing the intervals drops every cache. Replacing the config keeps the
    flat spans when the step functions are unchanged, so a new combine or
    conversion re-aggregates without re-sweeping. Replacing the palette drops
    the view only. A re-entrant lock makes concurrent callers share a single
    computation of each stage.
    """

    def __init__(
        self,
        intervals: Optional[Iterable[Any]] = None,
        config: Optional[GraphConfig] = None,
        palette: Optional[Palette] = None,
    ) -> None:
        self._lock = threading.RLock()
        self._cache: Dict[str, Any] = {}
        self._intervals: List[Any] = list(intervals) if intervals is not None else []
        self._config = config or GraphConfig()
        self._palette = palette if palette is not None else Palette()

    # --- source state --------------------------------------------------------

    @property
    def intervals(self) -> List[Any]:
        return list(self._intervals)

    def set_intervals(self, intervals: Iterable[Any]) -> "IntervalGraph":
        with self._lock:
            self._intervals = list(intervals)
            self._cache.clear()
        return self

    @property
    def config(self) -> GraphConfig:
        return self._config

    def set_config(self, config: GraphConfig) -> "IntervalGraph":
        with self._lock:
            old = self._config
            flat = self._cache.get("flat")
            self._config = config
            self._cache.clear()
            # Flat spans depend on the intervals and the step functions only.
            if flat is not None and (config.increment, config.decrement) == (old.increment, old.decrement):
                self._cache["flat"] = flat
        return self

    @property
    def palette(self) -> Palette:
        return self._palette

    def set_palette(self, palette: Palette) -> "IntervalGraph":
        with self._lock:
            self._palette = palette
            self._cache.pop("view", None)
        return self

    # --- pipeline -----------------------------------------------------------

    def _cached(self, name: str, compute: Callable[[], Any]) -> Any:
        with self._lock:
            if name not in self._cache:
                if obs_enabled():
                    eprint(f"[intervalgraph.graph] compute {name} ({len(self._intervals)} intervals)")
                self._cache[name] = tuple(compute())
            return self._cache[name]

    def flat_intervals(self) -> Tuple[FlatSpan, ...]:
        cfg = self._config
        return self._cached(
            "flat",
            lambda: flatten(self._intervals, increment=cfg.increment, decrement=cfg.decrement),
        )

    def aggregated(self) -> Tuple[AggregatedSpan, ...]:
        def compute() -> List[AggregatedSpan]:
            spans = aggregate(self.flat_intervals(), self._intervals, self._config.combine)
            if self._config.join_adjacent:
                spans = join(spans, increment=self._config.increment)
            return spans

        return self._cached("aggregated", compute)

    def view(self) -> Tuple[ViewEntry, ...]:
        return self._cached(
            "view",
            lambda: create_view(self.aggregated(), self._config, color_for=self._palette.get_color),
        )

    def numeric_values(self) -> Tuple[tuple, ...]:
        return self._cached(
            "numeric",
            lambda: (tuple(row) for row in compute_numeric_values(self.aggregated(), self._config)),
        )

    # --- helpers ------------------------------------------------------------

    def check_intervals(self) -> "IntervalGraph":
        """Raise ValidationError unless every interval converts with the config."""
        validate_intervals(self._intervals, self._config)
        return self

    def truncated(self, lower: Any = None, upper: Any = None, padding: bool = False) -> "IntervalGraph":
        return IntervalGraph(
            truncate(self._intervals, lower, upper, padding),
            config=self._config,
            palette=self._palette,
        )

    def to_rows(self) -> List[list]:
        return view_to_rows(self.view())

    def to_json(self) -> str:
        return dumps(self.to_rows())

    def draw(self) -> str:
        return render_bars(self.view())

    def __str__(self) -> str:
        try:
            return self.draw()
        except Exception as e:
            return f"Error : {e}"

    def __repr__(self) -> str:
        return f"IntervalGraph({len(self._intervals)} intervals, config={self._config!r})"


__all__ = ["IntervalGraph"]
