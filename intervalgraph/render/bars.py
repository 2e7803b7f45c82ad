# intervalgraph/render/bars.py
from __future__ import annotations

import html
from typing import Any, List, Sequence

from ..model import PointView, SpanView, ViewEntry
from ..util.rounding import format_number

ARROW = "➔"


def _pct(x: Any) -> str:
    return "0" if not x else f"{format_number(x)}%"


def _title(v: SpanView) -> str:
    t = f"{v.start_label} {ARROW} {v.end_label}"
    if v.value_label is not None:
        t += f" : {v.value_label}"
    return t


def render_bars(view: Sequence[ViewEntry], css_class: str = "intvg") -> str:
    """One absolutely positioned div per view entry, wrapped in a container div.

    Spans are anchored with left/right; points only with left.
    Colors end up in a background-color style when they look like CSS colors
    (e.g. "#ff9431"), otherwise they are emitted as an extra class name.
    """
    parts: List[str] = [f'<div class="{html.escape(css_class)}">']
    for i, v in enumerate(view):
        if isinstance(v, SpanView):
            classes = f"bar bar-intv bar{i}"
            style = f"left:{_pct(v.start_pct)};right:{_pct(v.end_pct)}"
            if isinstance(v.color, str) and v.color.startswith("#"):
                style += f";background-color:{v.color}"
            elif v.color is not None:
                classes += f" {v.color}"
            parts.append(
                f'<div class="{html.escape(classes)}" style="{html.escape(style)}"'
                f' data-title="{html.escape(_title(v))}"></div>'
            )
        elif isinstance(v, PointView):
            parts.append(
                f'<div class="bar bar-date bar{i}" style="left:{_pct(v.position_pct)}"'
                f' data-title="{html.escape(str(v.label))}"></div>'
            )
        else:
            raise TypeError(f"view entry must be SpanView or PointView, got {type(v).__name__}")
    parts.append("</div>")
    return "".join(parts)
