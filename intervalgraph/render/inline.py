# intervalgraph/render/inline.py
from __future__ import annotations

import html
from typing import Sequence

from ..model import ViewEntry
from ..serialize import dumps_view
from .template import HTML_TEMPLATE

_DATA_MARKER = "__DATA_JSON__"
_DATA_MARKER_COUNT = HTML_TEMPLATE.count(_DATA_MARKER)


def build_html(view: Sequence[ViewEntry], title: str = "Interval graph") -> str:
    # Inject the serialized view into the HTML template.
    # Hardening:
    #   - Template must contain the __DATA_JSON__ placeholder exactly once.
    #   - Generated HTML must not contain the placeholder after injection.
    if not isinstance(view, (list, tuple)):
        raise TypeError(f"view must be a list, got {type(view).__name__}")

    if _DATA_MARKER_COUNT != 1:
        raise RuntimeError(f"HTML_TEMPLATE must contain {_DATA_MARKER} exactly once (found {_DATA_MARKER_COUNT})")

    data_json = dumps_view(view).replace("</", r"<\/")  # script-safe injection
    # Underscores as character references: a title can never spell a marker.
    safe_title = html.escape(title).replace("_", "&#95;")
    page = HTML_TEMPLATE.replace("__TITLE__", safe_title).replace(_DATA_MARKER, data_json)

    if _DATA_MARKER in page:
        raise RuntimeError("HTML generation failed: marker still present after injection")

    return page
