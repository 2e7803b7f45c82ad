#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from intervalgraph.errors import ValidationError
from intervalgraph.render.bars import render_bars
from intervalgraph.render.inline import build_html
from intervalgraph.serialize import loads_view


def _die(msg: str, rc: int = 2) -> int:
    print(f"[intervalgraph-render] ERROR: {msg}", file=sys.stderr)
    return rc


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="intervalgraph-render-view",
        description="Render a serialized view (JSON rows) to HTML without re-running the pipeline.",
    )
    ap.add_argument("--in", dest="in_json", required=True, help="Input view JSON path")
    ap.add_argument("--out", required=True, help="Output HTML path")
    ap.add_argument("--fragment", action="store_true", help="Write only the bars markup, not a full page")
    ap.add_argument("--title", default="Interval graph", help="HTML page title")
    ns = ap.parse_args(argv)

    in_path = Path(ns.in_json)
    if not in_path.exists():
        return _die(f"Missing input JSON: {in_path}")

    try:
        view = loads_view(in_path.read_text(encoding="utf-8", errors="replace"))
    except ValidationError as e:
        return _die(f"Invalid view: {e}", rc=3)
    except ValueError as e:
        return _die(f"Failed to load JSON: {in_path} ({e})")

    html = render_bars(view) if ns.fragment else build_html(view, title=str(ns.title))

    out = Path(ns.out).expanduser()
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding="utf-8", newline="\n")

    print(f"[intervalgraph-render] OK: {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
