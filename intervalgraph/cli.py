from __future__ import annotations

import argparse
import os
import sys
import webbrowser
from pathlib import Path

from .config import DEFAULT_PRECISION, SUPPORTED_PRECISIONS, GraphConfig
from .errors import IntervalGraphError
from .graph import IntervalGraph
from .loader import BOUND_KINDS, load_intervals, parse_limit
from .render.inline import build_html
from .util.dates import add_second, sub_second


def _die(msg: str, rc: int = 2) -> int:
    print(f"[intervalgraph] ERROR: {msg}", file=sys.stderr)
    return rc


def main(argv: list[str] | None = None) -> int:
    default_out = os.path.join("build", "intervalgraph.html")
    ap = argparse.ArgumentParser(
        prog="intervalgraph",
        description="Flatten overlapping value-bearing intervals into a percentage bar view.",
    )
    ap.add_argument("--in", dest="in_json", required=True, help="Input JSON: [[low, high, value?], ...]")
    ap.add_argument(
        "--bounds",
        choices=BOUND_KINDS,
        default=os.getenv("INTERVALGRAPH_BOUNDS", "number"),
        help="Bound type: plain numbers or ISO-8601 dates (default: env INTERVALGRAPH_BOUNDS or 'number')",
    )
    ap.add_argument("--lower", default=None, help="Truncate intervals to this lower limit")
    ap.add_argument("--upper", default=None, help="Truncate intervals to this upper limit")
    ap.add_argument("--padding", action="store_true", help="Pad truncated views out to the limits")
    ap.add_argument(
        "--precision",
        type=int,
        choices=SUPPORTED_PRECISIONS,
        default=DEFAULT_PRECISION,
        help="Percentage decimals: 2, or 0 for whole-number rounding (default: env INTERVALGRAPH_PRECISION or 2)",
    )
    ap.add_argument(
        "--step-seconds",
        action="store_true",
        help="Date bounds only: show closed bounds as half-open at one-second granularity",
    )
    ap.add_argument("--join", action="store_true", help="Merge adjacent spans carrying equal values")
    ap.add_argument("--format", choices=("html", "json"), default="html", help="Output format (default: html)")
    ap.add_argument("--title", default="Interval graph", help="HTML page title")
    ap.add_argument("--out", default=default_out, help="Output path (default: ./build/intervalgraph.html)")
    ap.add_argument("--no-open", action="store_true", help="Do not open the generated HTML in a browser")

    args = ap.parse_args(argv)

    if args.step_seconds and args.bounds != "date":
        return _die("--step-seconds requires --bounds date")

    in_path = Path(args.in_json)
    if not in_path.exists():
        return _die(f"Missing input JSON: {in_path}")

    try:
        intervals = load_intervals(in_path, bounds=args.bounds)
        lower = parse_limit(args.lower, args.bounds)
        upper = parse_limit(args.upper, args.bounds)
    except (OSError, ValueError) as e:
        return _die(f"Failed to load intervals: {in_path} ({e})")

    cfg = GraphConfig(precision=int(args.precision), join_adjacent=bool(args.join))
    if args.step_seconds:
        cfg = cfg.replace(increment=add_second, decrement=sub_second)

    graph = IntervalGraph(intervals, config=cfg)
    try:
        graph.check_intervals()
        if lower is not None or upper is not None:
            graph = graph.truncated(lower, upper, padding=bool(args.padding))
        if args.format == "json":
            text = graph.to_json() + "\n"
        else:
            text = build_html(graph.view(), title=str(args.title))
    except IntervalGraphError as e:
        return _die(str(e), rc=3)

    out_path = Path(args.out).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text, encoding="utf-8", newline="\n")

    print(str(out_path))

    if args.format == "html" and not args.no_open:
        try:
            webbrowser.open("file://" + str(out_path))
        except webbrowser.Error as e:
            print(f"[intervalgraph] WARN: could not open browser: {e}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
