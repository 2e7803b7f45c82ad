#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from intervalgraph.config import GraphConfig
from intervalgraph.errors import ValidationError
from intervalgraph.loader import BOUND_KINDS, load_intervals
from intervalgraph.preprocess import validate_intervals


def _die(msg: str, rc: int = 2) -> int:
    print(f"[intervalgraph-validate] ERROR: {msg}", file=sys.stderr)
    return rc


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="intervalgraph-validate",
        description="Check that every interval bound and value converts to a number and a string.",
    )
    ap.add_argument("--in", dest="in_json", required=True, help="Input intervals JSON path")
    ap.add_argument("--bounds", choices=BOUND_KINDS, default="number", help="Bound type (default: number)")
    ns = ap.parse_args(argv)

    p = Path(ns.in_json)
    if not p.exists():
        return _die(f"Missing JSON file: {p}")

    try:
        intervals = load_intervals(p, bounds=ns.bounds)
    except ValidationError as e:
        print("[intervalgraph-validate] FAIL", file=sys.stderr)
        print(f"  - json:{p}: {e}", file=sys.stderr)
        return 3
    except (OSError, ValueError) as e:
        return _die(f"Failed to load JSON: {p} ({e})")

    try:
        checked = validate_intervals(intervals, GraphConfig())
    except ValidationError as e:
        print("[intervalgraph-validate] FAIL", file=sys.stderr)
        print(f"  - json:{p}: {e}", file=sys.stderr)
        return 3

    discrete = sum(1 for iv in checked if iv.is_discrete)
    print(f"[intervalgraph-validate] OK: {len(checked)} intervals ({discrete} discrete)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
