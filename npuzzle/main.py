#!/usr/bin/env python3
from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path

from npuzzle.domains.board import LAYOUTS
from npuzzle.domains.loader import load_puzzle
from npuzzle.errors import FormatError
from npuzzle.heuristics.select import NAMES as HEURISTICS
from npuzzle.search.a_star import a_star
from npuzzle.search.frontier import TIE_BREAKS

EXIT_CODES = {"ok": 0, "unsolvable": 2, "exhausted": 3, "timeout": 4, "budget": 4}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="npuzzle", description="Optimal n-puzzle solver (A*)")
    ap.add_argument("puzzle", type=Path, help="Puzzle file: size line, then n rows of labels (0 = blank)")
    ap.add_argument("--heuristic", choices=HEURISTICS, default="manhattan")
    ap.add_argument("--goal", choices=LAYOUTS, default="classic",
                    help="'classic' = row-major with the blank last, 'snail' = inward spiral")
    ap.add_argument("--tie_break", choices=TIE_BREAKS, default="h")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Stop after this much wall time")
    ap.add_argument("--max_evaluated", type=int, default=None, help="Stop after this many states")
    ap.add_argument("--progress_every", type=int, default=100000,
                    help="Log a progress line every N states (with --verbose)")
    ap.add_argument("--quiet", action="store_true", help="Print only the summary, not every board")
    ap.add_argument("--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    try:
        board = load_puzzle(args.puzzle, layout=args.goal)
    except FormatError as e:
        print(f"npuzzle: error: {e}", file=sys.stderr)
        return 1

    res = a_star(board, args.heuristic, tie_break=args.tie_break, timeout_sec=args.timeout_sec,
                 max_evaluated=args.max_evaluated, progress_every=args.progress_every)

    if res.termination == "unsolvable":
        print("This puzzle is unsolvable.")
    elif res.termination == "exhausted":
        print(f"npuzzle: error: open set exhausted after {res.evaluated} states", file=sys.stderr)
    elif not res.ok:
        print(f"Search stopped ({res.termination}) after {res.evaluated} states.")
    else:
        if not args.quiet:
            for i, b in enumerate(res.path):
                print(f"# step {i}")
                print(b)
                print()
        print(f"Heuristic:        {res.heuristic}")
        print(f"States evaluated: {res.evaluated}")
        print(f"Peak states:      {res.peak_states}")
        print(f"Moves:            {res.g}")
        print(f"Time:             {res.time:.3f}s")
    return EXIT_CODES[res.termination]


if __name__ == "__main__":
    sys.exit(main())
