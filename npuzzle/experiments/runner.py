from __future__ import annotations
import argparse, csv, logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from npuzzle.domains.board import Board, LAYOUTS
from npuzzle.domains.loader import load_puzzle
from npuzzle.errors import FormatError
from npuzzle.heuristics.select import NAMES as HEURISTICS, choose_heuristic
from npuzzle.search.a_star import a_star
from npuzzle.search.bfs import bfs
from npuzzle.search.frontier import TIE_BREAKS

log = logging.getLogger(__name__)

HEADER = [
    "puzzle", "n", "algorithm", "heuristic", "tie_break", "termination",
    "g", "evaluated", "generated", "reopened", "peak_states", "time_sec",
]


@dataclass
class Instance:
    name: str
    board: Board


def load_instances(paths: List[Path], layout: str) -> List[Instance]:
    out: List[Instance] = []
    for p in paths:
        try:
            out.append(Instance(name=p.name, board=load_puzzle(p, layout=layout)))
        except FormatError as e:
            log.warning("skip %s: %s", p, e)
    return out


def run(instances: List[Instance], heuristics: List[str], out: Path,
        tie_break: str = "h", timeout_sec: Optional[float] = None,
        with_bfs: bool = False) -> int:
    """Solve every instance with every heuristic; one CSV row per run. Returns rows written."""
    out.parent.mkdir(parents=True, exist_ok=True)
    rows = 0
    with out.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HEADER)
        w.writeheader()
        for inst in instances:
            for name in heuristics:
                r = a_star(inst.board, name, tie_break=tie_break, timeout_sec=timeout_sec)
                w.writerow({"puzzle": inst.name, "n": inst.board.n, **r.as_row()})
                rows += 1
            if with_bfs:
                r = bfs(inst.board, timeout_sec=timeout_sec)
                w.writerow({"puzzle": inst.name, "n": inst.board.n, **r.as_row()})
                rows += 1
    return rows


def main(argv=None):
    ap = argparse.ArgumentParser(description="Batch A* runner over puzzle files (CSV output)")
    ap.add_argument("puzzles", type=Path, nargs="+")
    ap.add_argument("--heuristics", nargs="+", default=["manhattan"],
                    help=f"Any of: {', '.join(HEURISTICS)}")
    ap.add_argument("--goal", choices=LAYOUTS, default="classic")
    ap.add_argument("--tie_break", choices=TIE_BREAKS, default="h")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-run wall time")
    ap.add_argument("--bfs", action="store_true", help="Also run plain BFS for reference")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    heuristics = [str(choose_heuristic(h)) for h in args.heuristics]
    insts = load_instances(args.puzzles, args.goal)
    n = run(insts, heuristics, args.out, tie_break=args.tie_break,
            timeout_sec=args.timeout_sec, with_bfs=args.bfs)
    print(f"Wrote {args.out} ({n} rows, {len(insts)} puzzles)")


if __name__ == "__main__":
    main()
