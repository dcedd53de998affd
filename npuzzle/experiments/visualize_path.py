#!/usr/bin/env python3
import argparse, os
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from npuzzle.domains.board import Board, LAYOUTS
from npuzzle.domains.loader import load_puzzle
from npuzzle.heuristics.select import NAMES as HEURISTICS
from npuzzle.search.a_star import a_star


def draw_board(board: Board, out_path: Path, title: str = ""):
    n = board.n
    plt.figure(figsize=(3, 3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n + 1):
        ax.plot([0, n], [i, i], linewidth=1)
        ax.plot([i, i], [0, n], linewidth=1)
    # tiles
    for pos, t in board:
        if t == 0: continue
        placed = board.goal[t] == pos
        ax.text(pos.x + 0.5, pos.y + 0.6, str(t), ha="center", va="center",
                fontsize=16 if n <= 4 else 10, color="black" if placed else "tab:red")
    if title:
        ax.set_title(title, fontsize=9)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()


def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one puzzle and save board images along the path.")
    p.add_argument("puzzle", type=Path)
    p.add_argument("--heuristic", choices=HEURISTICS, default="manhattan")
    p.add_argument("--goal", choices=LAYOUTS, default="classic")
    p.add_argument("--timeout_sec", type=float, default=None)
    p.add_argument("--outdir", default="report/figs/example_path")
    args = p.parse_args(argv)

    start = load_puzzle(args.puzzle, layout=args.goal)
    res = a_star(start, args.heuristic, timeout_sec=args.timeout_sec)

    if not res.ok:
        print(f"No path ({res.termination}).")
        return

    outdir = Path(args.outdir)
    for i, b in enumerate(res.path):
        draw_board(b, outdir / f"step_{i:03d}.png", title=f"step {i}/{res.g}")
    print(f"Saved {len(res.path)} frames to {outdir}")


if __name__ == "__main__":
    main()
