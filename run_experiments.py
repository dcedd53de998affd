#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("python -m npuzzle.experiments.runner puzzles/p8_*.txt puzzles/p15_*.txt "
        "--heuristics manhattan euclidean wrong-positions roundtrip-manhattan --bfs --timeout_sec 60 "
        "--out results/heuristics.csv")
    run("python -m npuzzle.experiments.runner puzzles/p8_*.txt --heuristics manhattan --tie_break fifo "
        "--out results/fifo.csv")
    run("python -m npuzzle.experiments.summarize results/heuristics.csv results/fifo.csv "
        "--out results/summary.csv")

if __name__ == "__main__":
    main()
